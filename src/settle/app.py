import logging
from settle.log import setup_logging
from settle.ui.demo_window import DemoApp

logger = logging.getLogger("settle")

def run():
    setup_logging()
    logger.info("Starting debounce demo")
    app = DemoApp()
    app.mainloop()


if __name__ == "__main__":
    run()
