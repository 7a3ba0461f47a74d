import tkinter as tk
from tkinter import ttk
import logging, os
from typing import Optional

from settle.data.simulator import COLUMNS, filter_rows, simulate_trades
from settle.timing.tk_scheduler import TkScheduler
from settle.utils.debounce import Debouncer, debounce
from settle.utils.settings import load_settings, default_settings

logger = logging.getLogger("settle.demo")


class DemoApp(tk.Tk):
    """Filter box and resizable table; keystrokes and resizes are debounced."""

    def __init__(self, settings_path: Optional[str] = None):
        super().__init__()
        self.title("settle | debounce demo")
        self.geometry("900x600")

        self.settings_path = settings_path or os.path.join(os.path.dirname(os.path.abspath(__file__)), "settings.json")
        try:
            self.settings = load_settings(self.settings_path)
        except Exception:
            logger.exception("Failed to load settings at startup")
            self.settings = default_settings()

        style = ttk.Style(self)
        try: style.theme_use("clam")
        except Exception: logger.warning("Could not use 'clam' theme")

        # ---------- STATE ----------
        self.df_all = simulate_trades(self.settings["n_rows"])
        self.df_filtered = self.df_all
        self.raw_events = 0
        self.refreshes = 0

        self.scheduler = TkScheduler(self)
        self._debouncer = Debouncer(self.scheduler)
        self._on_resize_settled = debounce(self._relayout, self.settings["resize_debounce_ms"], self.scheduler)

        # ---------- UI ----------
        bar = ttk.Frame(self); bar.pack(fill=tk.X, padx=12, pady=(12, 6))
        ttk.Label(bar, text="Filter:").pack(side=tk.LEFT, padx=(0, 6))
        self.filter_var = tk.StringVar(value="")
        entry = ttk.Entry(bar, width=30, textvariable=self.filter_var); entry.pack(side=tk.LEFT)
        entry.bind("<KeyRelease>", self.on_filter_key)
        self.status = ttk.Label(bar, text="", foreground="#555"); self.status.pack(side=tk.RIGHT)

        self.tree = ttk.Treeview(self, columns=COLUMNS, show="headings")
        self.tree.pack(fill=tk.BOTH, expand=True, padx=12, pady=(0, 12))
        for col in COLUMNS:
            self.tree.heading(col, text=col)
            self.tree.column(col, width=120, anchor="center")

        self.bind("<Configure>", self.on_configure)
        self.protocol("WM_DELETE_WINDOW", self.on_close)
        self.update_table()

    # ---- events ----
    def on_filter_key(self, _event=None):
        self.raw_events += 1
        self._debouncer.schedule("filters", self.settings["filter_debounce_ms"], self.apply_filter)
        self._update_status()

    def on_configure(self, event):
        # <Configure> also fires for every child widget
        if event.widget is self:
            self.raw_events += 1
            self._on_resize_settled(event.width)

    # ---- debounced actions ----
    def apply_filter(self):
        try:
            self.df_filtered = filter_rows(self.df_all, self.filter_var.get())
            self.refreshes += 1
            self.update_table()
        except Exception:
            logger.exception("apply_filter failed")

    def _relayout(self, width: int):
        try:
            col_w = max(60, (int(width) - 40) // len(COLUMNS))
            for col in COLUMNS:
                self.tree.column(col, width=col_w)
            self.refreshes += 1
            self._update_status()
            logger.debug("relayout at width=%s", width)
        except Exception:
            logger.exception("relayout failed")

    # ---- views ----
    def update_table(self):
        try:
            self.tree.delete(*self.tree.get_children())
            for row in self.df_filtered.itertuples(index=False):
                self.tree.insert("", tk.END, values=list(row))
            self._update_status()
        except Exception:
            logger.exception("update_table failed")

    def _update_status(self):
        self.status.config(text=f"{len(self.df_filtered)} rows | events {self.raw_events} | refreshes {self.refreshes}")

    def on_close(self):
        self._debouncer.cancel_all()
        self.scheduler.cancel_all()
        self.destroy()
