# src/settle/data/simulator.py
import logging
import random
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

import pandas as pd

logger = logging.getLogger(__name__)

COLUMNS = ["Time", "symbol", "Exchange", "side", "qty", "price"]


def simulate_trades(n_rows: int = 260, seed: Optional[int] = None) -> pd.DataFrame:
    """
    Sample rows for the demo table.
    Columns: Time (HH:MM:SS), symbol, Exchange (A-D), side, qty, price
    """
    rng = random.Random(seed)
    symbols = ["TSLA", "NVDA", "MSFT", "AAPL", "AMZN"]
    now = datetime.now()

    rows: List[Dict[str, Any]] = []
    for _ in range(max(1, int(n_rows))):
        tdt = now + timedelta(minutes=rng.randint(-120, 120), seconds=rng.randint(0, 59))
        rows.append({
            "Time": tdt.strftime("%H:%M:%S"),
            "symbol": rng.choice(symbols),
            "Exchange": rng.choice("ABCD"),
            "side": rng.choice(["buy", "sell"]),
            "qty": rng.choice([50, 100, 200, 500, 800, 1200]),
            "price": round(280 + rng.random() * 45, 2),
        })
    return pd.DataFrame(rows, columns=COLUMNS)


def filter_rows(df: pd.DataFrame, text: str) -> pd.DataFrame:
    """Rows where any column contains ``text`` (case-insensitive); all rows for blank text."""
    text = (text or "").strip().lower()
    if not text:
        return df
    mask = pd.Series(False, index=df.index)
    for col in df.columns:
        mask |= df[col].astype(str).str.lower().str.contains(text, regex=False)
    return df[mask].reset_index(drop=True)
