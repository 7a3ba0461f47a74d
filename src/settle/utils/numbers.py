# src/settle/utils/numbers.py
import math
from typing import Optional

def safe_int(s, default: Optional[int] = None) -> Optional[int]:
    """Whole milliseconds from settings text; "150.0" and "150,0" are accepted."""
    try:
        if s is None: return default
        f = float(str(s).replace(",", ".").strip())
    except (TypeError, ValueError):
        return default
    if not math.isfinite(f):
        return default
    return int(f)
