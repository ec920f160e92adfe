from __future__ import annotations

import math
from typing import Any, Optional


def to_safe_number(value: Any, fallback: float = 0.0) -> float:
    """Convert form/DB input to float; None, "", junk and NaN become ``fallback``."""
    if value is None or value == "" or isinstance(value, bool):
        return fallback
    try:
        number = float(value)
    except (TypeError, ValueError):
        return fallback
    return fallback if math.isnan(number) else number


def has_value(value: Any) -> bool:
    """True when ``value`` was explicitly provided as a number (0 counts)."""
    if value is None or value == "" or isinstance(value, bool):
        return False
    try:
        return not math.isnan(float(value))
    except (TypeError, ValueError):
        return False


def format_currency(value: Optional[float]) -> str:
    if value is None:
        return "-"
    return f"${float(value):.2f}"


def format_duration(hours: float) -> str:
    """Format hours as "2h", "45m" or "1h 30m"."""
    whole = math.floor(hours)
    minutes = round((hours - whole) * 60)
    if minutes == 60:
        whole, minutes = whole + 1, 0
    if minutes == 0:
        return f"{whole}h"
    if whole == 0:
        return f"{minutes}m"
    return f"{whole}h {minutes}m"
