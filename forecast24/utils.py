from __future__ import annotations
import math
import re
from datetime import date, datetime, timedelta
from typing import Iterable, Optional
from zoneinfo import ZoneInfo

import numpy as np
import pandas as pd

from . import canon, exceptions

_HHMM = re.compile(r"^\d{2}:\d{2}$")
_ISO_STAMP = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}")


def coerce_price(value: object) -> Optional[float]:
    """
    Convert a raw price to float, or None when it is not a finite number.

    Numbers and numeric strings are accepted. None, blank strings, booleans,
    non-numeric strings, NaN and +/-inf are rejected.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        out = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError, OverflowError):
        return None
    return out if math.isfinite(out) else None


def hourly_label(ts: object, tz: Optional[str] = None) -> Optional[str]:
    """
    Derive an 'HH:MM' label from an ISO-8601 timestamp string.

    Without tz, the wall-clock time is read straight from the string
    (characters 11-16), so '2024-01-01T03:00:00Z' -> '03:00'.
    With tz, the timestamp must start 'YYYY-MM-DD[T ]HH:MM'; it is parsed
    (naive values are taken as UTC) and converted to that zone first.
    """
    if not isinstance(ts, str):
        return None
    if tz is None:
        label = ts[11:16]
        return label if _HHMM.match(label) else None

    if not _ISO_STAMP.match(ts):
        return None
    stamp = pd.to_datetime(ts, errors="coerce", utc=True)
    if pd.isna(stamp):
        return None
    return stamp.tz_convert(ZoneInfo(tz)).strftime(canon.LABEL_FORMAT)


def daily_label(value: object) -> Optional[str]:
    """Return the stripped date string, or None when blank or not a string."""
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def round_price(value: float) -> float:
    return round(float(value), canon.PRICE_DECIMALS)


def mean_price(values: Iterable[float]) -> float:
    """
    Arithmetic mean of finite prices that stays finite near the float limit.

    The plain mean is used unless its sum overflows; then the values are
    scaled by 1/n before summing. NaN for no values.
    """
    arr = np.asarray(list(values), dtype=float)
    if arr.size == 0:
        return float("nan")
    with np.errstate(over="ignore"):
        out = float(arr.mean())
    if not math.isfinite(out):
        out = float((arr / arr.size).sum())
    return out


def format_date(d: date | datetime) -> str:
    """YYYY-MM-DD for a date or datetime."""
    if isinstance(d, datetime):
        d = d.date()
    return d.strftime("%Y-%m-%d")


def history_window(
    today: Optional[date] = None, days: int = canon.HISTORY_DAYS
) -> tuple[str, str]:
    """
    Return (start, end) date strings covering the last `days` calendar days,
    today included.
    """
    exceptions.require(days >= 1, "History window must cover at least one day.")
    end = today or date.today()
    start = end - timedelta(days=days - 1)
    return format_date(start), format_date(end)
