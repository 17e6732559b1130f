from __future__ import annotations
import numpy as np
import pandas as pd

from . import canon, exceptions


def validate_area(area: str) -> str:
    """Normalise a price area code ('no1' -> 'NO1') or raise AreaError."""
    code = str(area).strip().upper()
    if code not in canon.AREAS:
        raise exceptions.AreaError(
            f"Unknown price area {area!r}. Expected one of: {', '.join(canon.AREAS)}."
        )
    return code


def validate_mode(mode: str) -> str:
    if mode not in canon.MODES:
        raise exceptions.ModeError(
            f"Unknown mode {mode!r}. Expected one of: {', '.join(canon.MODES)}."
        )
    return mode


def assert_price_frame(df: pd.DataFrame) -> None:
    for col in canon.SERIES_COLS:
        if col not in df.columns:
            raise exceptions.Forecast24Error(f"Missing required column '{col}'.")
    if len(df) and not np.isfinite(df["price"].to_numpy(dtype=float)).all():
        raise exceptions.Forecast24Error("Non-finite prices in price frame.")
