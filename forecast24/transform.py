from __future__ import annotations
import numpy as np
import pandas as pd
from typing import Optional

from . import canon, ingest, utils, validate
from .types import RawRecords, SeriesPoint


def to_points(df: pd.DataFrame) -> list[SeriesPoint]:
    """Price frame -> list of plain {label, price} records (python scalars)."""
    return [
        {"label": str(label), "price": float(price)}
        for label, price in zip(df["label"], df["price"])
    ]


def daily_average(df: pd.DataFrame) -> pd.DataFrame:
    """
    Mean price per date label, rounded to PRICE_DECIMALS.

    Output is sorted ascending by the date string, one row per date.
    Dates whose mean is not finite are dropped.
    """
    out = (
        df.groupby("label", sort=True)["price"]
        .agg(utils.mean_price)
        .map(utils.round_price)
        .reset_index()
        .astype({"price": float})
    )
    out = out[np.isfinite(out["price"].to_numpy())]
    return out[canon.SERIES_COLS].reset_index(drop=True)


def hourly_series(df: pd.DataFrame) -> list[SeriesPoint]:
    validate.assert_price_frame(df)
    return to_points(df)


def daily_average_series(df: pd.DataFrame) -> list[SeriesPoint]:
    validate.assert_price_frame(df)
    return to_points(daily_average(df))


def build_series(
    records: RawRecords,
    mode: str = canon.HOURLY,
    *,
    tz: Optional[str] = None,
) -> list[SeriesPoint]:
    df = ingest.from_records(records, mode, tz=tz)
    if mode == canon.DAILY_AVERAGE:
        return daily_average_series(df)
    return hourly_series(df)
