from __future__ import annotations
from typing import Optional, Sequence, cast

import numpy as np
import pandas as pd

from . import canon, transform, utils
from .types import Kpi, RawRecords, SeriesPoint, SummaryPayload


def compute_kpi(series: Sequence[SeriesPoint]) -> Optional[Kpi]:
    """
    Cheapest / priciest point and average price over a series.

    Ties resolve to the first point in series order. None for an empty series.
    """
    if not series:
        return None

    prices = np.asarray([p["price"] for p in series], dtype=float)
    lo = int(prices.argmin())
    hi = int(prices.argmax())

    cheapest: SeriesPoint = {"label": series[lo]["label"], "price": series[lo]["price"]}
    priciest: SeriesPoint = {"label": series[hi]["label"], "price": series[hi]["price"]}
    return {
        "cheapest": cheapest,
        "priciest": priciest,
        "average": utils.round_price(utils.mean_price(prices)),
    }


def summarise(
    records: RawRecords,
    mode: str = canon.HOURLY,
    *,
    tz: Optional[str] = None,
) -> SummaryPayload:
    """Turn raw price records into a chart series plus KPI figures.

    `records` may be a list of raw records or an API payload of the form
    {"data": [...]}. In hourly mode every usable record becomes one
    'HH:MM' point, in input order. In daily-average mode records are
    grouped by date and averaged. Malformed records are skipped; an empty
    result is {"series": [], "kpi": None}.
    """
    series = transform.build_series(records, mode, tz=tz)
    if not series:
        return {"series": [], "kpi": None}

    return cast(SummaryPayload, {"series": series, "kpi": compute_kpi(series)})


def to_frame(payload: SummaryPayload) -> pd.DataFrame:
    """Chart-ready frame with 'label' and 'price' columns, series order kept."""
    df = pd.DataFrame(payload["series"], columns=canon.SERIES_COLS)
    return df.astype({"label": str, "price": float})
