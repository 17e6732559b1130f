from __future__ import annotations
from collections.abc import Mapping
from typing import Optional

import pandas as pd

from . import canon, utils, validate
from .types import RawRecords


def unwrap(payload: object) -> Optional[list]:
    """Accept both [..] and {"data": [..]}; None for any other shape."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, Mapping) and isinstance(payload.get("data"), list):
        return payload["data"]
    return None


def _as_records(payload: object) -> list:
    rows = unwrap(payload)
    if rows is not None:
        return rows
    if payload is None or isinstance(payload, (str, bytes, Mapping)):
        return []
    try:
        return list(payload)  # type: ignore[call-overload]
    except TypeError:
        return []


def _label_for(record: Mapping, mode: str, tz: Optional[str]) -> Optional[str]:
    if mode == canon.HOURLY:
        return utils.hourly_label(record.get(canon.TIME_FIELD), tz)
    return utils.daily_label(record.get(canon.DATE_FIELD))


def from_records(
    records: RawRecords,
    mode: str = canon.HOURLY,
    *,
    tz: Optional[str] = None,
) -> pd.DataFrame:
    """
    Normalise raw API records to a price frame:
      - columns: label (str), price (float, finite)
      - one row per usable record, input order kept (RangeIndex)

    Records that are not mappings, lack a derivable label, or carry a
    non-finite price are dropped rather than raising.
    """
    validate.validate_mode(mode)

    rows: list[dict[str, object]] = []
    for record in _as_records(records):
        if not isinstance(record, Mapping):
            continue
        label = _label_for(record, mode, tz)
        price = utils.coerce_price(record.get(canon.PRICE_FIELD))
        if label is None or price is None:
            continue
        rows.append({"label": label, "price": price})

    df = pd.DataFrame(rows, columns=canon.SERIES_COLS)
    df = df.astype({"label": str, "price": float})
    return df.reset_index(drop=True)
