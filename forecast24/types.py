from __future__ import annotations
from typing import Iterable, Mapping, TypedDict, List, Optional, Union


# Raw records (external, read-only)
class PricePoint(TypedDict, total=False):
    time_start: str  # ISO-8601
    time_end: str
    NOK_per_kWh: float
    EUR_per_kWh: float
    EXR: float


class DailyPricePoint(TypedDict, total=False):
    date: str  # "YYYY-MM-DD"
    NOK_per_kWh: float


# A list of raw records, or the {"data": [...]} envelope around one
RawRecords = Union[
    Iterable[Union[PricePoint, DailyPricePoint]], Mapping[str, object], None
]


# Derived
class SeriesPoint(TypedDict):
    label: str  # "HH:MM" (hourly) or "YYYY-MM-DD" (daily-average)
    price: float


class Kpi(TypedDict):
    cheapest: Optional[SeriesPoint]
    priciest: Optional[SeriesPoint]
    average: Optional[float]


class SummaryPayload(TypedDict):
    series: List[SeriesPoint]
    kpi: Optional[Kpi]
