from __future__ import annotations
from typing import Final, Literal

Mode = Literal["hourly", "daily-average"]

AREAS: Final[tuple[str, ...]] = ("NO1", "NO2", "NO3", "NO4", "NO5")
DEFAULT_AREA: Final[str] = "NO1"

HOURLY: Final = "hourly"
DAILY_AVERAGE: Final = "daily-average"
MODES: Final[tuple[str, ...]] = (HOURLY, DAILY_AVERAGE)

# Raw record field names as served by the pricing API
TIME_FIELD: Final[str] = "time_start"
DATE_FIELD: Final[str] = "date"
PRICE_FIELD: Final[str] = "NOK_per_kWh"

# Derived series columns
SERIES_COLS: Final[list[str]] = ["label", "price"]

PRICE_DECIMALS: Final[int] = 3
LABEL_FORMAT: Final[str] = "%H:%M"

HISTORY_DAYS: Final[int] = 30
HISTORY_LIMIT: Final[int] = 5000
DEFAULT_TIMEOUT_S: Final[float] = 15.0

# API paths relative to the configured base
SPOTPRICES_PATH: Final[str] = "/api/spotprices"
HISTORY_PATH: Final[str] = "/api/spotprices/history"
FORECAST_PATH: Final[str] = "/api/forecast"
