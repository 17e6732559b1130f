"""
HTTP client for the spot-price API.

Endpoints (relative to ClientConfig.api_base):
  - /api/spotprices?area=NO1                      -> hourly records
  - /api/spotprices/history?area&start&end&limit  -> daily records
  - /api/forecast                                 -> forecast records

Every endpoint may answer with a bare list or {"data": [...]}.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Any, Optional

import requests

from . import canon, exceptions, ingest, utils, validate
from .config import ClientConfig
from .types import DailyPricePoint, PricePoint

logger = logging.getLogger(__name__)


class PriceClient:
    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ):
        self.config = config or ClientConfig.from_env()
        self.session = session or requests.Session()

    def __enter__(self) -> "PriceClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.session.close()

    def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> list[dict]:
        url = f"{self.config.api_base}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            resp = self.session.get(url, params=params, timeout=self.config.timeout_s)
            resp.raise_for_status()
            payload = resp.json()
        except (requests.RequestException, ValueError) as e:
            logger.error("Request to %s failed: %s", url, e)
            raise exceptions.ApiError(f"Request to {url} failed: {e}") from e

        rows = ingest.unwrap(payload)
        if rows is None:
            logger.warning(
                "Unexpected payload from %s (%s); treating as empty",
                url,
                type(payload).__name__,
            )
            return []
        return rows

    def fetch_spot_prices(self, area: str) -> list[PricePoint]:
        """Today's hourly prices for a price area."""
        area = validate.validate_area(area)
        return self._get(canon.SPOTPRICES_PATH, params={"area": area})

    def fetch_spot_prices_history(
        self,
        area: str,
        start: str,
        end: str,
        limit: Optional[int] = None,
    ) -> list[DailyPricePoint]:
        """Historical daily records between start and end (YYYY-MM-DD, inclusive)."""
        area = validate.validate_area(area)
        params = {
            "area": area,
            "start": start,
            "end": end,
            "limit": limit or self.config.history_limit,
        }
        return self._get(canon.HISTORY_PATH, params=params)

    def fetch_history_window(
        self,
        area: str,
        today: Optional[date] = None,
        days: Optional[int] = None,
    ) -> list[DailyPricePoint]:
        """History for the last `days` calendar days, today included."""
        start, end = utils.history_window(today, days or self.config.history_days)
        return self.fetch_spot_prices_history(area, start, end)

    def fetch_forecast(self) -> list[PricePoint]:
        return self._get(canon.FORECAST_PATH)
