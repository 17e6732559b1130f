"""
Dashboard view state.

A view shows one price area in one mode and moves through
idle -> loading -> loaded | error. Each load is tagged with a Ticket; a
result whose ticket no longer matches the current request (parameters
changed, view cancelled, or a newer load started) is discarded.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from enum import Enum
from typing import Optional

from . import canon, exceptions, summary, validate
from .types import RawRecords, SummaryPayload

logger = logging.getLogger(__name__)


class ViewStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class Ticket:
    request_id: int
    area: str
    mode: str


@dataclass(frozen=True)
class ViewState:
    area: str
    mode: str
    status: ViewStatus = ViewStatus.IDLE
    request_id: int = 0
    payload: Optional[SummaryPayload] = None
    error: Optional[str] = None


class DashboardView:
    def __init__(
        self,
        client=None,
        area: str = canon.DEFAULT_AREA,
        mode: str = canon.HOURLY,
        *,
        tz: Optional[str] = None,
        today: Optional[date] = None,
        history_days: Optional[int] = None,
    ):
        self.client = client
        # Unset tz / history_days fall back to the client config, then canon
        config = getattr(client, "config", None)
        self.tz = tz if tz is not None else getattr(config, "tz", None)
        self.today = today
        self.history_days = (
            history_days
            or getattr(config, "history_days", None)
            or canon.HISTORY_DAYS
        )
        self._state = ViewState(
            area=validate.validate_area(area), mode=validate.validate_mode(mode)
        )

    @property
    def state(self) -> ViewState:
        return self._state

    def _is_current(self, ticket: Ticket) -> bool:
        s = self._state
        return (
            s.status is ViewStatus.LOADING
            and ticket.request_id == s.request_id
            and ticket.area == s.area
            and ticket.mode == s.mode
        )

    def _reset(self, area: str, mode: str) -> ViewState:
        if (area, mode) != (self._state.area, self._state.mode):
            self._state = ViewState(
                area=area, mode=mode, request_id=self._state.request_id + 1
            )
        return self._state

    def select_area(self, area: str) -> ViewState:
        return self._reset(validate.validate_area(area), self._state.mode)

    def select_mode(self, mode: str) -> ViewState:
        return self._reset(self._state.area, validate.validate_mode(mode))

    def begin(self) -> Ticket:
        s = self._state
        rid = s.request_id + 1
        self._state = replace(s, status=ViewStatus.LOADING, request_id=rid, error=None)
        return Ticket(request_id=rid, area=s.area, mode=s.mode)

    def complete(self, ticket: Ticket, records: RawRecords) -> bool:
        if not self._is_current(ticket):
            logger.debug("Discarding stale response for %s", ticket)
            return False
        payload = summary.summarise(records, ticket.mode, tz=self.tz)
        self._state = replace(
            self._state, status=ViewStatus.LOADED, payload=payload, error=None
        )
        return True

    def fail(self, ticket: Ticket, error: BaseException | str) -> bool:
        if not self._is_current(ticket):
            logger.debug("Discarding stale failure for %s: %s", ticket, error)
            return False
        self._state = replace(
            self._state, status=ViewStatus.ERROR, payload=None, error=str(error)
        )
        return True

    def cancel(self) -> ViewState:
        """Invalidate any in-flight load (view torn down)."""
        s = self._state
        status = ViewStatus.IDLE if s.status is ViewStatus.LOADING else s.status
        self._state = replace(s, status=status, request_id=s.request_id + 1)
        return self._state

    def _fetch(self, ticket: Ticket) -> list[dict]:
        if ticket.mode == canon.DAILY_AVERAGE:
            return self.client.fetch_history_window(
                ticket.area, today=self.today, days=self.history_days
            )
        return self.client.fetch_spot_prices(ticket.area)

    def refresh(self) -> ViewState:
        """Load and summarise the current area/mode synchronously."""
        exceptions.require(
            self.client is not None,
            "DashboardView.refresh needs a client.",
            exceptions.ConfigError,
        )
        ticket = self.begin()
        try:
            records = self._fetch(ticket)
        except exceptions.ApiError as e:
            self.fail(ticket, e)
        else:
            self.complete(ticket, records)
        return self._state

    def headline(self) -> dict[str, str]:
        """Titles and KPI labels for the current mode."""
        s = self._state
        if s.mode == canon.HOURLY:
            unit = "hour"
            title = "Today's spot price"
            subtitle = f"Area {s.area} · hourly prices (NOK/kWh)"
        else:
            unit = "day"
            title = f"Last {self.history_days} days (daily average)"
            subtitle = f"Area {s.area} · daily average (NOK/kWh)"
        return {
            "title": title,
            "subtitle": subtitle,
            "cheapest": f"Cheapest {unit}",
            "priciest": f"Priciest {unit}",
            "average": "Average price",
        }
