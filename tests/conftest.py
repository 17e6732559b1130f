import pytest
import requests


@pytest.fixture
def hourly_records():
    return [
        {"time_start": "2024-01-01T00:00:00+01:00", "NOK_per_kWh": 0.81},
        {"time_start": "2024-01-01T01:00:00+01:00", "NOK_per_kWh": 0.62},
        {"time_start": "2024-01-01T02:00:00+01:00", "NOK_per_kWh": 0.55},
        {"time_start": "2024-01-01T03:00:00+01:00", "NOK_per_kWh": 0.55},
        {"time_start": "2024-01-01T04:00:00+01:00", "NOK_per_kWh": 1.25},
        {"time_start": "2024-01-01T05:00:00+01:00", "NOK_per_kWh": 1.25},
    ]


@pytest.fixture
def daily_records():
    return [
        {"date": "2024-01-03", "NOK_per_kWh": 0.9},
        {"date": "2024-01-01", "NOK_per_kWh": 0.2},
        {"date": "2024-01-02", "NOK_per_kWh": 0.6},
        {"date": "2024-01-01", "NOK_per_kWh": 0.4},
        {"date": "2024-01-03", "NOK_per_kWh": 1.1},
    ]


@pytest.fixture
def messy_hourly_records():
    # Only the first two rows are usable
    return [
        {"time_start": "2024-01-01T06:00:00Z", "NOK_per_kWh": "0.74"},
        {"time_start": "2024-01-01T07:00:00Z", "NOK_per_kWh": 0.5},
        {"time_start": "2024-01-01T08:00:00Z", "NOK_per_kWh": None},
        {"time_start": "2024-01-01T09:00:00Z", "NOK_per_kWh": "n/a"},
        {"time_start": "2024-01-01T10:00:00Z", "NOK_per_kWh": float("nan")},
        {"time_start": "2024-01-01T11:00:00Z", "NOK_per_kWh": float("inf")},
        {"time_start": "2024-01-01T12:00:00Z", "NOK_per_kWh": True},
        {"time_start": "2024-01-01T13:00:00Z"},
        {"time_start": None, "NOK_per_kWh": 0.1},
        {"time_start": "2024-01-01", "NOK_per_kWh": 0.1},
        {"NOK_per_kWh": 0.1},
        "not-a-record",
        None,
    ]


class FakeResponse:
    def __init__(self, payload=None, status=200, bad_json=False):
        self.payload = payload
        self.status_code = status
        self.bad_json = bad_json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self.bad_json:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self.payload


class FakeSession:
    """Records GET calls and replays queued responses (or raises)."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []
        self.closed = False

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        nxt = self.responses.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        return nxt

    def close(self):
        self.closed = True


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def fake_response():
    return FakeResponse
