"""Pytest configuration and shared fixtures."""

import pytest
from datetime import date, timedelta
from typing import Any, Dict, List, Optional

from finplan_app.data.fetcher import HttpResponse
from finplan_app.data.models import OHLCVPoint, PriceSeries


def make_daily_payload(closes: List[float], start: date = date(2024, 1, 1),
                       symbol: str = "SPY") -> Dict[str, Any]:
    """Build a provider TIME_SERIES_DAILY payload with one entry per close."""
    series = {}
    for i, close in enumerate(closes):
        day = start + timedelta(days=i)
        series[day.isoformat()] = {
            "1. open": f"{close - 1:.4f}",
            "2. high": f"{close + 2:.4f}",
            "3. low": f"{close - 2:.4f}",
            "4. close": f"{close:.4f}",
            "5. volume": str(1000 + i),
        }
    return {
        "Meta Data": {"2. Symbol": symbol},
        "Time Series (Daily)": series,
    }


def make_series(closes: List[float], symbol: str = "SPY",
                start: date = date(2024, 1, 1)) -> PriceSeries:
    """Build a PriceSeries with consecutive dates."""
    points = tuple(
        OHLCVPoint(
            date=start + timedelta(days=i),
            open=close,
            high=close,
            low=close,
            close=close,
            volume=1000,
        )
        for i, close in enumerate(closes)
    )
    return PriceSeries(symbol=symbol, points=points)


class FakeTransport:
    """Records requests and replays canned responses."""

    def __init__(self, responses: Optional[Dict[str, HttpResponse]] = None,
                 default: Optional[HttpResponse] = None, clock=None):
        self.responses = responses or {}
        self.default = default
        self.clock = clock
        self.calls: List[Dict[str, Any]] = []

    async def get(self, url: str, params: Dict[str, str], timeout: float) -> HttpResponse:
        self.calls.append({
            "url": url,
            "params": dict(params),
            "timeout": timeout,
            "at": self.clock() if self.clock else None,
        })
        response = self.responses.get(params.get("symbol"), self.default)
        if response is None:
            raise AssertionError(f"No canned response for {params.get('symbol')}")
        return response


@pytest.fixture
def daily_payload() -> Dict[str, Any]:
    """Payload with 35 days of rising closes."""
    return make_daily_payload([100.0 + i for i in range(35)])


@pytest.fixture
def ok_response(daily_payload) -> HttpResponse:
    return HttpResponse(status=200, reason="OK", payload=daily_payload)
