"""
Alpha Vantage payload parsers for converting daily series into OHLCV points.

The provider's nested, string-keyed JSON stays behind this module: callers
receive either a PriceSeries or a typed exception, never raw provider keys.
"""

import math
import re
from typing import Any

from ..errors import (
    EmptyResultError,
    MalformedDataError,
    ProviderError,
    RateLimitError,
    TemporalDataError,
)
from ..utils.time import parse_trading_date
from .models import OHLCVPoint, PriceSeries

ERROR_KEY = "Error Message"
RATE_LIMIT_KEY = "Note"
INFORMATION_KEY = "Information"
RATE_LIMIT_PATTERN = re.compile(
    r"rate limit|call frequency|(calls|requests) per (minute|day)", re.IGNORECASE
)
TIME_SERIES_KEY = "Time Series (Daily)"

OPEN_KEY = "1. open"
HIGH_KEY = "2. high"
LOW_KEY = "3. low"
CLOSE_KEY = "4. close"
VOLUME_KEY = "5. volume"

SYMBOL_FORMAT_HINT = (
    "check the symbol format (e.g., MSFT for US, TSCO.LON for London)"
)


def classify_payload(payload: Any, symbol: str) -> dict[str, Any]:
    """
    Distinguish provider failure shapes from a daily series payload.

    Args:
        payload: Decoded JSON response body
        symbol: Symbol that was requested

    Returns:
        The date-keyed time series mapping

    Raises:
        ProviderError: Explicit error payload or unrecognized shape
        RateLimitError: Rate-limit notice in the response body
    """
    if not isinstance(payload, dict):
        raise ProviderError(
            f"Unexpected response for symbol {symbol}: expected a JSON object",
            symbol=symbol,
        )

    if payload.get(ERROR_KEY):
        message = str(payload[ERROR_KEY])
        raise ProviderError(
            f"Alpha Vantage error for {symbol}: {message} - {SYMBOL_FORMAT_HINT}",
            symbol=symbol,
            provider_message=message,
        )

    if payload.get(RATE_LIMIT_KEY):
        _raise_rate_limit(str(payload[RATE_LIMIT_KEY]), symbol)

    # Information also carries invalid-key and premium-endpoint notices
    if payload.get(INFORMATION_KEY):
        message = str(payload[INFORMATION_KEY])
        if RATE_LIMIT_PATTERN.search(message):
            _raise_rate_limit(message, symbol)
        raise ProviderError(
            f"Alpha Vantage notice for {symbol}: {message}",
            symbol=symbol,
            provider_message=message,
        )

    series = payload.get(TIME_SERIES_KEY)
    if not isinstance(series, dict):
        raise ProviderError(
            f"No data found for symbol {symbol}. This could be: "
            f"(1) invalid symbol - {SYMBOL_FORMAT_HINT}, "
            f"(2) rate limit reached - wait 1 minute and retry, or "
            f"(3) API key invalid",
            symbol=symbol,
            context={"response_keys": sorted(payload)[:5]},
        )

    return series


def _raise_rate_limit(message: str, symbol: str) -> None:
    raise RateLimitError(
        f"API rate limit: {message} - please wait a minute before retrying",
        symbol=symbol,
        provider_message=message,
    )


def parse_daily_series_payload(payload: Any, symbol: str, max_points: int = 30) -> PriceSeries:
    """
    Parse a TIME_SERIES_DAILY payload into a PriceSeries.

    Expected provider format:
    {
        "Meta Data": {...},
        "Time Series (Daily)": {
            "2024-05-17": {"1. open": "189.51", "2. high": "190.81",
                           "3. low": "189.18", "4. close": "189.87",
                           "5. volume": "41282925"},
            ...
        }
    }

    Args:
        payload: Decoded JSON response body
        symbol: Symbol that was requested
        max_points: Most recent observations to keep

    Returns:
        PriceSeries ordered oldest first, at most max_points long

    Raises:
        ProviderError: Explicit error payload or unrecognized shape
        RateLimitError: Rate-limit notice in the response body
        EmptyResultError: Series block present but empty
        MalformedDataError: A record has unparseable fields
        TemporalDataError: A date key is not an ISO date
        ValueError: max_points is not positive
    """
    if max_points <= 0:
        raise ValueError(f"max_points must be positive, got {max_points}")

    series = classify_payload(payload, symbol)

    dated = []
    for raw_date, record in series.items():
        try:
            day = parse_trading_date(raw_date)
        except (ValueError, AttributeError) as e:
            raise TemporalDataError(f"Invalid trading date '{raw_date}' for {symbol}: {e}",
                                    date_value=str(raw_date))
        dated.append((day, record))

    if not dated:
        raise EmptyResultError(f"No historical data available for symbol {symbol}", symbol=symbol)

    dated.sort(key=lambda item: item[0])
    recent = dated[-max_points:]

    points = tuple(_parse_single_point(day, record) for day, record in recent)
    return PriceSeries(symbol=symbol, points=points)


def _parse_single_point(day, record: Any) -> OHLCVPoint:
    """Parse one provider record into an OHLCVPoint."""
    if not isinstance(record, dict):
        raise MalformedDataError(
            f"Record for {day.isoformat()} must be an object",
            raw_data=repr(record),
            expected_format="object with open/high/low/close/volume keys",
        )

    try:
        open_price = _parse_price(record[OPEN_KEY])
        high_price = _parse_price(record[HIGH_KEY])
        low_price = _parse_price(record[LOW_KEY])
        close_price = _parse_price(record[CLOSE_KEY])
        volume = _parse_volume(record[VOLUME_KEY])
    except (KeyError, ValueError, TypeError, OverflowError) as e:
        raise MalformedDataError(
            f"Invalid record for {day.isoformat()}: {e}",
            raw_data=repr(record),
            expected_format="finite numeric strings",
        )

    if volume < 0:
        raise MalformedDataError(
            f"Volume must be non-negative for {day.isoformat()}: {volume}",
            raw_data=repr(record),
        )

    return OHLCVPoint(
        date=day,
        open=open_price,
        high=high_price,
        low=low_price,
        close=close_price,
        volume=volume,
    )


def _parse_price(raw: Any) -> float:
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"non-finite price {raw!r}")
    return round(value, 2)


def _parse_volume(raw: Any) -> int:
    try:
        return int(raw)
    except ValueError:
        return int(float(raw))
