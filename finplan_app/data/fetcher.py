"""
Rate-limited daily price fetcher.

Issues one throttled GET per symbol against the price-data provider and hands
the decoded body to the normalization boundary in ``parsers``.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Optional, Protocol

import aiohttp

from ..config.defaults import FetcherParams
from ..errors import ConfigurationError, FetchError, ProviderError, TransportError
from ..logging.config import get_fetch_logger, log_fetch_outcome
from .models import PriceSeries
from .parsers import parse_daily_series_payload
from .throttle import RequestThrottle

logger = get_fetch_logger(__name__)


@dataclass(frozen=True)
class HttpResponse:
    """Status line and decoded JSON body of a provider response."""
    status: int
    reason: str
    payload: Any = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300


class Transport(Protocol):
    """Performs a single HTTP GET and decodes the JSON body."""

    async def get(self, url: str, params: dict[str, str], timeout: float) -> HttpResponse:
        ...


class AiohttpTransport:
    """aiohttp-backed transport opening a short-lived session per request."""

    def __init__(self, user_agent: str = "finplan-app/0.1"):
        self.user_agent = user_agent

    async def get(self, url: str, params: dict[str, str], timeout: float) -> HttpResponse:
        client_timeout = aiohttp.ClientTimeout(total=timeout)
        headers = {"User-Agent": self.user_agent}

        try:
            async with (
                aiohttp.ClientSession(timeout=client_timeout, headers=headers) as session,
                session.get(url, params=params) as response,
            ):
                if not 200 <= response.status < 300:
                    return HttpResponse(status=response.status, reason=response.reason or "")

                try:
                    payload = await response.json(content_type=None)
                except ValueError as e:
                    raise ProviderError(f"Provider returned invalid JSON: {e}")

                return HttpResponse(status=response.status, reason=response.reason or "", payload=payload)

        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"Network error: {e}", reason=str(e))


class DailySeriesFetcher:
    """
    Fetches the most recent daily OHLCV series for a symbol.

    All fetchers in a process should share one RequestThrottle so the
    provider's per-minute budget is respected across symbols.
    """

    def __init__(
        self,
        api_key: Optional[str],
        throttle: RequestThrottle,
        params: Optional[FetcherParams] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        self.api_key = api_key
        self.throttle = throttle
        self.params = params or FetcherParams()
        self.transport = transport or AiohttpTransport()

    @classmethod
    def from_settings(cls, settings, throttle: Optional[RequestThrottle] = None,
                      transport: Optional[Transport] = None) -> "DailySeriesFetcher":
        """Build a fetcher (and, if needed, its throttle) from loaded Settings."""
        params = settings.config.fetcher
        if throttle is None:
            throttle = RequestThrottle(min_interval_seconds=params.min_interval_seconds)
        return cls(settings.api_key, throttle, params=params, transport=transport)

    def is_configured(self) -> bool:
        """True when a provider credential is available."""
        return bool(self.api_key and self.api_key.strip())

    async def fetch_daily_series(self, symbol: str) -> PriceSeries:
        """
        Fetch and normalize the daily series for one symbol.

        Args:
            symbol: Provider ticker symbol, e.g. 'SPY'

        Returns:
            PriceSeries with at most ``params.max_points`` points, oldest first

        Raises:
            ConfigurationError: No API key configured (no network call made)
            TransportError: Non-success HTTP status or network failure
            ProviderError: Provider error payload or unrecognized response
            RateLimitError: Provider rate-limit notice
            EmptyResultError: No historical data in the response
            MalformedDataError: Unparseable record in the response
        """
        try:
            if not self.is_configured():
                raise ConfigurationError(
                    f"Alpha Vantage API key not configured. Set {self.params.api_key_env} "
                    f"in the environment",
                    setting=self.params.api_key_env,
                    symbol=symbol,
                )

            await self.throttle.acquire()

            logger.debug("Fetching daily series", symbol=symbol)
            response = await self.transport.get(
                self.params.base_url,
                self._build_params(symbol),
                self.params.timeout_seconds,
            )

            if not response.ok:
                raise TransportError(
                    f"HTTP error! status: {response.status} {response.reason}".rstrip(),
                    status=response.status,
                    reason=response.reason,
                    symbol=symbol,
                )

            series = parse_daily_series_payload(response.payload, symbol, self.params.max_points)

        except Exception as e:
            if isinstance(e, FetchError) and e.symbol is None:
                e.symbol = symbol
            log_fetch_outcome(logger, symbol, succeeded=False, error=e)
            raise

        log_fetch_outcome(logger, symbol, succeeded=True, point_count=len(series))
        return series

    def _build_params(self, symbol: str) -> dict[str, str]:
        return {
            "function": self.params.function,
            "symbol": symbol,
            "outputsize": self.params.outputsize,
            "apikey": self.api_key or "",
        }
