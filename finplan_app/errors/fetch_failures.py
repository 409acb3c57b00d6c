"""
Fetch failure classifications for price-data provider calls.

Each category maps to a distinct caller reaction: fix configuration, report a
transport problem, correct the symbol, or wait and re-invoke manually.
"""

from typing import Optional, Dict, Any, List


class FetchError(Exception):
    """Base class for failures while fetching a daily price series."""

    category = "fetch"

    def __init__(self, message: str, symbol: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.symbol = symbol
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(FetchError):
    """Required provider setting is missing; no network call was made."""

    category = "configuration"

    def __init__(self, message: str, setting: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.setting = setting


class InvalidConfigError(ConfigurationError):
    """Configuration values failed validation at load time."""

    def __init__(self, message: str, errors: Optional[List[str]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class TransportError(FetchError):
    """Non-success HTTP status or network failure talking to the provider."""

    category = "transport"

    def __init__(self, message: str, status: Optional[int] = None,
                 reason: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.status = status
        self.reason = reason


class ProviderError(FetchError):
    """Provider answered with an explicit error payload."""

    category = "provider"

    def __init__(self, message: str, provider_message: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.provider_message = provider_message


class RateLimitError(FetchError):
    """Provider rate-limit notice embedded in a successful response."""

    category = "rate_limit"

    def __init__(self, message: str, provider_message: Optional[str] = None,
                 retry_after_seconds: Optional[float] = 60.0, **kwargs):
        super().__init__(message, **kwargs)
        self.provider_message = provider_message
        self.retry_after_seconds = retry_after_seconds
        self.recoverable = True


class EmptyResultError(FetchError):
    """Structurally valid response that contained no data points."""

    category = "empty_result"
