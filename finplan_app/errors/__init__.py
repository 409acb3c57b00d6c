"""
Error classification for the budgeting and investment-suggestion core.

Fetch failures surface provider and configuration problems to the caller
unchanged in category. The analysis, forecast, allocation and budget
calculations never raise on numeric input.
"""

from .data_quality import (
    DataQualityError,
    MalformedDataError,
    TemporalDataError,
)
from .fetch_failures import (
    FetchError,
    ConfigurationError,
    InvalidConfigError,
    TransportError,
    ProviderError,
    RateLimitError,
    EmptyResultError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "MalformedDataError",
    "TemporalDataError",
    # Fetch Failures
    "FetchError",
    "ConfigurationError",
    "InvalidConfigError",
    "TransportError",
    "ProviderError",
    "RateLimitError",
    "EmptyResultError",
]
