"""
Data quality error classifications for provider payload normalization.

These exceptions describe problems found while turning raw provider records
into OHLCV points.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues in provider payloads."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class MalformedDataError(DataQualityError):
    """Data exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format


class TemporalDataError(DataQualityError):
    """Dates are missing, unparseable or out of order."""

    def __init__(self, message: str, date_value: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.date_value = date_value
