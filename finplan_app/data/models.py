"""
Canonical data models for normalized daily price data.

This module defines immutable data structures that represent clean, validated
price history after normalization from the provider's raw format.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterator, Optional

from ..errors import TemporalDataError
from ..utils.time import format_day_label


@dataclass(frozen=True)
class OHLCVPoint:
    """One trading day of open/high/low/close/volume data."""
    date: date          # Trading day
    open: float         # Opening price, 2 decimals
    high: float         # High price, 2 decimals
    low: float          # Low price, 2 decimals
    close: float        # Closing price, 2 decimals
    volume: int         # Shares traded

    @property
    def label(self) -> str:
        """Short calendar label, e.g. '18 Oct'."""
        return format_day_label(self.date)


@dataclass(frozen=True)
class PriceSeries:
    """Ascending-by-date daily history for one ticker symbol."""
    symbol: str
    points: tuple[OHLCVPoint, ...]

    def __post_init__(self):
        """Enforce strictly increasing dates."""
        for previous, current in zip(self.points, self.points[1:]):
            if current.date <= previous.date:
                raise TemporalDataError(
                    f"Dates must be strictly increasing: {previous.date} then {current.date}",
                    date_value=current.date.isoformat(),
                )

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[OHLCVPoint]:
        return iter(self.points)

    def __getitem__(self, index):
        return self.points[index]

    @property
    def closes(self) -> list[float]:
        """Closing prices in date order."""
        return [point.close for point in self.points]

    @property
    def last_close(self) -> Optional[float]:
        """Most recent close, None for an empty series."""
        return self.points[-1].close if self.points else None

    @property
    def last_date(self) -> Optional[date]:
        """Most recent trading day, None for an empty series."""
        return self.points[-1].date if self.points else None
