"""Data models for price analysis and forecasts"""

from dataclasses import dataclass
from datetime import date

from ..utils.time import format_day_label


@dataclass(frozen=True)
class PriceAnalysis:
    """Derived statistics for one price series"""
    start_price: float = 0.0
    end_price: float = 0.0
    period_return: float = 0.0                # Fractional, e.g. 0.10
    period_return_pct: float = 0.0            # Percentage, e.g. 10.0
    annualized_rate: float = 0.0              # Fractional, period_return * 12
    annualized_return_pct: float = 0.0        # Percentage
    forecasted_price_at_horizon: float = 0.0
    high_price: float = 0.0
    low_price: float = 0.0

    @classmethod
    def empty(cls) -> "PriceAnalysis":
        """All-zero analysis for an empty series"""
        return cls()

    @property
    def monthly_rate(self) -> float:
        """Monthly growth rate implied by the annualized rate"""
        return self.annualized_rate / 12

    @property
    def price_range(self) -> float:
        return self.high_price - self.low_price


@dataclass(frozen=True)
class ForecastPoint:
    """One day of a linear forward projection"""
    day: int
    date: date
    projected_price: float

    @property
    def rounded_price(self) -> int:
        """Whole-unit price for charting"""
        return int(round(self.projected_price))

    @property
    def label(self) -> str:
        return format_day_label(self.date)
