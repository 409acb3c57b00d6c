"""Linear forward projection from a current price and an annualized rate"""

from datetime import date
from typing import Optional

from ..models.analysis import ForecastPoint
from ..utils.time import offset_day

DEFAULT_HORIZON_DAYS = 30


def project_forward(current_price: float, annualized_rate: float,
                    horizon_days: int = DEFAULT_HORIZON_DAYS,
                    start_date: Optional[date] = None,
                    periods_per_year: int = 12) -> list[ForecastPoint]:
    """
    Project a price forward by linear interpolation of the monthly rate

    price_i = current * (1 + monthly_rate * i / horizon), i = 0..horizon

    Deterministic in its numeric inputs; wall-clock time only labels dates
    when ``start_date`` is omitted.

    Args:
        current_price: Price on day 0
        annualized_rate: Simple annualized rate (fractional)
        horizon_days: Number of days to project (default 30)
        start_date: Calendar date of day 0, today when None
        periods_per_year: Divisor turning the annual rate into a monthly one

    Returns:
        horizon_days + 1 ForecastPoints starting at day 0
    """
    if horizon_days <= 0:
        return [ForecastPoint(day=0, date=offset_day(start_date, 0), projected_price=current_price)]

    monthly_rate = annualized_rate / periods_per_year

    points = []
    for i in range(horizon_days + 1):
        growth_factor = (monthly_rate * i) / horizon_days
        points.append(ForecastPoint(
            day=i,
            date=offset_day(start_date, i),
            projected_price=current_price * (1 + growth_factor),
        ))

    return points


class ForecastGenerator:
    """Forecast generator bound to a fixed horizon"""

    def __init__(self, horizon_days: int = DEFAULT_HORIZON_DAYS, periods_per_year: int = 12):
        self.horizon_days = horizon_days
        self.periods_per_year = periods_per_year

    def generate(self, current_price: float, annualized_rate: float,
                 start_date: Optional[date] = None) -> list[ForecastPoint]:
        """Regenerate the full projection; nothing is cached between calls"""
        return project_forward(
            current_price,
            annualized_rate,
            horizon_days=self.horizon_days,
            start_date=start_date,
            periods_per_year=self.periods_per_year,
        )
