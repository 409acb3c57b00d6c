"""Price analysis and forecasting for daily series"""

from .analyzer import (
    analyze,
    annualize_return,
    calculate_linear_annualized_return,
    calculate_period_return,
)
from .forecast import ForecastGenerator, project_forward
from .interpolation import fill_calendar_days

__all__ = [
    "analyze",
    "annualize_return",
    "calculate_linear_annualized_return",
    "calculate_period_return",
    "ForecastGenerator",
    "project_forward",
    "fill_calendar_days",
]
