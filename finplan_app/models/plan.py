"""Data models for per-instrument results and the composed investment plan"""

from dataclasses import dataclass
from typing import Optional

from ..budget.calculator import BudgetBreakdown
from ..config.defaults import InstrumentParams
from ..data.models import PriceSeries
from ..portfolio.allocator import AllocationEntry, RiskProfile
from .analysis import ForecastPoint, PriceAnalysis


@dataclass(frozen=True)
class InvestmentSnapshot:
    """Fetched history, analysis and forecast for one instrument"""
    instrument: InstrumentParams
    series: PriceSeries
    analysis: PriceAnalysis
    forecast: tuple[ForecastPoint, ...]

    @property
    def symbol(self) -> str:
        return self.instrument.symbol

    @property
    def current_price(self) -> Optional[float]:
        return self.series.last_close

    @property
    def expected_price(self) -> float:
        return self.analysis.forecasted_price_at_horizon

    @property
    def expected_return_pct(self) -> float:
        """Annualized return percentage used to weight the portfolio"""
        return self.analysis.annualized_return_pct


@dataclass(frozen=True)
class InvestmentPlan:
    """Allocation of a remaining budget under one risk profile"""
    risk_profile: RiskProfile
    budget: BudgetBreakdown
    allocations: tuple[AllocationEntry, ...]
    amounts: tuple[float, ...]
    portfolio_return_pct: float
    potential_returns: dict[str, float]

    @property
    def total_allocated(self) -> float:
        return sum(self.amounts)

    @property
    def has_suggestion(self) -> bool:
        """False when the budget is overspent or empty"""
        return self.budget.remaining > 0
