"""
Main planner coordinator.

Orchestrates the investment-suggestion pipeline for the tracked instruments,
and composes the results with a monthly budget for presentation.
"""

from typing import Any, Optional, Sequence

import structlog

from .budget.calculator import BudgetBreakdown
from .config.defaults import InstrumentParams
from .config.loader import Settings
from .data.fetcher import DailySeriesFetcher
from .data.throttle import RequestThrottle
from .errors import DataQualityError, FetchError
from .metrics.analyzer import analyze
from .metrics.forecast import ForecastGenerator
from .models.plan import InvestmentPlan, InvestmentSnapshot
from .portfolio.allocator import (
    INSTRUMENT_ORDER,
    RiskProfile,
    allocate,
    allocate_amounts,
    potential_return,
    weighted_return,
)

logger = structlog.get_logger(__name__)


class PlannerEngine:
    """
    Main coordinator for the budgeting and investment-suggestion core.

    Manages the pipeline:
    Throttled Fetch → Normalize → Analyze → Forecast → Allocate
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        fetcher: Optional[DailySeriesFetcher] = None,
        throttle: Optional[RequestThrottle] = None,
    ) -> None:
        """Initialize the planner engine."""
        self.logger = logger
        self.settings = settings or Settings.load()
        self.config = self.settings.config

        self.fetcher = fetcher or DailySeriesFetcher.from_settings(self.settings, throttle=throttle)
        self.forecaster = ForecastGenerator(
            horizon_days=self.config.forecast.horizon_days,
            periods_per_year=self.config.analysis.periods_per_year,
        )

        self.logger.info(
            "Planner engine initialized",
            instruments=[instrument.symbol for instrument in self.config.instruments],
            api_key_configured=self.fetcher.is_configured(),
        )

    async def load_investment(self, instrument: InstrumentParams) -> InvestmentSnapshot:
        """Fetch, analyze and forecast a single instrument."""
        series = await self.fetcher.fetch_daily_series(instrument.symbol)
        analysis = analyze(series, periods_per_year=self.config.analysis.periods_per_year)

        forecast = self.forecaster.generate(series.last_close, analysis.annualized_rate)

        return InvestmentSnapshot(
            instrument=instrument,
            series=series,
            analysis=analysis,
            forecast=tuple(forecast),
        )

    async def load_investments(
        self,
        instruments: Optional[Sequence[InstrumentParams]] = None,
    ) -> list[InvestmentSnapshot]:
        """
        Load every tracked instrument sequentially through the shared throttle.

        The first failure stops the run; its exception propagates unchanged.

        Args:
            instruments: Instruments to load, defaults to the configured set

        Returns:
            One InvestmentSnapshot per instrument, in the given order

        Raises:
            FetchError: Configuration, transport, provider, rate-limit or
                empty-result failure for one of the instruments
            DataQualityError: Provider data that could not be normalized
        """
        instruments = list(instruments or self.config.instruments)
        snapshots = []

        for instrument in instruments:
            try:
                snapshots.append(await self.load_investment(instrument))
            except (FetchError, DataQualityError) as e:
                self.logger.error(
                    "Failed to load investment data",
                    symbol=instrument.symbol,
                    error=str(e),
                    error_type=type(e).__name__,
                    loaded=len(snapshots),
                )
                raise

        self.logger.info("Investment data loaded", count=len(snapshots))
        return snapshots

    def build_plan(
        self,
        budget: BudgetBreakdown,
        risk_profile: Any,
        investments: Sequence[InvestmentSnapshot] = (),
    ) -> InvestmentPlan:
        """
        Compose an investment plan for a budget and risk profile.

        Recomputed from scratch on every call; switching profile keeps no state.

        Args:
            budget: Parsed monthly budget
            risk_profile: RiskProfile or its name
            investments: Loaded instrument snapshots

        Returns:
            InvestmentPlan with allocation, scaled amounts and weighted return
        """
        profile = RiskProfile.parse(risk_profile)
        by_symbol = {snapshot.symbol: snapshot for snapshot in investments}

        returns = [
            by_symbol[symbol].expected_return_pct
            for symbol in INSTRUMENT_ORDER
            if symbol in by_symbol
        ]

        share = self.config.allocation.potential_return_share
        potential_returns = {
            snapshot.symbol: potential_return(
                budget.remaining, snapshot.analysis.period_return_pct, share=share
            )
            for snapshot in investments
        }

        plan = InvestmentPlan(
            risk_profile=profile,
            budget=budget,
            allocations=tuple(allocate(profile)),
            amounts=tuple(allocate_amounts(profile, budget.remaining)),
            portfolio_return_pct=weighted_return(profile, returns),
            potential_returns=potential_returns,
        )

        if budget.is_overspent:
            self.logger.warning(
                "Budget overspent, no investment suggested",
                remaining=budget.remaining,
                risk_profile=profile.value,
            )

        return plan
