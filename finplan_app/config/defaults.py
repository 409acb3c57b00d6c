"""Default configuration parameters for the budgeting and investment core."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class FetcherParams:
    """Price-data provider request parameters."""
    base_url: str = "https://www.alphavantage.co/query"
    function: str = "TIME_SERIES_DAILY"              # Daily OHLCV series
    outputsize: str = "compact"                      # Provider returns ~100 latest days
    api_key_env: str = "ALPHA_VANTAGE_API_KEY"       # Credential setting name
    min_interval_seconds: float = 12.0               # 5 calls per minute
    max_points: int = 30                             # Most recent observations kept
    timeout_seconds: float = 30.0


@dataclass(frozen=True)
class AnalysisParams:
    """Return and annualization parameters."""
    periods_per_year: int = 12          # Observed window treated as one month


@dataclass(frozen=True)
class ForecastParams:
    """Forward projection parameters."""
    horizon_days: int = 30


@dataclass(frozen=True)
class AllocationParams:
    """Budget scaling parameters for suggestions."""
    potential_return_share: float = 0.3  # Share of budget used for per-instrument estimates


@dataclass(frozen=True)
class InstrumentParams:
    """A tracked instrument and its presentation metadata."""
    symbol: str
    name: str
    risk_level: str
    description: str


DEFAULT_INSTRUMENTS = (
    InstrumentParams(
        symbol="SPY",
        name="S&P 500 Index Fund (SPY)",
        risk_level="Low",
        description="Diversified index fund tracking the 500 largest US companies",
    ),
    InstrumentParams(
        symbol="JNJ",
        name="Johnson & Johnson (JNJ)",
        risk_level="Low",
        description="Diversified healthcare leader with stable dividends",
    ),
    InstrumentParams(
        symbol="AAPL",
        name="Apple (AAPL)",
        risk_level="High",
        description="Technology innovator with high growth potential",
    ),
)


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    fetcher: FetcherParams
    analysis: AnalysisParams
    forecast: ForecastParams
    allocation: AllocationParams
    instruments: tuple[InstrumentParams, ...] = field(default=DEFAULT_INSTRUMENTS)


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        fetcher=FetcherParams(),
        analysis=AnalysisParams(),
        forecast=ForecastParams(),
        allocation=AllocationParams(),
        instruments=DEFAULT_INSTRUMENTS,
    )
