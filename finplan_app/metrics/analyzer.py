"""Period return and simple annualization for daily price series"""

from typing import Protocol, Sequence

from ..models.analysis import PriceAnalysis

PERIODS_PER_YEAR = 12
DAYS_PER_YEAR = 365


class HasClose(Protocol):
    close: float


def calculate_period_return(start_price: float, end_price: float) -> float:
    """
    Fractional return over the observed window

    return = (end - start) / start, 0 when start <= 0

    Args:
        start_price: First close in the window
        end_price: Last close in the window

    Returns:
        Fractional return, e.g. 0.10 for +10%
    """
    if start_price <= 0:
        return 0.0

    return (end_price - start_price) / start_price


def annualize_return(period_return: float, periods_per_year: int = PERIODS_PER_YEAR) -> float:
    """
    Simple (non-compounding) annualization of a one-month return

    The observed window is treated as one month whatever its day count, so
    the annual figure is period_return * 12. No geometric compounding.
    """
    return period_return * periods_per_year


def calculate_linear_annualized_return(start_price: float, end_price: float,
                                       days_elapsed: int = 30,
                                       days_per_year: int = DAYS_PER_YEAR) -> float:
    """
    Day-count linear annualization: (return / days) * 365

    Not used by analyze(); kept for callers that know the true elapsed days.
    """
    if start_price <= 0 or end_price <= 0 or days_elapsed <= 0:
        return 0.0

    total_return = (end_price - start_price) / start_price
    return (total_return / days_elapsed) * days_per_year


def analyze(series: Sequence[HasClose], periods_per_year: int = PERIODS_PER_YEAR) -> PriceAnalysis:
    """
    Analyze price movement over a series of closes

    High and low come from closing prices only, not intraday extremes.

    Args:
        series: PriceSeries or any ordered sequence of points with ``close``
        periods_per_year: Annualization factor for the window

    Returns:
        PriceAnalysis; all fields zero for an empty series
    """
    closes = [point.close for point in series]
    if not closes:
        return PriceAnalysis.empty()

    start_price = closes[0]
    end_price = closes[-1]

    period_return = calculate_period_return(start_price, end_price)
    annualized_rate = annualize_return(period_return, periods_per_year)

    # One more synthetic month at the implied monthly rate
    forecasted_price = end_price * (1 + annualized_rate / periods_per_year)

    return PriceAnalysis(
        start_price=start_price,
        end_price=end_price,
        period_return=period_return,
        period_return_pct=period_return * 100,
        annualized_rate=annualized_rate,
        annualized_return_pct=annualized_rate * 100,
        forecasted_price_at_horizon=forecasted_price,
        high_price=max(closes),
        low_price=min(closes),
    )
