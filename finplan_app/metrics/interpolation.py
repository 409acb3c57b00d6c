"""Expansion of trading-day history onto consecutive calendar days"""

from datetime import date
from typing import Iterable, Optional

from ..data.models import OHLCVPoint
from ..utils.time import calendar_days, today_utc


def _midpoint(previous: OHLCVPoint, following: OHLCVPoint, day: date) -> OHLCVPoint:
    """Synthetic point between two known trading days"""
    return OHLCVPoint(
        date=day,
        open=(previous.open + following.open) / 2,
        high=max(previous.high, following.high),
        low=min(previous.low, following.low),
        close=(previous.close + following.close) / 2,
        volume=0,
    )


def _carry_forward(previous: OHLCVPoint, day: date) -> OHLCVPoint:
    return OHLCVPoint(
        date=day,
        open=previous.open,
        high=previous.high,
        low=previous.low,
        close=previous.close,
        volume=0,
    )


def fill_calendar_days(points: Iterable[OHLCVPoint], end_date: Optional[date] = None,
                       days: int = 30) -> list[OHLCVPoint]:
    """
    Fill weekends and holidays so a chart spans every calendar day

    Days before the first known point are skipped. An interior gap takes the
    midpoint of the last emitted point and the next known point; a trailing
    gap repeats the last emitted point. Synthetic days carry zero volume.

    Args:
        points: Trading-day points, oldest first
        end_date: Last calendar day of the window (today when None)
        days: Window length in days before end_date

    Returns:
        Points for each covered calendar day, oldest first
    """
    by_date = {point.date: point for point in points}
    if not by_date:
        return []

    window = calendar_days(end_date or today_utc(), days)
    result: list[OHLCVPoint] = []

    for index, day in enumerate(window):
        point = by_date.get(day)

        if point is None and result:
            previous = result[-1]
            following = next((by_date[d] for d in window[index + 1:] if d in by_date), None)
            if following is not None:
                point = _midpoint(previous, following, day)
            else:
                point = _carry_forward(previous, day)

        if point is not None:
            result.append(point)

    return result
