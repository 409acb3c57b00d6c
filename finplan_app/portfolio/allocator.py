"""
Risk-profile allocation over the three tracked instruments.

Weights come from a fixed table, not from optimization. Instrument order is
fixed: index 0 is SPY, 1 is JNJ, 2 is AAPL, and per-instrument return lists
must follow the same order.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Sequence


class RiskProfile(Enum):
    """Allocation tier selected by the user."""
    CONSERVATIVE = "conservative"
    BALANCED = "balanced"
    AGGRESSIVE = "aggressive"

    @classmethod
    def parse(cls, value: "str | RiskProfile") -> "RiskProfile":
        """Accept an enum member or a case-insensitive profile name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown risk profile '{value}'. Expected one of: {names}")


class RiskLevel(Enum):
    """Instrument risk label."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


@dataclass(frozen=True)
class AllocationEntry:
    """Suggested share of the budget for one instrument."""
    instrument_name: str
    symbol: str
    weight: float            # 0-1; entries of one profile sum to 1
    risk_level: RiskLevel
    description: str


INSTRUMENT_ORDER = ("SPY", "JNJ", "AAPL")

_NAMES = {
    "SPY": "S&P 500 Index (SPY)",
    "JNJ": "Johnson & Johnson (JNJ)",
    "AAPL": "Apple (AAPL)",
}

_RISK_LEVELS = {
    "SPY": RiskLevel.LOW,
    "JNJ": RiskLevel.LOW,
    "AAPL": RiskLevel.HIGH,
}

# (weight, description) per instrument, in INSTRUMENT_ORDER
ALLOCATION_TABLE: dict[RiskProfile, tuple[tuple[float, str], ...]] = {
    RiskProfile.CONSERVATIVE: (
        (0.5, "50% - Core stable foundation with broad diversification"),
        (0.3, "30% - Healthcare dividend stock with strong stability"),
        (0.2, "20% - Individual growth stock for capital appreciation"),
    ),
    RiskProfile.BALANCED: (
        (0.4, "40% - Diversified market base"),
        (0.35, "35% - Quality dividend-paying healthcare stock"),
        (0.25, "25% - Growth and potential upside"),
    ),
    RiskProfile.AGGRESSIVE: (
        (0.3, "30% - Market participation"),
        (0.4, "40% - Defensive dividend stock with growth"),
        (0.3, "30% - Maximum growth potential"),
    ),
}


def allocate(risk_profile: "str | RiskProfile") -> list[AllocationEntry]:
    """
    Fixed allocation for a risk profile.

    Args:
        risk_profile: RiskProfile or its name ('conservative', ...)

    Returns:
        Three AllocationEntry records in instrument order
    """
    profile = RiskProfile.parse(risk_profile)

    return [
        AllocationEntry(
            instrument_name=_NAMES[symbol],
            symbol=symbol,
            weight=weight,
            risk_level=_RISK_LEVELS[symbol],
            description=description,
        )
        for symbol, (weight, description) in zip(INSTRUMENT_ORDER, ALLOCATION_TABLE[profile])
    ]


def weighted_return(risk_profile: "str | RiskProfile", returns: Sequence[float]) -> float:
    """
    Portfolio return for a profile given per-instrument returns.

    Args:
        risk_profile: RiskProfile or its name
        returns: Percentage returns for SPY, JNJ, AAPL in that order

    Returns:
        Weighted return as a percentage; 0 when fewer than 3 returns
    """
    if len(returns) < 3:
        return 0.0

    entries = allocate(risk_profile)
    total = sum(entry.weight * (ret / 100) for entry, ret in zip(entries, returns))
    return total * 100


def calculate_portfolio_return(holdings: Iterable[tuple[float, float]]) -> float:
    """Weighted return over (weight, expected_return_pct) pairs, as a percentage."""
    total = 0.0
    for weight, expected_return in holdings:
        total += weight * (expected_return / 100)
    return total * 100


def allocate_amounts(risk_profile: "str | RiskProfile", remaining_budget: float) -> list[float]:
    """
    Split a remaining budget across the profile's instruments.

    An overspent or empty budget suggests no investment at all.
    """
    entries = allocate(risk_profile)
    if remaining_budget <= 0:
        return [0.0 for _ in entries]
    return [entry.weight * remaining_budget for entry in entries]


def potential_return(remaining_budget: float, period_return_pct: float, share: float = 0.3) -> float:
    """
    Amount earned by investing ``share`` of the budget at the period return.

    Returns 0 when the budget is not positive.
    """
    if remaining_budget <= 0:
        return 0.0
    return remaining_budget * share * (period_return_pct / 100)
