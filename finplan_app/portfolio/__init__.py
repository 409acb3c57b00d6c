"""Fixed-table portfolio allocation by risk profile"""

from .allocator import (
    ALLOCATION_TABLE,
    INSTRUMENT_ORDER,
    AllocationEntry,
    RiskLevel,
    RiskProfile,
    allocate,
    allocate_amounts,
    calculate_portfolio_return,
    potential_return,
    weighted_return,
)

__all__ = [
    "ALLOCATION_TABLE",
    "INSTRUMENT_ORDER",
    "AllocationEntry",
    "RiskLevel",
    "RiskProfile",
    "allocate",
    "allocate_amounts",
    "calculate_portfolio_return",
    "potential_return",
    "weighted_return",
]
