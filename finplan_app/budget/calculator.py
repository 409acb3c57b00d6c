"""
Monthly budget arithmetic.

The remaining budget is signed: a negative value means the user spends more
than they earn and is passed through unchanged to every consumer.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Iterable, Optional

_NON_DIGITS = re.compile(r"\D")


def parse_amount(value: Any) -> float:
    """
    Parse a user-entered amount, treating anything unusable as 0.

    Strings keep only their digits, so grouping separators and currency
    prefixes are ignored ("Rp 5.000.000" -> 5000000). Amounts are whole
    currency units.

    Args:
        value: Raw input (str, int, float or None)

    Returns:
        Parsed amount, 0 for absent or unparseable input
    """
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else 0
    if isinstance(value, str):
        digits = _NON_DIGITS.sub("", value)
        return int(digits) if digits else 0
    return 0


def remaining_budget(income: Any, expense_categories: Optional[Iterable[Any]] = None) -> float:
    """
    Income minus the sum of expense categories.

    Args:
        income: Monthly income
        expense_categories: Amounts for each expense category

    Returns:
        Signed remaining budget; negative means overspending
    """
    total_expenses = sum(parse_amount(expense) for expense in (expense_categories or ()))
    return parse_amount(income) - total_expenses


@dataclass(frozen=True)
class BudgetBreakdown:
    """Planner form categories and the resulting remaining budget."""
    income: float
    primary_expenses: float
    secondary_expenses: float
    savings: float
    pocket_money: float

    @property
    def total_expenses(self) -> float:
        return self.primary_expenses + self.secondary_expenses + self.savings + self.pocket_money

    @property
    def remaining(self) -> float:
        return remaining_budget(self.income, [
            self.primary_expenses, self.secondary_expenses, self.savings, self.pocket_money,
        ])

    @property
    def is_overspent(self) -> bool:
        return self.remaining < 0

    @property
    def investable(self) -> float:
        """Budget available for suggestions; zero when overspent."""
        return max(0, self.remaining)


def build_budget(income: Any = None, primary_expenses: Any = None, secondary_expenses: Any = None,
                 savings: Any = None, pocket_money: Any = None) -> BudgetBreakdown:
    """Parse raw form values into a BudgetBreakdown."""
    return BudgetBreakdown(
        income=parse_amount(income),
        primary_expenses=parse_amount(primary_expenses),
        secondary_expenses=parse_amount(secondary_expenses),
        savings=parse_amount(savings),
        pocket_money=parse_amount(pocket_money),
    )
