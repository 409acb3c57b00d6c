"""Monthly budget calculation"""

from .calculator import BudgetBreakdown, build_budget, parse_amount, remaining_budget

__all__ = ["BudgetBreakdown", "build_budget", "parse_amount", "remaining_budget"]
