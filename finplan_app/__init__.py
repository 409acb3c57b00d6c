"""
FinPlan App - Personal Budget and Investment Suggestion Core

Computes a remaining monthly budget from income and expense categories and
turns recent daily price history for a fixed set of tickers into period
returns, simple annualized rates, linear forecasts and risk-profile
weighted allocations.
"""

__version__ = "0.1.0"
__author__ = "FinPlan Team"
