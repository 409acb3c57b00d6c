"""Tests for risk-profile allocation"""

import pytest

from finplan_app.portfolio.allocator import (
    ALLOCATION_TABLE,
    RiskLevel,
    RiskProfile,
    allocate,
    allocate_amounts,
    calculate_portfolio_return,
    potential_return,
    weighted_return,
)


class TestRiskProfile:
    """Test profile parsing"""

    def test_parse_names(self):
        assert RiskProfile.parse("conservative") is RiskProfile.CONSERVATIVE
        assert RiskProfile.parse(" Balanced ") is RiskProfile.BALANCED
        assert RiskProfile.parse(RiskProfile.AGGRESSIVE) is RiskProfile.AGGRESSIVE

    def test_parse_unknown(self):
        with pytest.raises(ValueError, match="Unknown risk profile"):
            RiskProfile.parse("reckless")


class TestAllocate:
    """Test the fixed allocation table"""

    def test_conservative_weights(self):
        entries = allocate("conservative")

        assert [e.weight for e in entries] == [0.5, 0.3, 0.2]
        assert [e.symbol for e in entries] == ["SPY", "JNJ", "AAPL"]

    def test_balanced_weights(self):
        assert [e.weight for e in allocate(RiskProfile.BALANCED)] == [0.4, 0.35, 0.25]

    def test_aggressive_weights(self):
        assert [e.weight for e in allocate(RiskProfile.AGGRESSIVE)] == [0.3, 0.4, 0.3]

    @pytest.mark.parametrize("profile", list(RiskProfile))
    def test_weights_sum_to_one(self, profile):
        assert sum(e.weight for e in allocate(profile)) == pytest.approx(1.0)

    def test_entry_metadata(self):
        spy, jnj, aapl = allocate("balanced")

        assert spy.instrument_name == "S&P 500 Index (SPY)"
        assert spy.risk_level is RiskLevel.LOW
        assert jnj.risk_level is RiskLevel.LOW
        assert aapl.risk_level is RiskLevel.HIGH
        assert aapl.description.startswith("25%")

    def test_table_covers_every_profile(self):
        assert set(ALLOCATION_TABLE) == set(RiskProfile)
        assert all(len(rows) == 3 for rows in ALLOCATION_TABLE.values())


class TestWeightedReturn:
    """Test weighted portfolio return"""

    def test_conservative(self):
        # 0.5*10 + 0.3*20 + 0.2*(-5) = 10
        assert weighted_return("conservative", [10.0, 20.0, -5.0]) == pytest.approx(10.0)

    def test_aggressive(self):
        # 0.3*10 + 0.4*20 + 0.3*30 = 20
        assert weighted_return("aggressive", [10.0, 20.0, 30.0]) == pytest.approx(20.0)

    def test_fewer_than_three_returns(self):
        assert weighted_return("balanced", []) == 0
        assert weighted_return("balanced", [5.0, 6.0]) == 0

    def test_extra_returns_ignored(self):
        assert weighted_return("balanced", [10.0, 10.0, 10.0, 999.0]) == pytest.approx(10.0)

    def test_switching_profile_recomputes(self):
        returns = [12.0, 3.0, 40.0]

        conservative = weighted_return("conservative", returns)
        aggressive = weighted_return("aggressive", returns)

        assert conservative == pytest.approx(0.5 * 12 + 0.3 * 3 + 0.2 * 40)
        assert aggressive == pytest.approx(0.3 * 12 + 0.4 * 3 + 0.3 * 40)
        assert weighted_return("conservative", returns) == conservative


class TestBudgetScaling:
    """Test amounts and estimates scaled by the remaining budget"""

    @pytest.mark.parametrize("profile", list(RiskProfile))
    def test_allocation_partitions_budget(self, profile):
        budget = 1_200_000

        amounts = allocate_amounts(profile, budget)

        assert sum(amounts) == pytest.approx(budget)

    def test_overspent_budget_suggests_nothing(self):
        assert allocate_amounts("balanced", -500_000) == [0.0, 0.0, 0.0]
        assert allocate_amounts("balanced", 0) == [0.0, 0.0, 0.0]

    def test_potential_return(self):
        # 30% of 1,000,000 at +5%
        assert potential_return(1_000_000, 5.0) == pytest.approx(15_000)

    def test_potential_return_overspent(self):
        assert potential_return(-10, 5.0) == 0.0

    def test_generic_portfolio_return(self):
        assert calculate_portfolio_return([(0.5, 10.0), (0.5, 20.0)]) == pytest.approx(15.0)
        assert calculate_portfolio_return([]) == 0.0
