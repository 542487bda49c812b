"""
Unit tests for portfolio.py module.

Tests membership enforcement, ordering and aggregation of Portfolio.
"""

import pytest

from carteira.clients import IndividualClient
from carteira.exceptions import ForeignInvestmentError
from carteira.investment import StockPosition, InvestmentFund
from carteira.portfolio import Portfolio


class TestPortfolioInstantiation:
    """Test Portfolio creation and read views."""

    def test_empty_portfolio(self, individual):
        portfolio = Portfolio(individual)

        assert portfolio.client is individual
        assert portfolio.investments == ()
        assert len(portfolio) == 0
        assert portfolio.total_invested_value() == 0.0

    def test_investments_in_insertion_order(self, individual_portfolio, treasury, stock, fund):
        assert individual_portfolio.investments == (treasury, stock, fund)
        assert list(individual_portfolio) == [treasury, stock, fund]

    def test_investments_view_is_read_only(self, individual_portfolio, individual):
        view = individual_portfolio.investments
        assert isinstance(view, tuple)

        extra = StockPosition(individual, 1_000, "ITUB4", "Itaú PN", monthly_fee=5)
        with pytest.raises(AttributeError):
            view.append(extra)
        assert len(individual_portfolio) == 3


class TestAddInvestment:
    """Test membership invariant."""

    def test_same_client_accepted(self, individual, treasury):
        portfolio = Portfolio(individual)
        portfolio.add_investment(treasury)

        assert portfolio.investments == (treasury,)

    def test_no_dedup(self, individual, stock):
        portfolio = Portfolio(individual)
        portfolio.add_investment(stock)
        portfolio.add_investment(stock)

        assert len(portfolio) == 2
        assert portfolio.total_invested_value() == 6_000

    def test_foreign_investment_rejected(self, individual_portfolio, bond):
        with pytest.raises(ForeignInvestmentError, match="Empresa XYZ"):
            individual_portfolio.add_investment(bond)
        assert len(individual_portfolio) == 3

    def test_identity_not_field_equality(self, individual):
        twin = IndividualClient(individual.name, individual.email, cpf=individual.cpf)
        portfolio = Portfolio(individual)
        foreign = InvestmentFund(twin, 1_000, "Fundo Alfa", "00.000.000/0001-00", 0.02)

        with pytest.raises(ForeignInvestmentError):
            portfolio.add_investment(foreign)
        assert portfolio.investments == ()
        assert portfolio.total_invested_value() == 0.0


class TestAggregation:
    """Test totals and bulk operations."""

    def test_total_is_sum_of_balances(self, individual_portfolio):
        assert individual_portfolio.total_invested_value() == 16_000
        assert individual_portfolio.total_invested_value() == pytest.approx(
            sum(inv.balance for inv in individual_portfolio.investments)
        )

    def test_total_follows_movements(self, individual_portfolio, treasury, fund):
        treasury.apply(1_000)
        fund.withdraw(1_000)
        fund.withdraw(1_000_000)  # ignored

        assert individual_portfolio.total_invested_value() == 16_000

    def test_advance_one_month_moves_every_holding(self, individual_portfolio, treasury, stock, fund):
        individual_portfolio.advance_one_month()

        assert treasury.balance == pytest.approx(5_000 * (1 + 0.10 / 12))
        assert stock.balance == pytest.approx(3_000 * 1.008 - 10)
        assert fund.balance == pytest.approx(8_000 * (1 + 0.01 - 0.02 / 12))
        assert individual_portfolio.total_invested_value() == pytest.approx(
            treasury.balance + stock.balance + fund.balance
        )

    def test_projected_total_is_pure(self, individual_portfolio):
        expected = sum(inv.project_balance(12) for inv in individual_portfolio.investments)

        assert individual_portfolio.projected_total(12) == pytest.approx(expected)
        assert individual_portfolio.projected_total(0) == 16_000
        assert individual_portfolio.total_invested_value() == 16_000

    def test_repr(self, individual_portfolio):
        assert repr(individual_portfolio) == (
            "Portfolio('João Silva': 3 investments, total=16,000.00)"
        )
