"""
Unit tests for serialization.py module.

Tests building clients, investments and portfolios from dicts and JSON.
"""

import json

import pytest

from carteira.clients import CorporateClient, IndividualClient
from carteira.exceptions import (
    ConfigurationError,
    InvalidEligibilityError,
)
from carteira.investment import (
    CorporateBond,
    FixedRateTreasury,
    InvestmentFund,
    StockPosition,
)
from carteira.serialization import (
    client_from_dict,
    investment_from_dict,
    load_portfolio,
    load_portfolio_config,
    portfolio_from_dict,
)


class TestClientFromDict:

    def test_individual(self):
        client = client_from_dict(
            {"kind": "individual", "name": "Ana", "email": "ana@email.com", "document": "111"}
        )
        assert isinstance(client, IndividualClient)
        assert client.cpf == "111"

    def test_corporate(self):
        client = client_from_dict(
            {"kind": "corporate", "name": "ACME", "email": "a@acme.com", "document": "222"}
        )
        assert isinstance(client, CorporateClient)
        assert client.document_id == "222"

    def test_invalid(self):
        with pytest.raises(ConfigurationError, match="ClientConfig"):
            client_from_dict({"kind": "individual", "name": "Ana"})


class TestInvestmentFromDict:

    def test_every_type(self, individual, corporate):
        treasury = investment_from_dict(
            {"type": "treasury", "title_name": "Tesouro 2029",
             "initial_balance": 5000, "annual_rate": 0.10},
            individual,
        )
        stock = investment_from_dict(
            {"type": "stock", "ticker": "PETR4", "company_name": "Petrobras PN",
             "initial_balance": 3000, "monthly_fee": 10},
            individual,
        )
        fund = investment_from_dict(
            {"type": "fund", "fund_name": "Fundo Alfa", "manager_cnpj": "00",
             "initial_balance": 8000, "annual_admin_rate": 0.02},
            corporate,
        )
        bond = investment_from_dict(
            {"type": "bond", "issuer_name": "Empresa ABC", "initial_balance": 15000,
             "annual_rate": 0.12, "tax_rate": 0.2},
            corporate,
        )

        assert isinstance(treasury, FixedRateTreasury) and treasury.owner is individual
        assert isinstance(stock, StockPosition) and stock.monthly_fee == 10
        assert isinstance(fund, InvestmentFund) and fund.owner is corporate
        assert isinstance(bond, CorporateBond) and bond.tax_rate == 0.2

    def test_unknown_type(self, individual):
        with pytest.raises(ConfigurationError, match="Unknown investment type"):
            investment_from_dict({"type": "crypto"}, individual)

    def test_eligibility_still_enforced(self, corporate):
        with pytest.raises(InvalidEligibilityError):
            investment_from_dict(
                {"type": "treasury", "title_name": "Tesouro 2029", "annual_rate": 0.10},
                corporate,
            )


class TestPortfolioFromDict:

    def test_builds_in_order(self, individual_portfolio_dict):
        portfolio = portfolio_from_dict(individual_portfolio_dict)

        assert portfolio.client.name == "João Silva"
        assert [inv.product_name for inv in portfolio.investments] == [
            "Tesouro Prefixado 2029", "PETR4", "Fundo Alfa",
        ]
        assert all(inv.owner is portfolio.client for inv in portfolio.investments)
        assert portfolio.total_invested_value() == 16_000

    def test_movements_not_applied_on_load(self, corporate_portfolio_dict):
        portfolio = portfolio_from_dict(corporate_portfolio_dict)
        assert portfolio.total_invested_value() == 32_000

    def test_ineligible_product(self, corporate_portfolio_dict):
        corporate_portfolio_dict["investments"].append(
            {"type": "treasury", "title_name": "Tesouro 2029", "annual_rate": 0.10}
        )
        with pytest.raises(InvalidEligibilityError):
            portfolio_from_dict(corporate_portfolio_dict)


class TestLoadPortfolio:

    def test_load_json(self, individual_portfolio_file):
        portfolio = load_portfolio(individual_portfolio_file)

        assert len(portfolio) == 3
        assert portfolio.client.document_id == "123.456.789-00"

    def test_load_config_keeps_movements(self, individual_portfolio_file):
        config = load_portfolio_config(str(individual_portfolio_file))
        assert config.withdrawals == {"Fundo Alfa": 1000}

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="not valid UTF-8 JSON"):
            load_portfolio(path)

    def test_non_utf8_file(self, tmp_path):
        path = tmp_path / "latin.json"
        path.write_bytes(b"\xff\xfe{\"a\":1}")

        with pytest.raises(ConfigurationError, match="not valid UTF-8 JSON"):
            load_portfolio_config(path)

    def test_schema_error(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"client": {"kind": "individual"}}), encoding="utf-8")

        with pytest.raises(ConfigurationError, match="PortfolioConfig"):
            load_portfolio(path)
