"""
Pytest configuration and fixtures for the carteira test suite.

Fixtures mirror a small two-client book: an individual investor holding a
treasury title, a stock and a fund, and a company holding a corporate
bond, a stock and a fund.
"""

import json

import pytest

from carteira.clients import IndividualClient, CorporateClient
from carteira.investment import (
    FixedRateTreasury,
    StockPosition,
    InvestmentFund,
    CorporateBond,
)
from carteira.portfolio import Portfolio


# ---------------------------------------------------------------------------
# Client Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def individual() -> IndividualClient:
    """Individual client (CPF)."""
    return IndividualClient("João Silva", "joao@email.com", cpf="123.456.789-00")


@pytest.fixture
def corporate() -> CorporateClient:
    """Corporate client (CNPJ)."""
    return CorporateClient("Empresa XYZ", "contato@xyz.com", cnpj="12.345.678/0001-99")


# ---------------------------------------------------------------------------
# Investment Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def treasury(individual) -> FixedRateTreasury:
    """
    Fixed-rate treasury title.

    Balance: 5,000
    Rate: 10% annually, 15% tax on yield
    """
    return FixedRateTreasury(individual, 5_000, "Tesouro Prefixado 2029", annual_rate=0.10)


@pytest.fixture
def stock(individual) -> StockPosition:
    """
    Stock position.

    Balance: 3,000
    Fee: 10 per month
    """
    return StockPosition(individual, 3_000, "PETR4", "Petrobras PN", monthly_fee=10)


@pytest.fixture
def fund(individual) -> InvestmentFund:
    """
    Investment fund.

    Balance: 8,000
    Admin fee: 2% annually
    """
    return InvestmentFund(individual, 8_000, "Fundo Alfa", "00.000.000/0001-00", annual_admin_rate=0.02)


@pytest.fixture
def bond(corporate) -> CorporateBond:
    """
    Corporate bond.

    Balance: 15,000
    Rate: 12% annually, 20% tax on yield
    """
    return CorporateBond(corporate, 15_000, "Empresa ABC", annual_rate=0.12, tax_rate=0.20)


@pytest.fixture
def all_investments(treasury, stock, fund, bond):
    """One instance of every product variant."""
    return [treasury, stock, fund, bond]


# ---------------------------------------------------------------------------
# Portfolio Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def individual_portfolio(individual, treasury, stock, fund) -> Portfolio:
    """Individual portfolio: treasury + stock + fund (total 16,000)."""
    portfolio = Portfolio(individual)
    for inv in (treasury, stock, fund):
        portfolio.add_investment(inv)
    return portfolio


# ---------------------------------------------------------------------------
# Configuration Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def individual_portfolio_dict() -> dict:
    """Dictionary description of the individual portfolio."""
    return {
        "client": {
            "kind": "individual",
            "name": "João Silva",
            "email": "joao@email.com",
            "document": "123.456.789-00",
        },
        "investments": [
            {
                "type": "treasury",
                "title_name": "Tesouro Prefixado 2029",
                "initial_balance": 5000,
                "annual_rate": 0.10,
            },
            {
                "type": "stock",
                "ticker": "PETR4",
                "company_name": "Petrobras PN",
                "initial_balance": 3000,
                "monthly_fee": 10,
            },
            {
                "type": "fund",
                "fund_name": "Fundo Alfa",
                "manager_cnpj": "00.000.000/0001-00",
                "initial_balance": 8000,
                "annual_admin_rate": 0.02,
            },
        ],
        "contributions": {"Tesouro Prefixado 2029": 1000, "PETR4": 500},
        "withdrawals": {"Fundo Alfa": 1000},
    }


@pytest.fixture
def corporate_portfolio_dict() -> dict:
    """Dictionary description of the corporate portfolio."""
    return {
        "client": {
            "kind": "corporate",
            "name": "Empresa XYZ",
            "email": "contato@xyz.com",
            "document": "12.345.678/0001-99",
        },
        "investments": [
            {
                "type": "bond",
                "issuer_name": "Empresa ABC",
                "initial_balance": 15000,
                "annual_rate": 0.12,
                "tax_rate": 0.20,
            },
            {
                "type": "stock",
                "ticker": "VALE3",
                "company_name": "Vale ON",
                "initial_balance": 7000,
                "monthly_fee": 15,
            },
            {
                "type": "fund",
                "fund_name": "Fundo Beta",
                "manager_cnpj": "11.111.111/0001-11",
                "initial_balance": 10000,
                "annual_admin_rate": 0.015,
            },
        ],
        "contributions": {"Empresa ABC": 3000},
        "withdrawals": {"VALE3": 1500},
    }


@pytest.fixture
def individual_portfolio_file(tmp_path, individual_portfolio_dict):
    """Individual portfolio written as a JSON file."""
    path = tmp_path / "joao.json"
    with open(path, "w", encoding="utf-8") as f:
        json.dump(individual_portfolio_dict, f, ensure_ascii=False)
    return path
