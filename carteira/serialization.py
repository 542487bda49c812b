"""
Portfolio construction from configuration for carteira.

Purpose
-------
Builds clients, investments and portfolios from plain dictionaries or JSON
files, validating them with the Pydantic configs of ``carteira.config``.
Objects are always created through the engine constructors, so product
eligibility and portfolio membership are enforced exactly as for hand-built
objects.

Only loading is supported; portfolios are never written back.

Example
-------
>>> from carteira.serialization import load_portfolio
>>> portfolio = load_portfolio(Path("joao.json"))
>>> portfolio.total_invested_value()
16000.0
"""

from __future__ import annotations
from typing import Any, Dict, Union
from pathlib import Path
import json

import pydantic

from .clients import Client, CorporateClient, IndividualClient
from .config import (
    ClientConfig,
    CorporateBondConfig,
    FixedRateTreasuryConfig,
    InvestmentFundConfig,
    PortfolioConfig,
    StockPositionConfig,
)
from .exceptions import ConfigurationError
from .investment import (
    CorporateBond,
    FixedRateTreasury,
    Investment,
    InvestmentFund,
    StockPosition,
)
from .logger import get_logger
from .portfolio import Portfolio

__all__ = [
    "client_from_config",
    "client_from_dict",
    "investment_from_config",
    "investment_from_dict",
    "portfolio_from_config",
    "portfolio_from_dict",
    "load_portfolio_config",
    "load_portfolio",
]

logger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Clients
# ---------------------------------------------------------------------------

def client_from_config(config: ClientConfig) -> Client:
    """Create the client variant described by ``config``."""
    if config.kind == "individual":
        return IndividualClient(config.name, config.email, cpf=config.document)
    return CorporateClient(config.name, config.email, cnpj=config.document)


def client_from_dict(data: Dict[str, Any]) -> Client:
    """
    Create a client from its dictionary representation.

    Raises
    ------
    ConfigurationError
        If ``data`` does not match ClientConfig.
    """
    return client_from_config(_validate(ClientConfig, data))


# ---------------------------------------------------------------------------
# Investments
# ---------------------------------------------------------------------------

def investment_from_config(config, owner: Client) -> Investment:
    """
    Create the investment described by ``config`` for ``owner``.

    Raises
    ------
    InvalidEligibilityError
        If the product is restricted to the other client kind.
    """
    if isinstance(config, FixedRateTreasuryConfig):
        return FixedRateTreasury(
            owner,
            config.initial_balance,
            title_name=config.title_name,
            annual_rate=config.annual_rate,
        )
    if isinstance(config, StockPositionConfig):
        return StockPosition(
            owner,
            config.initial_balance,
            ticker=config.ticker,
            company_name=config.company_name,
            monthly_fee=config.monthly_fee,
        )
    if isinstance(config, InvestmentFundConfig):
        return InvestmentFund(
            owner,
            config.initial_balance,
            fund_name=config.fund_name,
            manager_cnpj=config.manager_cnpj,
            annual_admin_rate=config.annual_admin_rate,
        )
    if isinstance(config, CorporateBondConfig):
        return CorporateBond(
            owner,
            config.initial_balance,
            issuer_name=config.issuer_name,
            annual_rate=config.annual_rate,
            tax_rate=config.tax_rate,
        )
    raise ConfigurationError(f"Unsupported investment config: {type(config).__name__}")


_INVESTMENT_CONFIGS = {
    "treasury": FixedRateTreasuryConfig,
    "stock": StockPositionConfig,
    "fund": InvestmentFundConfig,
    "bond": CorporateBondConfig,
}


def investment_from_dict(data: Dict[str, Any], owner: Client) -> Investment:
    """
    Create an investment for ``owner`` from a dictionary with a ``type`` key
    ("treasury", "stock", "fund" or "bond").

    Raises
    ------
    ConfigurationError
        If the type is unknown or the fields do not validate.
    """
    kind = data.get("type")
    if kind not in _INVESTMENT_CONFIGS:
        raise ConfigurationError(
            f"Unknown investment type {kind!r}. "
            f"Expected one of: {', '.join(_INVESTMENT_CONFIGS)}."
        )
    return investment_from_config(_validate(_INVESTMENT_CONFIGS[kind], data), owner)


# ---------------------------------------------------------------------------
# Portfolios
# ---------------------------------------------------------------------------

def portfolio_from_config(config: PortfolioConfig) -> Portfolio:
    """Create the client and add every configured investment, in order."""
    client = client_from_config(config.client)
    portfolio = Portfolio(client)
    for inv_config in config.investments:
        portfolio.add_investment(investment_from_config(inv_config, client))
    logger.debug(
        "Built portfolio for %s with %d investments (total %.2f)",
        client.name, len(portfolio), portfolio.total_invested_value(),
    )
    return portfolio


def portfolio_from_dict(data: Dict[str, Any]) -> Portfolio:
    """Create a portfolio from its dictionary representation."""
    return portfolio_from_config(_validate(PortfolioConfig, data))


def load_portfolio_config(path: Union[str, Path]) -> PortfolioConfig:
    """
    Read and validate a portfolio description from a JSON file.

    Raises
    ------
    ConfigurationError
        If the file is not valid UTF-8 JSON or does not match PortfolioConfig.
    """
    path = Path(path)
    logger.info("Loading portfolio from %s", path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"{path} is not valid UTF-8 JSON: {e}") from e
    return _validate(PortfolioConfig, data)


def load_portfolio(path: Union[str, Path]) -> Portfolio:
    """Build the portfolio described by the JSON file at ``path``."""
    return portfolio_from_config(load_portfolio_config(path))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _validate(model, data: Dict[str, Any]):
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        raise ConfigurationError(f"Invalid {model.__name__}: {e}") from e
