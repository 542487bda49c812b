"""
Configuration management module for carteira.

Purpose
-------
Centralized configuration using Pydantic models for type-safe description
of clients, investments and portfolios, plus application settings loaded
from the environment.

Design Principles
-----------------
- Type-safe: Pydantic enforces types and validates ranges
- Immutable: Frozen models prevent accidental mutation
- Declarative only: configs describe objects, the engine constructors still
  enforce eligibility and membership when they are built
- Environment-aware: AppSettings reads CARTEIRA_* variables and .env files

Example
-------
>>> from carteira.config import PortfolioConfig
>>> config = PortfolioConfig.model_validate({
...     "client": {"kind": "individual", "name": "João Silva",
...                "email": "joao@email.com", "document": "123.456.789-00"},
...     "investments": [
...         {"type": "treasury", "title_name": "Tesouro Prefixado 2029",
...          "initial_balance": 5000, "annual_rate": 0.10},
...     ],
... })
>>> config.investments[0].type
'treasury'
"""

from __future__ import annotations
from typing import Dict, List, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated

from .constants import DEFAULT_PROJECTION_MONTHS, DEFAULT_SIMULATION_MONTHS

__all__ = [
    "ClientConfig",
    "FixedRateTreasuryConfig",
    "StockPositionConfig",
    "InvestmentFundConfig",
    "CorporateBondConfig",
    "InvestmentConfig",
    "PortfolioConfig",
    "AppSettings",
]


# ---------------------------------------------------------------------------
# Client Configuration
# ---------------------------------------------------------------------------

class ClientConfig(BaseModel):
    """
    Configuration for a portfolio holder.

    Attributes
    ----------
    kind : str
        "individual" (CPF) or "corporate" (CNPJ).
    name : str
        Client name.
    email : str
        Contact e-mail.
    document : str
        CPF for individuals, CNPJ for corporates.

    Examples
    --------
    >>> ClientConfig(kind="corporate", name="Empresa XYZ",
    ...              email="contato@xyz.com", document="12.345.678/0001-99")
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    kind: Literal["individual", "corporate"] = Field(
        description="Legal-person kind"
    )
    name: str = Field(
        min_length=1,
        max_length=200,
        description="Client name"
    )
    email: str = Field(
        min_length=1,
        description="Contact e-mail"
    )
    document: str = Field(
        min_length=1,
        description="CPF or CNPJ, depending on kind"
    )


# ---------------------------------------------------------------------------
# Investment Configuration
# ---------------------------------------------------------------------------

class _InvestmentConfigBase(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    initial_balance: float = Field(
        default=0.0,
        ge=0,
        description="Starting balance"
    )


class FixedRateTreasuryConfig(_InvestmentConfigBase):
    """
    Configuration for FixedRateTreasury (individual clients only).

    Examples
    --------
    >>> FixedRateTreasuryConfig(title_name="Tesouro Prefixado 2029",
    ...                         initial_balance=5_000, annual_rate=0.10)
    """

    type: Literal["treasury"] = "treasury"
    title_name: str = Field(min_length=1, description="Title label")
    annual_rate: float = Field(
        gt=-1.0,
        le=1.0,
        description="Nominal annual rate"
    )


class StockPositionConfig(_InvestmentConfigBase):
    """Configuration for StockPosition."""

    type: Literal["stock"] = "stock"
    ticker: str = Field(min_length=1, max_length=12, description="Exchange code")
    company_name: str = Field(min_length=1, description="Listed company")
    monthly_fee: float = Field(
        default=0.0,
        ge=0,
        description="Fixed monthly brokerage fee"
    )


class InvestmentFundConfig(_InvestmentConfigBase):
    """Configuration for InvestmentFund."""

    type: Literal["fund"] = "fund"
    fund_name: str = Field(min_length=1, description="Fund label")
    manager_cnpj: str = Field(min_length=1, description="Fund manager CNPJ")
    annual_admin_rate: float = Field(
        ge=0,
        le=1.0,
        description="Annual administration fee"
    )


class CorporateBondConfig(_InvestmentConfigBase):
    """
    Configuration for CorporateBond (corporate clients only).

    Examples
    --------
    >>> CorporateBondConfig(issuer_name="Empresa ABC", initial_balance=15_000,
    ...                     annual_rate=0.12, tax_rate=0.20)
    """

    type: Literal["bond"] = "bond"
    issuer_name: str = Field(min_length=1, description="Issuing company")
    annual_rate: float = Field(
        gt=-1.0,
        le=1.0,
        description="Nominal annual rate"
    )
    tax_rate: float = Field(
        ge=0,
        le=1.0,
        description="Tax on the yield"
    )


InvestmentConfig = Annotated[
    Union[
        FixedRateTreasuryConfig,
        StockPositionConfig,
        InvestmentFundConfig,
        CorporateBondConfig,
    ],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Portfolio Configuration
# ---------------------------------------------------------------------------

class PortfolioConfig(BaseModel):
    """
    Declarative description of one client's portfolio.

    Attributes
    ----------
    client : ClientConfig
        Portfolio holder; every investment is built for this client.
    investments : list of InvestmentConfig
        Holdings, in insertion order.
    contributions : dict
        Product name -> amount deposited by the driver before simulating.
    withdrawals : dict
        Product name -> amount withdrawn by the driver before simulating.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    client: ClientConfig
    investments: List[InvestmentConfig] = Field(
        default_factory=list,
        description="Holdings in insertion order"
    )
    contributions: Dict[str, float] = Field(
        default_factory=dict,
        description="Deposits applied by the driver, keyed by product name"
    )
    withdrawals: Dict[str, float] = Field(
        default_factory=dict,
        description="Withdrawals applied by the driver, keyed by product name"
    )


# ---------------------------------------------------------------------------
# Application Settings (Environment Variables)
# ---------------------------------------------------------------------------

class AppSettings(BaseSettings):
    """
    Global application settings loaded from environment variables.

    Environment variables are prefixed with CARTEIRA_
    (e.g., CARTEIRA_PROJECTION_MONTHS=24).

    Attributes
    ----------
    log_level : str
        Logging level of the driver: "DEBUG", "INFO", "WARNING", "ERROR".
    projection_months : int
        Default horizon for projection reports.
    simulation_months : int
        Default number of months advanced by ``carteira simulate``.

    Examples
    --------
    >>> settings = AppSettings()
    >>> settings.projection_months
    12
    """

    model_config = SettingsConfigDict(
        env_prefix="CARTEIRA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level"
    )
    projection_months: int = Field(
        default=DEFAULT_PROJECTION_MONTHS,
        ge=0,
        le=1200,
        description="Default projection horizon (months)"
    )
    simulation_months: int = Field(
        default=DEFAULT_SIMULATION_MONTHS,
        ge=0,
        le=1200,
        description="Default simulation length (months)"
    )
