"""
Global constants for carteira.

Purpose
-------
Centralizes the product rules that are fixed by the catalogue rather than
supplied per instance, together with driver defaults.

Usage
-----
>>> from carteira.constants import TREASURY_INCOME_TAX_RATE, MONTHS_PER_YEAR
>>> monthly_rate = annual_rate / MONTHS_PER_YEAR

Categories
----------
- Time: months per year
- Products: treasury tax, stock appreciation, fund gross yield
- Driver: default projection and simulation horizons
"""

__all__ = [
    # Time
    "MONTHS_PER_YEAR",
    # Products
    "TREASURY_INCOME_TAX_RATE",
    "STOCK_MONTHLY_APPRECIATION",
    "FUND_MONTHLY_GROSS_YIELD",
    # Driver
    "DEFAULT_PROJECTION_MONTHS",
    "DEFAULT_SIMULATION_MONTHS",
]


# =============================================================================
# Time
# =============================================================================

MONTHS_PER_YEAR: int = 12
"""Number of months in a year (nominal annual -> monthly conversion)."""


# =============================================================================
# Product Rules
# =============================================================================

TREASURY_INCOME_TAX_RATE: float = 0.15
"""Income tax withheld on FixedRateTreasury yield (15%)."""

STOCK_MONTHLY_APPRECIATION: float = 0.008
"""Fixed monthly appreciation assumed for StockPosition (0.8%)."""

FUND_MONTHLY_GROSS_YIELD: float = 0.01
"""Gross monthly yield of InvestmentFund before administration fee (1%)."""


# =============================================================================
# Driver Defaults
# =============================================================================

DEFAULT_PROJECTION_MONTHS: int = 12
"""Default horizon for projection reports (1 year)."""

DEFAULT_SIMULATION_MONTHS: int = 3
"""Default number of months advanced by the simulation driver."""
