"""
carteira - Investment Portfolio Valuation

Values a client's investment portfolio month by month and projects each
holding to a future horizon under fixed, caller-supplied rates.

Modules
-------
- clients       : Individual and corporate clients
- investment    : Treasury, stock, fund and corporate bond valuation rules
- portfolio     : Per-client aggregate with membership checks
- config        : Pydantic configuration models and settings
- serialization : Build portfolios from dicts / JSON files
- report        : pandas summaries for drivers
- cli           : Command-line driver

"""

from .clients import Client, IndividualClient, CorporateClient
from .investment import (
    Investment,
    FixedRateTreasury,
    StockPosition,
    InvestmentFund,
    CorporateBond,
)
from .portfolio import Portfolio
from .exceptions import (
    CarteiraError,
    ConfigurationError,
    ValidationError,
    InvalidEligibilityError,
    ForeignInvestmentError,
)

__version__ = "0.1.0"
