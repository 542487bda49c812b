"""
Investment valuation module for carteira.

Purpose
-------
Models a client's individual holdings and the monthly rules that move their
balances. Every product exposes two core operations:

- ``advance_one_month()``: mutates the live balance by one month of the
  product rule.
- ``project_balance(months)``: pure projection of the balance after
  ``months`` months, leaving the live balance untouched.

Key Mathematical Framework
--------------------------
With balance B, nominal annual rate r (monthly rate i = r/12) and horizon n:

- Fixed rate (treasury, bond):
    advance:  B <- B (1 + i)
    project:  G = B (1 + i)^n ;  P = B + (G - B)(1 - tax)
- Stock position (appreciation g = 0.8%, fee f):
    advance:  B <- max(B (1 + g), 0) ;  B <- max(B - f, 0)
    project:  P = max(B (1 + g)^n - f n, 0)
- Investment fund (gross yield y = 1%, admin rate a):
    advance and project: B <- B + B y - B a/12, repeated n times

Key components
--------------
- Investment:
    Abstract base owning the client reference, the clamped balance, the
    deposit/withdrawal rules and the construction-time eligibility check.
- FixedRateTreasury / CorporateBond:
    Symmetric fixed-rate products; tax is only netted at projection time.
- StockPosition:
    Fixed appreciation minus a flat monthly brokerage fee.
- InvestmentFund:
    Gross yield minus a proportional administration fee.

Design principles
-----------------
- Balance never negative: every internal write goes through _set_balance
- Eligibility checked once, in the constructor; never adjustable later
- Invalid deposits/withdrawals are silent no-ops, not errors
- Step rule and projection are deliberately NOT unified for stocks and
  fixed-rate products (see the class docstrings)

Example
-------
>>> joao = IndividualClient("João Silva", "joao@email.com", cpf="123.456.789-00")
>>> tesouro = FixedRateTreasury(joao, 5_000, "Tesouro Prefixado 2029", annual_rate=0.10)
>>> round(tesouro.project_balance(12), 2)
5445.03
>>> tesouro.advance_one_month()
>>> round(tesouro.balance, 2)
5041.67
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import ClassVar, Literal, Optional

import numpy as np

from .clients import Client, ClientKind
from .constants import (
    FUND_MONTHLY_GROSS_YIELD,
    STOCK_MONTHLY_APPRECIATION,
    TREASURY_INCOME_TAX_RATE,
)
from .exceptions import ConfigurationError, InvalidEligibilityError
from .utils import (
    check_annual_rate,
    check_months,
    check_non_negative,
    check_rate,
    nominal_monthly_rate,
)

__all__ = [
    "InvestmentKind",
    "Investment",
    "FixedRateTreasury",
    "StockPosition",
    "InvestmentFund",
    "CorporateBond",
]


InvestmentKind = Literal["treasury", "stock", "fund", "bond"]


# ---------------------------------------------------------------------------
# Base contract
# ---------------------------------------------------------------------------

class Investment(ABC):
    """
    Abstract holding owned by a single client.

    Parameters
    ----------
    owner : Client
        Shared, non-owning reference to the holder. The client does not
        track its investments.
    initial_balance : float
        Starting balance (non-negative).

    Class Attributes
    ----------------
    kind : InvestmentKind
        Product tag used by configuration and reporting.
    eligible_kind : ClientKind or None
        Client kind allowed to hold the product; None means any client.

    Raises
    ------
    InvalidEligibilityError
        If the product is restricted to another client kind.
    ValidationError
        If ``initial_balance`` is negative or NaN.

    Notes
    -----
    No internal synchronization: a host that shares an instance across
    threads must serialize access itself.
    """

    kind: ClassVar[InvestmentKind]
    eligible_kind: ClassVar[Optional[ClientKind]] = None

    def __init__(self, owner: Client, initial_balance: float):
        self._check_eligibility(owner)
        check_non_negative("initial_balance", initial_balance)
        self._owner = owner
        self._balance = 0.0
        self._set_balance(initial_balance)

    @classmethod
    def _check_eligibility(cls, owner: Client) -> None:
        if cls.eligible_kind is None:
            return
        owner_kind = getattr(owner, "kind", None)
        if owner_kind != cls.eligible_kind:
            raise InvalidEligibilityError(
                f"{cls.__name__} is restricted to {cls.eligible_kind} clients, "
                f"got {owner_kind} client {getattr(owner, 'name', owner)!r}."
            )

    # -- state -------------------------------------------------------------

    @property
    def owner(self) -> Client:
        """Client holding this investment."""
        return self._owner

    @property
    def balance(self) -> float:
        """Current balance, always >= 0."""
        return self._balance

    def _set_balance(self, value: float) -> None:
        # Single write path for the balance; floors float drift and NaN at zero.
        value = float(value)
        self._balance = value if value >= 0 else 0.0

    # -- deposits / withdrawals -------------------------------------------

    def apply(self, amount: float) -> None:
        """
        Deposit ``amount`` into the investment.

        Non-positive amounts are ignored: the call is a no-op, it does not
        raise.
        """
        if amount > 0:
            self._set_balance(self._balance + amount)

    def withdraw(self, amount: float) -> None:
        """
        Withdraw ``amount`` from the investment.

        Only ``0 < amount <= balance`` is honoured. Non-positive amounts and
        amounts above the balance leave the investment unchanged, without
        raising.
        """
        if 0 < amount <= self._balance:
            self._set_balance(self._balance - amount)

    # -- valuation ---------------------------------------------------------

    @abstractmethod
    def advance_one_month(self) -> None:
        """Apply one month of the product rule to the live balance."""

    def project_balance(self, months: int) -> float:
        """
        Balance after ``months`` months, without mutating the investment.

        Parameters
        ----------
        months : int
            Non-negative horizon. ``project_balance(0) == balance``.

        Returns
        -------
        float
            Projected balance (non-negative).

        Raises
        ------
        ValidationError
            If ``months`` is negative or not an int.
        """
        months = check_months(months)
        if months == 0:
            return self._balance
        return self._project(months)

    @abstractmethod
    def _project(self, months: int) -> float:
        """Variant projection for ``months >= 1``."""

    def project_path(self, months: int) -> np.ndarray:
        """
        Projected balances for every horizon from 0 to ``months``.

        Returns
        -------
        np.ndarray
            Shape (months + 1,), element k equals ``project_balance(k)``.

        Examples
        --------
        >>> fund.project_path(2)
        array([8000.        , 8066.66666667, 8133.88888889])
        """
        months = check_months(months)
        return np.array(
            [self.project_balance(k) for k in range(months + 1)],
            dtype=float,
        )

    # -- presentation ------------------------------------------------------

    @property
    @abstractmethod
    def product_name(self) -> str:
        """Human label of the product (title, ticker, fund or issuer)."""

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}('{self.product_name}', "
            f"owner='{self._owner.name}', balance={self._balance:,.2f})"
        )


# ---------------------------------------------------------------------------
# Fixed-rate products (treasury / corporate bond)
# ---------------------------------------------------------------------------

class _TaxedFixedRate(Investment):
    """
    Shared rule for fixed-rate products taxed on yield.

    Monthly accrual pays the full interest: tax is never withheld during
    ``advance_one_month``. Only ``project_balance`` nets the tax, and only on
    the yield, never on principal.
    """

    def __init__(self, owner: Client, initial_balance: float,
                 annual_rate: float, tax_rate: float):
        super().__init__(owner, initial_balance)
        check_annual_rate("annual_rate", annual_rate)
        check_rate("tax_rate", tax_rate)
        self.annual_rate = float(annual_rate)
        self.tax_rate = float(tax_rate)

    @property
    def monthly_rate(self) -> float:
        return nominal_monthly_rate(self.annual_rate)

    def advance_one_month(self) -> None:
        interest = self.balance * self.monthly_rate
        self._set_balance(self.balance + interest)

    def _project(self, months: int) -> float:
        gross = self.balance * (1.0 + self.monthly_rate) ** months
        gross_yield = gross - self.balance
        tax = gross_yield * self.tax_rate
        return self.balance + gross_yield - tax


class FixedRateTreasury(_TaxedFixedRate):
    """
    Fixed-rate government title, available to individual clients only.

    Income tax is fixed at 15% of the yield.

    Parameters
    ----------
    owner : IndividualClient
        Holder; a corporate client raises InvalidEligibilityError.
    initial_balance : float
        Starting balance.
    title_name : str
        Title label, e.g. "Tesouro Prefixado 2029".
    annual_rate : float
        Nominal annual rate (0.10 for 10%/year), finite and > -1.

    Examples
    --------
    >>> t = FixedRateTreasury(joao, 5_000, "Tesouro Prefixado 2029", 0.10)
    >>> round(t.project_balance(12), 2)
    5445.03
    """

    kind: ClassVar[InvestmentKind] = "treasury"
    eligible_kind: ClassVar[Optional[ClientKind]] = "individual"

    def __init__(self, owner: Client, initial_balance: float,
                 title_name: str, annual_rate: float):
        super().__init__(owner, initial_balance, annual_rate, TREASURY_INCOME_TAX_RATE)
        self.title_name = title_name

    @property
    def product_name(self) -> str:
        return self.title_name


class CorporateBond(_TaxedFixedRate):
    """
    Corporate debenture, available to corporate clients only.

    Parameters
    ----------
    owner : CorporateClient
        Holder; an individual client raises InvalidEligibilityError.
    initial_balance : float
        Starting balance.
    issuer_name : str
        Issuing company.
    annual_rate : float
        Nominal annual rate, finite and > -1.
    tax_rate : float
        Tax on the yield, within [0, 1] (caller-supplied per bond).

    Examples
    --------
    >>> d = CorporateBond(xyz, 15_000, "Empresa ABC", annual_rate=0.12, tax_rate=0.20)
    >>> round(d.project_balance(12), 2)
    16521.90
    """

    kind: ClassVar[InvestmentKind] = "bond"
    eligible_kind: ClassVar[Optional[ClientKind]] = "corporate"

    def __init__(self, owner: Client, initial_balance: float,
                 issuer_name: str, annual_rate: float, tax_rate: float):
        super().__init__(owner, initial_balance, annual_rate, tax_rate)
        self.issuer_name = issuer_name

    @property
    def product_name(self) -> str:
        return self.issuer_name


# ---------------------------------------------------------------------------
# Stock position
# ---------------------------------------------------------------------------

class StockPosition(Investment):
    """
    Listed stock with fixed 0.8% monthly appreciation and a flat brokerage fee.

    The step rule clamps after each write, so a balance eaten by fees stops
    at zero. The projection subtracts all fees from the compounded balance
    and clamps once at the end. The two therefore disagree: for balance
    3,000 and fee 10, three calls to ``advance_one_month`` give 3,042.3369
    while ``project_balance(3)`` gives 3,042.5775 (the fee paid each month
    no longer earns the 0.8%). Both are kept as they are.

    Parameters
    ----------
    owner : Client
        Any client.
    initial_balance : float
        Starting balance.
    ticker : str
        Exchange code, e.g. "PETR4".
    company_name : str
        Listed company.
    monthly_fee : float
        Fixed brokerage fee charged every month (non-negative).
    """

    kind: ClassVar[InvestmentKind] = "stock"

    def __init__(self, owner: Client, initial_balance: float,
                 ticker: str, company_name: str, monthly_fee: float):
        super().__init__(owner, initial_balance)
        check_non_negative("monthly_fee", monthly_fee, error=ConfigurationError)
        self.ticker = ticker
        self.company_name = company_name
        self.monthly_fee = float(monthly_fee)

    def advance_one_month(self) -> None:
        self._set_balance(self.balance * (1.0 + STOCK_MONTHLY_APPRECIATION))
        self._set_balance(self.balance - self.monthly_fee)

    def _project(self, months: int) -> float:
        grown = self.balance * (1.0 + STOCK_MONTHLY_APPRECIATION) ** months
        return max(grown - self.monthly_fee * months, 0.0)

    @property
    def product_name(self) -> str:
        return self.ticker


# ---------------------------------------------------------------------------
# Investment fund
# ---------------------------------------------------------------------------

class InvestmentFund(Investment):
    """
    Managed fund yielding 1% a month gross, minus a proportional admin fee.

    Step rule and projection share the same recurrence, so N calls to
    ``advance_one_month`` match ``project_balance(N)``.

    Parameters
    ----------
    owner : Client
        Any client.
    initial_balance : float
        Starting balance.
    fund_name : str
        Fund label.
    manager_cnpj : str
        Tax id of the fund manager.
    annual_admin_rate : float
        Annual administration fee (0.02 for 2%/year, non-negative).

    Examples
    --------
    >>> f = InvestmentFund(joao, 8_000, "Fundo Alfa", "00.000.000/0001-00", 0.02)
    >>> f.advance_one_month()
    >>> round(f.balance, 2)
    8066.67
    """

    kind: ClassVar[InvestmentKind] = "fund"

    def __init__(self, owner: Client, initial_balance: float,
                 fund_name: str, manager_cnpj: str, annual_admin_rate: float):
        super().__init__(owner, initial_balance)
        check_non_negative("annual_admin_rate", annual_admin_rate, error=ConfigurationError)
        self.fund_name = fund_name
        self.manager_cnpj = manager_cnpj
        self.annual_admin_rate = float(annual_admin_rate)

    def _step(self, balance: float) -> float:
        gross_yield = balance * FUND_MONTHLY_GROSS_YIELD
        admin_fee = balance * nominal_monthly_rate(self.annual_admin_rate)
        return balance + gross_yield - admin_fee

    def advance_one_month(self) -> None:
        self._set_balance(self._step(self.balance))

    def _project(self, months: int) -> float:
        projected = self.balance
        for _ in range(months):
            projected = self._step(projected)
        return max(projected, 0.0)

    @property
    def product_name(self) -> str:
        return self.fund_name
