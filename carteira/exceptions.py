"""
Custom exceptions for carteira.

Purpose
-------
Provides a unified exception hierarchy for consistent error handling
across all carteira modules. All exceptions inherit from CarteiraError,
enabling catch-all handling when needed.

Exception Hierarchy
-------------------
CarteiraError (base)
├── ConfigurationError - Invalid product parameters
├── ValidationError - Invalid caller input
├── InvalidEligibilityError - Product restricted to another client kind
└── ForeignInvestmentError - Investment owned by a different client

Non-positive ``apply``/``withdraw`` amounts and withdrawals above the
balance are *not* errors: they are defined no-ops on the investment.

Usage
-----
>>> from carteira.exceptions import InvalidEligibilityError
>>>
>>> try:
...     FixedRateTreasury(company, 5_000, "Tesouro Prefixado 2029", 0.10)
... except InvalidEligibilityError as e:
...     print(f"Rejected: {e}")
"""

__all__ = [
    "CarteiraError",
    "ConfigurationError",
    "ValidationError",
    "InvalidEligibilityError",
    "ForeignInvestmentError",
]


class CarteiraError(Exception):
    """
    Base exception for all carteira errors.

    Examples
    --------
    >>> try:
    ...     portfolio.add_investment(inv)
    ... except CarteiraError as e:
    ...     print(f"carteira error: {e}")
    """
    pass


class ConfigurationError(CarteiraError, ValueError):
    """
    Invalid product parameters.

    Raised when an investment is built with parameters outside their
    domain, such as:
    - Tax rate outside [0, 1]
    - Negative brokerage fee or administration rate
    - A portfolio description that fails schema validation

    Examples
    --------
    >>> raise ConfigurationError(
    ...     f"tax_rate must be within [0, 1], got {tax_rate}."
    ... )
    """
    pass


class ValidationError(CarteiraError, ValueError):
    """
    Invalid caller input.

    Raised when an operation receives input it cannot interpret:
    - Negative initial balance
    - Negative or non-integer projection horizon
    - Empty client name or e-mail

    Examples
    --------
    >>> raise ValidationError(f"months must be a non-negative int, got {months!r}.")
    """
    pass


class InvalidEligibilityError(CarteiraError):
    """
    Investment product not available to the owner's client kind.

    Raised once, at construction, when a restricted product is given an
    ineligible client:
    - FixedRateTreasury requires an IndividualClient
    - CorporateBond requires a CorporateClient

    Retrying with the same client always fails; only a client of the
    right kind can hold the product.

    Examples
    --------
    >>> raise InvalidEligibilityError(
    ...     "FixedRateTreasury is restricted to individual clients, "
    ...     "got corporate client 'Empresa XYZ'."
    ... )
    """
    pass


class ForeignInvestmentError(CarteiraError):
    """
    Investment does not belong to the portfolio's client.

    Raised by Portfolio.add_investment when the investment owner is not the
    very same client object the portfolio was created for. The portfolio
    is left unmodified.

    Examples
    --------
    >>> raise ForeignInvestmentError(
    ...     "Investment owned by 'Empresa XYZ' cannot join the portfolio "
    ...     "of 'João Silva'."
    ... )
    """
    pass
