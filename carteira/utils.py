"""General utilities for carteira

Contents
--------
- Validation helpers
- Rate conversions (nominal annual -> monthly)
"""

from __future__ import annotations

import numbers

import numpy as np

from .constants import MONTHS_PER_YEAR
from .exceptions import ConfigurationError, ValidationError

__all__ = [
    # Validation
    "check_non_negative",
    "check_rate",
    "check_months",
    "check_not_blank",
    "check_annual_rate",
    # Rates
    "nominal_monthly_rate",
]

# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def check_non_negative(name: str, value: float, *, error: type = ValidationError) -> None:
    """Raise *error* if *value* is negative (strict) or NaN."""
    if not value >= 0:
        raise error(f"{name} must be non-negative (got {value}).")


def check_rate(name: str, value: float) -> None:
    """Raise ConfigurationError unless 0 <= *value* <= 1."""
    if not 0.0 <= value <= 1.0:
        raise ConfigurationError(f"{name} must be within [0, 1] (got {value}).")


def check_annual_rate(name: str, value: float) -> None:
    """Raise ConfigurationError unless *value* is finite and above -100%."""
    if not np.isfinite(value) or value <= -1.0:
        raise ConfigurationError(f"{name} must be finite and > -1 (got {value}).")


def check_months(months: int) -> int:
    """Validate a projection horizon and return it as a plain int.

    Booleans are rejected even though they are ints.
    """
    if isinstance(months, bool) or not isinstance(months, numbers.Integral):
        raise ValidationError(f"months must be a non-negative int (got {months!r}).")
    if months < 0:
        raise ValidationError(f"months must be a non-negative int (got {months}).")
    return int(months)


def check_not_blank(name: str, value: str) -> None:
    """Raise ValidationError if *value* is empty or whitespace only."""
    if not value or not value.strip():
        raise ValidationError(f"{name} must not be empty.")


# ---------------------------------------------------------------------------
# Rate conversions (nominal)
# ---------------------------------------------------------------------------

def nominal_monthly_rate(r_annual: float) -> float:
    """Convert a nominal annual rate to its monthly rate.

    Uses: r_a / 12 (simple division, not the compounded equivalent).
    """
    return float(r_annual) / MONTHS_PER_YEAR
