"""
Reporting helpers for carteira.

Purpose
-------
Turns portfolio state into pandas DataFrames for display by a driver. Only
the public query surface of the engine is used (``investments``,
``balance``, ``project_balance``, ``advance_one_month``); no currency or
locale formatting is applied here.

Functions
---------
- holdings_frame(portfolio)            current balance per holding
- projection_frame(portfolio, months)  current vs projected balance
- simulate_months(portfolio, months)   advances the portfolio, month-indexed balances

Example
-------
>>> df = projection_frame(portfolio, months=12)
>>> df[["product", "balance", "projected"]]
            product  balance    projected
0  Tesouro Prefixado 2029   5000.0  5445.030...
"""

from __future__ import annotations
from typing import List

import numpy as np
import pandas as pd

from .portfolio import Portfolio
from .utils import check_months

TOTAL_COLUMN = "total"

__all__ = [
    "TOTAL_COLUMN",
    "holdings_frame",
    "projection_frame",
    "simulate_months",
]


def _labels(portfolio: Portfolio) -> List[str]:
    return [inv.product_name for inv in portfolio.investments]


def _column_labels(portfolio: Portfolio) -> List[str]:
    # Repeated names, and a name equal to TOTAL_COLUMN, get a " (n)" suffix.
    taken = {TOTAL_COLUMN}
    labels = []
    for name in _labels(portfolio):
        label, n = name, 2
        while label in taken:
            label = f"{name} ({n})"
            n += 1
        taken.add(label)
        labels.append(label)
    return labels


def holdings_frame(portfolio: Portfolio) -> pd.DataFrame:
    """
    One row per holding, in insertion order.

    Columns: product, kind, balance.
    """
    investments = portfolio.investments
    return pd.DataFrame(
        {
            "product": _labels(portfolio),
            "kind": [inv.kind for inv in investments],
            "balance": np.array([inv.balance for inv in investments], dtype=float),
        }
    )


def projection_frame(portfolio: Portfolio, months: int) -> pd.DataFrame:
    """
    Current and projected balance per holding after ``months`` months.

    Columns: product, kind, balance, projected, gain. The portfolio is not
    modified.
    """
    months = check_months(months)
    df = holdings_frame(portfolio)
    df["projected"] = np.array(
        [inv.project_balance(months) for inv in portfolio.investments],
        dtype=float,
    )
    df["gain"] = df["projected"] - df["balance"]
    return df


def simulate_months(portfolio: Portfolio, months: int) -> pd.DataFrame:
    """
    Advance ``portfolio`` month by month and record every balance.

    Parameters
    ----------
    portfolio : Portfolio
        Portfolio to advance (mutated in place).
    months : int
        Number of months to advance.

    Returns
    -------
    pd.DataFrame
        Index ``month`` from 0 (starting state) to ``months``; one column
        per holding plus ``total``. Holding columns are made unique: a repeated
        product name, or one equal to ``total``, gets a " (2)", " (3)" ... suffix.
    """
    months = check_months(months)
    n = len(portfolio)
    balances = np.zeros((months + 1, n), dtype=float)
    balances[0] = [inv.balance for inv in portfolio.investments]
    for t in range(1, months + 1):
        portfolio.advance_one_month()
        balances[t] = [inv.balance for inv in portfolio.investments]

    df = pd.DataFrame(
        balances,
        columns=_column_labels(portfolio),
        index=pd.RangeIndex(months + 1, name="month"),
    )
    df[TOTAL_COLUMN] = balances.sum(axis=1)
    return df
