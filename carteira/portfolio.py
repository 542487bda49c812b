"""
Portfolio aggregate module for carteira.

Purpose
-------
Groups the investments held by exactly one client and enforces that every
member really belongs to that client. Aggregates current and projected
values over the holdings.

Key components
--------------
- Portfolio:
    Owns one client reference and an ordered, append-only list of
    investments. Membership is checked by object identity on each insert.

Design principles
-----------------
- Membership invariant: inv.owner is portfolio.client for every holding
- Insertion order preserved, no dedup, no removal
- Read-only views: ``investments`` returns a tuple snapshot
- No internal synchronization (one lock per portfolio if a host shares it)

Example
-------
>>> joao = IndividualClient("João Silva", "joao@email.com", cpf="123.456.789-00")
>>> portfolio = Portfolio(joao)
>>> portfolio.add_investment(FixedRateTreasury(joao, 5_000, "Tesouro Prefixado 2029", 0.10))
>>> portfolio.add_investment(StockPosition(joao, 3_000, "PETR4", "Petrobras PN", 10))
>>> portfolio.total_invested_value()
8000.0
>>> portfolio.advance_one_month()
>>> round(portfolio.total_invested_value(), 2)
8055.67
"""

from __future__ import annotations
from typing import Iterator, List, Tuple

from .clients import Client
from .exceptions import ForeignInvestmentError
from .investment import Investment
from .utils import check_months

__all__ = [
    "Portfolio",
]


class Portfolio:
    """
    Investments of a single client.

    Parameters
    ----------
    client : Client
        Portfolio holder. Every investment added must be owned by this very
        object (identity, not field equality).

    Methods
    -------
    add_investment(inv)
        Append an investment owned by the portfolio client.
    total_invested_value() -> float
        Sum of current balances.
    advance_one_month()
        Advance every holding by one month, in insertion order.
    projected_total(months) -> float
        Sum of projected balances after ``months`` months.
    """

    def __init__(self, client: Client):
        self._client = client
        self._investments: List[Investment] = []

    @property
    def client(self) -> Client:
        """Portfolio holder."""
        return self._client

    @property
    def investments(self) -> Tuple[Investment, ...]:
        """Holdings in insertion order (read-only snapshot)."""
        return tuple(self._investments)

    def add_investment(self, inv: Investment) -> None:
        """
        Append ``inv`` to the portfolio.

        Raises
        ------
        ForeignInvestmentError
            If ``inv.owner`` is not the portfolio client. The portfolio is
            left unchanged.
        """
        if inv.owner is not self._client:
            raise ForeignInvestmentError(
                f"{type(inv).__name__} owned by '{inv.owner.name}' cannot join "
                f"the portfolio of '{self._client.name}'."
            )
        self._investments.append(inv)

    def total_invested_value(self) -> float:
        """Sum of current balances (0.0 for an empty portfolio)."""
        return float(sum(inv.balance for inv in self._investments))

    def advance_one_month(self) -> None:
        for inv in self._investments:
            inv.advance_one_month()

    def projected_total(self, months: int) -> float:
        """Sum of ``project_balance(months)`` over the holdings (pure)."""
        months = check_months(months)
        return float(sum(inv.project_balance(months) for inv in self._investments))

    def __len__(self) -> int:
        return len(self._investments)

    def __iter__(self) -> Iterator[Investment]:
        return iter(tuple(self._investments))

    def __repr__(self) -> str:
        return (
            f"Portfolio('{self._client.name}': {len(self._investments)} investments, "
            f"total={self.total_invested_value():,.2f})"
        )
