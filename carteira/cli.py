"""
Command-Line Interface for carteira.

Purpose
-------
Thin driver over the valuation engine: loads a portfolio description,
applies the configured deposits and withdrawals, advances months and
prints balances and projections. All financial rules live in the engine;
this module only orchestrates and renders.

Commands
--------
- show: Current holdings and total invested value
- project: Projected balance per holding after N months
- simulate: Apply configured movements, advance N months, print balances

Example Usage
-------------
    $ carteira show joao.json
    $ carteira project joao.json --months 12
    $ carteira simulate joao.json --months 3
    $ carteira --version
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click
import pandas as pd
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import AppSettings, PortfolioConfig
from .exceptions import CarteiraError
from .logger import setup_logger
from .portfolio import Portfolio
from .report import holdings_frame, projection_frame, simulate_months
from .serialization import load_portfolio_config, portfolio_from_config


@click.group()
@click.version_option(version=__version__, prog_name="carteira")
@click.option("--quiet", "-q", is_flag=True, help="Plain text output, no tables")
@click.option("--verbose", "-v", is_flag=True, help="Debug logging on stderr")
@click.pass_context
def main(ctx: click.Context, quiet: bool, verbose: bool) -> None:
    """
    carteira - Investment portfolio valuation.

    Values a client's holdings (treasury titles, stocks, funds and
    corporate bonds) month by month and projects them to a horizon.

    Use 'carteira COMMAND --help' for command-specific help.
    """
    settings = AppSettings()
    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["settings"] = settings
    ctx.obj["console"] = Console()
    ctx.obj["logger"] = setup_logger("carteira", "DEBUG" if verbose else settings.log_level)


def _load(ctx: click.Context, config_file: Path):
    """Load config and build the portfolio, exiting with status 1 on failure."""
    try:
        config = load_portfolio_config(config_file)
        return config, portfolio_from_config(config)
    except CarteiraError as e:
        ctx.obj["logger"].debug("Rejected %s", config_file, exc_info=True)
        click.echo(f"Error loading portfolio: {e}", err=True)
        sys.exit(1)


def _render(ctx: click.Context, title: str, df: pd.DataFrame, show_index: bool = False) -> None:
    if ctx.obj.get("quiet"):
        click.echo(title)
        click.echo(df.to_string(index=show_index, float_format=lambda x: f"{x:,.2f}"))
        return

    table = Table(title=title, show_header=True)
    if show_index:
        table.add_column(str(df.index.name or ""), style="cyan", justify="right")
    for col in df.columns:
        numeric = pd.api.types.is_numeric_dtype(df[col])
        table.add_column(str(col), style="green" if numeric else "cyan",
                         justify="right" if numeric else "left")
    for idx, row in df.iterrows():
        cells = [f"{v:,.2f}" if isinstance(v, float) else str(v) for v in row]
        table.add_row(*([str(idx)] if show_index else []), *cells)
    ctx.obj["console"].print(table)


def _header(portfolio: Portfolio) -> str:
    client = portfolio.client
    return (
        f"Carteira de {client.name} ({client.document_id}) - "
        f"total {portfolio.total_invested_value():,.2f}"
    )


def _apply_movements(ctx: click.Context, config: PortfolioConfig, portfolio: Portfolio) -> None:
    """Apply configured deposits then withdrawals, matched by product name."""
    logger = ctx.obj["logger"]
    by_name = {}
    for inv in portfolio.investments:
        by_name.setdefault(inv.product_name, []).append(inv)

    for label, movements, operation in (
        ("contribution", config.contributions, "apply"),
        ("withdrawal", config.withdrawals, "withdraw"),
    ):
        for product, amount in movements.items():
            targets = by_name.get(product)
            if not targets:
                click.echo(f"Error: {label} for unknown product '{product}'", err=True)
                sys.exit(1)
            for inv in targets:
                before = inv.balance
                getattr(inv, operation)(amount)
                if inv.balance == before:
                    logger.warning("%s of %.2f on %s had no effect", label, amount, product)


@main.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def show(ctx: click.Context, config_file: Path) -> None:
    """
    Show current holdings.

    Example:
        carteira show joao.json
    """
    _, portfolio = _load(ctx, config_file)
    _render(ctx, _header(portfolio), holdings_frame(portfolio))


@main.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--months", "-m",
    type=click.IntRange(min=0),
    default=None,
    help="Projection horizon in months (default: CARTEIRA_PROJECTION_MONTHS or 12)"
)
@click.pass_context
def project(ctx: click.Context, config_file: Path, months: Optional[int]) -> None:
    """
    Project every holding to a horizon without changing it.

    Example:
        carteira project joao.json --months 24
    """
    if months is None:
        months = ctx.obj["settings"].projection_months
    _, portfolio = _load(ctx, config_file)
    df = projection_frame(portfolio, months)
    title = f"{_header(portfolio)} - projection to {months} months"
    _render(ctx, title, df)
    if ctx.obj.get("quiet"):
        click.echo(f"Projected total: {df['projected'].sum():,.2f}")


@main.command()
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--months", "-m",
    type=click.IntRange(min=0),
    default=None,
    help="Months to advance (default: CARTEIRA_SIMULATION_MONTHS or 3)"
)
@click.pass_context
def simulate(ctx: click.Context, config_file: Path, months: Optional[int]) -> None:
    """
    Apply configured contributions and withdrawals, then advance month by month.

    Example:
        carteira simulate joao.json --months 3
    """
    if months is None:
        months = ctx.obj["settings"].simulation_months
    config, portfolio = _load(ctx, config_file)
    _apply_movements(ctx, config, portfolio)
    df = simulate_months(portfolio, months)
    _render(ctx, f"{_header(portfolio)} - after {months} months", df, show_index=True)


if __name__ == "__main__":
    main()
