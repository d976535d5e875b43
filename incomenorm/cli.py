"""
Command-Line Interface for incomenorm.

Purpose
-------
Exposes the income normalization engine from a shell: browse the structure
and schedule catalogs, recompute monthly figures for saved income records,
check a cycle list or a seasonal/variable range, and print the three-month
payment preview.

Commands
--------
- structures: List supported payment structures
- schedules: List calendar rules available for a structure
- monthly: Monthly/annual income for records stored in a JSON file
- preview: Three-month payment preview for a structure and amounts
- check-cycles: Validate a list of payment cycles for a frequency
- conservative: Conservative base amount for a low/high range

Example Usage
-------------
    $ incomenorm monthly -f incomes.json
    $ incomenorm preview bi-monthly 1200 900
    $ incomenorm check-cycles bi-weekly -c "750:Primera quincena" -c "800:Segunda quincena"
    $ incomenorm conservative 1000 3000 --stability seasonal
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional, Tuple

import click
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import AppSettings
from .constants import FREQUENCIES
from .cycles import PaymentCycle, new_cycle_id, validate_cycles
from .exceptions import IncomeNormError
from .logging_config import configure_logging
from .stability import IncomeRange, average_low, conservative_base, validate_income_range
from .structures import (
    STRUCTURE_TYPES,
    payments_per_year_text,
    schedule_options_for,
    schedule_summary,
    structure_for,
    structure_options,
)

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="incomenorm")
@click.option("--quiet", "-q", is_flag=True, help="Plain output without tables")
@click.pass_context
def main(ctx: click.Context, quiet: bool) -> None:
    """
    incomenorm - Normalize reported income into a monthly budget figure.

    Use 'incomenorm COMMAND --help' for command-specific help.
    """
    settings = AppSettings()
    configure_logging(settings)

    ctx.ensure_object(dict)
    ctx.obj["quiet"] = quiet
    ctx.obj["console"] = Console()
    ctx.obj["settings"] = settings


# ---------------------------------------------------------------------------
# Catalogs
# ---------------------------------------------------------------------------

@main.command()
@click.pass_context
def structures(ctx: click.Context) -> None:
    """List supported payment structures."""
    console: Console = ctx.obj["console"]

    if ctx.obj["quiet"]:
        for s in structure_options():
            click.echo(f"{s.type}\t{s.description}\t{payments_per_year_text(s)}")
        return

    table = Table(title="Payment Structures", show_header=True)
    table.add_column("Type", style="cyan")
    table.add_column("Description")
    table.add_column("Per year", style="green", justify="right")
    for s in structure_options():
        table.add_row(s.type, s.description, payments_per_year_text(s))
    console.print(table)


@main.command()
@click.argument("structure", type=click.Choice(STRUCTURE_TYPES))
@click.pass_context
def schedules(ctx: click.Context, structure: str) -> None:
    """List calendar rules available for STRUCTURE."""
    console: Console = ctx.obj["console"]
    options = schedule_options_for(structure_for(structure))

    if ctx.obj["quiet"]:
        for schedule in options:
            click.echo(f"{schedule.description}\t{schedule_summary(schedule)}")
        return

    table = Table(title=f"Schedules for {structure}", show_header=True)
    table.add_column("Schedule", style="cyan")
    table.add_column("When")
    for schedule in options:
        table.add_row(schedule.description, schedule_summary(schedule))
    console.print(table)


# ---------------------------------------------------------------------------
# Monthly income
# ---------------------------------------------------------------------------

@main.command()
@click.option(
    "--file", "-f", "path",
    type=click.Path(exists=True, path_type=Path),
    required=True,
    help="Path to income records file (JSON)"
)
@click.option("--json", "as_json", is_flag=True, help="Emit results as JSON")
@click.pass_context
def monthly(ctx: click.Context, path: Path, as_json: bool) -> None:
    """
    Compute monthly and annual income for saved income records.

    Example:
        incomenorm monthly -f incomes.json
    """
    from .income import income_frame, summarize_incomes
    from .serialization import load_incomes

    console: Console = ctx.obj["console"]
    symbol = ctx.obj["settings"].currency_symbol

    try:
        incomes = load_incomes(path)
    except (IncomeNormError, ValueError) as e:
        click.echo(f"Error loading incomes: {e}", err=True)
        sys.exit(1)

    logger.info("Loaded %d income records from %s", len(incomes), path)
    frame = income_frame(incomes)
    summary = summarize_incomes(incomes)

    if as_json:
        click.echo(json.dumps({
            "incomes": frame.to_dict(orient="records"),
            "total_monthly": summary.total_monthly,
            "total_annual": summary.total_annual,
        }, indent=2, ensure_ascii=False))
        return

    if ctx.obj["quiet"]:
        for row in frame.itertuples(index=False):
            click.echo(f"{row.name}: {symbol}{row.monthly:,.2f}/month")
        click.echo(f"Total monthly: {symbol}{summary.total_monthly:,.2f}")
        click.echo(f"Total annual: {symbol}{summary.total_annual:,.2f}")
        return

    table = Table(title="Income Sources", show_header=True)
    table.add_column("Name", style="cyan")
    table.add_column("Frequency")
    table.add_column("Monthly", style="green", justify="right")
    table.add_column("Annual", style="green", justify="right")
    table.add_column("Active", justify="center")
    for row in frame.itertuples(index=False):
        table.add_row(
            row.name,
            row.frequency,
            f"{symbol}{row.monthly:,.2f}",
            f"{symbol}{row.annual:,.2f}",
            "yes" if row.active else "no",
        )
    console.print(table)
    console.print(f"[bold]Total monthly:[/bold] {symbol}{summary.total_monthly:,.2f}")
    console.print(f"[bold]Total annual:[/bold] {symbol}{summary.total_annual:,.2f}")


# ---------------------------------------------------------------------------
# Preview
# ---------------------------------------------------------------------------

@main.command()
@click.argument("structure", type=click.Choice(STRUCTURE_TYPES))
@click.argument("amounts", type=float, nargs=-1, required=True)
@click.pass_context
def preview(ctx: click.Context, structure: str, amounts: Tuple[float, ...]) -> None:
    """
    Three-month payment preview for STRUCTURE paid AMOUNTS.

    Example:
        incomenorm preview bi-monthly 1200 900
    """
    from .preview import has_previewable_amounts, schedule_explanation, schedule_preview

    console: Console = ctx.obj["console"]
    symbol = ctx.obj["settings"].currency_symbol

    if not has_previewable_amounts(amounts):
        click.echo("Error: at least one amount must be positive.", err=True)
        sys.exit(1)

    selected = structure_for(structure)
    months = schedule_preview(selected, amounts)

    if ctx.obj["quiet"]:
        for m in months:
            dates = ", ".join(f"{p.date}={symbol}{p.amount:,.2f}" for p in m.payments)
            click.echo(f"{m.month}: {symbol}{m.total:,.2f} [{dates}]")
        return

    table = Table(title=f"Preview: {selected.description}", show_header=True)
    table.add_column("Month", style="cyan")
    table.add_column("Payments")
    table.add_column("Total", style="green", justify="right")
    for m in months:
        payments = "\n".join(f"{p.date}: {symbol}{p.amount:,.2f}" for p in m.payments)
        table.add_row(m.month, payments or "-", f"{symbol}{m.total:,.2f}")
    console.print(table)
    console.print(schedule_explanation(selected))


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

def _parse_cycle(raw: str) -> PaymentCycle:
    amount_text, _, description = raw.partition(":")
    try:
        amount = float(amount_text) if amount_text.strip() else 0.0
    except ValueError:
        raise click.BadParameter(f"invalid amount in {raw!r}; use AMOUNT:DESCRIPTION")
    return PaymentCycle(id=new_cycle_id(), amount=amount, description=description)


@main.command("check-cycles")
@click.argument("frequency", type=str)
@click.option(
    "--cycle", "-c", "raw_cycles",
    multiple=True,
    help="Cycle as AMOUNT:DESCRIPTION (repeatable)"
)
def check_cycles(frequency: str, raw_cycles: Tuple[str, ...]) -> None:
    """
    Validate payment cycles for FREQUENCY.

    Example:
        incomenorm check-cycles bi-weekly -c "750:Primera quincena" -c "800:Segunda quincena"
    """
    if frequency not in FREQUENCIES:
        logger.warning("Frequency %r is not recognized; using default limits", frequency)

    cycles = [_parse_cycle(raw) for raw in raw_cycles]
    errors = validate_cycles(cycles, frequency)
    if errors:
        for message in errors:
            click.echo(message, err=True)
        sys.exit(1)
    click.echo(f"{len(cycles)} cycles OK")


@main.command()
@click.argument("lowest", type=float)
@click.argument("highest", type=float)
@click.option(
    "--stability", "-s",
    type=click.Choice(["seasonal", "variable"]),
    default="seasonal",
    show_default=True,
    help="Stability pattern of the income"
)
@click.pass_context
def conservative(ctx: click.Context, lowest: float, highest: float, stability: str) -> None:
    """
    Conservative base amount for a LOWEST..HIGHEST income range.

    Example:
        incomenorm conservative 1000 3000 --stability seasonal
    """
    symbol = ctx.obj["settings"].currency_symbol
    income_range = IncomeRange(lowest=lowest, highest=highest)

    errors = validate_income_range(income_range)
    if errors:
        for message in errors:
            click.echo(message, err=True)
        sys.exit(1)

    click.echo(f"Conservative base: {symbol}{conservative_base(income_range, stability):,.2f}")
    click.echo(f"Live preview: {symbol}{average_low(income_range, stability):,.2f}")


if __name__ == "__main__":
    main()
