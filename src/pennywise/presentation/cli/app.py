"""Pennywise CLI application using Typer.

Reads a tracker backup file and prints dashboard analytics as Rich tables.
"""

import logging
import sys
from contextlib import contextmanager
from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Iterator, List, Optional

import typer
from rich.console import Console
from rich.table import Table

from pennywise.application.calculations import MissingCategoryPolicy
from pennywise.application.calculations.filters import (
    TransactionFilter,
    get_preset_date_range,
)
from pennywise.application.dtos.analytics import (
    BudgetProgress,
    BudgetStatus,
    GoalStatus,
    InsightType,
)
from pennywise.application.queries.analytics import (
    BudgetProgressQuery,
    InsightsQuery,
    MonthlySummaryQuery,
    MonthlyTrendsQuery,
    PeriodTrendsQuery,
    SavingsGoalsQuery,
    TransactionSearchQuery,
    TrendComparisonQuery,
)
from pennywise.domain.shared.exceptions import DomainException
from pennywise.domain.shared.months import MONTH_NAMES
from pennywise.domain.shared.time import coerce_datetime, end_of_day
from pennywise.domain.tracking.value_objects import (
    AmountRange,
    Currency,
    DateFilter,
    DateRange,
    Granularity,
    PeriodType,
    TransactionType,
)
from pennywise.infrastructure.persistence.json import JsonRepositoryFactory
from pennywise_config.settings import get_settings

app = typer.Typer(
    name="pennywise",
    help="Pennywise - personal finance analytics for tracker backups",
    no_args_is_help=True,
)
console = Console()

logger = logging.getLogger(__name__)

DATE_ONLY_LENGTH = len("2025-01-31")

_BUDGET_STYLES = {
    BudgetStatus.ON_TRACK: "green",
    BudgetStatus.WARNING: "yellow",
    BudgetStatus.OVER_BUDGET: "red",
}

_GOAL_STYLES = {
    GoalStatus.NOT_STARTED: "dim",
    GoalStatus.IN_PROGRESS: "cyan",
    GoalStatus.COMPLETED: "green",
    GoalStatus.OVERDUE: "red",
}

_INSIGHT_STYLES = {
    InsightType.POSITIVE: "green",
    InsightType.NEGATIVE: "red",
    InsightType.INFO: "blue",
}


@lru_cache(maxsize=1)
def _configure_logging() -> None:
    """Configure application logging once per process.

    Log lines go to stderr so they never interleave with table output.
    """
    settings = get_settings()
    log_level = getattr(logging, settings.log_level, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )


@app.callback()
def main() -> None:
    """Pennywise - personal finance analytics for tracker backups."""
    _configure_logging()


@contextmanager
def _handle_errors() -> Iterator[None]:
    try:
        yield
    except DomainException as e:
        logger.debug("Command failed: %r", e)
        console.print(f"[red]Error: {e.message}[/red]")
        raise typer.Exit(1) from e


def _factory(file: Optional[Path]) -> JsonRepositoryFactory:
    return JsonRepositoryFactory.from_path(file or get_settings().data_file)


def _currency(code: Optional[str]) -> Currency:
    try:
        return Currency.base(code or get_settings().base_currency)
    except ValueError as e:
        msg = f"Unsupported currency: {code}"
        raise typer.BadParameter(msg, param_hint="--currency") from e


def _date_range(start: Optional[str], end: Optional[str]) -> Optional[DateRange]:
    if start is None and end is None:
        return None
    if start is None or end is None:
        msg = "Both --from and --to are required for a custom range"
        raise typer.BadParameter(msg)
    try:
        end_moment = coerce_datetime(end)
        # A bare date means the whole day
        if len(end.strip()) == DATE_ONLY_LENGTH:
            end_moment = end_of_day(end_moment)
        return DateRange(start=start, end=end_moment)
    except ValueError as e:
        msg = f"Invalid date range {start} to {end}"
        raise typer.BadParameter(msg) from e


def _pct(value: Decimal) -> str:
    return f"{value:.1f}%"


def _budget_table(progress: List[BudgetProgress], currency: Currency) -> Table:
    table = Table(title="Budgets")
    table.add_column("Category", style="cyan")
    table.add_column("Limit", justify="right")
    table.add_column("Spent", justify="right")
    table.add_column("Remaining", justify="right")
    table.add_column("Used", justify="right")
    table.add_column("Status")

    for item in progress:
        style = _BUDGET_STYLES[item.status]
        table.add_row(
            item.category_name,
            currency.format_amount(item.budget_limit),
            currency.format_amount(item.spent),
            currency.format_amount(item.remaining),
            _pct(item.percentage),
            f"[{style}]{item.status.value}[/{style}]",
        )
    return table


@app.command()
def summary(
    month: Optional[int] = typer.Option(None, "--month", "-m", help="Month (1-12)"),
    year: Optional[int] = typer.Option(None, "--year", "-y", help="Year"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Backup file"),
    currency: Optional[str] = typer.Option(None, "--currency", "-c"),
) -> None:
    """Show the monthly dashboard summary."""
    settings = get_settings()
    base = _currency(currency)

    with _handle_errors():
        result = MonthlySummaryQuery.from_factory(_factory(file)).execute(
            month=month,
            year=year,
            base_currency=base.code,
            top_limit=settings.top_transactions_limit,
            missing_category_policy=MissingCategoryPolicy(
                settings.missing_category_policy,
            ),
        )

    period = result.period
    title = f"{MONTH_NAMES[period.month - 1]} {period.year}"
    console.print(
        f"\n[bold green]Summary for {title}[/bold green] "
        f"[dim]({base.code})[/dim]\n",
    )

    metrics = Table(title="Overview")
    metrics.add_column("Metric", style="cyan")
    metrics.add_column("Value", justify="right")
    metrics.add_row("Total balance", base.format_amount(result.total_balance))
    metrics.add_row("Income", base.format_amount(result.monthly_income))
    metrics.add_row("Expenses", base.format_amount(result.monthly_expenses))
    metrics.add_row("Net savings", base.format_amount(result.net_savings))
    metrics.add_row("Savings rate", _pct(result.savings_rate))
    metrics.add_row(
        "Transactions",
        str(result.transaction_stats.total_transactions),
    )
    console.print(metrics)

    breakdown = Table(title="Expenses by Category")
    breakdown.add_column("Category", style="cyan")
    breakdown.add_column("Amount", justify="right")
    breakdown.add_column("Share", justify="right")
    breakdown.add_column("Count", justify="right")
    for item in result.expense_breakdown.by_category:
        breakdown.add_row(
            item.category_name,
            base.format_amount(item.amount),
            _pct(item.percentage),
            str(item.transaction_count),
        )
    console.print(breakdown)

    top = Table(title="Top Expenses")
    top.add_column("Date")
    top.add_column("Description", style="cyan")
    top.add_column("Category")
    top.add_column("Amount", justify="right")
    for item in result.expense_breakdown.top_expenses:
        top.add_row(
            f"{item.date:%Y-%m-%d}",
            item.description,
            item.category_name,
            base.format_amount(item.amount),
        )
    console.print(top)

    if result.budget_progress:
        console.print(_budget_table(result.budget_progress, base))


@app.command()
def trends(
    months: Optional[int] = typer.Option(None, "--months", "-n", min=1),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Backup file"),
    currency: Optional[str] = typer.Option(None, "--currency", "-c"),
) -> None:
    """Show income, expenses and savings for the trailing months."""
    base = _currency(currency)
    factory = _factory(file)

    with _handle_errors():
        points = MonthlyTrendsQuery.from_factory(factory).execute(
            months=months or get_settings().trend_months,
            base_currency=base.code,
        )
        comparison = TrendComparisonQuery.from_factory(factory).execute(
            base_currency=base.code,
        )

    table = Table(title=f"Monthly Trends ({base.code})")
    table.add_column("Month", style="cyan")
    table.add_column("Income", justify="right")
    table.add_column("Expenses", justify="right")
    table.add_column("Savings", justify="right")
    table.add_column("Rate", justify="right")
    for point in points:
        table.add_row(
            point.period_label,
            base.format_amount(point.income),
            base.format_amount(point.expenses),
            base.format_amount(point.savings),
            _pct(point.savings_rate),
        )
    console.print(table)

    change = comparison.change
    console.print(
        f"[dim]{comparison.current.period_label} vs. previous month:[/dim] "
        f"income {_pct(change.income_percentage)}, "
        f"expenses {_pct(change.expenses_percentage)}, "
        f"savings {base.format_amount(change.savings)}",
    )


@app.command()
def budgets(
    month: Optional[int] = typer.Option(None, "--month", "-m", help="Month (1-12)"),
    year: Optional[int] = typer.Option(None, "--year", "-y", help="Year"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Backup file"),
    currency: Optional[str] = typer.Option(None, "--currency", "-c"),
) -> None:
    """Show spend against budget for every budgeted category."""
    base = _currency(currency)

    with _handle_errors():
        progress = BudgetProgressQuery.from_factory(_factory(file)).execute(
            month=month,
            year=year,
            base_currency=base.code,
        )

    if not progress:
        console.print("[yellow]No categories have a budget.[/yellow]")
        return
    console.print(_budget_table(progress, base))


@app.command()
def period(
    period_type: PeriodType = typer.Option(
        PeriodType.THIS_MONTH,
        "--period",
        "-p",
        help="thisWeek, thisMonth, thisYear or custom",
    ),
    start: Optional[str] = typer.Option(None, "--from", help="Custom start (ISO)"),
    end: Optional[str] = typer.Option(None, "--to", help="Custom end (ISO)"),
    granularity: Optional[Granularity] = typer.Option(None, "--granularity", "-g"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Backup file"),
    currency: Optional[str] = typer.Option(None, "--currency", "-c"),
) -> None:
    """Show income and expenses bucketed over an insights period."""
    base = _currency(currency)
    custom_range = _date_range(start, end)

    with _handle_errors():
        points = PeriodTrendsQuery.from_factory(_factory(file)).execute(
            period_type=period_type,
            custom_range=custom_range,
            granularity=granularity,
            base_currency=base.code,
        )

    table = Table(title=f"Period Trends ({base.code})")
    table.add_column("Period", style="cyan")
    table.add_column("Income", justify="right")
    table.add_column("Expenses", justify="right")
    table.add_column("Savings", justify="right")
    for point in points:
        table.add_row(
            point.label,
            base.format_amount(point.income),
            base.format_amount(point.expenses),
            base.format_amount(point.savings),
        )
    console.print(table)


@app.command()
def goals(
    active: bool = typer.Option(False, "--active", help="Hide completed goals"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Backup file"),
    currency: Optional[str] = typer.Option(None, "--currency", "-c"),
) -> None:
    """Show savings goals, most urgent first."""
    _currency(currency)

    with _handle_errors():
        progress = SavingsGoalsQuery.from_factory(_factory(file)).execute(
            active_only=active,
        )

    if not progress:
        console.print("[yellow]No savings goals found.[/yellow]")
        return

    table = Table(title="Savings Goals")
    table.add_column("Goal", style="cyan")
    table.add_column("Saved", justify="right")
    table.add_column("Target", justify="right")
    table.add_column("Progress", justify="right")
    table.add_column("Deadline")
    table.add_column("Status")
    for item in progress:
        goal_currency = item.goal.currency
        style = _GOAL_STYLES[item.status]
        table.add_row(
            item.goal.name,
            goal_currency.format_amount(item.goal.current_amount),
            goal_currency.format_amount(item.goal.target_amount),
            _pct(item.percentage),
            f"{item.goal.deadline:%Y-%m-%d}" if item.goal.deadline else "-",
            f"[{style}]{item.status.value}[/{style}]",
        )
    console.print(table)


@app.command()
def search(  # NOQA: PLR0913
    query: str = typer.Option("", "--query", "-q", help="Description or notes text"),
    types: Optional[List[TransactionType]] = typer.Option(None, "--type", "-t"),
    categories: Optional[List[str]] = typer.Option(None, "--category"),
    tags: Optional[List[str]] = typer.Option(None, "--tag"),
    min_amount: Optional[float] = typer.Option(None, "--min"),
    max_amount: Optional[float] = typer.Option(None, "--max"),
    preset: Optional[DateFilter] = typer.Option(None, "--when", help="Date preset"),
    start: Optional[str] = typer.Option(None, "--from", help="Custom start (ISO)"),
    end: Optional[str] = typer.Option(None, "--to", help="Custom end (ISO)"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Backup file"),
    currency: Optional[str] = typer.Option(None, "--currency", "-c"),
) -> None:
    """List transactions matching the given filters."""
    base = _currency(currency)

    date_range = _date_range(start, end)
    if date_range is None and preset is not None:
        date_range = get_preset_date_range(preset)

    amount_range = None
    if min_amount is not None or max_amount is not None:
        amount_range = AmountRange(
            min=None if min_amount is None else Decimal(str(min_amount)),
            max=None if max_amount is None else Decimal(str(max_amount)),
        )

    transaction_filter = TransactionFilter(
        types=tuple(types or ()),
        categories=tuple(categories or ()),
        date_range=date_range,
        amount_range=amount_range,
        search_query=query,
        tags=tuple(tags or ()),
    )

    with _handle_errors():
        matches = TransactionSearchQuery.from_factory(_factory(file)).execute(
            transaction_filter,
        )

    table = Table(title=f"Transactions ({len(matches)})")
    table.add_column("Date")
    table.add_column("Type")
    table.add_column("Description", style="cyan")
    table.add_column("Amount", justify="right")
    for t in sorted(matches, key=lambda t: t.date, reverse=True):
        amount = t.currency.format_amount(t.amount)
        if t.currency != base and t.currency.is_supported:
            amount = f"{amount} {t.currency.code}"
        table.add_row(f"{t.date:%Y-%m-%d}", t.type.value, t.description, amount)
    console.print(table)


@app.command()
def insights(
    month: Optional[int] = typer.Option(None, "--month", "-m", help="Month (1-12)"),
    year: Optional[int] = typer.Option(None, "--year", "-y", help="Year"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Backup file"),
    currency: Optional[str] = typer.Option(None, "--currency", "-c"),
) -> None:
    """Show observations about a month compared with the one before."""
    base = _currency(currency)

    with _handle_errors():
        results = InsightsQuery.from_factory(_factory(file)).execute(
            month=month,
            year=year,
            base_currency=base.code,
        )

    console.print("\n[bold]Insights[/bold]\n")
    for insight in results:
        style = _INSIGHT_STYLES[insight.type]
        console.print(f"[{style}]● {insight.title}[/{style}]")
        console.print(f"  {insight.description}")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


if __name__ == "__main__":
    cli()
