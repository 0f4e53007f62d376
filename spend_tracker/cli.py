# spend_tracker/cli.py
import logging
import os
from datetime import date
from pathlib import Path

import click
import yaml
from dotenv import load_dotenv

from spend_tracker.budgets import summarize_month
from spend_tracker.config import load_config
from spend_tracker.core.models import TransactionType
from spend_tracker.core.records import data_quality_issues
from spend_tracker.errors import SpendTrackerError
from spend_tracker.loaders import get_loader
from spend_tracker.month_cursor import MonthCursor
from spend_tracker.outputs import get_output
from spend_tracker.pagination import Pagination
from spend_tracker.sorting import SortField, SortState
from spend_tracker.view import TableState, compose_page

logger = logging.getLogger(__name__)

_COLUMNS = (
    (SortField.DATE, "Date", 14),
    (SortField.DESCRIPTION, "Description", 28),
    (SortField.CATEGORY, "Category", 20),
    (SortField.TYPE, "Type", 9),
    (SortField.AMOUNT, "Amount", 14),
)


def _configure_logging(verbose):
    level = "DEBUG" if verbose else os.getenv("SPENDTRACK_LOG_LEVEL", "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise click.ClickException(f"Invalid SPENDTRACK_LOG_LEVEL '{level}'")
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _money(amount):
    if amount < 0:
        return f"-${-amount:,.2f}"
    return f"${amount:,.2f}"


def _format_date(tx):
    d = tx.transaction_date
    if d is None:
        return tx.raw_date or "N/A"
    return f"{d:%b} {d.day}, {d.year}"


def _format_amount(tx):
    sign = "+" if tx.type is TransactionType.INCOME else "-"
    return f"{sign}{_money(tx.amount)}"


def _load_snapshot(config, data_path, fmt):
    fmt = fmt or ("csv" if Path(data_path).suffix.lower() == ".csv" else "yaml")
    logger.debug("Reading %s snapshot from %s", fmt, data_path)
    try:
        loader = get_loader(fmt, config)
        return loader.load_snapshot(data_path)
    except (ValueError, RuntimeError, yaml.YAMLError) as e:
        raise click.ClickException(f"Could not load {data_path}: {e}")


def _data_options(func):
    func = click.option(
        '--format', 'fmt',
        default=None,
        type=click.Choice(['yaml', 'csv']),
        help='Snapshot format (default: from the file extension)'
    )(func)
    func = click.argument(
        'data_path',
        type=click.Path(exists=True, dir_okay=False),
    )(func)
    return func


@click.group()
@click.option(
    '--config', 'config_path',
    default=None,
    type=click.Path(dir_okay=False),
    help='Path to config.yaml (defaults are used when omitted or missing)'
)
@click.option(
    '--env-file', 'env_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Optional .env file, e.g. to set SPENDTRACK_LOG_LEVEL'
)
@click.option('--verbose', '-v', is_flag=True, default=False, help='Enable debug logging.')
@click.pass_context
def main(ctx, config_path, env_file, verbose):
    """
    Browse a transaction snapshot as a sorted, paginated table and track
    monthly spending against overall and per-category budgets.
    """
    if env_file:
        load_dotenv(env_file)
    _configure_logging(verbose)
    try:
        ctx.obj = load_config(config_path)
    except (ValueError, OSError) as e:
        raise click.ClickException(f"Invalid config: {e}")


@main.command()
@_data_options
@click.option(
    '--sort', 'sort_keys',
    multiple=True,
    help='Sort key as field[:asc|desc]; repeat for a multi-column sort. '
         'Fields: date, description, category, type, amount.'
)
@click.option('--page', default=1, type=click.IntRange(min=1), show_default=True)
@click.option('--page-size', default=None, type=click.IntRange(min=1),
              help='Rows per page (default: page_size from config)')
@click.option(
    '--export', 'export_format',
    default=None,
    type=click.Choice(['csv']),
    help='Also write every sorted row (all pages) to the output directory.'
)
@click.pass_obj
def table(config, data_path, fmt, sort_keys, page, page_size, export_format):
    """Show one page of transactions."""
    snapshot = _load_snapshot(config, data_path, fmt)
    try:
        sort = SortState.from_list(sort_keys or config['default_sort'])
        pagination = Pagination(page=page, page_size=page_size or config['page_size'])
    except ValueError as e:
        raise click.BadParameter(str(e))
    state = TableState(sort=sort, pagination=pagination)
    view = compose_page(snapshot.transactions, state)

    header = "  ".join(
        f"{title}{sort.indicator(field) or ''}".ljust(width)
        for field, title, width in _COLUMNS
    )
    click.echo(header.rstrip())
    click.echo("-" * len(header))
    for tx in view.rows:
        cells = (
            _format_date(tx),
            (tx.description or "")[:28],
            tx.category.display_name,
            tx.type.value.title(),
            _format_amount(tx),
        )
        click.echo("  ".join(c.ljust(w) for c, (_, _, w) in zip(cells, _COLUMNS)).rstrip())
    if not view.rows:
        click.echo("No transactions.")

    picker = " ".join(
        f"[{p}]" if p == view.page else str(p) for p in view.page_numbers
    )
    click.echo(
        f"\nPage {view.page} of {view.total_pages} "
        f"({view.total_rows} transaction(s))   {picker}"
    )
    sizes = ", ".join(str(n) for n in config['page_size_options'])
    click.echo(f"Rows per page: {view.page_size} (choices: {sizes})")
    if sort.is_multi:
        click.echo("Sorted by " + ", then ".join(
            f"{k.field.value} {k.direction.value}" for k in sort.keys
        ))

    if export_format:
        outputter = get_output(export_format, config)
        out_path = outputter.write(sort.apply(snapshot.transactions))
        click.echo(f"Exported {view.total_rows} transaction(s) to {out_path}.")


@main.command()
@_data_options
@click.option('--month', 'month_str', default=None,
              help='Month to show as YYYY-MM (default: the current month)')
@click.pass_obj
def budget(config, data_path, fmt, month_str):
    """Show totals and budget progress for a month."""
    snapshot = _load_snapshot(config, data_path, fmt)
    try:
        if month_str:
            cursor = MonthCursor.from_string(month_str)
        else:
            cursor = MonthCursor.from_date(date.today())
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--month')

    try:
        summary = summarize_month(snapshot.transactions, cursor, snapshot.book)
    except SpendTrackerError as e:
        raise click.ClickException(str(e))

    click.echo(cursor.label)
    click.echo(f"Income:   {_money(summary.income_total)}")
    click.echo(f"Expenses: {_money(summary.expense_total)}")
    click.echo(f"Net:      {_money(summary.net_total)}")

    if summary.overall is None:
        click.echo(f"\nNo budget set for {cursor.label}. Set a budget to track progress.")
    else:
        p = summary.overall
        click.echo(
            f"\nBudget {_money(p.budget)} | Spent {_money(p.spent)} | "
            f"Remaining {_money(p.remaining)} | {p.percent_used:.1f}% used [{p.tier.value}]"
        )
        if p.is_over_budget:
            click.echo("Over budget!")

    if summary.categories:
        click.echo("\nCategory budgets:")
        for cp in summary.categories:
            p = cp.progress
            click.echo(
                f"  {cp.display_name}: {_money(p.spent)} of {_money(p.budget)} "
                f"({p.percent_used:.1f}%, {p.tier.value}), remaining {_money(p.remaining)}"
            )


@main.command()
@_data_options
@click.pass_obj
def issues(config, data_path, fmt):
    """List transactions with data-quality problems."""
    snapshot = _load_snapshot(config, data_path, fmt)
    found = data_quality_issues(snapshot.transactions)
    if not found:
        click.echo("No data-quality issues found.")
        return
    for issue in found:
        click.echo(f"{issue.transaction_id}: {issue.field}={issue.value!r} ({issue.message})")
    click.echo(f"{len(found)} issue(s).")
