# spend_tracker/aggregation.py
from __future__ import annotations

from collections import defaultdict
from decimal import Decimal
from typing import Dict, Iterable, List

from spend_tracker.core.models import Category, Transaction, TransactionType
from spend_tracker.month_cursor import MonthCursor

ZERO = Decimal("0")


def transactions_in_month(
    transactions: Iterable[Transaction], cursor: MonthCursor
) -> List[Transaction]:
    """Return the transactions dated within the cursor's month.

    Transactions without a parsed date never match.
    """
    return [tx for tx in transactions if cursor.contains(tx.transaction_date)]


def _total(transactions: Iterable[Transaction]) -> Decimal:
    return sum((tx.amount for tx in transactions), ZERO)


def monthly_expense_total(transactions: Iterable[Transaction], cursor: MonthCursor) -> Decimal:
    return _total(
        tx for tx in transactions_in_month(transactions, cursor)
        if tx.type is TransactionType.EXPENSE
    )


def monthly_income_total(transactions: Iterable[Transaction], cursor: MonthCursor) -> Decimal:
    return _total(
        tx for tx in transactions_in_month(transactions, cursor)
        if tx.type is TransactionType.INCOME
    )


def category_spend(
    transactions: Iterable[Transaction], cursor: MonthCursor, category: Category
) -> Decimal:
    category = Category(category)
    return _total(
        tx for tx in transactions_in_month(transactions, cursor)
        if tx.type is TransactionType.EXPENSE and tx.category is category
    )


def spend_by_category(
    transactions: Iterable[Transaction], cursor: MonthCursor
) -> Dict[Category, Decimal]:
    """Expense totals per category for the month, largest first."""
    totals: Dict[Category, Decimal] = defaultdict(lambda: ZERO)
    for tx in transactions_in_month(transactions, cursor):
        if tx.type is TransactionType.EXPENSE:
            totals[tx.category] += tx.amount
    ordered = sorted(totals.items(), key=lambda item: (-item[1], item[0].name))
    return dict(ordered)


class MonthlyTotals:
    """Expense and income totals for one month of a transaction snapshot."""

    def __init__(self, transactions: Iterable[Transaction], cursor: MonthCursor):
        self.cursor = cursor
        self.transactions = transactions_in_month(transactions, cursor)

    @property
    def expense_total(self) -> Decimal:
        return monthly_expense_total(self.transactions, self.cursor)

    @property
    def income_total(self) -> Decimal:
        return monthly_income_total(self.transactions, self.cursor)

    @property
    def net_total(self) -> Decimal:
        return self.income_total - self.expense_total

    def category_spend(self, category: Category) -> Decimal:
        return category_spend(self.transactions, self.cursor, category)

    def spend_by_category(self) -> Dict[Category, Decimal]:
        return spend_by_category(self.transactions, self.cursor)
