# spend_tracker/budgets.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

from spend_tracker.aggregation import MonthlyTotals
from spend_tracker.core.models import Budget, Category, CategoryBudget, Transaction
from spend_tracker.errors import DuplicateCategoryPeriodBudget, DuplicatePeriodBudget
from spend_tracker.month_cursor import MonthCursor
from spend_tracker.progress import BudgetProgress, CategoryProgress, budget_progress

logger = logging.getLogger(__name__)


class BudgetBook:
    """In-memory store of overall and per-category monthly budgets.

    A period with no budget returns ``None``; that is a normal state and is
    never confused with a zero budget (which cannot be stored).
    """

    def __init__(
        self,
        budgets: Iterable[Budget] = (),
        category_budgets: Iterable[CategoryBudget] = (),
    ):
        self._budgets: Dict[Tuple[int, int], Budget] = {}
        self._category_budgets: Dict[Tuple[int, int, Category], CategoryBudget] = {}
        for budget in budgets:
            self.add_budget(budget.month, budget.year, budget.amount)
        for cb in category_budgets:
            self.add_category_budget(cb.month, cb.year, cb.category, cb.amount)

    # Overall budgets

    def get_budget(self, month: int, year: int) -> Optional[Budget]:
        return self._budgets.get((month, year))

    def add_budget(self, month: int, year: int, amount) -> Budget:
        if (month, year) in self._budgets:
            raise DuplicatePeriodBudget(month, year)
        return self.set_budget(month, year, amount)

    def set_budget(self, month: int, year: int, amount) -> Budget:
        budget = Budget(month=month, year=year, amount=amount)
        self._budgets[(month, year)] = budget
        logger.debug("Budget for %04d-%02d set to %s", year, month, budget.amount)
        return budget

    def delete_budget(self, month: int, year: int) -> None:
        self._budgets.pop((month, year), None)

    # Category budgets

    def get_category_budget(self, month: int, year: int, category) -> Optional[CategoryBudget]:
        return self._category_budgets.get((month, year, Category(category)))

    def category_budgets(self, month: int, year: int) -> List[CategoryBudget]:
        return sorted(
            (cb for (m, y, _), cb in self._category_budgets.items() if (m, y) == (month, year)),
            key=lambda cb: cb.category.name,
        )

    def add_category_budget(self, month: int, year: int, category, amount) -> CategoryBudget:
        category = Category(category)
        if (month, year, category) in self._category_budgets:
            raise DuplicateCategoryPeriodBudget(month, year, category)
        return self.set_category_budget(month, year, category, amount)

    def set_category_budget(self, month: int, year: int, category, amount) -> CategoryBudget:
        cb = CategoryBudget(month=month, year=year, category=category, amount=amount)
        self._category_budgets[(month, year, cb.category)] = cb
        logger.debug(
            "%s budget for %04d-%02d set to %s", cb.category.name, year, month, cb.amount
        )
        return cb

    def delete_category_budget(self, month: int, year: int, category) -> None:
        self._category_budgets.pop((month, year, Category(category)), None)


@dataclass(frozen=True)
class MonthlySummary:
    cursor: MonthCursor
    expense_total: Decimal
    income_total: Decimal
    net_total: Decimal
    # None when the month has no budget ("set a budget").
    overall: Optional[BudgetProgress]
    categories: List[CategoryProgress]

    @property
    def has_budget(self) -> bool:
        return self.overall is not None


def summarize_month(
    transactions: Iterable[Transaction], cursor: MonthCursor, book: BudgetBook
) -> MonthlySummary:
    """Compute totals and budget progress for the month under ``cursor``.

    Call again whenever the cursor, the snapshot or the budgets change.
    """
    totals = MonthlyTotals(transactions, cursor)
    expense_total = totals.expense_total

    budget = book.get_budget(cursor.month, cursor.year)
    overall = budget_progress(budget.amount, expense_total) if budget else None

    categories = [
        CategoryProgress(
            category=cb.category,
            progress=budget_progress(cb.amount, totals.category_spend(cb.category)),
        )
        for cb in book.category_budgets(cursor.month, cursor.year)
    ]

    return MonthlySummary(
        cursor=cursor,
        expense_total=expense_total,
        income_total=totals.income_total,
        net_total=totals.net_total,
        overall=overall,
        categories=categories,
    )
