# spend_tracker/progress.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from spend_tracker.core.models import Category, to_amount
from spend_tracker.errors import InvalidBudget

HUNDRED = Decimal("100")


class SeverityTier(str, Enum):
    NORMAL = "normal"
    ELEVATED = "elevated"
    HIGH = "high"
    OVER = "over"


# (lower bound in percent, tier), checked top-down
_TIER_THRESHOLDS = (
    (Decimal("100"), SeverityTier.OVER),
    (Decimal("80"), SeverityTier.HIGH),
    (Decimal("60"), SeverityTier.ELEVATED),
)


def severity_tier(percent_used) -> SeverityTier:
    percent = to_amount(percent_used)
    for bound, tier in _TIER_THRESHOLDS:
        if percent >= bound:
            return tier
    return SeverityTier.NORMAL


@dataclass(frozen=True)
class BudgetProgress:
    budget: Decimal
    spent: Decimal
    percent_used: Decimal
    remaining: Decimal
    tier: SeverityTier

    @property
    def is_over_budget(self) -> bool:
        return self.remaining < 0


def budget_progress(budget_amount, spent) -> BudgetProgress:
    """Compare a spend against a budget.

    ``percent_used`` is capped at 100; ``remaining`` is not, so an
    over-budget spend shows up as a negative remainder.
    """
    budget = to_amount(budget_amount)
    spent = to_amount(spent)
    if not budget.is_finite() or budget <= 0:
        raise InvalidBudget(budget)
    if not spent.is_finite() or spent < 0:
        raise ValueError(f"Spent amount must be a non-negative number, got {spent}")
    percent = min(spent / budget * HUNDRED, HUNDRED)
    return BudgetProgress(
        budget=budget,
        spent=spent,
        percent_used=percent,
        remaining=budget - spent,
        tier=severity_tier(percent),
    )


@dataclass(frozen=True)
class CategoryProgress:
    category: Category
    progress: BudgetProgress

    @property
    def display_name(self) -> str:
        return self.category.display_name
