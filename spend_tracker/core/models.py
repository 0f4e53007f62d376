# spend_tracker/core/models.py
from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Optional

from spend_tracker.errors import InvalidBudget


class TransactionType(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class CategoryGroup(str, Enum):
    INCOME = "income"
    ESSENTIAL = "essential"
    LIFESTYLE = "lifestyle"
    FINANCIAL = "financial"
    MISCELLANEOUS = "miscellaneous"


class Category(str, Enum):
    # Income
    SALARY = "SALARY"
    BUSINESS_INCOME = "BUSINESS_INCOME"
    INVESTMENT_RETURNS = "INVESTMENT_RETURNS"
    RENTAL_INCOME = "RENTAL_INCOME"
    GIFTS_RECEIVED = "GIFTS_RECEIVED"
    TAX_REFUND = "TAX_REFUND"
    BONUS = "BONUS"
    SIDE_HUSTLE = "SIDE_HUSTLE"
    OTHER_INCOME = "OTHER_INCOME"

    # Essential expenses
    RENT_MORTGAGE = "RENT_MORTGAGE"
    UTILITIES = "UTILITIES"
    GROCERIES = "GROCERIES"
    TRANSPORTATION = "TRANSPORTATION"
    PUBLIC_TRANSPORT = "PUBLIC_TRANSPORT"
    RIDE_SHARE = "RIDE_SHARE"
    GAS = "GAS"
    INSURANCE = "INSURANCE"
    PHONE_INTERNET = "PHONE_INTERNET"
    HEALTHCARE = "HEALTHCARE"
    DEBT_PAYMENTS = "DEBT_PAYMENTS"

    # Lifestyle
    DINING_OUT = "DINING_OUT"
    DELIVERY = "DELIVERY"
    ENTERTAINMENT = "ENTERTAINMENT"
    SHOPPING = "SHOPPING"
    SUBSCRIPTIONS = "SUBSCRIPTIONS"
    GYM_FITNESS = "GYM_FITNESS"
    TRAVEL = "TRAVEL"
    HOBBIES = "HOBBIES"
    PERSONAL_CARE = "PERSONAL_CARE"
    GIFTS_GIVEN = "GIFTS_GIVEN"

    # Financial
    SAVINGS = "SAVINGS"
    INVESTMENTS = "INVESTMENTS"
    EMERGENCY_FUND = "EMERGENCY_FUND"
    RETIREMENT = "RETIREMENT"
    TAXES = "TAXES"
    BANK_FEES = "BANK_FEES"

    # Miscellaneous
    EDUCATION = "EDUCATION"
    CHARITY = "CHARITY"
    PET_EXPENSES = "PET_EXPENSES"
    HOME_IMPROVEMENT = "HOME_IMPROVEMENT"
    CLOTHING = "CLOTHING"
    BOOKS_MEDIA = "BOOKS_MEDIA"
    OTHER_EXPENSE = "OTHER_EXPENSE"

    @property
    def display_name(self) -> str:
        return CATEGORY_DISPLAY_NAMES[self]

    @property
    def group(self) -> CategoryGroup:
        return CATEGORY_GROUPS[self]

    @property
    def is_income(self) -> bool:
        return self.group is CategoryGroup.INCOME


CATEGORY_DISPLAY_NAMES = {
    Category.SALARY: "Salary",
    Category.BUSINESS_INCOME: "Business Income",
    Category.INVESTMENT_RETURNS: "Investment Returns",
    Category.RENTAL_INCOME: "Rental Income",
    Category.GIFTS_RECEIVED: "Gifts Received",
    Category.TAX_REFUND: "Tax Refund",
    Category.BONUS: "Bonus",
    Category.SIDE_HUSTLE: "Side Hustle",
    Category.OTHER_INCOME: "Other Income",
    Category.RENT_MORTGAGE: "Rent/Mortgage",
    Category.UTILITIES: "Utilities",
    Category.GROCERIES: "Groceries",
    Category.TRANSPORTATION: "Transportation",
    Category.PUBLIC_TRANSPORT: "Public Transport",
    Category.RIDE_SHARE: "Ride Share",
    Category.GAS: "Gas/Fuel",
    Category.INSURANCE: "Insurance",
    Category.PHONE_INTERNET: "Phone & Internet",
    Category.HEALTHCARE: "Healthcare",
    Category.DEBT_PAYMENTS: "Debt Payments",
    Category.DINING_OUT: "Dining Out",
    Category.DELIVERY: "Delivery",
    Category.ENTERTAINMENT: "Entertainment",
    Category.SHOPPING: "Shopping",
    Category.SUBSCRIPTIONS: "Subscriptions",
    Category.GYM_FITNESS: "Gym & Fitness",
    Category.TRAVEL: "Travel",
    Category.HOBBIES: "Hobbies",
    Category.PERSONAL_CARE: "Personal Care",
    Category.GIFTS_GIVEN: "Gifts Given",
    Category.SAVINGS: "Savings",
    Category.INVESTMENTS: "Investments",
    Category.EMERGENCY_FUND: "Emergency Fund",
    Category.RETIREMENT: "Retirement",
    Category.TAXES: "Taxes",
    Category.BANK_FEES: "Bank Fees",
    Category.EDUCATION: "Education",
    Category.CHARITY: "Charity/Donations",
    Category.PET_EXPENSES: "Pet Expenses",
    Category.HOME_IMPROVEMENT: "Home Improvement",
    Category.CLOTHING: "Clothing",
    Category.BOOKS_MEDIA: "Books & Media",
    Category.OTHER_EXPENSE: "Other Expense",
}

_GROUP_MEMBERS = {
    CategoryGroup.INCOME: (
        "SALARY", "BUSINESS_INCOME", "INVESTMENT_RETURNS", "RENTAL_INCOME",
        "GIFTS_RECEIVED", "TAX_REFUND", "BONUS", "SIDE_HUSTLE", "OTHER_INCOME",
    ),
    CategoryGroup.ESSENTIAL: (
        "RENT_MORTGAGE", "UTILITIES", "GROCERIES", "TRANSPORTATION",
        "PUBLIC_TRANSPORT", "RIDE_SHARE", "GAS", "INSURANCE", "PHONE_INTERNET",
        "HEALTHCARE", "DEBT_PAYMENTS",
    ),
    CategoryGroup.LIFESTYLE: (
        "DINING_OUT", "DELIVERY", "ENTERTAINMENT", "SHOPPING", "SUBSCRIPTIONS",
        "GYM_FITNESS", "TRAVEL", "HOBBIES", "PERSONAL_CARE", "GIFTS_GIVEN",
    ),
    CategoryGroup.FINANCIAL: (
        "SAVINGS", "INVESTMENTS", "EMERGENCY_FUND", "RETIREMENT", "TAXES",
        "BANK_FEES",
    ),
    CategoryGroup.MISCELLANEOUS: (
        "EDUCATION", "CHARITY", "PET_EXPENSES", "HOME_IMPROVEMENT", "CLOTHING",
        "BOOKS_MEDIA", "OTHER_EXPENSE",
    ),
}

CATEGORY_GROUPS = {
    Category[name]: group
    for group, names in _GROUP_MEMBERS.items()
    for name in names
}


def to_amount(value) -> Decimal:
    """Convert a raw amount (str, int, float or Decimal) to a Decimal."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # go through str so 0.1 stays 0.1
        value = repr(value)
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Could not parse amount {value!r}") from exc


@dataclass(frozen=True)
class Transaction:
    id: str
    transaction_date: Optional[date]
    category: Category
    type: TransactionType
    amount: Decimal
    description: Optional[str] = None
    # Original date text, kept when it could not be parsed.
    raw_date: Optional[str] = None

    def __post_init__(self):
        amount = to_amount(self.amount)
        if not amount.is_finite() or amount < 0:
            raise ValueError(
                f"Transaction {self.id}: amount must be a non-negative magnitude, got {self.amount}"
            )
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "category", Category(self.category))
        object.__setattr__(self, "type", TransactionType(self.type))

    @property
    def has_valid_date(self) -> bool:
        return self.transaction_date is not None


def _check_period(month: int, year: int) -> None:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be between 1 and 12, got {month}")
    if not isinstance(year, int):
        raise ValueError(f"year must be an integer, got {year!r}")


@dataclass(frozen=True)
class Budget:
    month: int
    year: int
    amount: Decimal

    def __post_init__(self):
        _check_period(self.month, self.year)
        amount = to_amount(self.amount)
        if not amount.is_finite() or amount <= 0:
            raise InvalidBudget(amount)
        object.__setattr__(self, "amount", amount)


@dataclass(frozen=True)
class CategoryBudget:
    month: int
    year: int
    category: Category
    amount: Decimal

    def __post_init__(self):
        _check_period(self.month, self.year)
        amount = to_amount(self.amount)
        if not amount.is_finite() or amount <= 0:
            raise InvalidBudget(amount)
        object.__setattr__(self, "amount", amount)
        object.__setattr__(self, "category", Category(self.category))
