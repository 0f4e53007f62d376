# spend_tracker/errors.py


class SpendTrackerError(ValueError):
    """Base class for user-correctable input errors."""


class InvalidBudget(SpendTrackerError):
    def __init__(self, amount):
        self.amount = amount
        super().__init__(f"Budget amount must be greater than 0, got {amount}")


class DuplicatePeriodBudget(SpendTrackerError):
    def __init__(self, month, year):
        self.month = month
        self.year = year
        super().__init__(f"A budget already exists for {year:04d}-{month:02d}")


class DuplicateCategoryPeriodBudget(SpendTrackerError):
    def __init__(self, month, year, category):
        self.month = month
        self.year = year
        self.category = category
        super().__init__(
            f"A {category.name} budget already exists for {year:04d}-{month:02d}"
        )


class MalformedTransactionDate(SpendTrackerError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Could not parse transaction date {value!r} (expected YYYY-MM-DD)")
