# spend_tracker/month_cursor.py
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class MonthCursor:
    """The (month, year) currently being viewed.

    Navigation never mutates the cursor; it returns the neighbouring one.
    """

    month: int
    year: int

    def __post_init__(self):
        if not 1 <= self.month <= 12:
            raise ValueError(f"month must be between 1 and 12, got {self.month}")

    @classmethod
    def from_date(cls, value: date) -> "MonthCursor":
        return cls(month=value.month, year=value.year)

    @classmethod
    def from_string(cls, month_str: str) -> "MonthCursor":
        """Parse ``YYYY-MM``."""
        try:
            year, month = map(int, month_str.strip().split("-"))
        except ValueError:
            raise ValueError(f"Invalid month '{month_str}', expected YYYY-MM") from None
        return cls(month=month, year=year)

    def shift(self, months: int) -> "MonthCursor":
        month_index = self.month - 1 + months
        return MonthCursor(month=month_index % 12 + 1, year=self.year + month_index // 12)

    def next(self) -> "MonthCursor":
        return self.shift(1)

    def previous(self) -> "MonthCursor":
        return self.shift(-1)

    def go_to_current(self, today: Optional[date] = None) -> "MonthCursor":
        return MonthCursor.from_date(today or date.today())

    def is_current(self, today: Optional[date] = None) -> bool:
        today = today or date.today()
        return self.month == today.month and self.year == today.year

    def contains(self, value: Optional[date]) -> bool:
        return value is not None and value.month == self.month and value.year == self.year

    @property
    def label(self) -> str:
        return f"{calendar.month_name[self.month]} {self.year}"

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
