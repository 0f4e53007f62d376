# spend_tracker/loaders/base.py
import logging
from abc import ABC, abstractmethod
from typing import List, NamedTuple

from spend_tracker.budgets import BudgetBook
from spend_tracker.core.models import Transaction
from spend_tracker.utils import dedupe_transactions

logger = logging.getLogger(__name__)


class Snapshot(NamedTuple):
    transactions: List[Transaction]
    book: BudgetBook


class BaseLoader(ABC):
    @abstractmethod
    def load(self, file_path):
        """
        Yield Transaction instances from file_path.
        """
        pass

    def load_budgets(self, file_path):
        """Return the budgets stored alongside the transactions, if any."""
        return BudgetBook()

    def load_snapshot(self, file_path):
        return self._snapshot(file_path, self.load(file_path), self.load_budgets(file_path))

    def _snapshot(self, file_path, transactions, book):
        transactions = dedupe_transactions(transactions)
        logger.debug("Loaded %d transaction(s) from %s", len(transactions), file_path)
        return Snapshot(transactions=transactions, book=book)
