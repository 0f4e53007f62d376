# spend_tracker/loaders/yaml_loader.py
import yaml

from spend_tracker.budgets import BudgetBook
from spend_tracker.core.categorizer import parse_category
from spend_tracker.core.records import transaction_from_record
from spend_tracker.loaders.base import BaseLoader


def _read(path):
    with open(path, encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    if isinstance(data, list):
        return {'transactions': data}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping or a list of transactions in {path}")
    return data


def _period(entry):
    for key in ('month', 'year'):
        if entry.get(key) is None:
            raise ValueError(f"Missing '{key}' in budget entry: {entry}")
    return int(entry['month']), int(entry['year'])


def _transactions(data):
    return [transaction_from_record(entry) for entry in data.get('transactions') or []]


def _budget_book(data):
    book = BudgetBook()
    for entry in data.get('budgets') or []:
        month, year = _period(entry)
        book.add_budget(month, year, entry.get('amount'))
    for entry in data.get('category_budgets') or []:
        month, year = _period(entry)
        book.add_category_budget(
            month, year, parse_category(entry.get('category')), entry.get('amount')
        )
    return book


class YAMLLoader(BaseLoader):
    """
    Reads a snapshot document:

        transactions:
          - id: 1
            transactionDate: 2024-05-03
            description: Weekly shop
            category: GROCERIES
            type: EXPENSE
            amount: "50.00"
        budgets:
          - {month: 5, year: 2024, amount: 100}
        category_budgets:
          - {month: 5, year: 2024, category: GROCERIES, amount: 60}

    A document that is just a list is read as the transactions.
    """
    def load(self, file_path):
        yield from _transactions(_read(file_path))

    def load_budgets(self, file_path):
        return _budget_book(_read(file_path))

    def load_snapshot(self, file_path):
        data = _read(file_path)
        return self._snapshot(file_path, _transactions(data), _budget_book(data))
