# spend_tracker/utils.py
from spend_tracker.month_cursor import MonthCursor


def filter_transactions_by_month(transactions, month_str):
    """
    Return only those transactions whose date falls in the given YYYY-MM.
    Transactions with an unparseable date are left out.
    """
    cursor = MonthCursor.from_string(month_str)
    return [tx for tx in transactions if cursor.contains(tx.transaction_date)]


def dedupe_transactions(transactions):
    """
    Remove repeated transactions, keeping the first occurrence of each id.
    """
    seen = set()
    unique = []
    for tx in transactions:
        if tx.id not in seen:
            seen.add(tx.id)
            unique.append(tx)
    return unique
