# spend_tracker/core/records.py
from __future__ import annotations

import logging
import re
from datetime import date, datetime
from typing import Iterable, List, Mapping, NamedTuple

from spend_tracker.core.categorizer import parse_category
from spend_tracker.core.models import Transaction, TransactionType
from spend_tracker.errors import MalformedTransactionDate

logger = logging.getLogger(__name__)

_DATE_RX = re.compile(r"^(\d{4})-(\d{1,2})-(\d{1,2})$")

_DATE_KEYS = ("transactionDate", "transaction_date", "date")


def parse_transaction_date(value) -> date:
    """Parse a ``YYYY-MM-DD`` literal into a calendar date.

    The literal is split into its integer components so no timezone
    conversion can move it to a neighbouring day. ``date`` objects pass
    through (``datetime`` values are truncated to their date).
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise MalformedTransactionDate(value)
    match = _DATE_RX.match(value.strip())
    if not match:
        raise MalformedTransactionDate(value)
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        raise MalformedTransactionDate(value) from None


def _parse_type(value) -> TransactionType:
    if isinstance(value, TransactionType):
        return value
    try:
        return TransactionType(str(value or "").strip().upper())
    except ValueError:
        raise ValueError(f"Unknown transaction type '{value}'") from None


def transaction_from_record(record: Mapping) -> Transaction:
    """Build a Transaction from a raw mapping (YAML entry, CSV row, API payload).

    A malformed date does not abort the load: the transaction keeps its raw
    date text, has no ``transaction_date`` and is reported by
    :func:`data_quality_issues`.
    """
    tx_id = record.get("id")
    if tx_id is None or str(tx_id).strip() == "":
        raise ValueError(f"Missing 'id' in transaction record: {dict(record)}")
    tx_id = str(tx_id).strip()

    raw_date = next((record[k] for k in _DATE_KEYS if record.get(k) is not None), None)
    try:
        tx_date = parse_transaction_date(raw_date)
        raw_text = None
    except MalformedTransactionDate as exc:
        logger.warning("Transaction %s: %s", tx_id, exc)
        tx_date = None
        raw_text = "" if raw_date is None else str(raw_date)

    description = record.get("description")
    if description is not None:
        description = str(description)

    return Transaction(
        id=tx_id,
        transaction_date=tx_date,
        category=parse_category(record.get("category")),
        type=_parse_type(record.get("type")),
        amount=record.get("amount"),
        description=description,
        raw_date=raw_text,
    )


class DataQualityIssue(NamedTuple):
    transaction_id: str
    field: str
    value: str
    message: str


def data_quality_issues(transactions: Iterable[Transaction]) -> List[DataQualityIssue]:
    issues = []
    for tx in transactions:
        if not tx.has_valid_date:
            issues.append(
                DataQualityIssue(
                    transaction_id=tx.id,
                    field="transactionDate",
                    value=tx.raw_date or "",
                    message="unparseable date; excluded from monthly totals and sorted last",
                )
            )
    return issues
