# spend_tracker/sorting.py
"""Multi-column ordering of transactions.

Text fields (description, category, type) are compared case-insensitively
with ``str.casefold``; a missing description compares as ``""``. Category
compares by its enum name (``DINING_OUT``), type by its value. Dates and
amounts compare as dates and Decimals. Transactions whose date could not be
parsed sort after all dated ones, in either direction.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from spend_tracker.core.models import Transaction


class SortField(str, Enum):
    DATE = "date"
    DESCRIPTION = "description"
    CATEGORY = "category"
    TYPE = "type"
    AMOUNT = "amount"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


_FIELD_ALIASES = {"transactiondate": SortField.DATE, "transaction_date": SortField.DATE}

_EXTRACTORS: Dict[SortField, Callable[[Transaction], object]] = {
    SortField.DATE: lambda tx: tx.transaction_date,
    SortField.DESCRIPTION: lambda tx: (tx.description or "").casefold(),
    SortField.CATEGORY: lambda tx: tx.category.name.casefold(),
    SortField.TYPE: lambda tx: tx.type.value.casefold(),
    SortField.AMOUNT: lambda tx: tx.amount,
}

ARROWS = {SortDirection.ASC: "↑", SortDirection.DESC: "↓"}


def parse_field(value) -> SortField:
    if isinstance(value, SortField):
        return value
    text = str(value).strip().lower()
    if text in _FIELD_ALIASES:
        return _FIELD_ALIASES[text]
    try:
        return SortField(text)
    except ValueError:
        raise ValueError(f"Unknown sort field '{value}'") from None


@dataclass(frozen=True)
class SortKey:
    field: SortField
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self):
        object.__setattr__(self, "field", parse_field(self.field))
        if not isinstance(self.direction, SortDirection):
            try:
                direction = SortDirection(str(self.direction).strip().lower())
            except ValueError:
                raise ValueError(f"Unknown sort direction '{self.direction}'") from None
            object.__setattr__(self, "direction", direction)

    @classmethod
    def parse(cls, text: str) -> "SortKey":
        """Parse ``field`` or ``field:direction`` (e.g. ``amount:desc``)."""
        field, _, direction = text.partition(":")
        return cls(field=field, direction=direction or SortDirection.ASC)

    def toggled(self) -> "SortKey":
        return SortKey(self.field, self.direction.toggled())

    def to_dict(self) -> dict:
        return {"field": self.field.value, "direction": self.direction.value}


DEFAULT_SORT_KEYS: Tuple[SortKey, ...] = (SortKey(SortField.DATE, SortDirection.DESC),)


def _as_sort_key(item) -> SortKey:
    """Coerce a ``SortKey``, a ``"field:dir"`` string or a ``{field, direction}`` mapping."""
    if isinstance(item, SortKey):
        return item
    if isinstance(item, str):
        return SortKey.parse(item)
    if isinstance(item, Mapping):
        unknown = set(item) - {"field", "direction"}
        if unknown or "field" not in item:
            raise ValueError(
                f"Sort key {dict(item)!r} must have a 'field' and an optional 'direction'"
            )
        return SortKey(**item)
    raise ValueError(f"Invalid sort key {item!r}")


def _check_unique(keys: Sequence[SortKey]) -> None:
    seen = set()
    for key in keys:
        if key.field in seen:
            raise ValueError(f"Sort field '{key.field.value}' appears more than once")
        seen.add(key.field)


def _stable_pass(rows: List[Transaction], key: SortKey) -> List[Transaction]:
    extract = _EXTRACTORS[key.field]
    present = [tx for tx in rows if extract(tx) is not None]
    missing = [tx for tx in rows if extract(tx) is None]
    # list.sort stays stable with reverse=True
    present.sort(key=extract, reverse=key.direction is SortDirection.DESC)
    return present + missing


def sort_transactions(
    transactions: Iterable[Transaction], keys: Sequence[SortKey]
) -> List[Transaction]:
    """Return a new list ordered by ``keys`` (first key has precedence).

    Stable: rows that tie on every key keep their input order. The input is
    not modified.
    """
    _check_unique(keys)
    rows = list(transactions)
    # least significant key first; each stable pass keeps earlier orderings among ties
    for key in reversed(keys):
        rows = _stable_pass(rows, key)
    return rows


@dataclass(frozen=True)
class SortState:
    """The sort key list selected in the table header."""

    keys: Tuple[SortKey, ...] = DEFAULT_SORT_KEYS

    def __post_init__(self):
        keys = tuple(_as_sort_key(k) for k in self.keys)
        _check_unique(keys)
        object.__setattr__(self, "keys", keys)

    def _index(self, field: SortField) -> Optional[int]:
        for idx, key in enumerate(self.keys):
            if key.field is field:
                return idx
        return None

    def select(self, field, multi: bool = False) -> "SortState":
        """Apply a header click on ``field``.

        A plain click toggles the direction when ``field`` is the only key and
        otherwise starts a fresh ascending sort on it. With ``multi`` (the
        modifier key held) an existing key toggles in place and a new one is
        appended ascending.
        """
        field = parse_field(field)
        idx = self._index(field)
        if multi:
            if idx is not None:
                keys = list(self.keys)
                keys[idx] = keys[idx].toggled()
                return SortState(tuple(keys))
            return SortState(self.keys + (SortKey(field, SortDirection.ASC),))
        if idx == 0 and len(self.keys) == 1:
            return SortState((self.keys[0].toggled(),))
        return SortState((SortKey(field, SortDirection.ASC),))

    def clear(self) -> "SortState":
        return SortState(DEFAULT_SORT_KEYS)

    @property
    def is_multi(self) -> bool:
        return len(self.keys) > 1

    def indicator(self, field) -> Optional[str]:
        """Header marker for ``field``: ``None``, an arrow, or arrow + precedence."""
        idx = self._index(parse_field(field))
        if idx is None:
            return None
        arrow = ARROWS[self.keys[idx].direction]
        if self.is_multi:
            return f"{arrow}{idx + 1}"
        return arrow

    def apply(self, transactions: Iterable[Transaction]) -> List[Transaction]:
        return sort_transactions(transactions, self.keys)

    def to_list(self) -> List[dict]:
        return [key.to_dict() for key in self.keys]

    @classmethod
    def from_list(cls, items: Iterable) -> "SortState":
        if items is None or isinstance(items, (str, Mapping)):
            raise ValueError(f"Expected a list of sort keys, got {items!r}")
        return cls(tuple(_as_sort_key(i) for i in items))
