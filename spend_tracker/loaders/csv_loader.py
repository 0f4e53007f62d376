# spend_tracker/loaders/csv_loader.py
import logging
import re

import pandas as pd

from spend_tracker.core.records import transaction_from_record
from spend_tracker.loaders.base import BaseLoader

logger = logging.getLogger(__name__)

_CLEAN_AMOUNT = re.compile(r"[^\d\.]")

_COLUMNS = ('id', 'date', 'description', 'category', 'type', 'amount')


class CSVLoader(BaseLoader):
    """
    Loader for transaction exports with a header row.
    Columns are matched by name fragment, so "Transaction Date" or
    "transactionDate" both serve as the date column. Every cell is read as
    text; dates and amounts are parsed by the record builder.
    """
    def load(self, file_path):
        df = pd.read_csv(file_path, dtype=str, keep_default_na=False)

        cols = {c.lower(): c for c in df.columns}
        def find(frag):
            frag = frag.lower()
            if frag in cols:
                return cols[frag]
            return next((orig for low, orig in cols.items() if frag in low), None)

        found = {name: find(name) for name in _COLUMNS}
        for name in ('id', 'date', 'category', 'type', 'amount'):
            if found[name] is None:
                raise RuntimeError(f"Missing required column '{name}' in {file_path}")

        for idx, row in df.iterrows():
            amt_raw = str(row[found['amount']]).strip()
            if not amt_raw:
                logger.warning("Skipping row %d in %s: no amount", idx + 1, file_path)
                continue
            # "(50.00)" is the accounting form of -50.00
            if '-' in amt_raw or (amt_raw.startswith('(') and amt_raw.endswith(')')):
                raise ValueError(f"Negative amount '{amt_raw}' in {file_path}; amounts are magnitudes")
            cleaned = _CLEAN_AMOUNT.sub("", amt_raw)
            if not any(ch.isdigit() for ch in cleaned):
                raise ValueError(f"Unparseable amount '{amt_raw}' in row {idx + 1} of {file_path}")

            record = {
                'id': row[found['id']],
                'date': row[found['date']],
                'category': row[found['category']],
                'type': row[found['type']],
                'amount': cleaned,
            }
            if found['description'] is not None:
                desc = str(row[found['description']]).strip()
                record['description'] = desc or None
            yield transaction_from_record(record)
