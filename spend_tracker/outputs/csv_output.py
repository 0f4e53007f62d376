# spend_tracker/outputs/csv_output.py

import csv
import logging
import os
from spend_tracker.outputs.base import BaseOutput

logger = logging.getLogger(__name__)

HEADER = ['id', 'transactionDate', 'description', 'category', 'type', 'amount']


class CSVOutput(BaseOutput):
    """
    Writes transactions, in the order given, to transactions.csv in the
    configured output directory. Undated rows keep their raw date text.
    """
    def __init__(self, config):
        self.config     = config
        self.output_dir = config.get('output_dir', 'data')
        os.makedirs(self.output_dir, exist_ok=True)

    def write(self, transactions):
        out_path = os.path.join(self.output_dir, 'transactions.csv')
        with open(out_path, 'w', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            writer.writerow(HEADER)
            for tx in transactions:
                date_s = tx.transaction_date.isoformat() if tx.transaction_date else (tx.raw_date or '')
                writer.writerow([
                    tx.id,
                    date_s,
                    tx.description or '',
                    tx.category.value,
                    tx.type.value,
                    f"{tx.amount:.2f}",
                ])

        logger.info("Written %d transactions to %s", len(transactions), out_path)
        return out_path
