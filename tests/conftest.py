import pytest

SNAPSHOT_YAML = """\
transactions:
  - id: 1
    transactionDate: 2024-05-03
    description: Weekly shop
    category: GROCERIES
    type: EXPENSE
    amount: "50.00"
  - id: 2
    transactionDate: "2024-05-20"
    category: Groceries
    type: expense
    amount: 30
  - id: 3
    transactionDate: 2024-05-01
    description: Paycheck
    category: SALARY
    type: INCOME
    amount: 1000
  - id: 3
    transactionDate: 2024-05-01
    description: Paycheck (duplicate)
    category: SALARY
    type: INCOME
    amount: 1000
  - id: 4
    transactionDate: not-a-date
    category: DINING_OUT
    type: EXPENSE
    amount: 12.5
budgets:
  - {month: 5, year: 2024, amount: 100}
category_budgets:
  - {month: 5, year: 2024, category: GROCERIES, amount: 60}
"""


@pytest.fixture
def snapshot_path(tmp_path):
    path = tmp_path / "snapshot.yaml"
    path.write_text(SNAPSHOT_YAML)
    return path
