import csv
from datetime import date

import yaml
from click.testing import CliRunner

import spend_tracker.cli as cli


def _config(tmp_path, **overrides):
    cfg = {'output_dir': str(tmp_path / 'out')}
    cfg.update(overrides)
    path = tmp_path / 'config.yaml'
    path.write_text(yaml.safe_dump(cfg))
    return str(path)


def _invoke(tmp_path, *args, **config):
    runner = CliRunner()
    return runner.invoke(cli.main, ['--config', _config(tmp_path, **config), *args])


def test_table_default_sort_is_newest_first(tmp_path, snapshot_path):
    result = _invoke(tmp_path, 'table', str(snapshot_path))
    assert result.exit_code == 0, result.output

    out = result.output
    assert any(line.startswith('Date↓') for line in out.splitlines())
    positions = [out.index(s) for s in ('May 20, 2024', 'May 3, 2024', 'May 1, 2024', 'not-a-date')]
    assert positions == sorted(positions)
    assert '+$1,000.00' in out
    assert '-$50.00' in out
    assert 'Page 1 of 1 (4 transaction(s))   [1]' in out
    assert 'Rows per page: 10 (choices: 5, 10, 25, 50, 100)' in out
    assert 'Sorted by' not in out


def test_table_multi_sort_and_paging(tmp_path, snapshot_path):
    result = _invoke(
        tmp_path, 'table', str(snapshot_path),
        '--sort', 'category', '--sort', 'amount:desc',
        '--page', '2', '--page-size', '2',
    )
    assert result.exit_code == 0, result.output
    out = result.output
    header = next(line for line in out.splitlines() if line.startswith('Date'))
    assert 'Category↑1' in header
    assert 'Amount↓2' in header
    # DINING_OUT, GROCERIES 50, GROCERIES 30, SALARY
    assert '-$30.00' in out
    assert '+$1,000.00' in out
    assert '-$50.00' not in out
    assert 'Page 2 of 2 (4 transaction(s))   1 [2]' in out
    assert 'Sorted by category asc, then amount desc' in out


def test_table_page_past_end_is_clamped(tmp_path, snapshot_path):
    result = _invoke(tmp_path, 'table', str(snapshot_path), '--page', '9')
    assert result.exit_code == 0, result.output
    assert 'Page 1 of 1' in result.output


def test_table_rejects_unknown_sort_field(tmp_path, snapshot_path):
    result = _invoke(tmp_path, 'table', str(snapshot_path), '--sort', 'merchant')
    assert result.exit_code == 2


def test_table_export_writes_all_rows(tmp_path, snapshot_path):
    result = _invoke(
        tmp_path, 'table', str(snapshot_path), '--page-size', '1', '--export', 'csv'
    )
    assert result.exit_code == 0, result.output
    out_file = tmp_path / 'out' / 'transactions.csv'
    assert f'Exported 4 transaction(s) to {out_file}.' in result.output

    with open(out_file, newline='', encoding='utf-8') as f:
        rows = list(csv.reader(f))
    assert [r[0] for r in rows[1:]] == ['2', '1', '3', '4']


def test_table_reads_csv_snapshot(tmp_path):
    data = tmp_path / 'export.csv'
    data.write_text(
        "id,date,description,category,type,amount\n"
        "a,2024-02-01,Coffee,Dining Out,EXPENSE,4.50\n"
        "b,2024-02-03,Books,BOOKS_MEDIA,EXPENSE,20\n"
    )
    result = _invoke(tmp_path, 'table', str(data), '--sort', 'amount')
    assert result.exit_code == 0, result.output
    assert result.output.index('Coffee') < result.output.index('Books')
    assert 'Books & Media' in result.output


def test_table_empty_snapshot(tmp_path):
    data = tmp_path / 'empty.yaml'
    data.write_text("transactions: []\n")
    result = _invoke(tmp_path, 'table', str(data))
    assert result.exit_code == 0, result.output
    assert 'No transactions.' in result.output
    assert 'Page 1 of 1 (0 transaction(s))' in result.output


def test_budget_for_month(tmp_path, snapshot_path):
    result = _invoke(tmp_path, 'budget', str(snapshot_path), '--month', '2024-05')
    assert result.exit_code == 0, result.output
    out = result.output
    assert 'May 2024' in out.splitlines()
    assert 'Income:   $1,000.00' in out
    assert 'Expenses: $80.00' in out
    assert 'Net:      $920.00' in out
    assert 'Budget $100.00 | Spent $80.00 | Remaining $20.00 | 80.0% used [high]' in out
    assert 'Over budget!' not in out
    assert '  Groceries: $80.00 of $60.00 (100.0%, over), remaining -$20.00' in out


def test_budget_defaults_to_current_month(tmp_path, snapshot_path, monkeypatch):
    class FakeDate(date):
        @classmethod
        def today(cls):
            return cls(2024, 6, 15)

    monkeypatch.setattr(cli, 'date', FakeDate)
    result = _invoke(tmp_path, 'budget', str(snapshot_path))
    assert result.exit_code == 0, result.output
    out = result.output
    assert 'June 2024' in out.splitlines()
    assert 'Expenses: $0.00' in out
    assert 'No budget set for June 2024. Set a budget to track progress.' in out
    assert 'Category budgets:' not in out


def test_budget_rejects_bad_month(tmp_path, snapshot_path):
    result = _invoke(tmp_path, 'budget', str(snapshot_path), '--month', '2024-13')
    assert result.exit_code == 2


def test_issues_lists_undated_transactions(tmp_path, snapshot_path):
    result = _invoke(tmp_path, 'issues', str(snapshot_path))
    assert result.exit_code == 0, result.output
    assert "4: transactionDate='not-a-date'" in result.output
    assert '1 issue(s).' in result.output


def test_invalid_snapshot_is_reported(tmp_path):
    data = tmp_path / 'bad.yaml'
    data.write_text("transactions:\n  - id: 1\n    date: 2024-01-01\n    category: NOPE\n    type: EXPENSE\n    amount: 1\n")
    result = _invoke(tmp_path, 'issues', str(data))
    assert result.exit_code == 1
    assert "Unknown category 'NOPE'" in result.output


def test_invalid_config_is_reported(tmp_path, snapshot_path):
    result = _invoke(tmp_path, 'table', str(snapshot_path), page_size=0)
    assert result.exit_code == 1
    assert 'Invalid config' in result.output


def test_table_rejects_bad_default_sort_in_config(tmp_path, snapshot_path):
    result = _invoke(
        tmp_path, 'table', str(snapshot_path),
        default_sort=[{'field': 'amount', 'dir': 'desc'}],
    )
    assert result.exit_code == 2
    assert not isinstance(result.exception, TypeError)


def test_invalid_log_level_is_reported(tmp_path, snapshot_path, monkeypatch):
    monkeypatch.setenv('SPENDTRACK_LOG_LEVEL', 'loud')
    result = _invoke(tmp_path, 'issues', str(snapshot_path))
    assert result.exit_code == 1
    assert "Invalid SPENDTRACK_LOG_LEVEL 'LOUD'" in result.output
