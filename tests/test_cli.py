"""End-to-end tests for the command-line interface."""

import json
from datetime import date
from decimal import Decimal

import pytest

from profitshare.cli.main import cli
from profitshare.database import create_sqlite_database


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "cli.db")


@pytest.fixture
def run(cli_runner, db_path):
    def _run(*args, input=None):
        return cli_runner.invoke(cli, ["--db-path", db_path, *args], input=input)

    return _run


@pytest.fixture
def stakeholders(run):
    assert run("stakeholder", "create", "Alice").exit_code == 0
    assert run("stakeholder", "create", "Bob").exit_code == 0


def _march(run):
    run("transaction", "add", "--type", "profit", "--amount", "5000", "--date", "2024-03-05", "--description", "Work")
    run("transaction", "add", "--type", "cost", "--amount", "1200", "--date", "2024-03-20", "--description", "Rent")


def test_help_does_not_need_database(cli_runner):
    result = cli_runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "stakeholder" in result.output
    assert "summary" in result.output


class TestTransactionCommands:
    def test_add_and_list(self, run):
        result = run(
            "transaction", "add", "--type", "profit", "--amount", "$5,000", "--date", "2024-03-05",
            "--description", "Client work",
        )
        assert result.exit_code == 0
        assert "Created profit transaction 1 for $5,000.00" in result.output

        result = run("transaction", "list")
        assert result.exit_code == 0
        assert "Client work" in result.output
        assert "Count: 1" in result.output

    def test_add_rejects_negative_amount(self, run):
        result = run("transaction", "add", "--type", "cost", "--amount=-5", "--description", "x")

        assert result.exit_code == 1
        assert "Invalid amount format" in result.output

    def test_show_update_delete(self, run):
        _march(run)

        result = run("transaction", "update", "1", "--amount", "4500")
        assert result.exit_code == 0

        result = run("transaction", "show", "1")
        assert "$4,500.00" in result.output

        result = run("transaction", "delete", "1", input="y\n")
        assert result.exit_code == 0
        assert "Deleted transaction 1" in result.output

        result = run("transaction", "show", "1")
        assert result.exit_code == 1
        assert "Transaction 1 not found" in result.output

    def test_list_filtered_by_type(self, run):
        _march(run)

        result = run("transaction", "list", "--type", "cost")

        assert "Rent" in result.output
        assert "Work" not in result.output


class TestStakeholderCommands:
    def test_duplicate_name(self, run, stakeholders):
        result = run("stakeholder", "create", "Alice")

        assert result.exit_code == 1
        assert "already exists" in result.output

    def test_rename_and_deactivate(self, run, stakeholders):
        assert run("stakeholder", "rename", "Alice", "Alicia").exit_code == 0
        assert run("stakeholder", "deactivate", "Bob").exit_code == 0

        result = run("stakeholder", "list")
        assert "Alicia" in result.output
        assert "inactive" in result.output

        result = run("stakeholder", "list", "--active-only")
        assert "Bob" not in result.output

    def test_delete_blocked_by_payments(self, run, stakeholders):
        run("payment", "record", "Alice", "--amount", "10", "--month", "2024-3")

        result = run("stakeholder", "delete", "Alice", input="y\n")

        assert result.exit_code == 1
        assert "Deactivate it instead" in result.output

    def test_unknown_stakeholder(self, run):
        result = run("stakeholder", "activate", "Nobody")

        assert result.exit_code == 1
        assert "Stakeholder 'Nobody' not found" in result.output


class TestPaymentCommands:
    def test_record_requires_month_or_global(self, run, stakeholders):
        result = run("payment", "record", "Alice", "--amount", "10")

        assert result.exit_code == 1
        assert "--month" in result.output

    def test_record_normalizes_month(self, run, db_path, stakeholders):
        result = run("payment", "record", "Alice", "--amount", "900", "--month", "March 2024")

        assert result.exit_code == 0
        assert "against March 2024" in result.output
        with create_sqlite_database(database_path=db_path) as db:
            assert db.list_payments()[0].month == "2024-3"

    def test_list_kinds(self, run, stakeholders):
        run("payment", "record", "Alice", "--amount", "900", "--month", "2024-3", "--date", "2024-04-01")
        run("payment", "record", "Bob", "--amount", "500", "--global", "--date", "2024-04-02")

        result = run("payment", "list", "--kind", "global")
        assert "Global" in result.output
        assert "Count: 1" in result.output

        result = run("payment", "list", "--stakeholder", "Alice")
        assert "March 2024" in result.output
        assert "Count: 1" in result.output

    def test_delete(self, run, stakeholders):
        run("payment", "record", "Alice", "--amount", "10", "--global")

        result = run("payment", "delete", "1", input="y\n")
        assert result.exit_code == 0

        result = run("payment", "list")
        assert "No payments found." in result.output


class TestSummaryCommand:
    def test_table(self, run, stakeholders):
        _march(run)
        run("payment", "record", "Alice", "--amount", "900", "--month", "2024-3")

        result = run("summary")

        assert result.exit_code == 0
        assert "March 2024" in result.output
        assert "$3,800.00" in result.output
        assert "$1,000.00" in result.output

    def test_json(self, run, stakeholders):
        _march(run)
        run("payment", "record", "Alice", "--amount", "500", "--global")

        result = run("summary", "--json")

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert Decimal(data["totalBalance"]) == Decimal("3800")
        assert data["monthlyCalculations"][0]["month"] == "2024-3"
        assert Decimal(data["stakeholderBalances"]["1"]["remaining"]) == Decimal("1400")

    def test_date_range(self, run, stakeholders):
        _march(run)
        run("transaction", "add", "--type", "profit", "--amount", "1", "--date", "2024-04-01", "--description", "April")

        result = run("summary", "--start-date", "2024-04-01", "--end-date", "2024-04-30", "--json")

        data = json.loads(result.output)
        assert [m["month"] for m in data["monthlyCalculations"]] == ["2024-4"]

    def test_no_active_stakeholders(self, run):
        _march(run)

        result = run("summary")

        assert result.exit_code == 1
        assert "no active stakeholders" in result.output

    def test_empty(self, run):
        result = run("summary")

        assert result.exit_code == 0
        assert "No transactions found." in result.output


def test_seed_is_idempotent(run, db_path):
    result = run("seed")
    assert result.exit_code == 0
    assert "Stakeholder 1, Stakeholder 2" in result.output

    result = run("seed")
    assert "Skipping default stakeholders" in result.output
    assert "Skipping sample transactions" in result.output

    with create_sqlite_database(database_path=db_path) as db:
        assert db.count_transactions() == 4
        months = {t.date.month for t in db.list_transactions()}
    assert len(months) == 2
    assert date.today().month not in months
