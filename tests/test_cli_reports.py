"""Tests for dashboard, location and backup commands."""

import json
import pytest
from datetime import date
from decimal import Decimal

from leaguebook.cli.main import cli
from leaguebook.domain.entities import EntityType, TransactionType


@pytest.fixture
def sample_ledger(transaction_service):
    """A team fee, a staff payment and two court rentals."""
    transaction_service.create_transaction(
        date=date(2025, 3, 2),
        type=TransactionType.INCOME,
        entity_type=EntityType.TEAM,
        entity_id="1",
        amount_due=Decimal("150"),
        amount_paid=Decimal("400"),
    )
    transaction_service.create_transaction(
        date=date(2025, 3, 2),
        type=TransactionType.EXPENSE,
        entity_type=EntityType.STAFF,
        entity_id="1",
        amount_due=Decimal("80"),
        amount_paid=Decimal("0"),
    )
    for day, hours, paid in ((2, "2", "180"), (9, "1", "0")):
        transaction_service.create_transaction(
            date=date(2025, 3, day),
            type=TransactionType.EXPENSE,
            entity_type=EntityType.COST,
            category="Aluguel Quadra",
            rental_hours=Decimal(hours),
            amount_due=Decimal("0"),
            amount_paid=Decimal(paid),
        )


def test_dashboard(cli_runner, db_path, sample_ledger):
    """Test the dashboard shows balance, receivables and payables."""
    result = cli_runner.invoke(cli, ["--db-path", db_path, "dashboard"])

    assert result.exit_code == 0
    assert "Cash balance" in result.output
    # 400 received minus 180 paid for the court
    assert "R$ 220,00" in result.output
    # 80 for the referee plus 90 for the second rental
    assert "R$ 170,00" in result.output
    assert "General costs" in result.output
    assert "Recent transactions:" in result.output


def test_dashboard_without_recent(cli_runner, db_path):
    """Test --recent 0 hides the recent list."""
    result = cli_runner.invoke(cli, ["--db-path", db_path, "dashboard", "--recent", "0"])

    assert result.exit_code == 0
    assert "Recent transactions" not in result.output


def test_location(cli_runner, db_path, sample_ledger):
    """Test court rental totals."""
    result = cli_runner.invoke(cli, ["--db-path", db_path, "location", "--month", "03/2025"])

    assert result.exit_code == 0
    assert "Court rentals for 2025-03" in result.output
    assert "3h" in result.output
    assert "R$ 270,00" in result.output
    assert "-R$ 90,00" in result.output


def test_location_other_month(cli_runner, db_path, sample_ledger):
    """Test a month without rentals."""
    result = cli_runner.invoke(cli, ["--db-path", db_path, "location", "--month", "2025-05"])

    assert result.exit_code == 0
    assert "No transactions found" in result.output


class TestBackupCommands:
    """Tests for backup export and import."""

    def test_export(self, cli_runner, db_path, sample_ledger, tmp_path):
        result = cli_runner.invoke(cli, ["--db-path", db_path, "backup", "export", str(tmp_path)])

        assert result.exit_code == 0
        assert "Exported backup to" in result.output
        files = list(tmp_path.glob("leaguebook_backup_*.json"))
        assert len(files) == 1
        assert len(json.loads(files[0].read_text(encoding="utf-8"))["transactions"]) == 4

    def test_import(self, cli_runner, db_path, sample_ledger, tmp_path, load_saved_state):
        source = tmp_path / "backup.json"
        source.write_text(json.dumps({"transactions": [], "teams": [{"id": "7", "name": "Red Wolves"}]}))

        result = cli_runner.invoke(cli, ["--db-path", db_path, "backup", "import", str(source), "--yes"])

        assert result.exit_code == 0
        assert "Imported 0 transaction(s), 1 team(s), 1 staff member(s)" in result.output
        state = load_saved_state()
        assert state.transactions == ()
        assert [team.name for team in state.teams] == ["Red Wolves"]

    def test_import_rejected(self, cli_runner, db_path, sample_ledger, tmp_path, load_saved_state):
        source = tmp_path / "backup.json"
        source.write_text(json.dumps({"teams": []}))

        result = cli_runner.invoke(cli, ["--db-path", db_path, "backup", "import", str(source), "--yes"])

        assert result.exit_code == 1
        assert "Invalid backup file" in result.output
        assert len(load_saved_state().transactions) == 4

    def test_import_cancelled(self, cli_runner, db_path, sample_ledger, tmp_path, load_saved_state):
        source = tmp_path / "backup.json"
        source.write_text(json.dumps({"transactions": []}))

        result = cli_runner.invoke(cli, ["--db-path", db_path, "backup", "import", str(source)], input="n\n")

        assert "Import cancelled" in result.output
        assert len(load_saved_state().transactions) == 4


def test_log_file_is_written(cli_runner, db_path, tmp_path):
    """Test --log-dir adds a daily log file."""
    log_dir = tmp_path / "logs"
    result = cli_runner.invoke(
        cli,
        ["--db-path", db_path, "--log-level", "info", "--log-dir", str(log_dir), "team", "add", "Red Wolves"],
    )

    assert result.exit_code == 0
    log_files = list(log_dir.glob("leaguebook-*.log"))
    assert len(log_files) == 1
    assert "Created team 'Red Wolves'" in log_files[0].read_text()
