"""Tests for the add, transaction and ledger commands."""

import pytest
from datetime import date
from decimal import Decimal

from leaguebook.cli.main import cli
from leaguebook.domain.entities import ContextType, EntityType, TransactionType


@pytest.fixture
def team_fee(transaction_service):
    """A partially paid match fee recorded before the CLI runs."""
    return transaction_service.create_transaction(
        date=date(2025, 3, 2),
        type=TransactionType.INCOME,
        entity_type=EntityType.TEAM,
        entity_id="1",
        category="Taxa Jogo",
        amount_due=Decimal("150"),
        amount_paid=Decimal("100"),
        competition_id="1",
        round="Rodada 1",
    )


def test_add_team_fee(cli_runner, db_path, load_saved_state):
    """Test adding a team fee by team and competition name."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            db_path,
            "add",
            "--entity",
            "orange ballers",
            "--category",
            "Taxa Jogo",
            "--date",
            "02/03/25",
            "--due",
            "150",
            "--paid",
            "100",
            "--competition",
            "Liga Orange 2025",
            "--round",
            "Rodada 1",
        ],
    )

    assert result.exit_code == 0
    assert "Created transaction" in result.output
    assert "Orange Ballers" in result.output
    assert "Partial" in result.output
    assert "R$ 150,00" in result.output

    state = load_saved_state()
    txn = state.transactions[0]
    assert txn.date == date(2025, 3, 2)
    assert txn.type is TransactionType.INCOME
    assert txn.season_id == "1"
    assert txn.amount_paid == Decimal("100")


def test_add_court_rental_by_hours(cli_runner, db_path, load_saved_state):
    """Test a court rental computes the amount due from the hours."""
    result = cli_runner.invoke(
        cli,
        [
            "--db-path",
            db_path,
            "add",
            "--entity-type",
            "cost",
            "--category",
            "Aluguel Quadra",
            "--hours",
            "1h30",
            "--paid",
            "135",
        ],
    )

    assert result.exit_code == 0
    assert "Hours: 1h30" in result.output
    txn = load_saved_state().transactions[0]
    assert txn.type is TransactionType.EXPENSE
    assert txn.amount_due == Decimal("135")


def test_add_staff_payment_defaults_to_expense(cli_runner, db_path, load_saved_state):
    """Test staff entries default to expenses with the staff member's name."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", db_path, "add", "--entity-type", "staff", "--entity", "Carlos Juiz", "--due", "80", "--matches", "2"],
    )

    assert result.exit_code == 0
    txn = load_saved_state().transactions[0]
    assert txn.type is TransactionType.EXPENSE
    assert txn.category == "Arbitro"
    assert txn.matches_worked == 2


def test_add_requires_entity_for_teams(cli_runner, db_path):
    """Test team entries need --entity."""
    result = cli_runner.invoke(cli, ["--db-path", db_path, "add", "--due", "150"])

    assert result.exit_code == 1
    assert "--entity is required" in result.output


def test_add_unknown_team(cli_runner, db_path):
    """Test an unknown team name is reported."""
    result = cli_runner.invoke(cli, ["--db-path", db_path, "add", "--entity", "Red Wolves"])

    assert result.exit_code == 1
    assert "Team 'Red Wolves' not found" in result.output


def test_add_rejects_invalid_amount(cli_runner, db_path, load_saved_state):
    """Test bad amounts never reach the ledger."""
    result = cli_runner.invoke(cli, ["--db-path", db_path, "add", "--entity", "1", "--due", "abc"])

    assert result.exit_code == 1
    assert "Invalid amount due" in result.output
    assert load_saved_state() is None


def test_transaction_show_by_prefix(cli_runner, db_path, team_fee):
    """Test showing a transaction by the short id from listings."""
    result = cli_runner.invoke(cli, ["--db-path", db_path, "transaction", "show", team_fee.id[:8]])

    assert result.exit_code == 0
    assert f"Transaction ID: {team_fee.id}" in result.output
    assert "Competition: Liga Orange 2025" in result.output
    assert "Season: 2025 I" in result.output
    assert "Outstanding: R$ 50,00" in result.output


def test_transaction_update(cli_runner, db_path, team_fee, load_saved_state):
    """Test updating the payment marks the fee as paid."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", db_path, "transaction", "update", team_fee.id, "--paid", "150", "--notes", "pix"],
    )

    assert result.exit_code == 0
    assert "Updated transaction" in result.output
    assert "Status: Paid" in result.output

    txn = load_saved_state().find_transaction(team_fee.id)
    assert txn.amount_paid == Decimal("150")
    assert txn.notes == "pix"
    assert txn.round == "Rodada 1"


def test_transaction_update_unknown_id(cli_runner, db_path, team_fee):
    """Test updating a missing transaction changes nothing."""
    result = cli_runner.invoke(cli, ["--db-path", db_path, "transaction", "update", "zzz", "--paid", "1"])

    assert result.exit_code == 0
    assert "nothing updated" in result.output


def test_transaction_delete(cli_runner, db_path, team_fee, load_saved_state):
    """Test deleting after confirmation."""
    result = cli_runner.invoke(
        cli, ["--db-path", db_path, "transaction", "delete", team_fee.id[:8]], input="y\n"
    )

    assert result.exit_code == 0
    assert f"Deleted transaction {team_fee.id}" in result.output
    assert load_saved_state().transactions == ()


def test_transaction_delete_cancelled(cli_runner, db_path, team_fee, load_saved_state):
    """Test answering no keeps the transaction."""
    result = cli_runner.invoke(
        cli, ["--db-path", db_path, "transaction", "delete", team_fee.id], input="n\n"
    )

    assert "Deletion cancelled" in result.output
    assert len(load_saved_state().transactions) == 1


def test_transaction_delete_unknown_id(cli_runner, db_path):
    """Test deleting a missing transaction is not an error."""
    result = cli_runner.invoke(cli, ["--db-path", db_path, "transaction", "delete", "zzz", "--yes"])

    assert result.exit_code == 0
    assert "nothing deleted" in result.output


class TestLedger:
    """Tests for ledger listing."""

    def test_ledger_empty(self, cli_runner, db_path):
        result = cli_runner.invoke(cli, ["--db-path", db_path, "ledger", "list"])

        assert result.exit_code == 0
        assert "No transactions found" in result.output

    def test_ledger_with_filters(self, cli_runner, db_path, team_fee, transaction_service):
        transaction_service.create_transaction(
            date=date(2025, 4, 6),
            type=TransactionType.INCOME,
            entity_type=EntityType.TEAM,
            entity_id="2",
            amount_due=Decimal("150"),
            amount_paid=Decimal("0"),
        )

        result = cli_runner.invoke(
            cli, ["--db-path", db_path, "ledger", "list", "--month", "2025-03", "--team", "Orange Ballers"]
        )

        assert result.exit_code == 0
        assert "Found 1 transaction(s)" in result.output
        assert "Orange Ballers" in result.output
        assert "Black Mambas" not in result.output
        assert "Net: R$ 100,00" in result.output
        assert "To receive: R$ 50,00" in result.output

    def test_ledger_group_and_search(self, cli_runner, db_path, team_fee):
        result = cli_runner.invoke(
            cli, ["--db-path", db_path, "ledger", "list", "--group", "location"]
        )
        assert "No transactions found" in result.output

        result = cli_runner.invoke(
            cli, ["--db-path", db_path, "ledger", "list", "--search", "rodada", "--verbose"]
        )
        assert f"Transaction ID: {team_fee.id}" in result.output

    def test_ledger_bad_month(self, cli_runner, db_path):
        result = cli_runner.invoke(cli, ["--db-path", db_path, "ledger", "list", "--month", "March"])

        assert result.exit_code == 1
        assert "Could not parse month" in result.output

    def test_ledger_rounds(self, cli_runner, db_path, team_fee):
        result = cli_runner.invoke(cli, ["--db-path", db_path, "ledger", "rounds"])

        assert result.exit_code == 0
        assert result.output.strip() == "Rodada 1"

    def test_ledger_categories(self, cli_runner, db_path):
        result = cli_runner.invoke(cli, ["--db-path", db_path, "ledger", "categories"])

        assert result.exit_code == 0
        assert "COST: Aluguel Quadra" in result.output
        assert "EXPENSE: Premiação" in result.output


def test_add_rejects_minutes_past_the_hour(cli_runner, db_path, load_saved_state):
    """Test rented time like 1h90 is refused."""
    result = cli_runner.invoke(
        cli,
        ["--db-path", db_path, "add", "--entity-type", "cost", "--category", "Aluguel Quadra", "--hours", "1h90"],
    )

    assert result.exit_code == 1
    assert "minutes must be below 60" in result.output
    assert load_saved_state() is None


def test_add_reads_dotted_thousands(cli_runner, db_path, load_saved_state):
    """Test 1.500 is fifteen hundred reais."""
    result = cli_runner.invoke(cli, ["--db-path", db_path, "add", "--entity", "1", "--due", "1.500"])

    assert result.exit_code == 0
    assert load_saved_state().transactions[0].amount_due == Decimal("1500")


def test_add_without_competition_is_an_event(cli_runner, db_path, load_saved_state):
    """Test a fee outside any competition is stored as an event."""
    result = cli_runner.invoke(cli, ["--db-path", db_path, "add", "--entity", "1", "--due", "150"])

    assert result.exit_code == 0
    assert "Context: EVENT" in result.output
    assert load_saved_state().transactions[0].context_type is ContextType.EVENT


@pytest.mark.parametrize("reference", ["", "   "])
def test_transaction_delete_blank_id(cli_runner, db_path, team_fee, load_saved_state, reference):
    """Test a blank id never matches a transaction."""
    result = cli_runner.invoke(cli, ["--db-path", db_path, "transaction", "delete", reference, "--yes"])

    assert result.exit_code == 0
    assert "nothing deleted" in result.output
    assert len(load_saved_state().transactions) == 1
