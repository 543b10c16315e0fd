"""Tests for backup export and import."""

import json
import pytest
from datetime import date
from decimal import Decimal

from leaguebook.domain.backup import backup_filename
from leaguebook.domain.defaults import INITIAL_STAFF
from leaguebook.domain.entities import EntityType, TransactionType
from leaguebook.domain.errors import ImportRejectedError


@pytest.fixture
def team_fee(transaction_service):
    """One recorded team fee."""
    return transaction_service.create_transaction(
        date=date(2025, 3, 2),
        type=TransactionType.INCOME,
        entity_type=EntityType.TEAM,
        entity_id="1",
        amount_due=Decimal("150"),
        amount_paid=Decimal("100"),
        round="Rodada 1",
    )


def test_backup_filename():
    """Test backup files are named after the day they were taken."""
    assert backup_filename(date(2025, 3, 2)) == "leaguebook_backup_2025-03-02.json"


def test_export_to_directory(backup_service, team_fee, tmp_path):
    """Test exporting into a directory writes a dated, indented JSON file."""
    path = backup_service.export_backup(tmp_path, on=date(2025, 3, 2))

    assert path == tmp_path / "leaguebook_backup_2025-03-02.json"
    text = path.read_text(encoding="utf-8")
    assert text.startswith("{\n  ")
    document = json.loads(text)
    assert document["transactions"][0]["id"] == team_fee.id
    assert document["transactions"][0]["round"] == "Rodada 1"


def test_export_to_file_path(backup_service, team_fee, tmp_path):
    """Test an explicit file path is used as is."""
    target = tmp_path / "league.json"
    assert backup_service.export_backup(target) == target
    assert target.exists()


def test_export_then_import_restores_state(backup_service, transaction_service, team_fee, tmp_path):
    """Test importing an exported file brings the state back."""
    path = backup_service.export_backup(tmp_path)
    original = backup_service.session.state

    transaction_service.delete_transaction(team_fee.id)
    imported = backup_service.import_backup(path)

    # Creation times are kept to the millisecond
    assert [txn.id for txn in imported.transactions] == [team_fee.id]
    assert imported.transactions[0].amount_paid == Decimal("100")
    assert imported.teams == original.teams
    assert imported.competitions == original.competitions
    assert backup_service.session.state is imported


def test_import_replaces_instead_of_merging(backup_service, registry_service, team_fee, tmp_path):
    """Test absent collections come from the seed data, not the current state."""
    registry_service.create_staff("Ana Souza")
    source = tmp_path / "partial.json"
    source.write_text(json.dumps({"transactions": [], "teams": [{"id": "9", "name": "Red Wolves"}]}))

    state = backup_service.import_backup(source)

    assert state.transactions == ()
    assert [team.name for team in state.teams] == ["Red Wolves"]
    assert state.staff == INITIAL_STAFF


def test_import_backfills_legacy_rounds(backup_service, tmp_path):
    """Test records from before rounds existed get their round on import."""
    source = tmp_path / "old.json"
    source.write_text(
        json.dumps(
            {
                "transactions": [
                    {
                        "id": "1",
                        "date": "2024-11-03",
                        "type": "INCOME",
                        "category": "Taxa Jogo",
                        "entityId": "2",
                        "entityName": "Black Mambas",
                        "entityType": "TEAM",
                        "contextValue": "Final",
                        "amountDue": 100,
                        "amountPaid": 100,
                        "status": "PAID",
                    }
                ]
            }
        )
    )
    state = backup_service.import_backup(source)
    assert state.transactions[0].round == "Final"


@pytest.mark.parametrize(
    "content",
    [
        "{not json",
        json.dumps({"teams": []}),
        json.dumps([1, 2, 3]),
        json.dumps({"transactions": [{"id": "1"}]}),
    ],
)
def test_rejected_import_leaves_state_untouched(backup_service, team_fee, tmp_path, content):
    """Test unusable files are rejected without touching the current state."""
    source = tmp_path / "bad.json"
    source.write_text(content)
    before = backup_service.session.state

    with pytest.raises(ImportRejectedError):
        backup_service.import_backup(source)
    assert backup_service.session.state is before


def test_import_is_saved(backup_service, tmp_path, temp_storage):
    """Test an imported state is written to storage."""
    source = tmp_path / "league.json"
    source.write_text(json.dumps({"transactions": [], "teams": []}))

    backup_service.import_backup(source)
    assert temp_storage.load().teams == ()
