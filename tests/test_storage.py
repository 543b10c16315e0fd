"""Tests for SQLite storage and the league session."""

import logging
from datetime import date
from decimal import Decimal

from leaguebook.database.models import StateBlob
from leaguebook.domain.entities import EntityType, TransactionType
from leaguebook.domain.session import LeagueSession
from leaguebook.domain.state import LeagueState
from leaguebook.domain.transaction import TransactionService


class FailingStorage:
    """Storage stand-in whose saves always fail."""

    def load(self):
        return None

    def save(self, state):
        raise OSError("disk full")


def test_empty_storage_loads_nothing(temp_storage):
    """Test a fresh database has no saved state."""
    assert temp_storage.load() is None
    assert temp_storage.load_document() is None


def test_save_and_load_round_trip(temp_storage, make_transaction):
    """Test the whole state survives a save and load."""
    state = LeagueState.default().add_transaction(make_transaction(amount_due="150", amount_paid="100"))
    temp_storage.save(state)

    assert temp_storage.load() == state


def test_save_replaces_previous_state(temp_storage, make_transaction):
    """Test saving twice keeps only the latest state."""
    temp_storage.save(LeagueState.default().add_transaction(make_transaction()))
    temp_storage.save(LeagueState.default())

    session = temp_storage._get_session()
    assert session.query(StateBlob).count() == 1
    assert temp_storage.load().transactions == ()


def test_unreadable_saved_state_is_ignored(temp_storage, caplog):
    """Test a corrupt payload is logged and treated as no saved state."""
    session = temp_storage._get_session()
    session.add(StateBlob(key=temp_storage.key, payload="{not json"))
    session.commit()

    with caplog.at_level(logging.WARNING, logger="leaguebook"):
        assert temp_storage.load() is None
    assert "unreadable saved state" in caplog.text


def test_clear(temp_storage):
    """Test clearing removes the saved state."""
    temp_storage.save(LeagueState.default())
    temp_storage.clear()
    assert temp_storage.load() is None


class TestLeagueSession:
    """Tests for the session that mirrors state to storage."""

    def test_new_session_starts_from_defaults(self, temp_storage):
        session = LeagueSession(temp_storage)
        assert session.state == LeagueState.default()

    def test_session_loads_saved_state(self, temp_storage, make_transaction):
        saved = LeagueState.default().add_transaction(make_transaction())
        temp_storage.save(saved)

        assert LeagueSession(temp_storage).state == saved

    def test_session_without_storage(self):
        session = LeagueSession()
        assert session.persist() is False
        assert session.state.teams

    def test_failed_save_is_logged_and_state_kept(self, caplog):
        session = LeagueSession(FailingStorage())
        service = TransactionService(session)

        with caplog.at_level(logging.ERROR, logger="leaguebook"):
            txn = service.create_transaction(
                date=date(2025, 3, 2),
                type=TransactionType.INCOME,
                entity_type=EntityType.TEAM,
                entity_id="1",
                amount_due=Decimal("150"),
                amount_paid=Decimal("0"),
            )

        assert "Failed to save state: disk full" in caplog.text
        assert session.state.find_transaction(txn.id) == txn
