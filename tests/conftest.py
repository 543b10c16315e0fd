"""Shared pytest fixtures for leaguebook tests."""

import logging
import tempfile
import os
from datetime import date, datetime, UTC
from decimal import Decimal
import pytest

from leaguebook.database.factories import create_sqlite_storage
from leaguebook.domain.backup import BackupService
from leaguebook.domain.entities import (
    CategoryKind,
    EntityType,
    GENERIC_ENTITY_ID,
    Transaction,
    TransactionType,
)
from leaguebook.domain.registry import RegistryService
from leaguebook.domain.session import LeagueSession
from leaguebook.domain.summary import SummaryService
from leaguebook.domain.transaction import TransactionService
from leaguebook.logging_config import get_logger


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by CLI runs so they do not outlive the test."""
    yield
    logger = get_logger()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_storage():
    """Create a temporary SQLite storage for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    storage = create_sqlite_storage(database_path=db_path)
    # Store the path for tests that need it
    storage.database_path = db_path
    storage.connect()
    storage.initialize_schema()

    yield storage

    # Cleanup
    storage.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def session(temp_storage):
    """Create a LeagueSession backed by the temporary storage."""
    return LeagueSession(temp_storage)


@pytest.fixture
def transaction_service(session):
    """Create a TransactionService for the session."""
    return TransactionService(session)


@pytest.fixture
def registry_service(session):
    """Create a RegistryService for the session."""
    return RegistryService(session)


@pytest.fixture
def summary_service(session):
    """Create a SummaryService for the session."""
    return SummaryService(session)


@pytest.fixture
def backup_service(session):
    """Create a BackupService for the session."""
    return BackupService(session)


@pytest.fixture
def make_transaction():
    """Build Transaction entities directly, bypassing the service rules."""
    counter = {"n": 0}

    def _make(
        amount_due="0",
        amount_paid="0",
        type=TransactionType.INCOME,
        entity_type=EntityType.TEAM,
        entity_id="1",
        entity_name="Orange Ballers",
        category="Taxa Jogo",
        kind=CategoryKind.STANDARD,
        date=date(2025, 3, 1),
        **fields,
    ):
        counter["n"] += 1
        if not entity_type.is_registered:
            entity_id = GENERIC_ENTITY_ID
        return Transaction(
            id=fields.pop("id", f"t{counter['n']}"),
            date=date,
            type=type,
            category=category,
            entity_id=entity_id,
            entity_name=entity_name,
            entity_type=entity_type,
            amount_due=Decimal(amount_due),
            amount_paid=Decimal(amount_paid),
            created_at=fields.pop("created_at", datetime(2025, 1, 1, tzinfo=UTC)),
            kind=kind,
            **fields,
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def db_path(temp_storage):
    """Path of the temporary database, for CLI invocations."""
    return temp_storage.database_path


@pytest.fixture
def load_saved_state(db_path):
    """Read back what is saved in the temporary database."""

    def _load():
        storage = create_sqlite_storage(database_path=db_path)
        try:
            return storage.load()
        finally:
            storage.disconnect()

    return _load
