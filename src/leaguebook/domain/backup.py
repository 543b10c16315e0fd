"""Backup export and import domain service."""

import json
from datetime import date
from pathlib import Path
from typing import Optional

from leaguebook.database.mappers import state_to_document, state_to_domain
from leaguebook.domain.errors import ImportRejectedError
from leaguebook.domain.session import LeagueSession
from leaguebook.domain.state import LeagueState
from leaguebook.logging_config import get_logger

logger = get_logger()

BACKUP_PREFIX = "leaguebook_backup_"


def backup_filename(on: Optional[date] = None) -> str:
    """File name for a backup taken on a given day (today by default)."""
    return f"{BACKUP_PREFIX}{(on or date.today()).isoformat()}.json"


class BackupService:
    """Service for exporting and importing the whole league state."""

    def __init__(self, session: LeagueSession):
        """Initialize backup service.

        Args:
            session: LeagueSession holding the current state
        """
        self.session = session

    def export_backup(self, destination: Path | str, on: Optional[date] = None) -> Path:
        """Write the current state as indented JSON.

        Args:
            destination: Directory to write a dated backup file into, or an
                explicit file path
            on: Date embedded in the file name (defaults to today)

        Returns:
            Path of the written file
        """
        destination = Path(destination)
        if destination.is_dir():
            destination = destination / backup_filename(on)

        document = state_to_document(self.session.state)
        destination.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.info(f"Exported {len(self.session.state.transactions)} transactions to {destination}")
        return destination

    def import_backup(self, source: Path | str) -> LeagueState:
        """Replace the whole state with the contents of a backup file.

        Nothing is merged: reference collections missing from the file fall
        back to the default seed data, not to what is currently loaded.

        Args:
            source: Path of a JSON backup

        Returns:
            The imported state, now current

        Raises:
            ImportRejectedError: If the file is not valid JSON or holds no
                transactions collection; the current state is left untouched
        """
        source = Path(source)
        try:
            document = json.loads(source.read_text(encoding="utf-8"))
            state = state_to_domain(document)
        except ValueError as e:
            logger.warning(f"Rejected backup {source}: {e}")
            raise ImportRejectedError(f"Invalid backup file '{source}': {e}") from e

        self.session.apply(state)
        logger.info(f"Imported {len(state.transactions)} transactions from {source}")
        return state
