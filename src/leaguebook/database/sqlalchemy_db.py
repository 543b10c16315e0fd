"""Generic SQLAlchemy storage implementation."""

import json
from datetime import datetime, UTC
from typing import Optional
from sqlalchemy.orm import Session

from leaguebook.database.base import Storage, STORAGE_KEY
from leaguebook.database.models import StateBlob, create_session_factory
from leaguebook.database.mappers import state_to_document, state_to_domain
from leaguebook.domain.state import LeagueState
from leaguebook.logging_config import get_logger

logger = get_logger()


class SQLAlchemyStorage(Storage):
    """SQLAlchemy-based implementation of the Storage interface.

    The whole state is kept as a single JSON payload under ``key``.
    """

    def __init__(self, database_url: str, key: str = STORAGE_KEY):
        """Initialize SQLAlchemy storage.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
            key: Key the state payload is stored under
        """
        self.database_url = database_url
        self.key = key
        self.session_factory = create_session_factory(database_url)
        self._session: Optional[Session] = None

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        # Schema is created automatically by create_session_factory
        pass

    def load_document(self) -> Optional[dict]:
        """Load the saved state as its raw JSON document."""
        session = self._get_session()
        blob = session.query(StateBlob).filter(StateBlob.key == self.key).first()
        if blob is None:
            return None
        return json.loads(blob.payload)

    def load(self) -> Optional[LeagueState]:
        """Load the saved state, or None if absent or unreadable."""
        try:
            document = self.load_document()
            if document is None:
                return None
            return state_to_domain(document)
        except ValueError as e:
            logger.warning(f"Ignoring unreadable saved state: {e}")
            return None

    def save_document(self, document: dict) -> None:
        """Persist a raw JSON document as the saved state."""
        session = self._get_session()
        payload = json.dumps(document, ensure_ascii=False)
        blob = session.query(StateBlob).filter(StateBlob.key == self.key).first()
        try:
            if blob is None:
                session.add(StateBlob(key=self.key, payload=payload))
            else:
                blob.payload = payload
                blob.saved_at = datetime.now(UTC)
            session.commit()
        except Exception:
            session.rollback()
            raise

    def save(self, state: LeagueState) -> None:
        """Persist the whole state."""
        self.save_document(state_to_document(state))

    def clear(self) -> None:
        """Remove the saved state."""
        session = self._get_session()
        session.query(StateBlob).filter(StateBlob.key == self.key).delete()
        session.commit()
