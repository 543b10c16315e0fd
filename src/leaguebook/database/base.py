"""Abstract storage interface."""

from abc import ABC, abstractmethod
from typing import Optional

# Import the state module directly to avoid a circular import through domain/__init__.py
from leaguebook.domain.state import LeagueState

STORAGE_KEY = "league_state_v1"


class Storage(ABC):
    """Abstract persistence interface for the league state."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the storage backend."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the storage backend."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    @abstractmethod
    def load(self) -> Optional[LeagueState]:
        """Load the saved state.

        Returns None when nothing was ever saved or the saved data can not be
        parsed.
        """
        pass

    @abstractmethod
    def save(self, state: LeagueState) -> None:
        """Persist the whole state, replacing what was saved before."""
        pass

    @abstractmethod
    def load_document(self) -> Optional[dict]:
        """Load the saved state as its raw JSON document."""
        pass

    @abstractmethod
    def save_document(self, document: dict) -> None:
        """Persist a raw JSON document as the saved state."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove the saved state."""
        pass
