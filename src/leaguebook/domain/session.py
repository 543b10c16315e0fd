"""In-memory league session.

The session owns the current ``LeagueState`` snapshot. Every change replaces
the snapshot and then saves it; a failed save is logged and the in-memory
state stays authoritative.
"""

from typing import TYPE_CHECKING, Optional

from leaguebook.domain.state import LeagueState
from leaguebook.logging_config import get_logger

if TYPE_CHECKING:
    from leaguebook.database.base import Storage

logger = get_logger()


class LeagueSession:
    """Holder of the current state, mirrored to storage after each change."""

    def __init__(self, storage: Optional["Storage"] = None, state: Optional[LeagueState] = None):
        """Initialize the session.

        Args:
            storage: Optional storage to load from and save to
            state: Optional initial state; when omitted the saved state is
                loaded, falling back to the default league
        """
        self.storage = storage
        if state is None and storage is not None:
            state = storage.load()
            if state is None:
                logger.info("No saved state found, starting from defaults")
        self._state = state if state is not None else LeagueState.default()

    @property
    def state(self) -> LeagueState:
        return self._state

    def apply(self, new_state: LeagueState) -> LeagueState:
        """Make ``new_state`` current and save it.

        Returns:
            The new current state
        """
        if new_state is self._state:
            return self._state
        self._state = new_state
        self.persist()
        return self._state

    def persist(self) -> bool:
        """Save the current state.

        Returns:
            True if saved, False if there is no storage or saving failed
        """
        if self.storage is None:
            return False
        try:
            self.storage.save(self._state)
        except Exception as e:
            logger.error(f"Failed to save state: {e}")
            return False
        logger.debug(f"Saved state with {len(self._state.transactions)} transactions")
        return True
