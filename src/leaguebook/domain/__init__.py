"""Domain layer for leaguebook application."""

from leaguebook.domain.session import LeagueSession
from leaguebook.domain.transaction import TransactionService
from leaguebook.domain.registry import RegistryService
from leaguebook.domain.summary import SummaryService
from leaguebook.domain.backup import BackupService

__all__ = [
    "LeagueSession",
    "TransactionService",
    "RegistryService",
    "SummaryService",
    "BackupService",
]
