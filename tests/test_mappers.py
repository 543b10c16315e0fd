"""Tests for document mappers."""

import pytest
from datetime import date, datetime, UTC
from decimal import Decimal

from leaguebook.database.mappers import (
    migrate_transaction_document,
    state_to_document,
    state_to_domain,
    transaction_to_document,
    transaction_to_domain,
)
from leaguebook.domain.defaults import INITIAL_COMPETITIONS, INITIAL_TEAMS, INITIAL_WEEKS
from leaguebook.domain.entities import CategoryKind, EntityType, TransactionType
from leaguebook.domain.state import LeagueState
from leaguebook.domain.status import TransactionStatus


@pytest.fixture
def stored_transaction():
    """A transaction record as saved by the league's browser app."""
    return {
        "id": "1712345678901",
        "date": "2025-03-02",
        "type": "INCOME",
        "category": "Taxa Jogo",
        "entityId": "1",
        "entityName": "Orange Ballers",
        "entityType": "TEAM",
        "seasonId": "1",
        "weekId": "",
        "competitionId": "1",
        "round": "Rodada 1",
        "contextType": "COMPETITION",
        "amountDue": 150,
        "amountPaid": 100.5,
        "status": "PARTIAL",
        "createdAt": 1740873600000,
    }


class TestTransactionMapper:
    """Tests for transaction records."""

    def test_transaction_to_domain(self, stored_transaction):
        txn = transaction_to_domain(stored_transaction)

        assert txn.id == "1712345678901"
        assert txn.date == date(2025, 3, 2)
        assert txn.type is TransactionType.INCOME
        assert txn.entity_type is EntityType.TEAM
        assert txn.amount_due == Decimal("150")
        assert txn.amount_paid == Decimal("100.5")
        assert txn.week_id is None
        assert txn.kind is CategoryKind.STANDARD
        assert txn.created_at == datetime(2025, 3, 2, tzinfo=UTC)

    def test_stored_status_is_ignored(self, stored_transaction):
        stored_transaction["amountPaid"] = 150
        stored_transaction["status"] = "PARTIAL"

        assert transaction_to_domain(stored_transaction).status is TransactionStatus.PAID

    def test_legacy_round_comes_from_context_value(self, stored_transaction):
        del stored_transaction["round"]
        stored_transaction["contextValue"] = "Semifinal"

        assert transaction_to_domain(stored_transaction).round == "Semifinal"

    def test_round_wins_over_context_value(self, stored_transaction):
        stored_transaction["contextValue"] = "Semifinal"
        assert migrate_transaction_document(stored_transaction)["round"] == "Rodada 1"

    def test_venue_rental_kind_inferred_from_category(self, stored_transaction):
        stored_transaction.update(
            type="EXPENSE", category="Aluguel Quadra", entityType="COST", entityId="GENERIC"
        )
        assert transaction_to_domain(stored_transaction).kind is CategoryKind.VENUE_RENTAL

    def test_missing_created_at_uses_transaction_date(self, stored_transaction):
        del stored_transaction["createdAt"]
        assert transaction_to_domain(stored_transaction).created_at == datetime(2025, 3, 2, tzinfo=UTC)

    def test_negative_amount_is_malformed(self, stored_transaction):
        stored_transaction["amountDue"] = -10
        with pytest.raises(ValueError):
            transaction_to_domain(stored_transaction)

    def test_transaction_to_document(self, stored_transaction):
        document = transaction_to_document(transaction_to_domain(stored_transaction))

        assert document["amountDue"] == 150
        assert document["amountPaid"] == 100.5
        assert document["status"] == "PARTIAL"
        assert document["kind"] == "STANDARD"
        assert document["weekId"] == ""
        assert document["createdAt"] == 1740873600000
        assert "description" not in document


class TestStateMapper:
    """Tests for whole-state documents."""

    def test_missing_collections_fall_back_to_seed_data(self, stored_transaction):
        state = state_to_domain({"transactions": [stored_transaction], "teams": []})

        assert len(state.transactions) == 1
        assert state.teams == ()
        assert state.competitions == INITIAL_COMPETITIONS
        assert state.weeks == INITIAL_WEEKS

    def test_document_without_transactions_is_rejected(self):
        with pytest.raises(ValueError):
            state_to_domain({"teams": []})
        with pytest.raises(ValueError):
            state_to_domain(["not", "a", "document"])

    def test_malformed_record_is_rejected(self, stored_transaction):
        del stored_transaction["date"]
        with pytest.raises(ValueError):
            state_to_domain({"transactions": [stored_transaction]})

    def test_state_document_keeps_reference_data(self, stored_transaction):
        state = state_to_domain({"transactions": [stored_transaction]})
        document = state_to_document(state)

        assert [team["name"] for team in document["teams"]] == [team.name for team in INITIAL_TEAMS]
        assert document["competitions"][0]["seasonId"] == "1"
        assert document["staff"][0]["defaultRole"] == "Arbitro"
        assert state_to_domain(document) == state

    def test_empty_state(self):
        document = state_to_document(LeagueState.default())
        assert document["transactions"] == []
        assert state_to_domain(document) == LeagueState.default()
