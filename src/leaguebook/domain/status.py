"""Payment status classification.

A transaction's status is a pure function of its amount due and amount paid.
It is never stored on the domain object, so edits to the amounts can not leave
a stale status behind.
"""

from decimal import Decimal
from enum import Enum


class TransactionStatus(str, Enum):
    """Payment status of a single transaction."""

    PENDING = "PENDING"
    PARTIAL = "PARTIAL"
    PAID = "PAID"


class Settlement(str, Enum):
    """Display status, splitting PAID into exact and excess payments."""

    PENDING = "PENDING"
    PARTIAL = "PARTIAL"
    PAID = "PAID"
    EXCESS = "EXCESS"


STATUS_LABELS = {
    Settlement.PENDING: "Pending",
    Settlement.PARTIAL: "Partial",
    Settlement.PAID: "Paid",
    Settlement.EXCESS: "Surplus",
}


def classify(amount_due: Decimal, amount_paid: Decimal) -> TransactionStatus:
    """Classify a (due, paid) pair.

    Args:
        amount_due: Money obligated
        amount_paid: Money actually transferred

    Returns:
        PAID when something was due and it was fully covered, PARTIAL when a
        positive payment falls short of the amount due, PENDING otherwise.

    Note:
        A payment against a zero amount due is PENDING. Nothing is due, so
        the PAID branch never matches and the payment is not "short" either.
    """
    if amount_due > 0 and amount_paid >= amount_due:
        return TransactionStatus.PAID
    if amount_paid > 0 and amount_paid < amount_due:
        return TransactionStatus.PARTIAL
    return TransactionStatus.PENDING


def settle(amount_due: Decimal, amount_paid: Decimal) -> Settlement:
    """Derive the display status, reporting overpayments as EXCESS."""
    status = classify(amount_due, amount_paid)
    if status is TransactionStatus.PAID and amount_paid > amount_due:
        return Settlement.EXCESS
    return Settlement(status.value)


def outstanding(amount_due: Decimal, amount_paid: Decimal) -> Decimal:
    """Return the unpaid portion, floored at zero."""
    return max(Decimal("0"), amount_due - amount_paid)
