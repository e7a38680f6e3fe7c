"""
ExpenseRepository - the append-only expense ledger.

Core rules:
1. Validate the whole request before touching the store
2. Build the complete record, then append it in one step
3. id == number of records before the append; ids are 0, 1, 2... with no gaps
4. Records are never edited or removed
5. Participants need not be registered
"""

from typing import List, Sequence

import structlog

from app.db.store import LedgerStore
from app.models.base import Identity
from app.models.event import ExpenseAdded
from app.models.expense import Expense, ExpenseInfo
from app.utils.ledger_validation import (
    IdOutOfBoundsError,
    LedgerError,
    NoExpensesError,
    validate_expense,
)

logger = structlog.get_logger(__name__)


class ExpenseRepository:
    """Ledger operations over one ledger store."""

    def __init__(self, store: LedgerStore):
        self.store = store
        self.collection = store.expenses

    def add_expense(
        self,
        label: str,
        participants: Sequence[Identity],
        paid_amounts: Sequence[int],
        owed_amounts: Sequence[int],
    ) -> int:
        """
        Append a new expense and return its id.

        Raises EmptyLabelError, NoParticipantsError, LengthMismatchError,
        InvalidIdentityError or NegativeAmountError. A rejected call leaves
        the ledger and the event log exactly as they were.
        """
        with self.store.write_lock:
            try:
                validate_expense(label, participants, paid_amounts, owed_amounts)
            except LedgerError as exc:
                logger.warning("add_expense_rejected", label=label, code=exc.code.value)
                raise

            expense = Expense.build(
                expense_id=len(self.collection),
                label=label,
                timestamp=self.store.clock(),
                participants=participants,
                paid_amounts=paid_amounts,
                owed_amounts=owed_amounts,
            )
            self.collection.append(expense)
            self.store.events.publish(ExpenseAdded(id=expense.id, label=expense.label))

        logger.info(
            "expense_added",
            expense_id=expense.id,
            label=expense.label,
            participants=len(expense.participants),
        )
        return expense.id

    def count(self) -> int:
        return len(self.collection)

    def get_expense(self, expense_id: int) -> Expense:
        """Full record for expense_id; raises IdOutOfBoundsError."""
        count = len(self.collection)
        if expense_id < 0 or expense_id >= count:
            raise IdOutOfBoundsError(
                f"Expense id {expense_id} out of bounds", {"count": count}
            )
        return self.collection[expense_id]

    def get_basic_info(self, expense_id: int) -> ExpenseInfo:
        return self.get_expense(expense_id).info()

    def get_participants(self, expense_id: int) -> tuple[Identity, ...]:
        return self.get_expense(expense_id).participants

    def get_amount_paid(self, expense_id: int, identity: Identity) -> int:
        return self.get_expense(expense_id).paid_by(identity)

    def get_amount_owed(self, expense_id: int, identity: Identity) -> int:
        return self.get_expense(expense_id).owed_by(identity)

    def get_last_label(self) -> str:
        snapshot = self.snapshot()
        if not snapshot:
            raise NoExpensesError("No expenses recorded yet")
        return snapshot[-1].label

    def list_expenses(self) -> List[Expense]:
        return list(self.snapshot())

    def snapshot(self) -> tuple[Expense, ...]:
        """Consistent view of every record accepted so far."""
        return tuple(self.collection)
