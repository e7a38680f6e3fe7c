"""
Expense model - one immutable record in the append-only ledger.

Design principles:
- id is the ledger count at creation time
- Immutable once created; never edited or deleted
- All amounts in integer smallest currency units
- amount_paid / amount_owed are keyed by identity; an identity listed
  twice in participants keeps only its last paid/owed values
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple, Sequence, Tuple

from pydantic import field_serializer, field_validator

from app.models.base import Identity, LedgerModel


class ExpenseInfo(NamedTuple):
    id: int
    label: str
    timestamp: int


class Expense(LedgerModel):
    id: int
    label: str
    timestamp: int
    participants: Tuple[Identity, ...]
    amount_paid: Mapping[Identity, int]
    amount_owed: Mapping[Identity, int]

    @field_validator("amount_paid", "amount_owed", mode="after")
    @classmethod
    def _read_only_amounts(cls, amounts: Mapping[Identity, int]) -> Mapping[Identity, int]:
        return MappingProxyType(dict(amounts))

    @field_serializer("amount_paid", "amount_owed")
    def _serialize_amounts(self, amounts: Mapping[Identity, int]) -> dict:
        return dict(amounts)

    @classmethod
    def build(
        cls,
        expense_id: int,
        label: str,
        timestamp: int,
        participants: Sequence[Identity],
        paid_amounts: Sequence[int],
        owed_amounts: Sequence[int],
    ) -> "Expense":
        """Assemble a record; later duplicate participants overwrite earlier amounts."""
        paid: dict[Identity, int] = {}
        owed: dict[Identity, int] = {}
        for identity, paid_amount, owed_amount in zip(participants, paid_amounts, owed_amounts):
            paid[identity] = paid_amount
            owed[identity] = owed_amount

        return cls(
            id=expense_id,
            label=label,
            timestamp=timestamp,
            participants=tuple(participants),
            amount_paid=paid,
            amount_owed=owed,
        )

    def info(self) -> ExpenseInfo:
        return ExpenseInfo(self.id, self.label, self.timestamp)

    def paid_by(self, identity: Identity) -> int:
        return self.amount_paid.get(identity, 0)

    def owed_by(self, identity: Identity) -> int:
        return self.amount_owed.get(identity, 0)

    def net_for(self, identity: Identity) -> int:
        """Paid minus owed for one identity; zero when it is not a participant."""
        return self.paid_by(identity) - self.owed_by(identity)

    def paid_list(self) -> list[int]:
        """Paid amounts read back positionally, one per participants entry."""
        return [self.paid_by(identity) for identity in self.participants]

    def owed_list(self) -> list[int]:
        return [self.owed_by(identity) for identity in self.participants]
