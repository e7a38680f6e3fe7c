"""
Notification events emitted after a successful mutation.

Each event carries a gap-free sequence number assigned by the event bus, so
subscribers and pollers can observe the order in which mutations were
accepted.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field

from app.models.base import Identity, LedgerModel


class EventType(str, Enum):
    PERSON_REGISTERED = "PersonRegistered"
    NAME_UPDATED = "NameUpdated"
    EXPENSE_ADDED = "ExpenseAdded"
    DEBT_SETTLED = "DebtSettled"


class LedgerEvent(LedgerModel):
    sequence: int = -1
    emitted_at: int = 0


class PersonRegistered(LedgerEvent):
    type: Literal[EventType.PERSON_REGISTERED] = EventType.PERSON_REGISTERED
    identity: Identity
    name: str


class NameUpdated(LedgerEvent):
    type: Literal[EventType.NAME_UPDATED] = EventType.NAME_UPDATED
    identity: Identity
    new_name: str


class ExpenseAdded(LedgerEvent):
    type: Literal[EventType.EXPENSE_ADDED] = EventType.EXPENSE_ADDED
    id: int
    label: str


class DebtSettled(LedgerEvent):
    type: Literal[EventType.DEBT_SETTLED] = EventType.DEBT_SETTLED
    payer: Identity
    payee: Identity
    amount: int


AnyEvent = Annotated[
    Union[PersonRegistered, NameUpdated, ExpenseAdded, DebtSettled],
    Field(discriminator="type"),
]
