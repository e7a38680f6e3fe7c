"""
Person model - a registered participant.

Invariants:
- At most one Person per identity
- identity never changes once created
- is_registered is never reset to False
- Renaming produces a new Person value; records are frozen
"""

from typing import NamedTuple

from app.models.base import Identity, LedgerModel


class Person(LedgerModel):
    name: str
    identity: Identity
    is_registered: bool = True

    def renamed(self, name: str) -> "Person":
        return self.model_copy(update={"name": name})


class PersonLookup(NamedTuple):
    """Result of a registry lookup; unknown identities read as unregistered."""
    name: str
    identity: Identity
    is_registered: bool
