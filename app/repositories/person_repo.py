"""
PersonRepository - the participant registry.

Maps an identity to its display name and keeps the identities in
first-registration order. Registration happens once per identity; names can
be corrected afterwards with update_name.
"""

from typing import List

import structlog

from app.db.store import LedgerStore
from app.models.base import Identity
from app.models.event import NameUpdated, PersonRegistered
from app.models.person import Person, PersonLookup
from app.utils.ledger_validation import (
    AlreadyRegisteredError,
    LedgerError,
    NotRegisteredError,
    validate_identity,
    validate_name,
)

logger = structlog.get_logger(__name__)


class PersonRepository:
    """Registry operations over one ledger store."""

    def __init__(self, store: LedgerStore):
        self.store = store
        self.collection = store.people

    def register(self, identity: Identity, name: str) -> Person:
        """
        Register identity under name.

        Raises EmptyNameError, InvalidIdentityError or AlreadyRegisteredError;
        on failure nothing is stored and no event is emitted.
        """
        with self.store.write_lock:
            try:
                clean_name = validate_name(name)
                validate_identity(identity)
                if identity in self.collection:
                    raise AlreadyRegisteredError(
                        "Identity is already registered", {"identity": identity}
                    )
            except LedgerError as exc:
                logger.warning("register_rejected", identity=identity, code=exc.code.value)
                raise

            person = Person(name=clean_name, identity=identity, is_registered=True)
            self.collection[identity] = person
            self.store.people_order.append(identity)
            self.store.events.publish(PersonRegistered(identity=identity, name=clean_name))

        logger.info("person_registered", identity=identity, name=clean_name)
        return person

    def update_name(self, identity: Identity, new_name: str) -> Person:
        """Replace the display name of a registered identity."""
        with self.store.write_lock:
            try:
                current = self.collection.get(identity)
                if current is None:
                    raise NotRegisteredError(
                        "Identity is not registered", {"identity": identity}
                    )
                clean_name = validate_name(new_name)
            except LedgerError as exc:
                logger.warning("update_name_rejected", identity=identity, code=exc.code.value)
                raise

            person = current.renamed(clean_name)
            self.collection[identity] = person
            self.store.events.publish(NameUpdated(identity=identity, new_name=clean_name))

        logger.info("person_renamed", identity=identity, name=clean_name)
        return person

    def lookup(self, identity: Identity) -> PersonLookup:
        """Never fails; unknown identities read as an empty, unregistered record."""
        person = self.collection.get(identity)
        if person is None:
            return PersonLookup(name="", identity=identity, is_registered=False)
        return PersonLookup(person.name, person.identity, person.is_registered)

    def count(self) -> int:
        return len(self.store.people_order)

    def enumerate(self) -> tuple[Identity, ...]:
        """Registered identities in registration order."""
        return tuple(self.store.people_order)

    def list_people(self) -> List[Person]:
        """Every registered person, in registration order."""
        return [self.collection[identity] for identity in self.enumerate()]
