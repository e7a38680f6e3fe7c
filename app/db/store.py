"""
In-memory ledger store.

The store is the single owner of all ledger state: registered people, the
append-only expense list and the notification log. Repositories are thin
views over one store, the same way a repository wraps one database handle.
Mutations run under ``write_lock`` so they form a single total order; reads
work on snapshots and never take the lock.
"""

from threading import RLock
from typing import Dict, List, Optional

import structlog

from app.core.events import EventBus
from app.models.base import Clock, Identity, unix_now
from app.models.expense import Expense
from app.models.person import Person

logger = structlog.get_logger(__name__)


class LedgerStore:
    """Registry collections, expense collection and event bus for one ledger."""

    def __init__(self, clock: Clock = unix_now):
        self.clock = clock
        self.write_lock = RLock()
        self.people: Dict[Identity, Person] = {}
        self.people_order: List[Identity] = []
        self.expenses: List[Expense] = []
        self.events = EventBus(clock=clock)


class StoreHolder:
    """Process-wide store handle, opened at app startup."""

    store: Optional[LedgerStore] = None

ledger_db = StoreHolder()

def open_store(clock: Clock = unix_now) -> LedgerStore:
    """Create the process store if it is not open yet."""
    if ledger_db.store is None:
        ledger_db.store = LedgerStore(clock=clock)
        logger.info("ledger_store_opened")
    return ledger_db.store

def close_store() -> None:
    ledger_db.store = None
    logger.info("ledger_store_closed")

def get_store() -> LedgerStore:
    """Get the store instance (FastAPI dependency)."""
    return open_store()
