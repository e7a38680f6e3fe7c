"""
Event bus for ledger notifications.

Keeps the ordered log of every accepted notification and fans each one out
to in-process subscribers, synchronously and in acceptance order. Callers
publish while holding the store's write lock, so log order equals the order
in which mutations were accepted.
"""

from threading import RLock
from typing import Callable, List

import structlog

from app.models.base import Clock, unix_now
from app.models.event import LedgerEvent

logger = structlog.get_logger(__name__)

Subscriber = Callable[[LedgerEvent], None]


class EventBus:
    """Append-only notification log with subscriber fan-out."""

    def __init__(self, clock: Clock = unix_now):
        self._clock = clock
        self._log: List[LedgerEvent] = []
        self._subscribers: List[Subscriber] = []
        self._lock = RLock()

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """Register a subscriber; returns a callable that removes it."""
        with self._lock:
            self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            with self._lock:
                if subscriber in self._subscribers:
                    self._subscribers.remove(subscriber)

        return unsubscribe

    def publish(self, event: LedgerEvent) -> LedgerEvent:
        """Stamp the event with its sequence number and deliver it."""
        with self._lock:
            stamped = event.model_copy(
                update={"sequence": len(self._log), "emitted_at": self._clock()}
            )
            self._log.append(stamped)
            subscribers = list(self._subscribers)

        for subscriber in subscribers:
            try:
                subscriber(stamped)
            except Exception:
                # Observer failures never roll back an accepted mutation.
                logger.exception(
                    "event_subscriber_failed",
                    event_type=stamped.type.value,
                    sequence=stamped.sequence,
                )
        return stamped

    def events(self, since: int = 0) -> tuple[LedgerEvent, ...]:
        """Events with sequence >= since, in order."""
        return tuple(self._log[max(since, 0):])

    def __len__(self) -> int:
        return len(self._log)
