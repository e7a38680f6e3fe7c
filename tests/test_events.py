"""Tests for the notification bus."""
from app.core.events import EventBus
from app.models.event import DebtSettled, ExpenseAdded, PersonRegistered
from app.services.settlement_service import SettlementService
from conftest import ALICE, BOB, FakeClock


def test_publish_assigns_sequence_and_time():
    clock = FakeClock(start=100)
    bus = EventBus(clock=clock)

    first = bus.publish(ExpenseAdded(id=0, label="a"))
    clock.advance(5)
    second = bus.publish(ExpenseAdded(id=1, label="b"))

    assert (first.sequence, first.emitted_at) == (0, 100)
    assert (second.sequence, second.emitted_at) == (1, 105)
    assert len(bus) == 2


def test_events_since():
    bus = EventBus(clock=FakeClock())
    for n in range(4):
        bus.publish(ExpenseAdded(id=n, label=str(n)))

    assert [e.id for e in bus.events()] == [0, 1, 2, 3]
    assert [e.id for e in bus.events(since=2)] == [2, 3]
    assert bus.events(since=10) == ()


def test_unsubscribe():
    bus = EventBus(clock=FakeClock())
    seen = []
    unsubscribe = bus.subscribe(seen.append)

    bus.publish(ExpenseAdded(id=0, label="a"))
    unsubscribe()
    bus.publish(ExpenseAdded(id=1, label="b"))

    assert [e.id for e in seen] == [0]


def test_failing_subscriber_does_not_block_others(store, people, received_events):
    def broken(event):
        raise RuntimeError("observer down")

    store.events.subscribe(broken)
    later = []
    store.events.subscribe(later.append)

    people.register(ALICE, "Alice")

    assert people.count() == 1
    assert len(received_events) == 1
    assert len(later) == 1


def test_events_follow_acceptance_order(store, people, ledger, received_events):
    people.register(ALICE, "Alice")
    ledger.add_expense("dinner", [ALICE, BOB], [100, 0], [50, 50])
    SettlementService.record_settlement(store, BOB, ALICE, 50)

    assert [type(e) for e in received_events] == [PersonRegistered, ExpenseAdded, DebtSettled]
    assert [e.sequence for e in received_events] == [0, 1, 2]
    assert list(store.events.events()) == received_events
