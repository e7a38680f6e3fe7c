import pytest
from fastapi.testclient import TestClient

from main import app
from app.core.config import settings
from app.db.store import LedgerStore, get_store
from app.repositories.expense_repo import ExpenseRepository
from app.repositories.person_repo import PersonRepository

ALICE = "0x1111111111111111111111111111111111111111"
BOB = "0x2222222222222222222222222222222222222222"
CAROL = "0x3333333333333333333333333333333333333333"
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


class FakeClock:
    """Deterministic clock: starts at a fixed instant and can be advanced."""

    def __init__(self, start: int = 1_700_000_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    """Fresh, empty ledger store."""
    return LedgerStore(clock=clock)


@pytest.fixture
def people(store):
    return PersonRepository(store)


@pytest.fixture
def ledger(store):
    return ExpenseRepository(store)


@pytest.fixture
def received_events(store):
    """Every notification delivered to an in-process subscriber."""
    received = []
    store.events.subscribe(received.append)
    return received


@pytest.fixture
def test_client(store):
    """Fixture for FastAPI test client bound to the test store."""
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


def as_caller(identity: str) -> dict:
    """Request headers identifying the caller."""
    return {settings.IDENTITY_HEADER: identity}
