import pytest

from app.repositories.expense_repo import ExpenseRepository
from app.services.balance_service import BalanceService
from app.services.settlement_service import SettlementService
from conftest import ALICE, BOB, CAROL


def test_unknown_identity_has_zero_balance(store, ledger):
    ledger.add_expense("dinner", [ALICE, BOB], [100, 0], [50, 50])

    assert BalanceService.net_balance(store, CAROL) == 0


def test_empty_ledger_balance(store):
    assert BalanceService.net_balance(store, ALICE) == 0


def test_simple_split(store, ledger):
    # Alice paid 100, both owe 50
    ledger.add_expense("dinner", [ALICE, BOB], [100, 0], [50, 50])

    assert BalanceService.net_balance(store, ALICE) == 50
    assert BalanceService.net_balance(store, BOB) == -50


def test_unbalanced_expense_is_accepted(store, ledger):
    """Paid totals need not equal owed totals."""
    ledger.add_expense("gift", [ALICE, BOB], [100, 0], [0, 0])

    alice = BalanceService.net_balance(store, ALICE)
    bob = BalanceService.net_balance(store, BOB)
    assert alice == 100
    assert bob == 0
    assert alice + bob == 100


def test_balanced_expenses_sum_to_zero(store, ledger):
    ledger.add_expense("hotel", [ALICE, BOB, CAROL], [300, 0, 0], [100, 100, 100])
    ledger.add_expense("fuel", [BOB, CAROL], [60, 0], [30, 30])
    ledger.add_expense("museum", [CAROL, ALICE], [40, 0], [20, 20])

    balances = {who: BalanceService.net_balance(store, who) for who in (ALICE, BOB, CAROL)}

    assert balances == {ALICE: 180, BOB: -70, CAROL: -110}
    assert sum(balances.values()) == 0


def test_balance_matches_per_expense_sum(store, ledger):
    ledger.add_expense("a", [ALICE, BOB], [70, 30], [50, 50])
    ledger.add_expense("b", [BOB], [10], [25])
    ledger.add_expense("c", [ALICE, ALICE], [5, 8], [1, 2])

    expected = sum(
        ledger.get_amount_paid(i, ALICE) - ledger.get_amount_owed(i, ALICE)
        for i in range(ledger.count())
    )
    assert BalanceService.net_balance(store, ALICE) == expected == 26


@pytest.mark.parametrize("amount", [1, 50, 10_000])
def test_settlement_never_changes_balances(store, ledger, amount):
    ledger.add_expense("dinner", [ALICE, BOB], [100, 0], [50, 50])
    before = (BalanceService.net_balance(store, ALICE), BalanceService.net_balance(store, BOB))

    SettlementService.record_settlement(store, BOB, ALICE, amount)
    after_settlement = (BalanceService.net_balance(store, ALICE), BalanceService.net_balance(store, BOB))

    ledger.add_expense("coffee", [BOB, ALICE], [10, 0], [5, 5])
    SettlementService.record_settlement(store, ALICE, BOB, amount)

    assert after_settlement == before
    assert BalanceService.net_balance(store, ALICE) == 45
    assert BalanceService.net_balance(store, BOB) == -45


def test_people_balances(store, people, ledger):
    people.register(BOB, "Bob")
    people.register(ALICE, "Alice")
    ledger.add_expense("dinner", [ALICE, BOB, CAROL], [90, 0, 0], [30, 30, 30])

    rows = BalanceService.people_balances(store)

    # Carol never registered, so she is not listed
    assert [(r.name, r.identity, r.net_balance) for r in rows] == [
        ("Bob", BOB, -30),
        ("Alice", ALICE, 60),
    ]


def test_people_balances_uses_one_snapshot(store, people, ledger, monkeypatch):
    people.register(ALICE, "Alice")
    people.register(BOB, "Bob")
    people.register(CAROL, "Carol")
    ledger.add_expense("dinner", [ALICE, BOB], [100, 0], [50, 50])
    ledger.add_expense("cab", [CAROL, ALICE], [30, 0], [15, 15])

    calls = []
    original = ExpenseRepository.snapshot

    def counting_snapshot(self):
        calls.append(1)
        return original(self)

    monkeypatch.setattr(ExpenseRepository, "snapshot", counting_snapshot)

    rows = BalanceService.people_balances(store)

    assert len(calls) == 1
    assert {r.identity: r.net_balance for r in rows} == {ALICE: 35, BOB: -50, CAROL: 15}
