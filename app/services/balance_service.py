from typing import List

from app.db.store import LedgerStore
from app.models.base import Identity
from app.repositories.expense_repo import ExpenseRepository
from app.repositories.person_repo import PersonRepository
from app.schemas.balance import PersonBalanceResponse


class BalanceService:
    @staticmethod
    def net_balance(store: LedgerStore, identity: Identity) -> int:
        """
        Net position of identity across the whole ledger.

        Sums paid minus owed over every expense, recomputed from the full
        history on each call. Positive = others owe this identity,
        negative = this identity owes others. Never fails; identities that
        appear nowhere get 0.
        """
        net = 0
        for expense in ExpenseRepository(store).snapshot():
            net += expense.net_for(identity)
        return net

    @staticmethod
    def people_balances(store: LedgerStore) -> List[PersonBalanceResponse]:
        """Name, identity and net balance of every registered person.

        All rows are computed from one ledger snapshot in a single pass.
        """
        people = PersonRepository(store).list_people()
        totals = {person.identity: 0 for person in people}
        for expense in ExpenseRepository(store).snapshot():
            for identity in expense.amount_paid:
                if identity in totals:
                    totals[identity] += expense.net_for(identity)

        return [
            PersonBalanceResponse(
                name=person.name,
                identity=person.identity,
                net_balance=totals[person.identity],
            )
            for person in people
        ]
