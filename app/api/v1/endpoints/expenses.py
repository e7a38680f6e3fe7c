from typing import List
from fastapi import APIRouter, Depends

from app.db.store import LedgerStore, get_store
from app.models.expense import Expense
from app.repositories.expense_repo import ExpenseRepository
from app.schemas.expense import (
    AmountResponse,
    ExpenseCreate,
    ExpenseCreated,
    ExpenseInfoResponse,
    ExpenseResponse,
    LastLabelResponse,
    ParticipantShare,
)
from app.schemas.person import CountResponse

router = APIRouter()


def _to_response(expense: Expense) -> ExpenseResponse:
    return ExpenseResponse(
        id=expense.id,
        label=expense.label,
        timestamp=expense.timestamp,
        participants=[
            ParticipantShare(identity=identity, amount_paid=paid, amount_owed=owed)
            for identity, paid, owed in zip(
                expense.participants, expense.paid_list(), expense.owed_list()
            )
        ]
    )


@router.post("", response_model=ExpenseCreated)
async def add_expense(
    expense_in: ExpenseCreate,
    store: LedgerStore = Depends(get_store)
):
    """Append an expense to the ledger."""
    expense_id = ExpenseRepository(store).add_expense(
        expense_in.label,
        expense_in.participants,
        expense_in.paid_amounts,
        expense_in.owed_amounts
    )
    return ExpenseCreated(id=expense_id)


@router.get("", response_model=List[ExpenseResponse])
async def list_expenses(store: LedgerStore = Depends(get_store)):
    """Every expense in id order."""
    return [_to_response(expense) for expense in ExpenseRepository(store).list_expenses()]


@router.get("/count", response_model=CountResponse)
async def count_expenses(store: LedgerStore = Depends(get_store)):
    return CountResponse(count=ExpenseRepository(store).count())


@router.get("/last-label", response_model=LastLabelResponse)
async def get_last_label(store: LedgerStore = Depends(get_store)):
    return LastLabelResponse(label=ExpenseRepository(store).get_last_label())


@router.get("/{expense_id}", response_model=ExpenseResponse)
async def get_expense(expense_id: int, store: LedgerStore = Depends(get_store)):
    return _to_response(ExpenseRepository(store).get_expense(expense_id))


@router.get("/{expense_id}/info", response_model=ExpenseInfoResponse)
async def get_basic_info(expense_id: int, store: LedgerStore = Depends(get_store)):
    info = ExpenseRepository(store).get_basic_info(expense_id)
    return ExpenseInfoResponse(id=info.id, label=info.label, timestamp=info.timestamp)


@router.get("/{expense_id}/participants", response_model=List[str])
async def get_participants(expense_id: int, store: LedgerStore = Depends(get_store)):
    return list(ExpenseRepository(store).get_participants(expense_id))


@router.get("/{expense_id}/paid/{identity}", response_model=AmountResponse)
async def get_amount_paid(
    expense_id: int,
    identity: str,
    store: LedgerStore = Depends(get_store)
):
    amount = ExpenseRepository(store).get_amount_paid(expense_id, identity)
    return AmountResponse(expense_id=expense_id, identity=identity, amount=amount)


@router.get("/{expense_id}/owed/{identity}", response_model=AmountResponse)
async def get_amount_owed(
    expense_id: int,
    identity: str,
    store: LedgerStore = Depends(get_store)
):
    amount = ExpenseRepository(store).get_amount_owed(expense_id, identity)
    return AmountResponse(expense_id=expense_id, identity=identity, amount=amount)
