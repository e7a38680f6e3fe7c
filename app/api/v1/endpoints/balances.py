from typing import List
from fastapi import APIRouter, Depends

from app.db.store import LedgerStore, get_store
from app.schemas.balance import NetBalanceResponse, PersonBalanceResponse
from app.services.balance_service import BalanceService

router = APIRouter()

@router.get("", response_model=List[PersonBalanceResponse])
async def get_people_balances(store: LedgerStore = Depends(get_store)):
    """Net balance of every registered person"""
    return BalanceService.people_balances(store)

@router.get("/{identity}", response_model=NetBalanceResponse)
async def get_balance(identity: str, store: LedgerStore = Depends(get_store)):
    """Net balance for any identity, registered or not"""
    return NetBalanceResponse(
        identity=identity,
        net_balance=BalanceService.net_balance(store, identity)
    )
