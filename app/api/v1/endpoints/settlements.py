from fastapi import APIRouter, Depends

from app.core.auth import get_caller_identity
from app.db.store import LedgerStore, get_store
from app.schemas.settlement import SettlementCreate, SettlementResponse
from app.services.settlement_service import SettlementService

router = APIRouter()

@router.post("", response_model=SettlementResponse)
async def create_settlement(
    settlement_in: SettlementCreate,
    caller: str = Depends(get_caller_identity),
    store: LedgerStore = Depends(get_store)
):
    event = SettlementService.record_settlement(
        store, caller, settlement_in.payee, settlement_in.amount
    )
    return SettlementResponse(
        sequence=event.sequence,
        payer=event.payer,
        payee=event.payee,
        amount=event.amount,
        emitted_at=event.emitted_at
    )
