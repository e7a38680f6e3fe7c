from fastapi import APIRouter, Depends, Query

from app.db.store import LedgerStore, get_store
from app.schemas.event import EventListResponse

router = APIRouter()

@router.get("", response_model=EventListResponse)
async def list_events(
    since: int = Query(0, ge=0, description="First sequence number to return"),
    store: LedgerStore = Depends(get_store)
):
    """Notification log, oldest first."""
    events = store.events.events(since)
    return EventListResponse(
        since=since,
        next=since + len(events),
        events=list(events)
    )
