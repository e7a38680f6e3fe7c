from typing import List
from pydantic import BaseModel

from app.models.event import AnyEvent


class EventListResponse(BaseModel):
    """Notifications from sequence `since` onwards; poll again with `next`."""
    since: int
    next: int
    events: List[AnyEvent]
