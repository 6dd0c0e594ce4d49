from datetime import datetime
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from toast.events.features.get_event.router import get_event_read_model
from toast.events.repository.read_models import EventReadModel
from toast.events.urls import EVENTS_URL
from toast.identity.callers import AuthenticatedCaller
from toast.identity.dependencies import require_authenticated

router = APIRouter()


class EventSummaryResponse(BaseModel):
    id: UUID
    title: str
    date: str
    time: str
    location: str
    category: str
    attendee_count: int
    created_at: datetime | None = None


@router.get(EVENTS_URL, response_model=list[EventSummaryResponse])
async def list_events(
    host: AuthenticatedCaller = Depends(require_authenticated),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> list[EventSummaryResponse]:
    """List the events hosted by the caller, newest first."""
    events = await read_model.list_events_for_host(host.id)
    return [
        EventSummaryResponse(
            id=event.id,
            title=event.title,
            date=event.date,
            time=event.time,
            location=event.location,
            category=event.category,
            attendee_count=event.attendee_count,
            created_at=event.created_at,
        )
        for event in events
    ]
