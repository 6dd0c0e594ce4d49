from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from toast.errors import EventNotFoundError
from toast.events.dtos import PublicEventDTO
from toast.events.features.get_event.router import get_event_read_model
from toast.events.repository.read_models import EventReadModel
from toast.events.urls import SHARE_EVENT_URL

router = APIRouter()


class SharedEventResponse(BaseModel):
    """Everything the public RSVP page needs. No responses, no host identity."""

    id: UUID
    title: str
    date: str
    time: str
    location: str
    description: str
    category: str
    attendee_count: int
    total_responses: int
    dietary_options: list[str]
    music_options: list[str]
    shared_media_link: str


@router.get(SHARE_EVENT_URL, response_model=SharedEventResponse)
async def get_shared_event(
    event_id: UUID,
    read_model: EventReadModel = Depends(get_event_read_model),
) -> SharedEventResponse:
    """Public view of an event for the share link. No authentication required."""
    event = await read_model.get_event(event_id)
    if event is None:
        raise EventNotFoundError(event_id)

    public = PublicEventDTO.from_event(event)
    return SharedEventResponse(
        id=public.id,
        title=public.title,
        date=public.date,
        time=public.time,
        location=public.location,
        description=public.description,
        category=public.category,
        attendee_count=public.attendee_count,
        total_responses=public.total_responses,
        dietary_options=public.dietary_options,
        music_options=public.music_options,
        shared_media_link=public.shared_media_link,
    )
