from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from toast.events.dtos import EventFieldsDTO
from toast.events.features.create_event.write_model import (
    EventCreateWriteModel,
    SqlEventCreateWriteModel,
)
from toast.events.urls import EVENTS_URL
from toast.identity.callers import AuthenticatedCaller
from toast.identity.dependencies import require_authenticated

router = APIRouter()


class EventCreateRequest(BaseModel):
    """Required fields are checked by the write model so that a missing one is a 400."""

    title: str | None = None
    date: str | None = None
    time: str | None = None
    location: str | None = None
    description: str | None = None
    category: str | None = None
    dietary_options: list[str] = []
    music_options: list[str] = []
    shared_media_link: str | None = None


class EventCreatedResponse(BaseModel):
    message: str
    event_id: UUID
    shared_media_link: str


def get_event_create_write_model() -> EventCreateWriteModel:
    """Dependency to get event creation write model instance."""
    return SqlEventCreateWriteModel()


@router.post(EVENTS_URL, response_model=EventCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    request: EventCreateRequest,
    host: AuthenticatedCaller = Depends(require_authenticated),
    write_model: EventCreateWriteModel = Depends(get_event_create_write_model),
) -> EventCreatedResponse:
    """
    Create an event hosted by the authenticated caller.
    Title, date, time and location are required.
    """
    event = await write_model.create_event(
        host=host,
        fields=EventFieldsDTO(
            title=request.title,
            date=request.date,
            time=request.time,
            location=request.location,
            description=request.description,
            category=request.category,
            dietary_options=request.dietary_options,
            music_options=request.music_options,
            shared_media_link=request.shared_media_link,
        ),
    )
    return EventCreatedResponse(
        message="Event created successfully",
        event_id=event.id,
        shared_media_link=event.shared_media_link,
    )
