from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from toast.events.dtos import EventFieldsUpdateDTO
from toast.events.repository.write_models import EventUpdateWriteModel, SqlEventUpdateWriteModel
from toast.events.schemas import EventResponse
from toast.events.urls import EVENT_URL
from toast.identity.callers import AuthenticatedCaller
from toast.identity.dependencies import require_authenticated

router = APIRouter()


class EventFieldsUpdate(BaseModel):
    """Host-editable fields. Unknown keys in the body are ignored."""

    title: str | None = None
    date: str | None = None
    time: str | None = None
    location: str | None = None
    description: str | None = None
    category: str | None = None
    dietary_options: list[str] | None = None
    music_options: list[str] | None = None


def get_event_update_write_model() -> EventUpdateWriteModel:
    """Dependency to get event update write model instance."""
    return SqlEventUpdateWriteModel()


@router.put(EVENT_URL, response_model=EventResponse)
async def replace_event_fields(
    event_id: UUID,
    update: EventFieldsUpdate,
    host: AuthenticatedCaller = Depends(require_authenticated),
    write_model: EventUpdateWriteModel = Depends(get_event_update_write_model),
) -> EventResponse:
    """
    Replace the descriptive fields and poll options of an event.
    Only the host may do this. Responses and counters are left alone.
    """
    event = await write_model.replace_fields(
        event_id,
        host,
        EventFieldsUpdateDTO(
            title=update.title,
            date=update.date,
            time=update.time,
            location=update.location,
            description=update.description,
            category=update.category,
            dietary_options=update.dietary_options,
            music_options=update.music_options,
        ),
    )
    return EventResponse.model_validate(event)
