from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from toast.errors import EventNotFoundError
from toast.events.dtos import RsvpStatus
from toast.events.features.get_event.router import get_event_read_model
from toast.events.features.list_attendees.projector import list_attendees
from toast.events.repository.read_models import EventReadModel
from toast.events.urls import ATTENDEES_URL
from toast.identity.callers import AuthenticatedCaller
from toast.identity.dependencies import require_authenticated

router = APIRouter()


class AttendeeResponse(BaseModel):
    participant_key: str
    display_name: str
    status: RsvpStatus


@router.get(ATTENDEES_URL, response_model=list[AttendeeResponse])
async def get_attendees(
    event_id: UUID,
    status: str | None = None,
    caller: AuthenticatedCaller = Depends(require_authenticated),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> list[AttendeeResponse]:
    """List who responded to an event. Pass ?status=going to list attendees only."""
    wanted = RsvpStatus.parse(status) if status is not None else None

    event = await read_model.get_event(event_id)
    if event is None:
        raise EventNotFoundError(event_id)

    return [
        AttendeeResponse(
            participant_key=attendee.participant_key,
            display_name=attendee.display_name,
            status=attendee.status,
        )
        for attendee in list_attendees(event, wanted)
    ]
