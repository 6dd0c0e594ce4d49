from uuid import UUID

from fastapi import APIRouter, Depends

from toast.errors import EventNotFoundError
from toast.events.repository.read_models import EventReadModel, SqlEventReadModel
from toast.events.repository.write_models import ensure_host
from toast.events.schemas import EventResponse
from toast.events.urls import EVENT_URL
from toast.identity.callers import AuthenticatedCaller
from toast.identity.dependencies import require_authenticated

router = APIRouter()


def get_event_read_model() -> EventReadModel:
    """Dependency to get event read model instance."""
    return SqlEventReadModel()


@router.get(EVENT_URL, response_model=EventResponse)
async def get_event(
    event_id: UUID,
    host: AuthenticatedCaller = Depends(require_authenticated),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> EventResponse:
    """
    Get the full event, including every RSVP and poll response.
    Only the host sees this view; guests use the share link.
    """
    event = await read_model.get_event(event_id)
    if event is None:
        raise EventNotFoundError(event_id)
    ensure_host(event.host_id, host)
    return EventResponse.model_validate(event)
