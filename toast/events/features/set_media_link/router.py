from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from toast.events.features.replace_fields.router import get_event_update_write_model
from toast.events.repository.write_models import EventUpdateWriteModel
from toast.events.urls import EVENT_MEDIA_LINK_URL
from toast.identity.callers import AuthenticatedCaller
from toast.identity.dependencies import require_authenticated

router = APIRouter()


class MediaLinkUpdate(BaseModel):
    shared_media_link: str | None = None


class MediaLinkResponse(BaseModel):
    message: str
    shared_media_link: str


@router.patch(EVENT_MEDIA_LINK_URL, response_model=MediaLinkResponse)
async def set_media_link(
    event_id: UUID,
    update: MediaLinkUpdate,
    host: AuthenticatedCaller = Depends(require_authenticated),
    write_model: EventUpdateWriteModel = Depends(get_event_update_write_model),
) -> MediaLinkResponse:
    """Set or clear the shared media link of an event. Host only."""
    event = await write_model.set_media_link(event_id, host, update.shared_media_link)
    return MediaLinkResponse(
        message="Media link updated successfully",
        shared_media_link=event.shared_media_link,
    )
