"""Response models shared by the event routers."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from toast.events.dtos import RsvpStatus


class RsvpEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    display_name: str
    status: RsvpStatus
    responded_at: datetime


class PollEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    dietary_choice: str
    music_choice: str
    display_name: str
    responded_at: datetime


class EventResponse(BaseModel):
    """Full event aggregate for the host."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    date: str
    time: str
    location: str
    description: str
    category: str
    host_id: str
    host_email: str | None = None
    created_at: datetime | None = None
    dietary_options: list[str]
    music_options: list[str]
    shared_media_link: str
    attendee_count: int
    total_responses: int
    rsvps: dict[str, RsvpEntryResponse]
    poll_responses: dict[str, PollEntryResponse]
