"""Write model for creating events.

Validates and normalizes the host's fields, then stores the event with no responses.
Returns DTOs instead of ORM models.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy.ext.asyncio import AsyncSession

from toast.config.database import async_session_manager
from toast.events.dtos import EventDTO, EventFieldsDTO
from toast.events.repository.orm_models import Event
from toast.events.repository.read_models import event_dto_from_rows
from toast.events.repository.store_errors import translate_store_errors
from toast.identity.callers import AuthenticatedCaller

logger = logging.getLogger(__name__)


class EventCreateWriteModel(ABC):
    """Abstract base class for event creation."""

    async def create_event(self, host: AuthenticatedCaller, fields: EventFieldsDTO) -> EventDTO:
        """Create a new event hosted by the caller. Returns DTO.

        Args:
            host: The authenticated caller who becomes the event's host
            fields: Descriptive fields, poll options and media link

        Raises:
            InvalidInputError: if title, date, time or location is missing
        """
        validated = fields.validated()
        event = await self.insert_event(host, validated)
        logger.info("Event %s created by host %s", event.id, host.id)
        return event

    @abstractmethod
    async def insert_event(self, host: AuthenticatedCaller, fields: EventFieldsDTO) -> EventDTO:
        """Persist an event from already-validated fields."""
        raise NotImplementedError


class SqlEventCreateWriteModel(EventCreateWriteModel):
    """SQL implementation of event creation."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def insert_event(self, host: AuthenticatedCaller, fields: EventFieldsDTO) -> EventDTO:
        with translate_store_errors("insert_event"):
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                event = Event(
                    title=fields.title,
                    date=fields.date,
                    time=fields.time,
                    location=fields.location,
                    description=fields.description,
                    category=fields.category,
                    host_id=host.id,
                    host_email=host.email,
                    dietary_options=fields.dietary_options,
                    music_options=fields.music_options,
                    shared_media_link=fields.shared_media_link,
                )
                session.add(event)
                await session.flush()  # Get event.uuid and server timestamps
                await session.refresh(event)

                return event_dto_from_rows(event)
