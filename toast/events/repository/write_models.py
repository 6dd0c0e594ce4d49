"""Host edits to an existing event. Returns DTOs, never ORM models."""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from toast.config.database import async_session_manager
from toast.errors import EventNotFoundError, ForbiddenError
from toast.events.dtos import EventDTO, EventFieldsUpdateDTO, normalize_media_link
from toast.events.repository.orm_models import Event
from toast.events.repository.read_models import load_event_aggregate
from toast.events.repository.store_errors import translate_store_errors
from toast.identity.callers import AuthenticatedCaller

logger = logging.getLogger(__name__)


def ensure_host(host_id: str, caller: AuthenticatedCaller) -> None:
    if caller.id != host_id:
        raise ForbiddenError()


class EventUpdateWriteModel(ABC):
    async def replace_fields(
        self,
        event_id: UUID,
        caller: AuthenticatedCaller,
        update: EventFieldsUpdateDTO,
    ) -> EventDTO:
        """
        Overwrite the host-editable fields present in the update.
        Counters and responses are never touched.
        """
        changes = update.changes()
        return await self.apply_changes(event_id, caller, changes)

    async def set_media_link(
        self,
        event_id: UUID,
        caller: AuthenticatedCaller,
        link: str | None,
    ) -> EventDTO:
        """Update only the shared media link."""
        return await self.apply_changes(
            event_id, caller, {"shared_media_link": normalize_media_link(link)}
        )

    @abstractmethod
    async def apply_changes(
        self,
        event_id: UUID,
        caller: AuthenticatedCaller,
        changes: dict,
    ) -> EventDTO:
        """
        Write already-validated column values if the caller hosts the event.
        Raises EventNotFoundError or ForbiddenError without writing anything.
        """
        raise NotImplementedError


class SqlEventUpdateWriteModel(EventUpdateWriteModel):
    """SQL implementation of host edits."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def apply_changes(
        self,
        event_id: UUID,
        caller: AuthenticatedCaller,
        changes: dict,
    ) -> EventDTO:
        with translate_store_errors("apply_changes"):
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                event = await session.get(Event, event_id, with_for_update=True)
                if event is None:
                    raise EventNotFoundError(event_id)
                ensure_host(event.host_id, caller)

                for name, value in changes.items():
                    setattr(event, name, value)
                await session.flush()
                await session.refresh(event)

                logger.info(
                    "Host %s updated %s on event %s", caller.id, ", ".join(sorted(changes)), event_id
                )
                return await load_event_aggregate(session, event_id)
