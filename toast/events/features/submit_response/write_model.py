"""Write model for RSVP and poll submissions.

Every participant owns one RSVP record and one poll record per event, so concurrent
submissions from different participants never write the same row. Counters are
recomputed by scanning those records inside the same transaction as the upsert.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Collection
from functools import partial
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from toast.config.database import async_session_manager
from toast.config.settings import settings
from toast.errors import ConflictError, EventNotFoundError, InvalidInputError, StoreUnavailableError
from toast.events.dtos import (
    PollEntryDTO,
    ResponseKind,
    ResponsePayload,
    RsvpEntryDTO,
    RsvpStatus,
    UpdatedCountersDTO,
)
from toast.events.repository.orm_models import Event, PollResponse, RsvpResponse
from toast.events.repository.store_errors import translate_store_errors

logger = logging.getLogger(__name__)

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class ResponseWriteModel(ABC):
    """Merges one participant's responses into an event."""

    max_attempts: int = settings.RESPONSE_WRITE_MAX_ATTEMPTS

    async def submit_response(
        self,
        event_id: UUID,
        participant_key: str,
        payload: ResponsePayload,
        kinds: Collection[ResponseKind],
    ) -> UpdatedCountersDTO:
        """
        Validate the payload, then upsert the participant's entries.
        Nothing is written when validation fails.
        A write rejected as concurrent is retried up to max_attempts times.
        """
        if not kinds:
            raise InvalidInputError("Nothing to submit")

        rsvp = RsvpEntryDTO.from_payload(payload) if ResponseKind.RSVP in kinds else None
        poll = PollEntryDTO.from_payload(payload) if ResponseKind.POLL in kinds else None

        for attempt in range(1, self.max_attempts + 1):
            try:
                counters = await self.store_response(event_id, participant_key, rsvp=rsvp, poll=poll)
            except ConflictError:
                logger.warning(
                    "Concurrent write on event %s (attempt %d of %d)",
                    event_id,
                    attempt,
                    self.max_attempts,
                )
                continue

            logger.info(
                "Stored %s for %s on event %s",
                "+".join(sorted(kind.value for kind in kinds)),
                participant_key,
                event_id,
            )
            return counters

        raise StoreUnavailableError()

    @abstractmethod
    async def store_response(
        self,
        event_id: UUID,
        participant_key: str,
        rsvp: RsvpEntryDTO | None = None,
        poll: PollEntryDTO | None = None,
    ) -> UpdatedCountersDTO:
        """
        Replace the participant's entries and recompute counters as one atomic write.
        Raises EventNotFoundError if the event does not exist.
        """
        raise NotImplementedError


class SqlResponseWriteModel(ResponseWriteModel):
    """SQL implementation using INSERT ... ON CONFLICT DO UPDATE per participant record."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def store_response(
        self,
        event_id: UUID,
        participant_key: str,
        rsvp: RsvpEntryDTO | None = None,
        poll: PollEntryDTO | None = None,
    ) -> UpdatedCountersDTO:
        with translate_store_errors("store_response"):
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                if await session.get(Event, event_id) is None:
                    raise EventNotFoundError(event_id)

                if rsvp is not None:
                    await self._upsert(
                        session,
                        RsvpResponse,
                        event_id=event_id,
                        participant_key=participant_key,
                        display_name=rsvp.display_name,
                        status=rsvp.status,
                        responded_at=rsvp.responded_at,
                    )
                if poll is not None:
                    await self._upsert(
                        session,
                        PollResponse,
                        event_id=event_id,
                        participant_key=participant_key,
                        display_name=poll.display_name,
                        dietary_choice=poll.dietary_choice,
                        music_choice=poll.music_choice,
                        responded_at=poll.responded_at,
                    )

                return await self._count(session, event_id)

    async def _upsert(self, session: AsyncSession, model, **values) -> None:
        """Insert the participant's record or replace every field of the existing one."""
        connection = await session.connection()
        dialect = connection.dialect.name
        try:
            insert = _UPSERT_INSERTS[dialect]
        except KeyError:
            raise RuntimeError(f"Upserts are not supported on {dialect}")

        stmt = insert(model).values(**values)
        replaced = {
            name: stmt.excluded[name]
            for name in values
            if name not in ("event_id", "participant_key")
        }
        replaced["updated_at"] = func.current_timestamp()
        stmt = stmt.on_conflict_do_update(
            index_elements=["event_id", "participant_key"],
            set_=replaced,
        )
        await session.execute(stmt)

    async def _count(self, session: AsyncSession, event_id: UUID) -> UpdatedCountersDTO:
        attendee_count = await session.scalar(
            select(func.count())
            .select_from(RsvpResponse)
            .where(RsvpResponse.event_id == event_id)
            .where(RsvpResponse.status == RsvpStatus.GOING)
        )
        total_responses = await session.scalar(
            select(func.count())
            .select_from(PollResponse)
            .where(PollResponse.event_id == event_id)
        )
        return UpdatedCountersDTO(
            attendee_count=attendee_count or 0,
            total_responses=total_responses or 0,
        )
