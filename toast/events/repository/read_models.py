import abc
from functools import partial
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from toast.config.database import async_session_manager
from toast.events.dtos import EventDTO, EventSummaryDTO, PollEntryDTO, RsvpEntryDTO, RsvpStatus
from toast.events.repository.orm_models import Event, PollResponse, RsvpResponse
from toast.events.repository.store_errors import translate_store_errors


def rsvp_entry_from_row(row: RsvpResponse) -> RsvpEntryDTO:
    return RsvpEntryDTO(
        display_name=row.display_name,
        status=RsvpStatus(row.status),
        responded_at=row.responded_at,
    )


def poll_entry_from_row(row: PollResponse) -> PollEntryDTO:
    return PollEntryDTO(
        dietary_choice=row.dietary_choice,
        music_choice=row.music_choice,
        display_name=row.display_name,
        responded_at=row.responded_at,
    )


def event_dto_from_rows(
    event: Event,
    rsvps: list[RsvpResponse] | None = None,
    polls: list[PollResponse] | None = None,
) -> EventDTO:
    return EventDTO(
        id=event.uuid,
        title=event.title,
        date=event.date,
        time=event.time,
        location=event.location,
        description=event.description,
        category=event.category,
        host_id=event.host_id,
        host_email=event.host_email,
        created_at=event.created_at,
        dietary_options=list(event.dietary_options or []),
        music_options=list(event.music_options or []),
        shared_media_link=event.shared_media_link,
        rsvps={row.participant_key: rsvp_entry_from_row(row) for row in rsvps or []},
        poll_responses={row.participant_key: poll_entry_from_row(row) for row in polls or []},
    )


async def load_event_aggregate(session: AsyncSession, event_id: UUID) -> EventDTO | None:
    """Load an event and scan its response records. Returns None if the event does not exist."""
    event = await session.get(Event, event_id)
    if event is None:
        return None

    # rows may have been rewritten by an upsert since they were loaded
    rsvp_result = await session.execute(
        select(RsvpResponse)
        .where(RsvpResponse.event_id == event_id)
        .execution_options(populate_existing=True)
    )
    poll_result = await session.execute(
        select(PollResponse)
        .where(PollResponse.event_id == event_id)
        .execution_options(populate_existing=True)
    )

    return event_dto_from_rows(
        event,
        rsvps=list(rsvp_result.scalars().all()),
        polls=list(poll_result.scalars().all()),
    )


class EventReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_event(self, event_id: UUID) -> EventDTO | None:
        """
        Get the full event aggregate, including every RSVP and poll record.
        Returns None if the event does not exist.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def list_events_for_host(self, host_id: str) -> list[EventSummaryDTO]:
        """List the events created by a host, newest first."""
        raise NotImplementedError


class SqlEventReadModel(EventReadModel):
    """SQL implementation of the event read model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_event(self, event_id: UUID) -> EventDTO | None:
        with translate_store_errors("get_event"):
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                return await load_event_aggregate(session, event_id)

    async def list_events_for_host(self, host_id: str) -> list[EventSummaryDTO]:
        going_counts = (
            select(RsvpResponse.event_id, func.count().label("attendee_count"))
            .where(RsvpResponse.status == RsvpStatus.GOING)
            .group_by(RsvpResponse.event_id)
            .subquery()
        )
        stmt = (
            select(Event, func.coalesce(going_counts.c.attendee_count, 0))
            .outerjoin(going_counts, going_counts.c.event_id == Event.uuid)
            .where(Event.host_id == host_id)
            .order_by(Event.created_at.desc())
        )

        with translate_store_errors("list_events_for_host"):
            async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
                result = await session.execute(stmt)
                return [
                    EventSummaryDTO(
                        id=event.uuid,
                        title=event.title,
                        date=event.date,
                        time=event.time,
                        location=event.location,
                        category=event.category,
                        attendee_count=attendee_count,
                        created_at=event.created_at,
                    )
                    for event, attendee_count in result.all()
                ]
