"""Tests for SqlResponseWriteModel against the test database."""

import asyncio
from uuid import uuid4

import pytest
from sqlalchemy import func, select

from toast.config.database import async_session_maker
from toast.errors import EventNotFoundError, InvalidInputError
from toast.events.dtos import NOT_SPECIFIED, EventFieldsDTO, ResponseKind, ResponsePayload, RsvpStatus
from toast.events.features.create_event.write_model import SqlEventCreateWriteModel
from toast.events.features.submit_response.write_model import SqlResponseWriteModel
from toast.events.repository.orm_models import RsvpResponse
from toast.events.repository.read_models import SqlEventReadModel
from toast.identity.callers import AuthenticatedCaller

HOST = AuthenticatedCaller(id="host-1", email="host@example.com")
BOTH = {ResponseKind.RSVP, ResponseKind.POLL}


async def _create_event(session=None):
    write_model = SqlEventCreateWriteModel(session_overwrite=session)
    return await write_model.create_event(
        host=HOST,
        fields=EventFieldsDTO(
            title="Dinner",
            date="2026-09-12",
            time="20:00",
            location="Town hall",
            dietary_options=["Vegan", "Vegetarian"],
        ),
    )


async def test_submit_rsvp_counts_attendees():
    async with async_session_maker() as db_session:
        event = await _create_event(db_session)
        write_model = SqlResponseWriteModel(session_overwrite=db_session)

        await write_model.submit_response(
            event.id, "alice@example.com", ResponsePayload(status="going", display_name="Alice"), {ResponseKind.RSVP}
        )
        counters = await write_model.submit_response(
            event.id, "bob@example.com", ResponsePayload(status="maybe", display_name="Bob"), {ResponseKind.RSVP}
        )

        stored = await SqlEventReadModel(session_overwrite=db_session).get_event(event.id)
        await db_session.rollback()

    assert counters.attendee_count == 1
    assert counters.total_responses == 0
    assert stored.rsvps["alice@example.com"].status == RsvpStatus.GOING
    assert stored.rsvps["bob@example.com"].display_name == "Bob"


async def test_resubmission_replaces_previous_entry():
    async with async_session_maker() as db_session:
        event = await _create_event(db_session)
        write_model = SqlResponseWriteModel(session_overwrite=db_session)

        first = await write_model.submit_response(
            event.id,
            "user-1",
            ResponsePayload(status="going", dietary_choice="Vegan", display_name="Alice"),
            BOTH,
        )
        second = await write_model.submit_response(
            event.id,
            "user-1",
            ResponsePayload(status="not going", dietary_choice="Vegetarian", display_name="Alice"),
            BOTH,
        )

        rows = await db_session.scalar(
            select(func.count()).select_from(RsvpResponse).where(RsvpResponse.event_id == event.id)
        )
        stored = await SqlEventReadModel(session_overwrite=db_session).get_event(event.id)
        await db_session.rollback()

    assert (first.attendee_count, first.total_responses) == (1, 1)
    assert (second.attendee_count, second.total_responses) == (0, 1)
    assert rows == 1
    assert stored.rsvps["user-1"].status == RsvpStatus.NOT_GOING
    assert stored.poll_responses["user-1"].dietary_choice == "Vegetarian"


async def test_same_submission_twice_is_idempotent():
    async with async_session_maker() as db_session:
        event = await _create_event(db_session)
        write_model = SqlResponseWriteModel(session_overwrite=db_session)
        payload = ResponsePayload(status="going", dietary_choice="Vegan", music_choice="Jazz")

        first = await write_model.submit_response(event.id, "user-1", payload, BOTH)
        second = await write_model.submit_response(event.id, "user-1", payload, BOTH)
        stored = await SqlEventReadModel(session_overwrite=db_session).get_event(event.id)
        await db_session.rollback()

    assert first == second
    assert list(stored.rsvps) == ["user-1"]
    assert list(stored.poll_responses) == ["user-1"]


async def test_poll_defaults_are_substituted():
    async with async_session_maker() as db_session:
        event = await _create_event(db_session)
        write_model = SqlResponseWriteModel(session_overwrite=db_session)

        counters = await write_model.submit_response(
            event.id, "guest_abc", ResponsePayload(dietary_choice="", music_choice=None), {ResponseKind.POLL}
        )
        stored = await SqlEventReadModel(session_overwrite=db_session).get_event(event.id)
        await db_session.rollback()

    entry = stored.poll_responses["guest_abc"]
    assert counters.total_responses == 1
    assert counters.attendee_count == 0
    assert entry.dietary_choice == NOT_SPECIFIED
    assert entry.music_choice == NOT_SPECIFIED
    assert entry.display_name == "Anonymous"
    assert stored.rsvps == {}


async def test_invalid_status_writes_nothing():
    async with async_session_maker() as db_session:
        event = await _create_event(db_session)
        write_model = SqlResponseWriteModel(session_overwrite=db_session)

        with pytest.raises(InvalidInputError):
            await write_model.submit_response(
                event.id, "user-1", ResponsePayload(status="perhaps", dietary_choice="Vegan"), BOTH
            )

        stored = await SqlEventReadModel(session_overwrite=db_session).get_event(event.id)
        await db_session.rollback()

    assert stored.rsvps == {}
    assert stored.poll_responses == {}


async def test_submit_to_missing_event():
    async with async_session_maker() as db_session:
        write_model = SqlResponseWriteModel(session_overwrite=db_session)

        with pytest.raises(EventNotFoundError):
            await write_model.submit_response(
                uuid4(), "user-1", ResponsePayload(status="going"), {ResponseKind.RSVP}
            )
        await db_session.rollback()


async def test_nothing_to_submit():
    write_model = SqlResponseWriteModel()

    with pytest.raises(InvalidInputError):
        await write_model.submit_response(uuid4(), "user-1", ResponsePayload(status="going"), set())


async def test_concurrent_submissions_are_all_kept():
    """Each submission commits in its own session."""
    event = await _create_event()
    participants = [f"guest{i}@example.com" for i in range(5)]

    async def submit(key: str):
        return await SqlResponseWriteModel().submit_response(
            event.id,
            key,
            ResponsePayload(status="going", dietary_choice="Vegan", display_name=key),
            BOTH,
        )

    await asyncio.gather(*(submit(key) for key in participants))

    stored = await SqlEventReadModel().get_event(event.id)
    assert set(stored.rsvps) == set(participants)
    assert set(stored.poll_responses) == set(participants)
    assert stored.attendee_count == len(participants)
    assert stored.total_responses == len(participants)
