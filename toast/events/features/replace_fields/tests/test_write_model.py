"""Tests for SqlEventUpdateWriteModel."""

from uuid import uuid4

import pytest

from toast.config.database import async_session_maker
from toast.errors import EventNotFoundError, ForbiddenError, InvalidInputError
from toast.events.dtos import EventFieldsDTO, EventFieldsUpdateDTO, ResponseKind, ResponsePayload
from toast.events.features.create_event.write_model import SqlEventCreateWriteModel
from toast.events.features.submit_response.write_model import SqlResponseWriteModel
from toast.events.repository.read_models import SqlEventReadModel
from toast.events.repository.write_models import SqlEventUpdateWriteModel
from toast.identity.callers import AuthenticatedCaller

HOST = AuthenticatedCaller(id="host-1")
STRANGER = AuthenticatedCaller(id="stranger-1")


async def _create_event(session):
    return await SqlEventCreateWriteModel(session_overwrite=session).create_event(
        HOST,
        EventFieldsDTO(
            title="Brunch",
            date="2026-06-01",
            time="11:00",
            location="Cafe",
            description="Pancakes",
            dietary_options=["Vegan"],
        ),
    )


async def test_replace_fields_keeps_responses():
    async with async_session_maker() as db_session:
        event = await _create_event(db_session)
        await SqlResponseWriteModel(session_overwrite=db_session).submit_response(
            event.id, "user-1", ResponsePayload(status="going", dietary_choice="Vegan"),
            {ResponseKind.RSVP, ResponseKind.POLL},
        )
        write_model = SqlEventUpdateWriteModel(session_overwrite=db_session)

        updated = await write_model.replace_fields(
            event.id,
            HOST,
            EventFieldsUpdateDTO(title="Late brunch", time="12:30", music_options=["Soul", " "]),
        )
        await db_session.rollback()

    assert updated.title == "Late brunch"
    assert updated.time == "12:30"
    assert updated.music_options == ["Soul"]
    assert updated.location == "Cafe"
    assert updated.description == "Pancakes"
    assert updated.dietary_options == ["Vegan"]
    assert updated.attendee_count == 1
    assert updated.total_responses == 1
    assert "user-1" in updated.rsvps


async def test_replace_fields_by_non_host_is_forbidden():
    async with async_session_maker() as db_session:
        event = await _create_event(db_session)
        write_model = SqlEventUpdateWriteModel(session_overwrite=db_session)

        with pytest.raises(ForbiddenError):
            await write_model.replace_fields(event.id, STRANGER, EventFieldsUpdateDTO(title="Hijacked"))

        stored = await SqlEventReadModel(session_overwrite=db_session).get_event(event.id)
        await db_session.rollback()

    assert stored.title == "Brunch"


async def test_replace_fields_rejects_blank_required_field():
    async with async_session_maker() as db_session:
        event = await _create_event(db_session)
        write_model = SqlEventUpdateWriteModel(session_overwrite=db_session)

        with pytest.raises(InvalidInputError):
            await write_model.replace_fields(event.id, HOST, EventFieldsUpdateDTO(date=""))
        await db_session.rollback()


async def test_replace_fields_on_missing_event():
    async with async_session_maker() as db_session:
        write_model = SqlEventUpdateWriteModel(session_overwrite=db_session)

        with pytest.raises(EventNotFoundError):
            await write_model.replace_fields(uuid4(), HOST, EventFieldsUpdateDTO(title="Ghost"))
        await db_session.rollback()


async def test_set_media_link_normalizes():
    async with async_session_maker() as db_session:
        event = await _create_event(db_session)
        write_model = SqlEventUpdateWriteModel(session_overwrite=db_session)

        updated = await write_model.set_media_link(event.id, HOST, "photos.example.com/brunch")
        cleared = await write_model.set_media_link(event.id, HOST, "")
        await db_session.rollback()

    assert updated.shared_media_link == "https://photos.example.com/brunch"
    assert cleared.shared_media_link == ""


async def test_set_media_link_by_non_host_is_forbidden():
    async with async_session_maker() as db_session:
        event = await _create_event(db_session)
        write_model = SqlEventUpdateWriteModel(session_overwrite=db_session)

        with pytest.raises(ForbiddenError):
            await write_model.set_media_link(event.id, STRANGER, "https://evil.example.com")
        await db_session.rollback()
