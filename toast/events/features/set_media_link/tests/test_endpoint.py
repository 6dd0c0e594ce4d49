from uuid import uuid4

import pytest

from toast.events.features.replace_fields.router import get_event_update_write_model
from toast.events.tests.inmemory_models import InMemoryEventStore, InMemoryEventUpdateWriteModel
from toast.events.urls import EVENT_MEDIA_LINK_URL
from toast.identity.tests.fakes import FRIEND_TOKEN, HOST_TOKEN, bearer


@pytest.fixture
def store():
    return InMemoryEventStore()


@pytest.fixture
def overrides(store):
    return {get_event_update_write_model: lambda: InMemoryEventUpdateWriteModel(store)}


@pytest.mark.asyncio
async def test_set_media_link(client_factory, store, overrides):
    event = store.add()

    async with client_factory(overrides) as client:
        response = await client.patch(
            EVENT_MEDIA_LINK_URL.format(event_id=event.id),
            json={"shared_media_link": "drive.google.com/abc"},
            headers=bearer(HOST_TOKEN),
        )

    assert response.status_code == 200
    assert response.json() == {
        "message": "Media link updated successfully",
        "shared_media_link": "https://drive.google.com/abc",
    }
    assert store.events[event.id].shared_media_link == "https://drive.google.com/abc"


@pytest.mark.asyncio
async def test_set_media_link_by_other_user(client_factory, store, overrides):
    event = store.add()

    async with client_factory(overrides) as client:
        response = await client.patch(
            EVENT_MEDIA_LINK_URL.format(event_id=event.id),
            json={"shared_media_link": "https://x.example.com"},
            headers=bearer(FRIEND_TOKEN),
        )

    assert response.status_code == 403
    assert store.events[event.id].shared_media_link == ""


@pytest.mark.asyncio
async def test_set_media_link_missing_event(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.patch(
            EVENT_MEDIA_LINK_URL.format(event_id=uuid4()),
            json={"shared_media_link": "https://x.example.com"},
            headers=bearer(HOST_TOKEN),
        )

    assert response.status_code == 404
