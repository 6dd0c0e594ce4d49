import pytest

from toast.events.features.replace_fields.router import get_event_update_write_model
from toast.events.tests.inmemory_models import InMemoryEventStore, InMemoryEventUpdateWriteModel
from toast.events.urls import EVENT_URL
from toast.identity.tests.fakes import FRIEND_TOKEN, HOST_TOKEN, bearer


@pytest.fixture
def store():
    return InMemoryEventStore()


@pytest.fixture
def overrides(store):
    return {get_event_update_write_model: lambda: InMemoryEventUpdateWriteModel(store)}


@pytest.mark.asyncio
async def test_replace_fields(client_factory, store, overrides):
    event = store.add(title="Old", category="Birthday")
    body = {"title": "New", "category": "", "dietary_options": ["Kosher"]}

    async with client_factory(overrides) as client:
        response = await client.put(EVENT_URL.format(event_id=event.id), json=body, headers=bearer(HOST_TOKEN))

    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "New"
    assert data["category"] == "General"
    assert data["dietary_options"] == ["Kosher"]
    assert data["location"] == event.location


@pytest.mark.asyncio
async def test_replace_fields_ignores_fields_outside_allow_list(client_factory, store, overrides):
    event = store.add()
    body = {
        "title": "Renamed",
        "host_id": "friend-1",
        "attendee_count": 99,
        "rsvps": {"x": {"status": "going"}},
        "shared_media_link": "https://elsewhere.example.com",
    }

    async with client_factory(overrides) as client:
        response = await client.put(EVENT_URL.format(event_id=event.id), json=body, headers=bearer(HOST_TOKEN))

    assert response.status_code == 200
    stored = store.events[event.id]
    assert stored.title == "Renamed"
    assert stored.host_id == "host-1"
    assert stored.attendee_count == 0
    assert stored.rsvps == {}
    assert stored.shared_media_link == ""


@pytest.mark.asyncio
async def test_replace_fields_by_other_user(client_factory, store, overrides):
    event = store.add(title="Old")

    async with client_factory(overrides) as client:
        response = await client.put(
            EVENT_URL.format(event_id=event.id), json={"title": "Mine now"}, headers=bearer(FRIEND_TOKEN)
        )

    assert response.status_code == 403
    assert response.json()["error"] == "forbidden"
    assert store.events[event.id].title == "Old"


@pytest.mark.asyncio
async def test_replace_fields_blank_title(client_factory, store, overrides):
    event = store.add(title="Old")

    async with client_factory(overrides) as client:
        response = await client.put(
            EVENT_URL.format(event_id=event.id), json={"title": " "}, headers=bearer(HOST_TOKEN)
        )

    assert response.status_code == 400
    assert store.events[event.id].title == "Old"


@pytest.mark.asyncio
async def test_replace_fields_location_too_long(client_factory, store, overrides):
    event = store.add(location="Cafe")

    async with client_factory(overrides) as client:
        response = await client.put(
            EVENT_URL.format(event_id=event.id), json={"location": "L" * 501}, headers=bearer(HOST_TOKEN)
        )

    assert response.status_code == 400
    assert store.events[event.id].location == "Cafe"
