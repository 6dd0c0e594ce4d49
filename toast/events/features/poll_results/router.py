from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from toast.errors import EventNotFoundError
from toast.events.features.get_event.router import get_event_read_model
from toast.events.features.poll_results.projector import project_poll_results
from toast.events.repository.read_models import EventReadModel
from toast.events.schemas import PollEntryResponse
from toast.events.urls import POLL_RESULTS_URL
from toast.identity.callers import AuthenticatedCaller
from toast.identity.dependencies import require_authenticated

router = APIRouter()


class PollTallies(BaseModel):
    dietary: dict[str, int]
    music: dict[str, int]


class PollResultsResponse(BaseModel):
    event_id: UUID
    title: str
    total_responses: int
    dietary_options: list[str]
    music_options: list[str]
    results: PollTallies
    responses: dict[str, PollEntryResponse]
    shared_media_link: str


@router.get(POLL_RESULTS_URL, response_model=PollResultsResponse)
async def get_poll_results(
    event_id: UUID,
    caller: AuthenticatedCaller = Depends(require_authenticated),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> PollResultsResponse:
    """
    Frequency tables of the dietary and music picks.
    "Not specified" answers count towards total_responses but not the tables.
    """
    event = await read_model.get_event(event_id)
    if event is None:
        raise EventNotFoundError(event_id)

    results = project_poll_results(event)
    return PollResultsResponse(
        event_id=results.event_id,
        title=results.title,
        total_responses=results.total_responses,
        dietary_options=results.dietary_options,
        music_options=results.music_options,
        results=PollTallies(dietary=results.dietary, music=results.music),
        responses={
            key: PollEntryResponse.model_validate(entry) for key, entry in results.responses.items()
        },
        shared_media_link=results.shared_media_link,
    )
