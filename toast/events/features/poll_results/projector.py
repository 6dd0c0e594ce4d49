"""Read-side projection of an event's poll responses into frequency tables."""

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass, field
from uuid import UUID

from toast.events.dtos import NOT_SPECIFIED, EventDTO, PollEntryDTO


@dataclass(frozen=True)
class PollResultsDTO:
    event_id: UUID
    title: str
    total_responses: int
    dietary_options: list[str]
    music_options: list[str]
    dietary: dict[str, int] = field(default_factory=dict)
    music: dict[str, int] = field(default_factory=dict)
    responses: dict[str, PollEntryDTO] = field(default_factory=dict)
    shared_media_link: str = ""


def tally(choices: Iterable[str]) -> dict[str, int]:
    """Count each choice, skipping the "Not specified" placeholder."""
    return dict(Counter(choice for choice in choices if choice != NOT_SPECIFIED))


def project_poll_results(event: EventDTO) -> PollResultsDTO:
    responses = event.poll_responses
    return PollResultsDTO(
        event_id=event.id,
        title=event.title,
        total_responses=len(responses),
        dietary_options=list(event.dietary_options),
        music_options=list(event.music_options),
        dietary=tally(entry.dietary_choice for entry in responses.values()),
        music=tally(entry.music_choice for entry in responses.values()),
        responses=dict(responses),
        shared_media_link=event.shared_media_link,
    )
