import re
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from uuid import UUID

from toast.errors import InvalidInputError

DEFAULT_CATEGORY = "General"
NOT_SPECIFIED = "Not specified"
ANONYMOUS = "Anonymous"

REQUIRED_EVENT_FIELDS = ("title", "date", "time", "location")

# column sizes of the events and response tables
MAX_LENGTHS = {
    "title": 255,
    "date": 100,
    "time": 100,
    "location": 500,
    "category": 100,
    "shared_media_link": 2048,
    "display_name": 255,
    "dietary_choice": 255,
    "music_choice": 500,
}

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*://")


class RsvpStatus(str, Enum):
    GOING = "going"
    MAYBE = "maybe"
    NOT_GOING = "not_going"

    @classmethod
    def parse(cls, raw: str | None) -> "RsvpStatus":
        """Parse a submitted status, accepting "not going" and "not-going"."""
        if raw is None or not raw.strip():
            raise InvalidInputError("RSVP status is required")
        normalized = raw.strip().lower().replace(" ", "_").replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            allowed = ", ".join(status.value for status in cls)
            raise InvalidInputError(f"Invalid RSVP status '{raw}', expected one of: {allowed}")


class ResponseKind(str, Enum):
    RSVP = "rsvp"
    POLL = "poll"


def check_length(name: str, value: str) -> str:
    """Raise InvalidInputError if the value would not fit its column."""
    limit = MAX_LENGTHS[name]
    if len(value) > limit:
        raise InvalidInputError(f"Field '{name}' must be at most {limit} characters")
    return value


def normalize_media_link(link: str | None) -> str:
    """Empty stays empty; a link without a scheme gets https:// prepended."""
    if not link or not link.strip():
        return ""
    link = link.strip()
    if not _SCHEME.match(link):
        link = f"https://{link}"
    return check_length("shared_media_link", link)


def normalize_options(options: list[str] | None) -> list[str]:
    if not options:
        return []
    return [option.strip() for option in options if option and option.strip()]


def normalize_category(category: str | None) -> str:
    if not category or not category.strip():
        return DEFAULT_CATEGORY
    return check_length("category", category.strip())


def _choice_or_default(name: str, value: str | None) -> str:
    if value is None or not value.strip():
        return NOT_SPECIFIED
    return check_length(name, value.strip())


def _display_name(value: str | None) -> str:
    return check_length("display_name", (value or "").strip() or ANONYMOUS)


@dataclass(frozen=True)
class ResponsePayload:
    """Validated transport payload of a response submission."""

    status: str | None = None
    dietary_choice: str | None = None
    music_choice: str | None = None
    display_name: str | None = None


@dataclass(frozen=True)
class RsvpEntryDTO:
    display_name: str
    status: RsvpStatus
    responded_at: datetime

    @classmethod
    def from_payload(cls, payload: ResponsePayload) -> "RsvpEntryDTO":
        return cls(
            display_name=_display_name(payload.display_name),
            status=RsvpStatus.parse(payload.status),
            responded_at=datetime.now(UTC),
        )


@dataclass(frozen=True)
class PollEntryDTO:
    dietary_choice: str
    music_choice: str
    display_name: str
    responded_at: datetime

    @classmethod
    def from_payload(cls, payload: ResponsePayload) -> "PollEntryDTO":
        return cls(
            dietary_choice=_choice_or_default("dietary_choice", payload.dietary_choice),
            music_choice=_choice_or_default("music_choice", payload.music_choice),
            display_name=_display_name(payload.display_name),
            responded_at=datetime.now(UTC),
        )


@dataclass(frozen=True)
class UpdatedCountersDTO:
    """Counters recomputed from the response records at write time."""

    attendee_count: int
    total_responses: int


@dataclass(frozen=True)
class EventFieldsDTO:
    """Fields supplied by the host when creating an event."""

    title: str | None = None
    date: str | None = None
    time: str | None = None
    location: str | None = None
    description: str | None = None
    category: str | None = None
    dietary_options: list[str] = field(default_factory=list)
    music_options: list[str] = field(default_factory=list)
    shared_media_link: str | None = None

    def validated(self) -> "EventFieldsDTO":
        """Return a normalized copy, raising InvalidInputError on missing required fields."""
        missing = [name for name in REQUIRED_EVENT_FIELDS if not (getattr(self, name) or "").strip()]
        if missing:
            raise InvalidInputError(f"Missing required fields: {', '.join(missing)}")
        return EventFieldsDTO(
            title=check_length("title", self.title.strip()),
            date=check_length("date", self.date.strip()),
            time=check_length("time", self.time.strip()),
            location=check_length("location", self.location.strip()),
            description=(self.description or "").strip(),
            category=normalize_category(self.category),
            dietary_options=normalize_options(self.dietary_options),
            music_options=normalize_options(self.music_options),
            shared_media_link=normalize_media_link(self.shared_media_link),
        )


@dataclass(frozen=True)
class EventFieldsUpdateDTO:
    """Host-editable fields. A field left as None is not changed."""

    title: str | None = None
    date: str | None = None
    time: str | None = None
    location: str | None = None
    description: str | None = None
    category: str | None = None
    dietary_options: list[str] | None = None
    music_options: list[str] | None = None

    def changes(self) -> dict:
        """Normalized column values to write, raising InvalidInputError on blanked required fields."""
        changes: dict = {}
        for name in REQUIRED_EVENT_FIELDS:
            value = getattr(self, name)
            if value is None:
                continue
            if not value.strip():
                raise InvalidInputError(f"Field '{name}' cannot be empty")
            changes[name] = check_length(name, value.strip())
        if self.description is not None:
            changes["description"] = self.description.strip()
        if self.category is not None:
            changes["category"] = normalize_category(self.category)
        if self.dietary_options is not None:
            changes["dietary_options"] = normalize_options(self.dietary_options)
        if self.music_options is not None:
            changes["music_options"] = normalize_options(self.music_options)
        return changes


@dataclass(frozen=True)
class EventDTO:
    """Full event aggregate as seen by the host."""

    id: UUID
    title: str
    date: str
    time: str
    location: str
    description: str
    category: str
    host_id: str
    host_email: str | None
    created_at: datetime | None
    dietary_options: list[str] = field(default_factory=list)
    music_options: list[str] = field(default_factory=list)
    shared_media_link: str = ""
    rsvps: dict[str, RsvpEntryDTO] = field(default_factory=dict)
    poll_responses: dict[str, PollEntryDTO] = field(default_factory=dict)

    @property
    def attendee_count(self) -> int:
        return sum(1 for entry in self.rsvps.values() if entry.status == RsvpStatus.GOING)

    @property
    def total_responses(self) -> int:
        return len(self.poll_responses)


@dataclass(frozen=True)
class EventSummaryDTO:
    """Event row in the host's listing."""

    id: UUID
    title: str
    date: str
    time: str
    location: str
    category: str
    attendee_count: int
    created_at: datetime | None


@dataclass(frozen=True)
class PublicEventDTO:
    """Subset of an event that may be shown on the public share page."""

    id: UUID
    title: str
    date: str
    time: str
    location: str
    description: str
    category: str
    attendee_count: int
    total_responses: int
    dietary_options: list[str]
    music_options: list[str]
    shared_media_link: str

    @classmethod
    def from_event(cls, event: EventDTO) -> "PublicEventDTO":
        return cls(
            id=event.id,
            title=event.title,
            date=event.date,
            time=event.time,
            location=event.location,
            description=event.description,
            category=event.category,
            attendee_count=event.attendee_count,
            total_responses=event.total_responses,
            dietary_options=list(event.dietary_options),
            music_options=list(event.music_options),
            shared_media_link=event.shared_media_link,
        )


@dataclass(frozen=True)
class AttendeeDTO:
    participant_key: str
    display_name: str
    status: RsvpStatus
