from datetime import datetime
from uuid import UUID

from sqlalchemy import JSON, DateTime, Enum, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from toast.config.table_names import TableNames
from toast.events.dtos import DEFAULT_CATEGORY, MAX_LENGTHS, NOT_SPECIFIED, RsvpStatus
from toast.models.base import Base, TimeStamp


class Event(Base, TimeStamp):
    __tablename__ = TableNames.EVENTS.value

    title: Mapped[str] = mapped_column(String(MAX_LENGTHS["title"]), nullable=False)
    # date and time are kept as the host typed them
    date: Mapped[str] = mapped_column(String(MAX_LENGTHS["date"]), nullable=False)
    time: Mapped[str] = mapped_column(String(MAX_LENGTHS["time"]), nullable=False)
    location: Mapped[str] = mapped_column(String(MAX_LENGTHS["location"]), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    category: Mapped[str] = mapped_column(
        String(MAX_LENGTHS["category"]), nullable=False, default=DEFAULT_CATEGORY
    )

    host_id: Mapped[str] = mapped_column(String(128), nullable=False, index=True)
    host_email: Mapped[str | None] = mapped_column(String(255), nullable=True)

    dietary_options: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    music_options: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    shared_media_link: Mapped[str] = mapped_column(
        String(MAX_LENGTHS["shared_media_link"]), nullable=False, default=""
    )

    def __repr__(self) -> str:
        return f"<Event {self.title} on {self.date}>"


class RsvpResponse(Base, TimeStamp):
    """One participant's RSVP for one event."""

    __tablename__ = TableNames.RSVP_RESPONSES.value
    __table_args__ = (
        UniqueConstraint("event_id", "participant_key", name="uq_rsvp_responses_event_participant"),
    )

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    participant_key: Mapped[str] = mapped_column(String(255), nullable=False)
    display_name: Mapped[str] = mapped_column(String(MAX_LENGTHS["display_name"]), nullable=False)
    status: Mapped[RsvpStatus] = mapped_column(
        Enum(RsvpStatus, name="rsvp_status_enum", values_callable=lambda x: [e.value for e in x]),
        nullable=False,
    )
    responded_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<RsvpResponse {self.participant_key} - {self.status.value}>"


class PollResponse(Base, TimeStamp):
    """One participant's dietary and music picks for one event."""

    __tablename__ = TableNames.POLL_RESPONSES.value
    __table_args__ = (
        UniqueConstraint("event_id", "participant_key", name="uq_poll_responses_event_participant"),
    )

    event_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    participant_key: Mapped[str] = mapped_column(String(255), nullable=False)
    display_name: Mapped[str] = mapped_column(String(MAX_LENGTHS["display_name"]), nullable=False)
    dietary_choice: Mapped[str] = mapped_column(
        String(MAX_LENGTHS["dietary_choice"]), nullable=False, default=NOT_SPECIFIED
    )
    music_choice: Mapped[str] = mapped_column(
        String(MAX_LENGTHS["music_choice"]), nullable=False, default=NOT_SPECIFIED
    )
    responded_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    def __repr__(self) -> str:
        return f"<PollResponse {self.participant_key}>"
