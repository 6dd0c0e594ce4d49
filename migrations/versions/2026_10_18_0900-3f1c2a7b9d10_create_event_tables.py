"""create_event_tables

Revision ID: 3f1c2a7b9d10
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""

import sqlalchemy as sa
import sqlalchemy_utils
from alembic import op

# revision identifiers, used by Alembic.
revision = "3f1c2a7b9d10"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "events",
        sa.Column("uuid", sqlalchemy_utils.types.uuid.UUIDType(binary=False), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("date", sa.String(length=100), nullable=False),
        sa.Column("time", sa.String(length=100), nullable=False),
        sa.Column("location", sa.String(length=500), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", sa.String(length=100), nullable=False),
        sa.Column("host_id", sa.String(length=128), nullable=False),
        sa.Column("host_email", sa.String(length=255), nullable=True),
        sa.Column("dietary_options", sa.JSON(), nullable=False),
        sa.Column("music_options", sa.JSON(), nullable=False),
        sa.Column("shared_media_link", sa.String(length=2048), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("uuid"),
    )
    op.create_index(op.f("ix_events_host_id"), "events", ["host_id"], unique=False)

    op.create_table(
        "rsvp_responses",
        sa.Column("uuid", sqlalchemy_utils.types.uuid.UUIDType(binary=False), nullable=False),
        sa.Column("event_id", sqlalchemy_utils.types.uuid.UUIDType(binary=False), nullable=False),
        sa.Column("participant_key", sa.String(length=255), nullable=False),
        sa.Column("display_name", sa.String(length=255), nullable=False),
        sa.Column(
            "status",
            sa.Enum("going", "maybe", "not_going", name="rsvp_status_enum"),
            nullable=False,
        ),
        sa.Column("responded_at", sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["event_id"], ["events.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
        sa.UniqueConstraint("event_id", "participant_key", name="uq_rsvp_responses_event_participant"),
    )
    op.create_index(op.f("ix_rsvp_responses_event_id"), "rsvp_responses", ["event_id"], unique=False)

    op.create_table(
        "poll_responses",
        sa.Column("uuid", sqlalchemy_utils.types.uuid.UUIDType(binary=False), nullable=False),
        sa.Column("event_id", sqlalchemy_utils.types.uuid.UUIDType(binary=False), nullable=False),
        sa.Column("participant_key", sa.String(length=255), nullable=False),
        sa.Column("display_name", sa.String(length=255), nullable=False),
        sa.Column("dietary_choice", sa.String(length=255), nullable=False),
        sa.Column("music_choice", sa.String(length=500), nullable=False),
        sa.Column("responded_at", sa.DateTime(timezone=True), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["event_id"], ["events.uuid"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("uuid"),
        sa.UniqueConstraint("event_id", "participant_key", name="uq_poll_responses_event_participant"),
    )
    op.create_index(op.f("ix_poll_responses_event_id"), "poll_responses", ["event_id"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_poll_responses_event_id"), table_name="poll_responses")
    op.drop_table("poll_responses")
    op.drop_index(op.f("ix_rsvp_responses_event_id"), table_name="rsvp_responses")
    op.drop_table("rsvp_responses")
    op.drop_index(op.f("ix_events_host_id"), table_name="events")
    op.drop_table("events")
    sa.Enum(name="rsvp_status_enum").drop(op.get_bind(), checkfirst=True)
