from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel, EmailStr, field_validator

from toast.events.dtos import ResponseKind, ResponsePayload, UpdatedCountersDTO
from toast.events.features.submit_response.write_model import (
    ResponseWriteModel,
    SqlResponseWriteModel,
)
from toast.events.urls import SUBMIT_POLL_URL, SUBMIT_RESPONSES_URL, SUBMIT_RSVP_URL
from toast.identity.callers import Caller, participant_key_for
from toast.identity.dependencies import resolve_caller_or_guest

router = APIRouter()


class ResponseSubmit(BaseModel):
    """A participant's submission. Which fields matter depends on the route."""

    status: str | None = None
    dietary_choice: str | None = None
    music_choice: str | None = None
    display_name: str | None = None
    email: EmailStr | None = None

    @field_validator("email", mode="before")
    @classmethod
    def blank_email_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ResponseSubmitted(BaseModel):
    message: str
    attendee_count: int
    total_responses: int


def get_response_write_model() -> ResponseWriteModel:
    """Dependency to get response write model instance."""
    return SqlResponseWriteModel()


async def _submit(
    event_id: UUID,
    submission: ResponseSubmit,
    caller: Caller,
    write_model: ResponseWriteModel,
    kinds: set[ResponseKind],
) -> UpdatedCountersDTO:
    participant_key = participant_key_for(caller, submission.email)
    payload = ResponsePayload(
        status=submission.status,
        dietary_choice=submission.dietary_choice,
        music_choice=submission.music_choice,
        display_name=submission.display_name or caller.display_name,
    )
    return await write_model.submit_response(event_id, participant_key, payload, kinds)


@router.post(SUBMIT_RSVP_URL, response_model=ResponseSubmitted)
async def submit_rsvp(
    event_id: UUID,
    submission: ResponseSubmit,
    caller: Caller = Depends(resolve_caller_or_guest),
    write_model: ResponseWriteModel = Depends(get_response_write_model),
) -> ResponseSubmitted:
    """
    Record the caller's RSVP. Submitting again replaces the previous answer.
    Authentication is optional.
    """
    counters = await _submit(event_id, submission, caller, write_model, {ResponseKind.RSVP})
    return ResponseSubmitted(
        message="RSVP submitted successfully",
        attendee_count=counters.attendee_count,
        total_responses=counters.total_responses,
    )


@router.post(SUBMIT_POLL_URL, response_model=ResponseSubmitted)
async def submit_poll(
    event_id: UUID,
    submission: ResponseSubmit,
    caller: Caller = Depends(resolve_caller_or_guest),
    write_model: ResponseWriteModel = Depends(get_response_write_model),
) -> ResponseSubmitted:
    """Record the caller's dietary and music picks."""
    counters = await _submit(event_id, submission, caller, write_model, {ResponseKind.POLL})
    return ResponseSubmitted(
        message="Poll response submitted successfully",
        attendee_count=counters.attendee_count,
        total_responses=counters.total_responses,
    )


@router.post(SUBMIT_RESPONSES_URL, response_model=ResponseSubmitted)
async def submit_responses(
    event_id: UUID,
    submission: ResponseSubmit,
    caller: Caller = Depends(resolve_caller_or_guest),
    write_model: ResponseWriteModel = Depends(get_response_write_model),
) -> ResponseSubmitted:
    """
    Record the RSVP and the poll picks together, as submitted from the share page.
    Either both are stored or neither is.
    """
    counters = await _submit(
        event_id, submission, caller, write_model, {ResponseKind.RSVP, ResponseKind.POLL}
    )
    return ResponseSubmitted(
        message="Response submitted successfully",
        attendee_count=counters.attendee_count,
        total_responses=counters.total_responses,
    )
