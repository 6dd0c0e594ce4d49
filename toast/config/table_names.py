from enum import Enum


class TableNames(str, Enum):
    EVENTS = "events"
    RSVP_RESPONSES = "rsvp_responses"
    POLL_RESPONSES = "poll_responses"
