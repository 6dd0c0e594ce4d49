EVENTS_URL = "/api/v1/events"
EVENT_URL = "/api/v1/events/{event_id}"
EVENT_MEDIA_LINK_URL = "/api/v1/events/{event_id}/media-link"
SHARE_EVENT_URL = "/api/v1/share/{event_id}"

SUBMIT_RSVP_URL = "/api/v1/events/{event_id}/rsvp"
SUBMIT_POLL_URL = "/api/v1/events/{event_id}/poll"
SUBMIT_RESPONSES_URL = "/api/v1/events/{event_id}/responses"

POLL_RESULTS_URL = "/api/v1/events/{event_id}/poll-results"
ATTENDEES_URL = "/api/v1/events/{event_id}/attendees"
