from toast.events.dtos import AttendeeDTO, EventDTO, RsvpStatus


def list_attendees(event: EventDTO, status: RsvpStatus | None = None) -> list[AttendeeDTO]:
    """RSVPs of an event ordered by display name, optionally filtered by status."""
    attendees = [
        AttendeeDTO(participant_key=key, display_name=entry.display_name, status=entry.status)
        for key, entry in event.rsvps.items()
        if status is None or entry.status == status
    ]
    return sorted(attendees, key=lambda attendee: (attendee.display_name.lower(), attendee.participant_key))
