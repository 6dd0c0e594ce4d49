"""CLI commands for Toast event management."""

import asyncio
from uuid import UUID

import typer

from toast.errors import EventNotFoundError, InvalidInputError, ToastError
from toast.events.dtos import EventFieldsDTO, RsvpStatus
from toast.events.features.create_event.write_model import SqlEventCreateWriteModel
from toast.events.features.list_attendees.projector import list_attendees as project_attendees
from toast.events.features.poll_results.projector import project_poll_results
from toast.events.repository.read_models import SqlEventReadModel
from toast.identity.callers import AuthenticatedCaller

app = typer.Typer(help="CLI commands for Toast event management")


async def _load_event(event_id: str):
    try:
        event_uuid = UUID(event_id)
    except ValueError:
        raise InvalidInputError(f"Not an event id: {event_id}")
    event = await SqlEventReadModel().get_event(event_uuid)
    if event is None:
        raise EventNotFoundError(event_id)
    return event


@app.command()
def create_event(
    title: str = typer.Argument(..., help="Event title"),
    date: str = typer.Argument(..., help="Event date, as shown to guests"),
    time: str = typer.Argument(..., help="Event time, as shown to guests"),
    location: str = typer.Argument(..., help="Event location"),
    host_id: str = typer.Option(..., "--host-id", help="Identity provider id of the host"),
    host_email: str = typer.Option(None, "--host-email", help="Email of the host"),
    description: str = typer.Option("", "--description", "-d", help="Event description"),
    category: str = typer.Option(None, "--category", "-c", help="Event category"),
    dietary: list[str] = typer.Option([], "--dietary", help="Dietary option offered in the poll"),
    music: list[str] = typer.Option([], "--music", help="Music option offered in the poll"),
    media_link: str = typer.Option(None, "--media-link", help="Shared photo/media folder"),
):
    """Create an event on behalf of a host."""
    host = AuthenticatedCaller(id=host_id, email=host_email)
    fields = EventFieldsDTO(
        title=title,
        date=date,
        time=time,
        location=location,
        description=description,
        category=category,
        dietary_options=dietary,
        music_options=music,
        shared_media_link=media_link,
    )

    try:
        event = asyncio.run(SqlEventCreateWriteModel().create_event(host=host, fields=fields))
    except ToastError as e:
        typer.secho(e.message, fg=typer.colors.RED)
        raise typer.Exit(1)

    typer.secho("Event created!", fg=typer.colors.GREEN)
    typer.secho(f"  Event ID: {event.id}", fg=typer.colors.CYAN)
    typer.secho(f"  {event.title} - {event.date} {event.time} @ {event.location}", fg=typer.colors.BLUE)
    if event.shared_media_link:
        typer.secho(f"  Media: {event.shared_media_link}", fg=typer.colors.BLUE)


@app.command()
def show_results(
    event_id: str = typer.Argument(..., help="Event UUID"),
):
    """Show the dietary and music poll results of an event."""
    try:
        event = asyncio.run(_load_event(event_id))
    except ToastError as e:
        typer.secho(e.message, fg=typer.colors.RED)
        raise typer.Exit(1)

    results = project_poll_results(event)
    typer.secho(f"{results.title}: {results.total_responses} poll responses", fg=typer.colors.GREEN)
    for heading, table in (("Dietary", results.dietary), ("Music", results.music)):
        typer.echo()
        typer.secho(f"{heading}:", fg=typer.colors.GREEN)
        if not table:
            typer.secho("  (no answers)", fg=typer.colors.YELLOW)
        for choice, count in sorted(table.items(), key=lambda item: (-item[1], item[0])):
            typer.secho(f"  {choice}: {count}", fg=typer.colors.BLUE)


@app.command()
def list_attendees(
    event_id: str = typer.Argument(..., help="Event UUID"),
    status: str = typer.Option(None, "--status", "-s", help="Only show this RSVP status"),
):
    """List who responded to an event."""
    try:
        wanted = RsvpStatus.parse(status) if status is not None else None
        event = asyncio.run(_load_event(event_id))
    except ToastError as e:
        typer.secho(e.message, fg=typer.colors.RED)
        raise typer.Exit(1)

    attendees = project_attendees(event, wanted)
    typer.secho(f"{event.title}: {event.attendee_count} going", fg=typer.colors.GREEN)
    if not attendees:
        typer.secho("  No responses yet", fg=typer.colors.YELLOW)
    for attendee in attendees:
        typer.secho(f"  - {attendee.display_name} ({attendee.status.value})", fg=typer.colors.BLUE)


if __name__ == "__main__":
    app()
