"""Typed errors raised by the event store and mapped to HTTP responses in main."""


class ToastError(Exception):
    """Base class for errors with a machine-readable kind."""

    kind: str = "error"
    status_code: int = 500
    default_message: str = "Something went wrong"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class EventNotFoundError(ToastError):
    kind = "not_found"
    status_code = 404
    default_message = "Event not found"

    def __init__(self, event_id=None) -> None:
        self.event_id = event_id
        super().__init__()


class InvalidInputError(ToastError):
    kind = "invalid_input"
    status_code = 400
    default_message = "Invalid input"


class UnauthorizedError(ToastError):
    kind = "unauthorized"
    status_code = 401
    default_message = "Access denied. No token provided."


class ForbiddenError(ToastError):
    kind = "forbidden"
    status_code = 403
    default_message = "Only the event host can do this"


class ConflictError(ToastError):
    """Raised when a concurrent writer invalidated the snapshot a write was based on."""

    kind = "conflict"
    status_code = 409
    default_message = "The event was modified concurrently, please retry"


class StoreUnavailableError(ToastError):
    kind = "store_unavailable"
    status_code = 503
    default_message = "The event store is temporarily unavailable"
