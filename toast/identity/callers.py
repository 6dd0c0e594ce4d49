"""Caller identities: an authenticated user or an anonymous guest."""

from dataclasses import dataclass, field
from uuid import uuid4

GUEST_TOKEN_PREFIX = "guest_"


def _mint_guest_token() -> str:
    return f"{GUEST_TOKEN_PREFIX}{uuid4().hex}"


@dataclass(frozen=True)
class AuthenticatedCaller:
    """Caller whose bearer credential was verified."""

    id: str
    email: str | None = None
    display_name: str | None = None


@dataclass(frozen=True)
class GuestCaller:
    """Anonymous caller. The token is minted per request and never looked up again."""

    token: str = field(default_factory=_mint_guest_token)

    @property
    def display_name(self) -> str | None:
        return None


Caller = AuthenticatedCaller | GuestCaller


def participant_key_for(caller: Caller, email: str | None = None) -> str:
    """Key identifying one responder within one event.

    Priority: authenticated id, then the supplied email, then the guest token.
    """
    if isinstance(caller, AuthenticatedCaller):
        return caller.id
    if email and email.strip():
        return email.strip().lower()
    return caller.token
