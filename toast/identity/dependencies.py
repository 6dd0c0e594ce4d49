import logging

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from toast.errors import UnauthorizedError
from toast.identity.callers import AuthenticatedCaller, Caller, GuestCaller
from toast.identity.verifier import FirebaseTokenVerifier, TokenVerifier

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_token_verifier() -> TokenVerifier:
    """Dependency to get the bearer token verifier."""
    return FirebaseTokenVerifier()


async def resolve_caller(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> Caller:
    """
    Resolve the caller of the current request.
    Requests without a credential become a freshly minted guest.
    """
    if credentials is None or not credentials.credentials:
        return GuestCaller()

    claims = await verifier(credentials.credentials)
    uid = claims.get("uid") or claims.get("sub")
    if not uid:
        raise UnauthorizedError("Invalid or expired token.")

    email = claims.get("email")
    return AuthenticatedCaller(
        id=uid,
        email=email,
        display_name=claims.get("name") or email,
    )


async def resolve_caller_or_guest(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> Caller:
    """
    Resolve the caller for routes where authentication is optional.
    A credential that fails verification makes the caller a guest instead of a 401.
    """
    try:
        return await resolve_caller(credentials=credentials, verifier=verifier)
    except UnauthorizedError:
        logger.info("Unverified bearer token, continuing as guest")
        return GuestCaller()


async def require_authenticated(
    caller: Caller = Depends(resolve_caller),
) -> AuthenticatedCaller:
    if not isinstance(caller, AuthenticatedCaller):
        raise UnauthorizedError()
    return caller
