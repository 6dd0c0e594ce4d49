import asyncio
import logging
from typing import Any, Protocol

from toast.config.settings import settings
from toast.errors import UnauthorizedError

logger = logging.getLogger(__name__)


class TokenVerifier(Protocol):
    """Protocol for bearer credential verification."""

    async def __call__(self, token: str) -> dict[str, Any]:
        """Verify the credential and return its decoded claims."""
        ...


class FirebaseConfig(Protocol):
    firebase_credentials_path: str
    firebase_project_id: str


class FirebaseTokenVerifier:
    """Default verifier for Firebase ID tokens."""

    def __init__(self, config: FirebaseConfig = settings):
        self._config = config

    def _get_app(self):
        import firebase_admin
        from firebase_admin import credentials

        try:
            return firebase_admin.get_app()
        except ValueError:
            if self._config.firebase_credentials_path:
                cred = credentials.Certificate(self._config.firebase_credentials_path)
            else:
                cred = credentials.ApplicationDefault()
            options = {}
            if self._config.firebase_project_id:
                options["projectId"] = self._config.firebase_project_id
            return firebase_admin.initialize_app(cred, options or None)

    def _verify(self, token: str) -> dict[str, Any]:
        from firebase_admin import auth

        try:
            return auth.verify_id_token(token, app=self._get_app())
        except (auth.InvalidIdTokenError, auth.UserDisabledError, ValueError) as e:
            logger.info("Rejected bearer token: %s", e)
            raise UnauthorizedError("Invalid or expired token.") from e

    async def __call__(self, token: str) -> dict[str, Any]:
        # verify_id_token may fetch signing certificates over the network
        return await asyncio.to_thread(self._verify, token)
