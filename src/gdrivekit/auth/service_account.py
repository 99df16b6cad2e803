"""Service-account (JWT) authentication for gdrivekit."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from gdrivekit.errors import AuthError, InvalidArgumentError

from .auth_info import SERVICE_ACCOUNT, AuthInfo, validate_service_account_info
from .session import DriveSession, build_drive_service

logger = logging.getLogger(__name__)


class ServiceAccountClient:
    """
    Authorize as a service account from a {client_email, private_key} key.

    The account only sees files shared with its email, unless `subject`
    impersonates a user through domain-wide delegation.
    """

    def __init__(self, auth_info: AuthInfo, *, subject: Optional[str] = None) -> None:
        if auth_info.kind != SERVICE_ACCOUNT:
            raise InvalidArgumentError(
                "ServiceAccountClient requires AuthInfo(kind='service_account')"
            )
        self._auth_info = auth_info
        self._subject = subject

    def get_credentials(self, scopes: Sequence[str]):
        """
        Build JWT credentials and fetch an access token right away.

        Raises:
            AuthError: if the key is malformed or authorization is refused.
        """
        if not scopes:
            raise InvalidArgumentError("scopes must be a non-empty sequence of strings")

        info = validate_service_account_info(self._auth_info.load_credentials())

        try:
            from google.auth.transport.requests import Request
            from google.oauth2 import service_account
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "Google auth libraries are not available",
                details={"hint": "Install google-auth"},
                cause=exc,
            ) from exc

        email = info["client_email"]
        try:
            creds = service_account.Credentials.from_service_account_info(
                info,
                scopes=list(scopes),
                subject=self._subject,
            )
        except Exception as exc:
            raise AuthError(
                f"Malformed service account key: {exc}",
                details={"client_email": email},
                cause=exc,
            ) from exc

        try:
            creds.refresh(Request())
        except Exception as exc:
            raise AuthError(
                f"Service account authorization failed: {exc}",
                details={"client_email": email},
                cause=exc,
            ) from exc

        logger.info("Service account authorized: %s", email)
        return creds

    def build_drive_session(self, scopes: Sequence[str]) -> DriveSession:
        creds = self.get_credentials(scopes)
        return DriveSession(
            service=build_drive_service(creds),
            credentials=creds,
            kind=SERVICE_ACCOUNT,
        )
