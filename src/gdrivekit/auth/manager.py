"""Pick the credential flow for an AuthInfo and produce a DriveSession."""

from __future__ import annotations

import logging
import os
from typing import Callable, Optional, Sequence

from gdrivekit.errors import InvalidArgumentError

from .auth_info import OAUTH, SERVICE_ACCOUNT, AuthInfo, CredentialsSource
from .oauth_client import OAuthClient
from .service_account import ServiceAccountClient
from .session import DriveSession

logger = logging.getLogger(__name__)

DEFAULT_SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/drive",)


class AuthManager:
    """Establish credentials and build the Drive service handle."""

    def __init__(self, scopes: Optional[Sequence[str]] = None) -> None:
        self.scopes: tuple[str, ...] = tuple(scopes) if scopes else DEFAULT_SCOPES

    def authorize(
        self,
        auth_info: AuthInfo,
        *,
        input_func: Callable[[str], str] = input,
        local_server: bool = False,
        subject: Optional[str] = None,
    ) -> DriveSession:
        if auth_info.kind == OAUTH:
            client = OAuthClient(auth_info, input_func=input_func, local_server=local_server)
            session = client.build_drive_session(self.scopes)
        elif auth_info.kind == SERVICE_ACCOUNT:
            session = ServiceAccountClient(auth_info, subject=subject).build_drive_session(
                self.scopes
            )
        else:  # pragma: no cover - AuthInfo validates kind
            raise InvalidArgumentError(f"Unsupported auth kind: {auth_info.kind}")

        logger.info("Authenticated with %s credentials", auth_info.kind)
        return session

    def authorize_oauth(
        self,
        credentials: CredentialsSource,
        token_file: str | os.PathLike,
        *,
        input_func: Callable[[str], str] = input,
        local_server: bool = False,
    ) -> DriveSession:
        return self.authorize(
            AuthInfo.oauth(credentials, token_file),
            input_func=input_func,
            local_server=local_server,
        )

    def authorize_service_account(
        self,
        credentials: CredentialsSource,
        *,
        subject: Optional[str] = None,
    ) -> DriveSession:
        return self.authorize(AuthInfo.service_account(credentials), subject=subject)
