"""GoogleDrive: configuration, authentication and the files client in one object."""

from __future__ import annotations

import os
from typing import Callable, Optional, Sequence

from gdrivekit.auth import AuthManager, DriveSession
from gdrivekit.auth.auth_info import CredentialsSource
from gdrivekit.client import DriveClient
from gdrivekit.config import DriveConfig
from gdrivekit.errors import InvalidStateError


class GoogleDrive:
    """
    Entry point: authenticate once, then use `client` for file operations.

    The instance is unauthenticated until one of the auth methods succeeds;
    `client` raises InvalidStateError before that.
    """

    def __init__(
        self,
        config: Optional[DriveConfig] = None,
        *,
        root_folder: Optional[str] = None,
        scopes: Optional[Sequence[str]] = None,
    ) -> None:
        base = config or DriveConfig()
        self._config = DriveConfig(
            root_folder=root_folder if root_folder is not None else base.root_folder,
            scopes=tuple(scopes) if scopes else base.scopes,
            key_file=base.key_file,
            credentials_json=base.credentials_json,
        )
        self._auth = AuthManager(self._config.scopes)
        self._client: Optional[DriveClient] = None

    @classmethod
    def from_env(cls) -> "GoogleDrive":
        return cls(DriveConfig.from_env())

    @classmethod
    def from_session(
        cls,
        session: DriveSession,
        config: Optional[DriveConfig] = None,
    ) -> "GoogleDrive":
        """Create an authenticated instance around an existing session (useful for tests)."""
        obj = cls(config)
        obj._client = DriveClient(session, root_folder=obj._config.root_folder)
        return obj

    @property
    def config(self) -> DriveConfig:
        return self._config

    @property
    def is_auth_active(self) -> bool:
        return self._client is not None

    @property
    def client(self) -> DriveClient:
        """Return the files client. Requires authentication first."""
        if self._client is None:
            raise InvalidStateError(
                "Not authenticated. Call request_auth_token() or use_service_account_auth() first."
            )
        return self._client

    def request_auth_token(
        self,
        credentials: CredentialsSource,
        token_path: str | os.PathLike,
        *,
        input_func: Callable[[str], str] = input,
        local_server: bool = False,
    ) -> DriveClient:
        """Authenticate with OAuth client secrets and a token file."""
        session = self._auth.authorize_oauth(
            credentials,
            token_path,
            input_func=input_func,
            local_server=local_server,
        )
        return self._activate(session)

    def use_service_account_auth(
        self,
        credentials: Optional[CredentialsSource] = None,
        *,
        subject: Optional[str] = None,
    ) -> DriveClient:
        """Authenticate as a service account; defaults to the configured key."""
        if credentials is None:
            credentials = self._config.service_account_info()
        session = self._auth.authorize_service_account(credentials, subject=subject)
        return self._activate(session)

    def _activate(self, session: DriveSession) -> DriveClient:
        self._client = DriveClient(session, root_folder=self._config.root_folder)
        return self._client
