"""OAuth client utilities for gdrivekit."""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Sequence

from gdrivekit.errors import AuthError, InvalidArgumentError, NotFoundError, TokenParseError

from .auth_info import OAUTH, AuthInfo, client_section, normalize_client_config
from .session import DriveSession, build_drive_service
from .token_store import Token, TokenStore

logger = logging.getLogger(__name__)


class OAuthClient:
    """
    Obtain OAuth user credentials backed by a token file.

    A readable token file is refreshed silently. When the file is missing or
    corrupt, the stored grant is rejected, or the token expired with no
    refresh_token, the user is sent through the consent flow once and the new
    token is written back.
    """

    def __init__(
        self,
        auth_info: AuthInfo,
        *,
        token_store: Optional[TokenStore] = None,
        input_func: Callable[[str], str] = input,
        local_server: bool = False,
    ) -> None:
        if auth_info.kind != OAUTH:
            raise InvalidArgumentError("OAuthClient requires AuthInfo(kind='oauth')")
        self._auth_info = auth_info
        self._token_store = token_store or TokenStore()
        self._input_func = input_func
        self._local_server = local_server
        self._client_config: Optional[dict[str, Any]] = None

    @property
    def client_config(self) -> dict[str, Any]:
        if self._client_config is None:
            self._client_config = normalize_client_config(self._auth_info.load_credentials())
        return self._client_config

    def get_credentials(self, scopes: Sequence[str]):
        """
        Return OAuth credentials for the given scopes.

        Returns:
            google.oauth2.credentials.Credentials

        Raises:
            AuthError: on flow failures, or when a refresh fails for a reason
                other than the stored token being rejected.
            InvalidArgumentError: if scopes or the client config are invalid.
        """
        if not scopes or not all(isinstance(s, str) and s.strip() for s in scopes):
            raise InvalidArgumentError("scopes must be a non-empty sequence of strings")

        token_file = self._auth_info.token_file
        section = client_section(self.client_config)

        try:
            token = self._token_store.read(token_file)
        except (NotFoundError, TokenParseError) as exc:
            logger.warning("Stored token unavailable (%s); starting authorization flow", exc)
            return self._authorize(scopes)

        creds = token.to_credentials(
            client_id=section["client_id"],
            client_secret=section["client_secret"],
            token_uri=section["token_uri"],
            scopes=scopes,
        )

        if creds.refresh_token:
            try:
                self._refresh(creds)
            except AuthError as exc:
                if not _is_refresh_rejection(exc.cause):
                    raise
                logger.warning(
                    "Stored refresh token was rejected (%s); starting authorization flow",
                    exc.cause,
                )
                return self._authorize(scopes)
            return creds

        if token.expired:
            logger.warning(
                "Stored token expired without a refresh_token; starting authorization flow"
            )
            return self._authorize(scopes)
        return creds

    def refresh_if_expired(self, creds) -> None:
        """Refresh expired credentials and persist the new token."""
        if creds.expired and creds.refresh_token:
            logger.info("Access token expired, refreshing")
            self._refresh(creds)

    def build_drive_session(self, scopes: Sequence[str]) -> DriveSession:
        """Authorize and build a Drive v3 session that refreshes through this client."""
        creds = self.get_credentials(scopes)
        service = build_drive_service(creds)
        return DriveSession(
            service=service,
            credentials=creds,
            refresher=self.refresh_if_expired,
            kind=OAUTH,
        )

    # ----------------------------
    # Internals
    # ----------------------------
    def _refresh(self, creds) -> None:
        try:
            from google.auth.transport.requests import Request
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "Google auth libraries are not available",
                details={"hint": "Install google-auth"},
                cause=exc,
            ) from exc

        token_file = self._auth_info.token_file
        try:
            creds.refresh(Request())
        except Exception as exc:
            raise AuthError(
                f"Failed to refresh OAuth credentials: {exc}",
                details={"token_file": token_file},
                cause=exc,
            ) from exc

        new_token = self._token_store.write(token_file, Token.from_credentials(creds))
        logger.info("Token refreshed, new expiry_date %s", new_token.expiry_date)

    def _authorize(self, scopes: Sequence[str]):
        try:
            from google_auth_oauthlib.flow import Flow, InstalledAppFlow
        except Exception as exc:  # pragma: no cover
            raise AuthError(
                "google-auth-oauthlib is not available",
                details={"hint": "Install google-auth-oauthlib"},
                cause=exc,
            ) from exc

        config = self.client_config
        try:
            if self._local_server:
                flow = InstalledAppFlow.from_client_config(config, scopes=list(scopes))
                creds = flow.run_local_server(port=0)
            else:
                flow = Flow.from_client_config(
                    config,
                    scopes=list(scopes),
                    redirect_uri=client_section(config)["redirect_uris"][0],
                )
                auth_url, _ = flow.authorization_url(access_type="offline", prompt="consent")
                print(f"Authorize this app by visiting this url: {auth_url}")
                code = self._input_func("Enter the code from that page here: ").strip()
                flow.fetch_token(code=code)
                creds = flow.credentials
        except Exception as exc:
            raise AuthError(
                f"OAuth authorization flow failed: {exc}",
                details={"token_file": self._auth_info.token_file},
                cause=exc,
            ) from exc

        self._token_store.write(self._auth_info.token_file, Token.from_credentials(creds))
        return creds


def _is_refresh_rejection(exc: Optional[BaseException]) -> bool:
    # RefreshError is the server refusing the grant; transport failures are not.
    try:
        from google.auth.exceptions import RefreshError
    except Exception:  # pragma: no cover
        return False
    return isinstance(exc, RefreshError)
