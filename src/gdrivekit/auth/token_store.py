"""On-disk persistence of OAuth tokens."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Optional, Sequence

from gdrivekit.errors import LocalIOError, NotFoundError, TokenParseError
from gdrivekit.util.time import from_epoch_ms, now_utc, to_epoch_ms

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Token:
    """
    OAuth token as persisted between runs.

    expiry_date is milliseconds since the Unix epoch.
    """

    access_token: str
    refresh_token: Optional[str] = None
    expiry_date: Optional[int] = None
    token_type: Optional[str] = None
    scope: Optional[str] = None

    @property
    def expired(self) -> bool:
        if self.expiry_date is None:
            return False
        return self.expiry_date <= to_epoch_ms(now_utc())

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "access_token": self.access_token,
            "refresh_token": self.refresh_token,
            "expiry_date": self.expiry_date,
        }
        if self.token_type is not None:
            data["token_type"] = self.token_type
        if self.scope is not None:
            data["scope"] = self.scope
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Token":
        access_token = data.get("access_token")
        if not isinstance(access_token, str) or not access_token:
            raise TokenParseError("Token is missing 'access_token'")

        expiry_date = data.get("expiry_date")
        if expiry_date is not None and not isinstance(expiry_date, int):
            raise TokenParseError(
                "Token 'expiry_date' must be an integer (epoch milliseconds)",
                details={"expiry_date": expiry_date},
            )

        return cls(
            access_token=access_token,
            refresh_token=data.get("refresh_token"),
            expiry_date=expiry_date,
            token_type=data.get("token_type"),
            scope=data.get("scope"),
        )

    @classmethod
    def from_credentials(cls, creds: Any) -> "Token":
        """Snapshot google.oauth2.credentials.Credentials into a Token."""
        scopes = getattr(creds, "scopes", None)
        return cls(
            access_token=creds.token,
            refresh_token=creds.refresh_token,
            expiry_date=to_epoch_ms(creds.expiry),
            token_type="Bearer",
            scope=" ".join(scopes) if scopes else None,
        )

    def to_credentials(
        self,
        *,
        client_id: str,
        client_secret: str,
        token_uri: str,
        scopes: Sequence[str],
    ):
        """
        Build google.oauth2.credentials.Credentials from this token.

        google-auth compares expiry against naive UTC, so tzinfo is stripped.
        """
        from google.oauth2.credentials import Credentials

        expiry = from_epoch_ms(self.expiry_date)
        return Credentials(
            token=self.access_token,
            refresh_token=self.refresh_token,
            token_uri=token_uri,
            client_id=client_id,
            client_secret=client_secret,
            scopes=list(scopes),
            expiry=expiry.replace(tzinfo=None) if expiry is not None else None,
        )


class TokenStore:
    """Read and write Token JSON files. No locking: the last writer wins."""

    @staticmethod
    def read(path: str | os.PathLike) -> Token:
        """
        Raises:
            NotFoundError: if the file does not exist.
            TokenParseError: if the file is not a valid token.
        """
        path = os.fspath(path)
        if not os.path.exists(path):
            raise NotFoundError("Token file not found", details={"token_file": path})

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise TokenParseError(
                "Token file is not valid JSON",
                details={"token_file": path},
                cause=exc,
            ) from exc
        except OSError as exc:
            raise NotFoundError(
                "Token file could not be read",
                details={"token_file": path},
                cause=exc,
            ) from exc

        if not isinstance(data, dict):
            raise TokenParseError("Token file must hold a JSON object", details={"token_file": path})

        token = Token.from_dict(data)
        logger.debug("Loaded token from %s (expiry_date=%s)", path, token.expiry_date)
        return token

    @staticmethod
    def write(path: str | os.PathLike, token: Token) -> Token:
        path = os.fspath(path)
        token_dir = os.path.dirname(path)
        try:
            if token_dir:
                os.makedirs(token_dir, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump(token.to_dict(), f, indent=4)
        except OSError as exc:
            raise LocalIOError(
                "Failed to save token file",
                details={"token_file": path},
                cause=exc,
            ) from exc

        logger.info("Token stored to %s", path)
        return token
