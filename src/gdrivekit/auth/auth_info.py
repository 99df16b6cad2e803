"""Authentication information for gdrivekit."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any, Union

from gdrivekit.errors import InvalidArgumentError, NotFoundError, TokenParseError

CredentialsSource = Union[str, os.PathLike, dict]

OAUTH = "oauth"
SERVICE_ACCOUNT = "service_account"

DEFAULT_AUTH_URI: str = "https://accounts.google.com/o/oauth2/auth"
DEFAULT_TOKEN_URI: str = "https://oauth2.googleapis.com/token"


@dataclass(slots=True, frozen=True)
class AuthInfo:
    """
    Authentication information.

    kind = "oauth":
        data must include:
            - credentials: path to client secrets JSON, or the dict itself
            - token_file
    kind = "service_account":
        data must include:
            - credentials: path to the key JSON, or the dict itself
    """

    kind: str
    data: dict[str, Any]

    def __post_init__(self) -> None:
        if self.kind not in (OAUTH, SERVICE_ACCOUNT):
            raise ValueError("AuthInfo.kind must be 'oauth' or 'service_account'")

        if not isinstance(self.data, dict):
            raise TypeError("AuthInfo.data must be a dict")

        creds = self.data.get("credentials")
        if isinstance(creds, os.PathLike):
            creds = os.fspath(creds)
        if isinstance(creds, str):
            if not creds.strip():
                raise ValueError("AuthInfo.data['credentials'] must be a non-empty path")
        elif not isinstance(creds, dict):
            raise TypeError("AuthInfo.data['credentials'] must be a path or a dict")

        if self.kind == OAUTH:
            token_file = self.data.get("token_file")
            if isinstance(token_file, os.PathLike):
                token_file = os.fspath(token_file)
            if not isinstance(token_file, str) or not token_file.strip():
                raise ValueError("AuthInfo.data['token_file'] must be a non-empty string")

    @classmethod
    def oauth(cls, credentials: CredentialsSource, token_file: str | os.PathLike) -> "AuthInfo":
        return cls(kind=OAUTH, data={"credentials": credentials, "token_file": token_file})

    @classmethod
    def service_account(cls, credentials: CredentialsSource) -> "AuthInfo":
        return cls(kind=SERVICE_ACCOUNT, data={"credentials": credentials})

    @property
    def token_file(self) -> str:
        """Path to the OAuth token JSON."""
        return os.fspath(self.data["token_file"])

    def load_credentials(self) -> dict[str, Any]:
        """Return the credentials dict, reading it from disk when given a path."""
        creds = self.data["credentials"]
        if isinstance(creds, dict):
            return creds
        return load_json_file(os.fspath(creds))


def load_json_file(path: str) -> dict[str, Any]:
    if not os.path.exists(path):
        raise NotFoundError("Credentials file not found", details={"path": path})
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as exc:
        raise TokenParseError(
            f"Invalid JSON in {path}: {exc}",
            details={"path": path},
            cause=exc,
        ) from exc
    if not isinstance(data, dict):
        raise TokenParseError("Expected a JSON object", details={"path": path})
    return data


def normalize_client_config(creds: dict[str, Any]) -> dict[str, Any]:
    """
    Return an OAuth client config in the {"installed": {...}} shape.

    Accepts the "installed" and "web" layouts downloaded from the Cloud Console
    and the bare {client_id, client_secret, redirect_uris} object.
    """
    if "installed" in creds:
        key, section = "installed", creds["installed"]
    elif "web" in creds:
        key, section = "web", creds["web"]
    else:
        key, section = "installed", creds

    if not isinstance(section, dict):
        raise InvalidArgumentError("OAuth client config must be an object")

    for field_name in ("client_id", "client_secret"):
        if not section.get(field_name):
            raise InvalidArgumentError(
                f"OAuth client config is missing '{field_name}'",
                details={"field": field_name},
            )

    redirect_uris = section.get("redirect_uris") or []
    if not isinstance(redirect_uris, list) or not redirect_uris:
        raise InvalidArgumentError("OAuth client config needs at least one redirect_uri")

    section = dict(section)
    section.setdefault("auth_uri", DEFAULT_AUTH_URI)
    section.setdefault("token_uri", DEFAULT_TOKEN_URI)
    return {key: section}


def client_section(config: dict[str, Any]) -> dict[str, Any]:
    """The inner installed/web section of a normalized client config."""
    return config.get("installed") or config["web"]


def validate_service_account_info(info: dict[str, Any]) -> dict[str, Any]:
    """Check the service-account shape and fill the default token_uri."""
    for field_name in ("client_email", "private_key"):
        value = info.get(field_name)
        if not isinstance(value, str) or not value.strip():
            raise InvalidArgumentError(
                f"Service account credentials are missing '{field_name}'",
                details={"field": field_name},
            )
    info = dict(info)
    info.setdefault("token_uri", DEFAULT_TOKEN_URI)
    return info
