"""Authenticated Drive service handle."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from gdrivekit.errors import AuthError


@dataclass
class DriveSession:
    """
    A built Drive v3 service plus the credentials behind it.

    `refresher` (when set) is called with the credentials before each request;
    the OAuth client uses it to refresh and persist expired tokens.
    """

    service: Any
    credentials: Any = None
    refresher: Optional[Callable[[Any], None]] = None
    kind: str = "custom"

    def ensure_fresh(self) -> None:
        if self.refresher is not None and self.credentials is not None:
            self.refresher(self.credentials)


def build_drive_service(credentials: Any):
    """
    Build a Drive API service resource.

    Returns:
        googleapiclient.discovery.Resource
    """
    try:
        from googleapiclient.discovery import build
    except Exception as exc:  # pragma: no cover
        raise AuthError(
            "google-api-python-client is not available",
            details={"hint": "Install google-api-python-client"},
            cause=exc,
        ) from exc

    try:
        return build("drive", "v3", credentials=credentials, cache_discovery=False)
    except Exception as exc:
        raise AuthError("Failed to build Drive service", cause=exc) from exc
