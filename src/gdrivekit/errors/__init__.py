"""Public error exports for gdrivekit."""

from __future__ import annotations

from .exceptions import (
    ApiError,
    AuthError,
    ConflictError,
    GDriveKitError,
    HttpErrorInfo,
    InvalidArgumentError,
    InvalidStateError,
    LocalIOError,
    NetworkError,
    NotFoundError,
    PermissionError,
    QuotaExceededError,
    RateLimitError,
    TokenParseError,
    map_http_error,
)

__all__ = [
    "GDriveKitError",
    "InvalidStateError",
    "AuthError",
    "TokenParseError",
    "LocalIOError",
    "PermissionError",
    "InvalidArgumentError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
