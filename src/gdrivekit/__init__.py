"""gdrivekit public API."""

from __future__ import annotations

from gdrivekit.auth import (
    AuthInfo,
    AuthManager,
    DriveSession,
    OAuthClient,
    ServiceAccountClient,
    Token,
    TokenStore,
)
from gdrivekit.client import DriveClient, ListRequest, QueryBuilder
from gdrivekit.config import DriveConfig
from gdrivekit.errors import (
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
from gdrivekit.manager import GoogleDrive
from gdrivekit.models import DownloadResult, FileList, FileResource

__all__ = [
    # High-level
    "GoogleDrive",
    "DriveConfig",
    "DriveClient",
    # Auth
    "AuthInfo",
    "AuthManager",
    "DriveSession",
    "OAuthClient",
    "ServiceAccountClient",
    "Token",
    "TokenStore",
    # Query / Models
    "ListRequest",
    "QueryBuilder",
    "FileResource",
    "FileList",
    "DownloadResult",
    # Errors
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
