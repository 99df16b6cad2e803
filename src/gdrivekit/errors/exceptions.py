"""Exception hierarchy and HTTP error mapping for gdrivekit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class GDriveKitError(Exception):
    """
    Base class of every error gdrivekit raises.

    Attributes:
        details: structured context such as the HTTP status, a file id or a path.
        cause: the library exception this error was translated from, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


class InvalidStateError(GDriveKitError):
    """The files client was requested before authentication succeeded."""


class AuthError(GDriveKitError):
    """Authorization, code exchange or token refresh failed."""


class TokenParseError(GDriveKitError):
    """A token or key file is not JSON of the expected shape."""


class LocalIOError(GDriveKitError):
    """A token file or download target could not be written."""


class PermissionError(GDriveKitError):
    """HTTP 403 for a reason other than quota."""


class InvalidArgumentError(GDriveKitError):
    """Bad input: unsupported upload source, folder download, HTTP 400."""


class NotFoundError(GDriveKitError):
    """Missing local file, or HTTP 404 from Drive."""


class ConflictError(GDriveKitError):
    """HTTP 409 or 412."""


class RateLimitError(GDriveKitError):
    """HTTP 429."""


class QuotaExceededError(GDriveKitError):
    """HTTP 403 with a quota or usage-limit reason."""


class NetworkError(GDriveKitError):
    """The request never got an HTTP answer (socket error, timeout)."""


class ApiError(GDriveKitError):
    """Any Drive failure not covered by a more specific class (5xx, odd 4xx)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Status, reason and message pulled out of a Drive API error response."""

    status_code: int
    reason: Optional[str] = None
    message: Optional[str] = None
    details: Optional[dict[str, Any]] = None

    @property
    def is_quota(self) -> bool:
        if not self.reason:
            return False
        reason = self.reason.lower()
        return any(marker in reason for marker in _QUOTA_MARKERS)


# 403 reasons that mean a usage limit rather than an access denial
# (covers userRateLimitExceeded too).
_QUOTA_MARKERS: tuple[str, ...] = (
    "quota",
    "ratelimitexceeded",
    "dailylimitexceeded",
    "usagelimits",
)

_STATUS_ERRORS: dict[int, type[GDriveKitError]] = {
    400: InvalidArgumentError,
    401: AuthError,
    403: PermissionError,
    404: NotFoundError,
    409: ConflictError,
    412: ConflictError,
    429: RateLimitError,
}


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> GDriveKitError:
    """
    Build the gdrivekit exception for a failed Drive call.

    400 is InvalidArgumentError, 401 AuthError, 403 PermissionError (or
    QuotaExceededError for quota reasons), 404 NotFoundError, 409/412
    ConflictError and 429 RateLimitError. Anything else is an ApiError.
    The provider's message becomes the exception message.
    """
    if info.status_code == 403 and info.is_quota:
        error_cls: type[GDriveKitError] = QuotaExceededError
    else:
        error_cls = _STATUS_ERRORS.get(info.status_code, ApiError)

    details: dict[str, Any] = {"status_code": info.status_code, "reason": info.reason}
    details.update(info.details or {})

    return error_cls(
        info.message or f"HTTP error {info.status_code}",
        details=details,
        cause=cause,
    )
