from .mime import (
    DEFAULT_EXPORT_MIME,
    EXPORT_MIME_TYPES,
    FOLDER_MIME,
    GOOGLE_APP_MIMES,
    export_mime_for,
    extension_for,
    is_folder,
    is_google_app,
    needs_export,
)
from .time import (
    from_epoch_ms,
    now_utc,
    parse_rfc3339,
    timestamp_name,
    to_epoch_ms,
)

__all__ = [
    "FOLDER_MIME",
    "GOOGLE_APP_MIMES",
    "EXPORT_MIME_TYPES",
    "DEFAULT_EXPORT_MIME",
    "is_folder",
    "is_google_app",
    "needs_export",
    "export_mime_for",
    "extension_for",
    "now_utc",
    "parse_rfc3339",
    "to_epoch_ms",
    "from_epoch_ms",
    "timestamp_name",
]
