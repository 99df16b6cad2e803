"""Field selections for Google Drive API responses."""

from __future__ import annotations

FILE_FIELDS: str = (
    "id,"
    "name,"
    "mimeType,"
    "parents,"
    "trashed,"
    "modifiedTime,"
    "createdTime,"
    "size,"
    "md5Checksum"
)

DEFAULT_LIST_FIELDS: str = "nextPageToken, files(id, name, parents, mimeType, modifiedTime)"
