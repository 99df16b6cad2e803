"""Data model for Drive files and folders."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Optional

from gdrivekit.util.mime import is_folder, is_google_app
from gdrivekit.util.time import parse_rfc3339


@dataclass(slots=True)
class FileResource:
    """
    A Drive file or folder as returned by the files API.

    Notes:
        - Owned by Drive; instances are transient copies of one response.
        - Fields outside the requested `fields` selection stay at their defaults.
    """

    id: str
    name: str
    mime_type: str
    parents: list[str] = field(default_factory=list)
    modified_time: Optional[datetime] = None

    created_time: Optional[datetime] = None
    size: Optional[int] = None
    trashed: bool = False
    md5_checksum: Optional[str] = None

    @property
    def is_folder(self) -> bool:
        return is_folder(self.mime_type)

    @property
    def is_google_app(self) -> bool:
        return is_google_app(self.mime_type)


def file_resource_from_dict(data: dict[str, Any]) -> FileResource:
    """Build a FileResource from a raw Drive response, tolerating missing fields."""
    file_id = data.get("id")
    name = data.get("name", "")
    mime_type = data.get("mimeType", "")
    parents = data.get("parents", []) or []

    size = None
    if isinstance(data.get("size"), str) and data["size"].isdigit():
        size = int(data["size"])
    elif isinstance(data.get("size"), int):
        size = data["size"]

    md5 = data.get("md5Checksum")

    return FileResource(
        id=file_id if isinstance(file_id, str) else "",
        name=name if isinstance(name, str) else "",
        mime_type=mime_type if isinstance(mime_type, str) else "",
        parents=list(parents) if isinstance(parents, list) else [],
        modified_time=_parse_time(data.get("modifiedTime")),
        created_time=_parse_time(data.get("createdTime")),
        size=size,
        trashed=bool(data.get("trashed", False)),
        md5_checksum=md5 if isinstance(md5, str) else None,
    )


def _parse_time(value: Any) -> Optional[datetime]:
    if not isinstance(value, str):
        return None
    try:
        return parse_rfc3339(value)
    except ValueError:
        return None
