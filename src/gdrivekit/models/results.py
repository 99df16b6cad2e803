"""Result models for list and download operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .file_resource import FileResource


@dataclass(slots=True)
class FileList:
    """One page of a files.list call."""

    files: list[FileResource] = field(default_factory=list)
    next_page_token: Optional[str] = None
    parent_folder: Optional[str] = None

    @property
    def has_more(self) -> bool:
        """True when the caller should resubmit next_page_token."""
        return bool(self.next_page_token)


@dataclass(slots=True)
class DownloadResult:
    """Where a downloaded file landed and how it was fetched."""

    path: Path
    mime_type: str
    exported: bool = False
