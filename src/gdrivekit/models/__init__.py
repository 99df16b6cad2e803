"""Public model exports for gdrivekit."""

from __future__ import annotations

from .file_resource import FileResource, file_resource_from_dict
from .results import DownloadResult, FileList

__all__ = [
    "FileResource",
    "file_resource_from_dict",
    "FileList",
    "DownloadResult",
]
