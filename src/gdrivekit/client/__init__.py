"""Drive client exports for gdrivekit."""

from __future__ import annotations

from .drive_client import DriveClient
from .query import ListRequest, QueryBuilder, build_list_params, build_list_query

__all__ = [
    "DriveClient",
    "ListRequest",
    "QueryBuilder",
    "build_list_params",
    "build_list_query",
]
