"""Drive `q` filter construction and files.list parameter building."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Any, Optional

from gdrivekit.util.mime import FOLDER_MIME

from .fields import DEFAULT_LIST_FIELDS

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE: int = 100


@dataclass(frozen=True)
class ListRequest:
    """Options of a single files.list call."""

    folder_id: Optional[str] = None
    page_token: Optional[str] = None
    recursive: bool = True
    include_removed: bool = False
    fields: str = DEFAULT_LIST_FIELDS
    query: Optional[str] = None
    page_size: int = DEFAULT_PAGE_SIZE
    spaces: str = "drive"
    mime_type_clause: Optional[str] = None

    def with_options(self, **options: Any) -> "ListRequest":
        return replace(self, **options)


def escape_literal(value: str) -> str:
    """Escape a value for use inside a single-quoted Drive query string."""
    return value.replace("\\", "\\\\").replace("'", "\\'")


class QueryBuilder:
    """Collect filter clauses and join them with `and`."""

    def __init__(self) -> None:
        self._clauses: list[str] = []

    def raw(self, clause: Optional[str]) -> "QueryBuilder":
        if clause and clause.strip():
            self._clauses.append(clause.strip())
        return self

    def in_parents(self, folder_id: str) -> "QueryBuilder":
        return self.raw(f"'{escape_literal(folder_id)}' in parents")

    def mime_type_is(self, mime_type: str) -> "QueryBuilder":
        return self.raw(f"mimeType = '{escape_literal(mime_type)}'")

    def mime_type_is_not(self, mime_type: str) -> "QueryBuilder":
        return self.raw(f"mimeType != '{escape_literal(mime_type)}'")

    def not_trashed(self) -> "QueryBuilder":
        return self.raw("trashed = false")

    def mentions(self, term: str) -> bool:
        return any(term in clause for clause in self._clauses)

    def build(self) -> Optional[str]:
        if not self._clauses:
            return None
        if len(self._clauses) == 1:
            return self._clauses[0]
        return " and ".join(_wrap(c) for c in self._clauses)


def _wrap(clause: str) -> str:
    # Parenthesise anything that could bind looser than `and`.
    lowered = f" {clause.lower()} "
    if " or " in lowered or " and " in lowered or lowered.strip().startswith("not "):
        return f"({clause})"
    return clause


def folders_only_clause() -> str:
    return f"mimeType = '{FOLDER_MIME}'"


def files_only_clause() -> str:
    return f"mimeType != '{FOLDER_MIME}'"


def build_list_query(request: ListRequest) -> Optional[str]:
    """
    Render the `q` parameter for a ListRequest.

    Order: free-form query, MIME predicate, direct-child predicate (only when
    not recursive), then the trashed filter unless the caller already set one.
    """
    qb = QueryBuilder().raw(request.query).raw(request.mime_type_clause)

    if not request.recursive and request.folder_id:
        qb.in_parents(request.folder_id)

    if not request.include_removed and not qb.mentions("trashed"):
        qb.not_trashed()

    return qb.build()


def build_list_params(request: ListRequest) -> dict[str, Any]:
    """files.list keyword arguments for a ListRequest."""
    params: dict[str, Any] = {
        "spaces": request.spaces,
        "pageSize": request.page_size,
        "fields": request.fields,
    }
    q = build_list_query(request)
    if q is not None:
        params["q"] = q
    if request.page_token:
        params["pageToken"] = request.page_token

    logger.debug("files.list params: %s", params)
    return params
