"""Google Drive files API client."""

from __future__ import annotations

import io
import json
import logging
import mimetypes
import os
from pathlib import Path
from typing import Any, BinaryIO, Callable, Optional, TypeVar, Union

from gdrivekit.auth.session import DriveSession
from gdrivekit.errors import (
    ApiError,
    AuthError,
    GDriveKitError,
    HttpErrorInfo,
    InvalidArgumentError,
    LocalIOError,
    NetworkError,
    NotFoundError,
    map_http_error,
)
from gdrivekit.models import DownloadResult, FileList, FileResource, file_resource_from_dict
from gdrivekit.util.mime import (
    FOLDER_MIME,
    export_mime_for,
    extension_for,
    needs_export,
)
from gdrivekit.util.time import timestamp_name

from .fields import FILE_FIELDS
from .query import ListRequest, build_list_params, files_only_clause, folders_only_clause

logger = logging.getLogger(__name__)

T = TypeVar("T")

UploadSource = Union[str, bytes, bytearray, os.PathLike, BinaryIO]
FileRef = Union[str, FileResource]

DEFAULT_FOLDER_NAME: str = "Generic Folder"
OCTET_STREAM: str = "application/octet-stream"
TEXT_PLAIN: str = "text/plain"


class DriveClient:
    """
    Drive v3 files client: one method per remote operation.

    Notes:
        - Optional folder arguments fall back to `root_folder`.
        - Errors are raised as gdrivekit exceptions on first failure; nothing
          is retried.
    """

    def __init__(
        self,
        session: DriveSession,
        *,
        root_folder: Optional[str] = None,
    ) -> None:
        self._session = session
        self._root_folder = root_folder

    @classmethod
    def from_service(
        cls,
        service: Any,
        *,
        root_folder: Optional[str] = None,
    ) -> "DriveClient":
        """Create client from a pre-built Drive service (useful for tests)."""
        return cls(DriveSession(service=service), root_folder=root_folder)

    @property
    def root_folder(self) -> Optional[str]:
        return self._root_folder

    @property
    def session(self) -> DriveSession:
        return self._session

    # ----------------------------
    # Listing
    # ----------------------------
    def list(self, request: Optional[ListRequest] = None, **options: Any) -> FileList:
        """
        Fetch one page of files.

        Keyword options are ListRequest fields and override `request`. Follow
        pagination by passing `page_token=result.next_page_token`.

        With `recursive=True` (the default) no parent predicate is sent, so the
        page covers the whole drive visible to the account; `folder_id` is only
        echoed back as `parent_folder`. Pass `recursive=False` to restrict the
        listing to direct children of `folder_id`.
        """
        req = self._resolve_request(request, options)
        params = build_list_params(req)

        data = self._execute(self._files().list(**params).execute)
        files = [file_resource_from_dict(f) for f in data.get("files", []) or []]

        logger.debug("Found %s files on folder %s", len(files), req.folder_id)
        return FileList(
            files=files,
            next_page_token=data.get("nextPageToken") or None,
            parent_folder=req.folder_id,
        )

    def list_files(
        self,
        folder_id: Optional[str] = None,
        page_token: Optional[str] = None,
        recursive: bool = True,
        **options: Any,
    ) -> FileList:
        """Like list(), restricted to non-folder resources."""
        _check_type_filter_options(options)
        page = self.list(
            folder_id=folder_id,
            page_token=page_token,
            recursive=recursive,
            mime_type_clause=files_only_clause(),
            **options,
        )
        page.files = [f for f in page.files if not f.is_folder]
        return page

    def list_folders(
        self,
        folder_id: Optional[str] = None,
        page_token: Optional[str] = None,
        recursive: bool = True,
        **options: Any,
    ) -> FileList:
        """Like list(), restricted to folders."""
        _check_type_filter_options(options)
        page = self.list(
            folder_id=folder_id,
            page_token=page_token,
            recursive=recursive,
            mime_type_clause=folders_only_clause(),
            **options,
        )
        page.files = [f for f in page.files if f.is_folder]
        logger.debug("Found %s folders on parent folder %s", len(page.files), page.parent_folder)
        return page

    def list_all(self, request: Optional[ListRequest] = None, **options: Any) -> list[FileResource]:
        """Follow nextPageToken until every page of the listing is fetched."""
        req = self._resolve_request(request, options)
        all_files: list[FileResource] = []
        page_token: Optional[str] = req.page_token

        while True:
            page = self.list(req, page_token=page_token)
            all_files.extend(page.files)
            page_token = page.next_page_token
            if not page_token:
                break

        return all_files

    def get(self, file_id: str) -> FileResource:
        req = self._files().get(fileId=file_id, fields=FILE_FIELDS)
        data = self._execute(req.execute)
        return file_resource_from_dict(data)

    # ----------------------------
    # Create / upload
    # ----------------------------
    def create(
        self,
        source: UploadSource,
        parent_folder: Optional[str] = None,
        name: Optional[str] = None,
        mime_type: Optional[str] = None,
    ) -> FileResource:
        """
        Upload `source` into `parent_folder`.

        `source` may be:
            - a path (str or os.PathLike) to an existing file: streamed from
              disk, named after its base name by default;
            - a readable binary stream;
            - any other str/bytes: uploaded as the literal content under a
              timestamp-based name.

        Raises:
            NotFoundError: if an os.PathLike source does not exist.
            InvalidArgumentError: for unsupported source types.
        """
        media, default_name, resolved_mime = self._media_for(source, mime_type)
        return self._create(media, parent_folder, name or default_name, resolved_mime)

    def write_text_file(
        self,
        content: str,
        parent_folder: Optional[str] = None,
        name: Optional[str] = None,
    ) -> FileResource:
        """Upload a string as a text/plain file, never reading it as a path."""
        if not isinstance(content, str):
            raise InvalidArgumentError("content must be a string")
        media = self._literal_media(content.encode("utf-8"), TEXT_PLAIN)
        return self._create(
            media,
            parent_folder,
            name or timestamp_name("Text_file"),
            TEXT_PLAIN,
        )

    def create_folder(
        self,
        parent_folder: Optional[str] = None,
        folder_name: Optional[str] = None,
    ) -> FileResource:
        folder_id = parent_folder or self._root_folder
        body: dict[str, Any] = {
            "name": folder_name or DEFAULT_FOLDER_NAME,
            "mimeType": FOLDER_MIME,
        }
        if folder_id:
            body["parents"] = [folder_id]

        req = self._files().create(body=body, fields=FILE_FIELDS)
        data = self._execute(req.execute)
        created = file_resource_from_dict(data)
        logger.info("Created folder %s (%s) under %s", created.name, created.id, folder_id)
        return created

    # ----------------------------
    # Download / export
    # ----------------------------
    def get_file(
        self,
        file: FileRef,
        destination_folder: Union[str, os.PathLike],
        file_name: Optional[str] = None,
    ) -> DownloadResult:
        """
        Download a file into `destination_folder`.

        Google-native documents have no raw bytes and are exported instead.
        A failed transfer leaves the partial file on disk.
        """
        resource = self._resolve_resource(file)
        if resource.is_folder:
            raise InvalidArgumentError(
                "Folders cannot be downloaded",
                details={"file_id": resource.id},
            )
        if needs_export(resource.mime_type):
            return self.export_file(resource, destination_folder, file_name)

        dest = Path(destination_folder) / (file_name or _local_name(resource))
        req = self._files().get_media(fileId=resource.id)
        self._download(req, dest)

        logger.info("Downloaded %s to %s", resource.id, dest)
        return DownloadResult(path=dest, mime_type=resource.mime_type, exported=False)

    def export_file(
        self,
        file: FileRef,
        destination_folder: Union[str, os.PathLike],
        file_name: Optional[str] = None,
        mime_type: Optional[str] = None,
    ) -> DownloadResult:
        """
        Export a Google-native document to a concrete format and save it.

        The target format comes from EXPORT_MIME_TYPES unless `mime_type` is
        given; unmapped types export as PDF.
        """
        resource = self._resolve_resource(file)
        if resource.is_folder:
            raise InvalidArgumentError(
                "Folders cannot be exported",
                details={"file_id": resource.id},
            )

        target_mime = mime_type or export_mime_for(resource.mime_type)
        if file_name is None:
            file_name = _local_name(resource)
            ext = extension_for(target_mime)
            if ext and not file_name.lower().endswith(ext):
                file_name += ext

        dest = Path(destination_folder) / file_name
        req = self._files().export_media(fileId=resource.id, mimeType=target_mime)
        self._download(req, dest)

        logger.info("Exported %s as %s to %s", resource.id, target_mime, dest)
        return DownloadResult(path=dest, mime_type=target_mime, exported=True)

    # ----------------------------
    # Delete
    # ----------------------------
    def remove_file(self, file_id: str) -> Any:
        """Delete a file permanently; returns the raw API response."""
        req = self._files().delete(fileId=file_id)
        data = self._execute(req.execute)
        logger.info("Removed file %s", file_id)
        return data

    # ----------------------------
    # Internals
    # ----------------------------
    def _files(self) -> Any:
        self._session.ensure_fresh()
        return self._session.service.files()

    def _resolve_request(self, request: Optional[ListRequest], options: dict[str, Any]) -> ListRequest:
        req = request or ListRequest()
        if options:
            req = req.with_options(**options)
        if req.folder_id is None and self._root_folder:
            req = req.with_options(folder_id=self._root_folder)
        return req

    def _resolve_resource(self, file: FileRef) -> FileResource:
        if isinstance(file, FileResource):
            return file
        if isinstance(file, str) and file:
            return self.get(file)
        raise InvalidArgumentError("file must be a FileResource or a non-empty file id")

    def _create(
        self,
        media: Any,
        parent_folder: Optional[str],
        name: str,
        mime_type: str,
    ) -> FileResource:
        folder_id = parent_folder or self._root_folder
        body: dict[str, Any] = {"name": name, "mimeType": mime_type}
        if folder_id:
            body["parents"] = [folder_id]

        req = self._files().create(body=body, media_body=media, fields=FILE_FIELDS)
        data = self._execute(req.execute)
        created = file_resource_from_dict(data)
        logger.info("Uploaded %s (%s) to folder %s", created.name, created.id, folder_id)
        return created

    def _media_for(self, source: Any, mime_type: Optional[str]) -> tuple[Any, str, str]:
        from googleapiclient.http import MediaFileUpload, MediaIoBaseUpload

        if isinstance(source, os.PathLike):
            path = os.fspath(source)
            if not os.path.isfile(path):
                raise NotFoundError("Source file not found", details={"path": path})
            return self._file_media(MediaFileUpload, path, mime_type)

        if isinstance(source, str) and os.path.isfile(source):
            return self._file_media(MediaFileUpload, source, mime_type)

        if isinstance(source, io.TextIOBase):
            data = source.read().encode("utf-8")
            name = _stream_name(source) or timestamp_name("Text_file")
            resolved = mime_type or TEXT_PLAIN
            return self._literal_media(data, resolved), name, resolved

        if hasattr(source, "read"):
            resolved = mime_type or OCTET_STREAM
            media = MediaIoBaseUpload(source, mimetype=resolved, resumable=True)
            return media, _stream_name(source) or timestamp_name("File"), resolved

        if isinstance(source, str):
            resolved = mime_type or TEXT_PLAIN
            return (
                self._literal_media(source.encode("utf-8"), resolved),
                timestamp_name("Text_file"),
                resolved,
            )

        if isinstance(source, (bytes, bytearray)):
            resolved = mime_type or OCTET_STREAM
            return self._literal_media(bytes(source), resolved), timestamp_name("File"), resolved

        raise InvalidArgumentError(
            "Unsupported upload source",
            details={"type": type(source).__name__},
        )

    @staticmethod
    def _file_media(media_cls: Any, path: str, mime_type: Optional[str]) -> tuple[Any, str, str]:
        resolved = mime_type or mimetypes.guess_type(path)[0] or OCTET_STREAM
        media = media_cls(path, mimetype=resolved, resumable=True)
        return media, os.path.basename(path), resolved

    @staticmethod
    def _literal_media(data: bytes, mime_type: str) -> Any:
        from googleapiclient.http import MediaIoBaseUpload

        return MediaIoBaseUpload(io.BytesIO(data), mimetype=mime_type, resumable=True)

    def _download(self, request: Any, dest: Path) -> None:
        from googleapiclient.http import MediaIoBaseDownload

        try:
            dest.parent.mkdir(parents=True, exist_ok=True)
            f = open(dest, "wb")
        except OSError as exc:
            raise LocalIOError(
                "Cannot open download destination",
                details={"path": str(dest)},
                cause=exc,
            ) from exc

        with f:
            downloader = MediaIoBaseDownload(f, request)
            done = False
            while not done:
                _, done = self._execute(downloader.next_chunk)

    def _execute(self, func: Callable[[], T]) -> T:
        try:
            return func()
        except GDriveKitError:
            raise
        except Exception as exc:
            raise self._map_exception(exc) from exc

    def _map_exception(self, exc: Exception) -> Exception:
        try:
            from googleapiclient.errors import HttpError
        except Exception:  # pragma: no cover
            HttpError = None  # type: ignore[assignment]

        if HttpError is not None and isinstance(exc, HttpError):
            info = _http_error_to_info(exc)
            return map_http_error(info, cause=exc)

        try:
            from google.auth.exceptions import RefreshError
        except Exception:  # pragma: no cover
            RefreshError = None  # type: ignore[assignment]

        if RefreshError is not None and isinstance(exc, RefreshError):
            return AuthError(str(exc), cause=exc)

        if isinstance(exc, (OSError, TimeoutError)):
            return NetworkError(f"Network error: {exc}", cause=exc)

        return ApiError(f"Drive API error: {exc}", cause=exc)


def _local_name(resource: FileResource) -> str:
    """Drive name usable as a single file name inside the destination folder."""
    name = resource.name.replace("/", "_").replace("\\", "_") if resource.name else ""
    if name.strip(".") == "":
        return resource.id
    return name


def _check_type_filter_options(options: dict[str, Any]) -> None:
    if "mime_type_clause" in options:
        raise InvalidArgumentError(
            "mime_type_clause is set by list_files/list_folders; use list() to pass your own"
        )
    fields = options.get("fields")
    if fields is not None and "mimeType" not in fields:
        raise InvalidArgumentError(
            "fields must include mimeType so results can be filtered by type",
            details={"fields": fields},
        )


def _stream_name(stream: Any) -> Optional[str]:
    name = getattr(stream, "name", None)
    if isinstance(name, str) and name:
        return os.path.basename(name)
    return None


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, ValueError):
            payload = None
        err = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
