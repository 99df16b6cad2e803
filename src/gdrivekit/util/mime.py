from __future__ import annotations

FOLDER_MIME: str = "application/vnd.google-apps.folder"
GOOGLE_APPS_PREFIX: str = "application/vnd.google-apps."

GOOGLE_DOC_MIME: str = "application/vnd.google-apps.document"
GOOGLE_SHEET_MIME: str = "application/vnd.google-apps.spreadsheet"
GOOGLE_SLIDES_MIME: str = "application/vnd.google-apps.presentation"
GOOGLE_DRAWING_MIME: str = "application/vnd.google-apps.drawing"
GOOGLE_SCRIPT_MIME: str = "application/vnd.google-apps.script"

GOOGLE_APP_MIMES: set[str] = {
    GOOGLE_DOC_MIME,
    GOOGLE_SHEET_MIME,
    GOOGLE_SLIDES_MIME,
    GOOGLE_DRAWING_MIME,
    GOOGLE_SCRIPT_MIME,
    "application/vnd.google-apps.form",
    "application/vnd.google-apps.site",
}

DEFAULT_EXPORT_MIME: str = "application/pdf"

# Google-native type -> concrete format used when downloading.
EXPORT_MIME_TYPES: dict[str, str] = {
    GOOGLE_DOC_MIME: "application/pdf",
    GOOGLE_SHEET_MIME: (
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    ),
    GOOGLE_SLIDES_MIME: "application/pdf",
    GOOGLE_DRAWING_MIME: "image/png",
    GOOGLE_SCRIPT_MIME: "application/vnd.google-apps.script+json",
}

_EXTENSIONS: dict[str, str] = {
    "application/pdf": ".pdf",
    "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": ".xlsx",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": ".docx",
    "application/vnd.openxmlformats-officedocument.presentationml.presentation": ".pptx",
    "application/vnd.google-apps.script+json": ".json",
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "text/plain": ".txt",
    "text/csv": ".csv",
    "text/html": ".html",
}


def is_folder(mime_type: str) -> bool:
    return mime_type == FOLDER_MIME


def is_google_app(mime_type: str) -> bool:
    """
    Returns True if the MIME type is a Google 'apps' type.

    Unlisted types are still detected by the 'application/vnd.google-apps.' prefix.
    """
    if mime_type in GOOGLE_APP_MIMES:
        return True
    return mime_type.startswith(GOOGLE_APPS_PREFIX)


def needs_export(mime_type: str) -> bool:
    """Google-native documents have no raw bytes and must go through export."""
    return is_google_app(mime_type) and not is_folder(mime_type)


def export_mime_for(mime_type: str) -> str:
    """Target format for a Google-native type; unmapped types fall back to PDF."""
    return EXPORT_MIME_TYPES.get(mime_type, DEFAULT_EXPORT_MIME)


def extension_for(mime_type: str) -> str:
    return _EXTENSIONS.get(mime_type, "")
