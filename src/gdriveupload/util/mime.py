from __future__ import annotations

import mimetypes

FOLDER_MIME: str = "application/vnd.google-apps.folder"
DEFAULT_MIME: str = "application/octet-stream"


def is_folder(mime_type: str) -> bool:
    return mime_type == FOLDER_MIME


def guess_mime_type(path: str) -> str:
    """
    Best-effort MIME type detection from the file name.

    Falls back to application/octet-stream when the extension is unknown.
    """
    guessed, _ = mimetypes.guess_type(path, strict=False)
    return guessed or DEFAULT_MIME
