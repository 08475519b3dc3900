"""Field definitions for Google Drive API responses."""

from __future__ import annotations

FILE_FIELDS: str = (
    "id,"
    "name,"
    "mimeType,"
    "trashed,"
    "size,"
    "md5Checksum"
)

LIST_FIELDS: str = f"nextPageToken,files({FILE_FIELDS})"

LINK_FIELDS: str = "id,webViewLink,webContentLink"

PERMISSION_FIELDS: str = "id"

# Large enough to capture realistic folders in a single listing call.
LIST_PAGE_SIZE: int = 1000
