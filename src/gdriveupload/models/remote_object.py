"""Data model for Drive items seen by the upload run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class RemoteObjectMetadata:
    """
    A snapshot of one Drive item, as returned by a single API call.

    Notes:
        - Drive does not enforce unique names within a folder; several
          RemoteObjectMetadata may share the same `name`.
        - `md5_checksum` is None for Google-native types and whenever Drive
          omits it; None means "unknown" and never equals a local checksum.
    """

    file_id: str
    name: str
    mime_type: str = ""
    md5_checksum: Optional[str] = None
    size: Optional[int] = None
    trashed: bool = False


@dataclass(slots=True, frozen=True)
class RemoteLinks:
    """Canonical links reported by Drive for a file (empty if absent)."""

    web_view_link: str = ""
    download_link: str = ""


@dataclass(slots=True)
class FolderLookup:
    """Name matches for one local file inside the target folder."""

    folder_id: str
    file_name: str
    matches: list[RemoteObjectMetadata]
    truncated: bool = False

    @property
    def match_ids(self) -> list[str]:
        return [m.file_id for m in self.matches]
