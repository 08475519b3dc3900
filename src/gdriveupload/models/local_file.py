"""Local file model (read once per upload pass)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from gdriveupload.errors import LocalFileNotFoundError
from gdriveupload.util.hashing import md5_checksum
from gdriveupload.util.mime import guess_mime_type


@dataclass(slots=True, frozen=True)
class LocalFile:
    """A local file selected for upload."""

    path: str
    name: str
    mime_type: str
    size: Optional[int] = None
    md5_checksum: Optional[str] = None

    @classmethod
    def from_path(cls, path: str) -> LocalFile:
        """
        Read metadata and fingerprint for `path`.

        Raises:
            LocalFileNotFoundError: if `path` is not an existing regular file
                or cannot be read.
        """
        if not path or not os.path.isfile(path):
            raise LocalFileNotFoundError(
                f"File not found: {path}",
                details={"path": path},
            )

        try:
            size: Optional[int] = os.path.getsize(path)
        except OSError:
            size = None

        try:
            checksum = md5_checksum(path)
        except OSError as exc:
            raise LocalFileNotFoundError(
                f"Cannot read file: {path}",
                details={"path": path},
                cause=exc,
            ) from exc

        return cls(
            path=path,
            name=os.path.basename(path),
            mime_type=guess_mime_type(path),
            size=size,
            md5_checksum=checksum,
        )
