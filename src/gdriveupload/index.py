"""Lookup of same-named files inside the target folder."""

from __future__ import annotations

import logging

from gdriveupload.controller import GoogleDriveController
from gdriveupload.models import FolderLookup

logger = logging.getLogger(__name__)


class RemoteFolderIndex:
    """
    Query the folder's children and match by name locally.

    The file name never goes into the Drive query string; only parent
    membership and trashed=false are filtered server-side. Results are a
    fresh snapshot per lookup (no caching across files).
    """

    def __init__(self, controller: GoogleDriveController) -> None:
        self._controller = controller

    def lookup(self, folder_id: str, file_name: str) -> FolderLookup:
        listing = self._controller.list_children(folder_id)
        if listing.truncated:
            logger.warning(
                "Folder %s has more items than one listing page; "
                "files beyond the first page are not checked for duplicates",
                folder_id,
            )

        matches = [m for m in listing.matches if m.name == file_name and not m.trashed]
        logger.debug("Found %d existing file(s) named %r in %s", len(matches), file_name, folder_id)
        return FolderLookup(
            folder_id=folder_id,
            file_name=file_name,
            matches=matches,
            truncated=listing.truncated,
        )
