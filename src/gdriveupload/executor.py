"""Content transfer for create/update decisions and duplicate cleanup."""

from __future__ import annotations

import logging

from gdriveupload.controller import GoogleDriveController
from gdriveupload.errors import CleanupWarning, GDriveUploadError
from gdriveupload.models import LocalFile

logger = logging.getLogger(__name__)


class TransferExecutor:
    """Create, update and delete Drive files for one upload run."""

    def __init__(self, controller: GoogleDriveController) -> None:
        self._controller = controller

    def create_new(self, folder_id: str, local: LocalFile) -> str:
        """
        Upload `local` as a new file in folder_id.

        Raises:
            TransferInitError, TransferUploadError
        """
        logger.info("Uploading %s (%s, %s bytes)", local.name, local.mime_type, _size_text(local))
        file_id = self._controller.create_file(folder_id, local)
        logger.info("Upload successful: %s", file_id)
        return file_id

    def update_in_place(self, file_id: str, local: LocalFile) -> str:
        """
        Replace the content of an existing file, keeping its id, permissions and links.

        Raises:
            TransferInitError, TransferUploadError
        """
        logger.info("Updating existing file %s with %s", file_id, local.name)
        result_id = self._controller.update_file_content(file_id, local)
        if result_id != file_id:
            logger.warning("Drive reported id %s for in-place update of %s", result_id, file_id)
        logger.info("Update successful: %s", file_id)
        return file_id

    def purge_duplicates(self, ids: list[str] | tuple[str, ...]) -> list[str]:
        """
        Delete each id, best effort.

        Returns:
            The ids that were deleted. Failures are logged as CleanupWarning.
        """
        deleted: list[str] = []
        for file_id in ids:
            logger.info("Deleting duplicate file: %s", file_id)
            try:
                self._controller.delete_permanently(file_id)
            except GDriveUploadError as exc:
                warning = CleanupWarning(
                    f"Could not delete duplicate {file_id}: {exc}",
                    details={"file_id": file_id},
                    cause=exc,
                )
                logger.warning("%s", warning)
                continue
            deleted.append(file_id)
        return deleted


def _size_text(local: LocalFile) -> str:
    return str(local.size) if local.size is not None else "unknown"
