"""Assemble per-file results with canonical Drive links."""

from __future__ import annotations

import logging

from gdriveupload.controller import GoogleDriveController
from gdriveupload.errors import GDriveUploadError
from gdriveupload.models import (
    DecisionKind,
    LocalFile,
    ReconciliationDecision,
    RemoteLinks,
    UploadResult,
)

logger = logging.getLogger(__name__)


class ResultReporter:
    """
    Fetch link fields from Drive and build the UploadResult.

    Links are always read from the file's metadata, never built from a
    URL template.
    """

    def __init__(self, controller: GoogleDriveController) -> None:
        self._controller = controller

    def fetch_links(self, file_id: str) -> RemoteLinks:
        try:
            links = self._controller.get_links(file_id)
        except GDriveUploadError as exc:
            logger.warning("Could not fetch links for %s: %s", file_id, exc)
            return RemoteLinks()

        if not links.web_view_link or not links.download_link:
            logger.warning("Drive returned no view/download link for %s", file_id)
        return links

    def report(
        self,
        file_id: str,
        local: LocalFile,
        decision: ReconciliationDecision,
    ) -> UploadResult:
        links = self.fetch_links(file_id)
        return UploadResult(
            file_id=file_id,
            file_name=local.name,
            updated=decision.kind is DecisionKind.UPDATE_IN_PLACE,
            skipped=decision.kind is DecisionKind.SKIP,
            web_view_link=links.web_view_link,
            download_link=links.download_link,
        )
