"""UploadOrchestrator: per-file reconcile -> transfer -> share -> report."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from gdriveupload.controller import GoogleDriveController
from gdriveupload.decider import decide
from gdriveupload.errors import (
    InvalidArgumentError,
    NotFoundError,
    PermissionError,
    PreflightError,
)
from gdriveupload.executor import TransferExecutor
from gdriveupload.index import RemoteFolderIndex
from gdriveupload.models import (
    DecisionKind,
    LocalFile,
    ReconciliationDecision,
    RemoteObjectMetadata,
    RunResult,
    SharingPolicy,
    UploadResult,
)
from gdriveupload.reporter import ResultReporter
from gdriveupload.sharing import ShareOutcome, SharingConfigurator
from gdriveupload.util.mime import is_folder
from gdriveupload.util.paths import resolve_file_selector

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _FileOutcome:
    result: UploadResult
    decision: ReconciliationDecision
    purged: int
    share: ShareOutcome


class UploadOrchestrator:
    """
    Upload a set of local files into one Drive folder.

    Policy:
        - Files are processed strictly one after another.
        - A missing local file or a transfer failure raises and stops the
          whole run (files already processed stay uploaded).
        - Sharing, link and duplicate-cleanup failures are logged and the
          run continues.
    """

    def __init__(self, controller: GoogleDriveController) -> None:
        self._controller = controller
        self._index = RemoteFolderIndex(controller)
        self._executor = TransferExecutor(controller)
        self._sharing = SharingConfigurator(controller)
        self._reporter = ResultReporter(controller)

    def preflight(self, folder_id: str) -> RemoteObjectMetadata:
        """
        Check that folder_id is an accessible folder.

        Raises:
            PreflightError: if the id is unknown, inaccessible or not a folder.
        """
        try:
            folder = self._controller.get(folder_id)
        except (NotFoundError, PermissionError, InvalidArgumentError) as exc:
            raise PreflightError(
                f"Folder {folder_id} is not accessible",
                details={"folder_id": folder_id, **exc.details},
                cause=exc,
            ) from exc

        if not is_folder(folder.mime_type):
            raise PreflightError(
                f"{folder_id} is not a folder",
                details={"folder_id": folder_id, "mime_type": folder.mime_type},
            )
        logger.info("Target folder: %s (%s)", folder.name, folder_id)
        return folder

    def run(
        self,
        folder_id: str,
        file_selector: str,
        *,
        overwrite: bool = True,
        sharing: Optional[SharingPolicy] = None,
    ) -> RunResult:
        """
        Resolve the selector, check the folder, then process each file.

        Raises:
            ConfigurationError: invalid sharing policy or empty selector
                (before any Drive call).
            PreflightError, LocalFileNotFoundError, TransferInitError,
            TransferUploadError: fatal, stop the run.
        """
        policy = sharing if sharing is not None else SharingPolicy()
        policy.validate()
        paths = resolve_file_selector(file_selector)

        self.preflight(folder_id)

        run = RunResult(summary=_empty_summary())
        for path in paths:
            outcome = self.process_file(folder_id, path, overwrite=overwrite, sharing=policy)
            run.results.append(outcome.result)
            _count(run.summary, outcome)

        logger.info(
            "Processed %d file(s): %d created, %d updated, %d skipped",
            len(run.results),
            run.summary["created"],
            run.summary["updated"],
            run.summary["skipped"],
        )
        return run

    def process_file(
        self,
        folder_id: str,
        path: str,
        *,
        overwrite: bool,
        sharing: SharingPolicy,
    ) -> _FileOutcome:
        local = LocalFile.from_path(path)
        logger.info("Processing file: %s", local.path)

        lookup = self._index.lookup(folder_id, local.name)
        decision = decide(local, lookup, overwrite)
        decision.validate_required_fields()
        logger.info("Decision for %s: %s", local.name, _describe(decision))

        purged = 0
        if decision.kind is DecisionKind.SKIP:
            file_id = decision.target_id
        elif decision.kind is DecisionKind.UPDATE_IN_PLACE:
            file_id = self._executor.update_in_place(decision.target_id, local)  # type: ignore[arg-type]
        elif decision.kind is DecisionKind.PURGE_DUPLICATES_AND_CREATE:
            purged = len(self._executor.purge_duplicates(decision.ids_to_delete))
            file_id = self._executor.create_new(folder_id, local)
        else:
            file_id = self._executor.create_new(folder_id, local)

        share = self._sharing.apply(sharing, file_id, decision)  # type: ignore[arg-type]
        result = self._reporter.report(file_id, local, decision)  # type: ignore[arg-type]
        return _FileOutcome(result=result, decision=decision, purged=purged, share=share)


def _describe(decision: ReconciliationDecision) -> str:
    if decision.kind is DecisionKind.SKIP:
        reason = decision.reason.value if decision.reason else ""
        return f"skip ({reason}), existing file {decision.target_id}"
    if decision.kind is DecisionKind.UPDATE_IN_PLACE:
        return f"update existing file {decision.target_id}"
    if decision.kind is DecisionKind.PURGE_DUPLICATES_AND_CREATE:
        return f"delete {len(decision.ids_to_delete)} duplicates, then create"
    return "create new file"


def _empty_summary() -> dict[str, int]:
    return {
        "created": 0,
        "updated": 0,
        "skipped": 0,
        "duplicates_deleted": 0,
        "sharing_warnings": 0,
    }


def _count(summary: dict[str, int], outcome: _FileOutcome) -> None:
    kind = outcome.decision.kind
    if kind is DecisionKind.SKIP:
        summary["skipped"] += 1
    elif kind is DecisionKind.UPDATE_IN_PLACE:
        summary["updated"] += 1
    else:
        summary["created"] += 1
    summary["duplicates_deleted"] += outcome.purged
    if outcome.share.warning is not None:
        summary["sharing_warnings"] += 1
