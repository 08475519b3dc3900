"""Command-line entry point (GitHub Actions step)."""

from __future__ import annotations

import json
import logging
import os
import sys
from typing import Mapping, Optional

from gdriveupload.config import load_config
from gdriveupload.context import open_context
from gdriveupload.errors import GDriveUploadError, PreflightError
from gdriveupload.github import (
    append_step_summary,
    build_outputs,
    render_summary,
    write_outputs,
)
from gdriveupload.models import RunResult
from gdriveupload.orchestrator import UploadOrchestrator

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
    logging.getLogger().setLevel(logging.DEBUG if debug else logging.INFO)
    # googleapiclient logs every discovery/HTTP call at INFO.
    logging.getLogger("googleapiclient").setLevel(logging.WARNING)


def main(environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Run one upload and return the process exit status.

    0 on success (including sharing warnings), 1 on any fatal error.
    """
    env = os.environ if environ is None else environ
    configure_logging()

    try:
        config = load_config(env)
        configure_logging(debug=config.debug)
        with open_context(config) as ctx:
            orchestrator = UploadOrchestrator(ctx.controller)
            try:
                run = orchestrator.run(
                    config.folder_id,
                    config.file_selector,
                    overwrite=config.overwrite,
                    sharing=config.sharing,
                )
            except PreflightError:
                logger.error("Make sure the folder is shared with %s as Editor", ctx.client_email)
                raise
    except GDriveUploadError as exc:
        logger.error("%s: %s", exc.__class__.__name__, exc)
        if exc.details:
            logger.debug("Details: %s", exc.details)
        return 1

    _log_summary(run)
    _emit(run, env)
    return 0


def _log_summary(run: RunResult) -> None:
    for r in run.results:
        logger.info(
            "File ID: %s | Filename: %s | updated=%s skipped=%s | View: %s | Download: %s",
            r.file_id,
            r.file_name,
            r.updated,
            r.skipped,
            r.web_view_link or "-",
            r.download_link or "-",
        )


def _emit(run: RunResult, env: Mapping[str, str]) -> None:
    outputs = build_outputs(run)

    output_path = env.get("GITHUB_OUTPUT")
    if output_path:
        write_outputs(outputs, output_path)
    else:
        sys.stdout.write(json.dumps([r.to_dict() for r in run.results], indent=2) + "\n")

    summary_path = env.get("GITHUB_STEP_SUMMARY")
    if summary_path:
        append_step_summary(render_summary(run), summary_path)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
