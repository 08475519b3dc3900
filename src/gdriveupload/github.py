"""GitHub Actions integration: step outputs, step summary and log masking."""

from __future__ import annotations

import json
import sys
import uuid
from typing import Mapping, Optional, TextIO

from gdriveupload.models import RunResult, UploadResult


def mask_value(value: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Ask the runner to redact `value` from all subsequent log output."""
    if not value:
        return
    out = stream if stream is not None else sys.stdout
    out.write(f"::add-mask::{value}\n")
    out.flush()


def build_outputs(run: RunResult) -> dict[str, str]:
    """
    Build step outputs for a run.

    The last processed file is the primary result (single-file callers read
    `file_id`, `web_view_link`, ...). `results` holds every record as JSON.
    """
    outputs: dict[str, str] = {
        "file_count": str(len(run.results)),
        "results": json.dumps([r.to_dict() for r in run.results]),
    }
    primary = run.primary
    if primary is not None:
        outputs.update(_primary_outputs(primary))
    return outputs


def write_outputs(outputs: Mapping[str, str], path: str) -> None:
    """Append outputs to the $GITHUB_OUTPUT file (multiline-safe)."""
    with open(path, "a", encoding="utf-8") as f:
        for key, value in outputs.items():
            if "\n" in value:
                delimiter = f"ghadelimiter_{uuid.uuid4()}"
                f.write(f"{key}<<{delimiter}\n{value}\n{delimiter}\n")
            else:
                f.write(f"{key}={value}\n")


def render_summary(run: RunResult) -> str:
    """Render a Markdown table for $GITHUB_STEP_SUMMARY."""
    lines = [
        "### Google Drive upload",
        "",
        "| File | Status | File ID | Link |",
        "|---|---|---|---|",
    ]
    for r in run.results:
        link = f"[view]({r.web_view_link})" if r.web_view_link else ""
        lines.append(f"| {_escape(r.file_name)} | {_status(r)} | `{r.file_id}` | {link} |")
    return "\n".join(lines) + "\n"


def append_step_summary(text: str, path: str) -> None:
    with open(path, "a", encoding="utf-8") as f:
        f.write(text)


def _primary_outputs(result: UploadResult) -> dict[str, str]:
    return {
        "file_id": result.file_id,
        "file_name": result.file_name,
        "updated": _bool_text(result.updated),
        "skipped": _bool_text(result.skipped),
        "web_view_link": result.web_view_link,
        "download_link": result.download_link,
        # Name used by earlier releases of the action; same value as download_link.
        "web_content_link": result.download_link,
    }


def _status(result: UploadResult) -> str:
    if result.skipped:
        return "skipped"
    if result.updated:
        return "updated"
    return "created"


def _bool_text(value: bool) -> str:
    return "true" if value else "false"


def _escape(text: str) -> str:
    return text.replace("|", "\\|")
