"""Result models for an upload run."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Optional


@dataclass(slots=True)
class UploadResult:
    """Result for a single processed local file."""

    file_id: str
    file_name: str
    updated: bool = False
    skipped: bool = False
    web_view_link: str = ""
    download_link: str = ""

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class RunResult:
    """Aggregate result for one run; `primary` is the last processed file."""

    results: list[UploadResult] = field(default_factory=list)
    summary: dict[str, int] = field(default_factory=dict)

    @property
    def primary(self) -> Optional[UploadResult]:
        if not self.results:
            return None
        return self.results[-1]
