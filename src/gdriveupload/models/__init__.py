"""Public model exports for gdriveupload."""

from __future__ import annotations

from .decision import DecisionKind, ReconciliationDecision, SkipReason
from .local_file import LocalFile
from .remote_object import FolderLookup, RemoteLinks, RemoteObjectMetadata
from .results import RunResult, UploadResult
from .sharing import SharingMode, SharingPolicy, SharingRole

__all__ = [
    "LocalFile",
    "RemoteObjectMetadata",
    "RemoteLinks",
    "FolderLookup",
    "DecisionKind",
    "SkipReason",
    "ReconciliationDecision",
    "SharingMode",
    "SharingRole",
    "SharingPolicy",
    "UploadResult",
    "RunResult",
]
