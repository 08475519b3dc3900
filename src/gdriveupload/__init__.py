"""gdriveupload public API."""

from __future__ import annotations

from gdriveupload.auth import ServiceAccountClient, ServiceAccountInfo
from gdriveupload.config import UploadConfig, load_config
from gdriveupload.context import UploadContext, open_context
from gdriveupload.controller import GoogleDriveController, RetryPolicy
from gdriveupload.decider import decide
from gdriveupload.errors import (
    ApiError,
    AuthenticationError,
    CleanupWarning,
    ConfigurationError,
    ConflictError,
    GDriveUploadError,
    HttpErrorInfo,
    InvalidArgumentError,
    LocalFileNotFoundError,
    NetworkError,
    NotFoundError,
    PermissionError,
    PreflightError,
    QuotaExceededError,
    RateLimitError,
    SharingWarning,
    TransferInitError,
    TransferUploadError,
    map_http_error,
)
from gdriveupload.executor import TransferExecutor
from gdriveupload.index import RemoteFolderIndex
from gdriveupload.models import (
    DecisionKind,
    FolderLookup,
    LocalFile,
    ReconciliationDecision,
    RemoteLinks,
    RemoteObjectMetadata,
    RunResult,
    SharingMode,
    SharingPolicy,
    SharingRole,
    SkipReason,
    UploadResult,
)
from gdriveupload.orchestrator import UploadOrchestrator
from gdriveupload.reporter import ResultReporter
from gdriveupload.sharing import ShareOutcome, SharingConfigurator

__all__ = [
    # High-level
    "UploadOrchestrator",
    "UploadContext",
    "open_context",
    "UploadConfig",
    "load_config",
    # Components
    "RemoteFolderIndex",
    "decide",
    "TransferExecutor",
    "SharingConfigurator",
    "ShareOutcome",
    "ResultReporter",
    # Drive access
    "GoogleDriveController",
    "RetryPolicy",
    # Auth
    "ServiceAccountInfo",
    "ServiceAccountClient",
    # Models
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
    # Errors
    "GDriveUploadError",
    "ConfigurationError",
    "AuthenticationError",
    "PreflightError",
    "LocalFileNotFoundError",
    "TransferInitError",
    "TransferUploadError",
    "SharingWarning",
    "CleanupWarning",
    "PermissionError",
    "InvalidArgumentError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    "QuotaExceededError",
    "NetworkError",
    "ApiError",
    "HttpErrorInfo",
    "map_http_error",
]
