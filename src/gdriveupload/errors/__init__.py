"""Public error exports for gdriveupload."""

from __future__ import annotations

from .exceptions import (
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

__all__ = [
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
