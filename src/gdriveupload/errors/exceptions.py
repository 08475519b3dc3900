"""Exception hierarchy and HTTP error mapping for gdriveupload."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class GDriveUploadError(Exception):
    """
    Base exception for gdriveupload.

    Attributes:
        details: Optional structured information (e.g., HTTP status, reason).
        cause: Optional original exception that triggered this error.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause


# ----------------------------
# Fatal run errors
# ----------------------------
class ConfigurationError(GDriveUploadError):
    """Raised when inputs are missing or malformed (before any Drive call)."""


class AuthenticationError(GDriveUploadError):
    """Raised when the service account token exchange fails (or HTTP 401)."""


class PreflightError(GDriveUploadError):
    """Raised when the target folder id does not resolve to an accessible folder."""


class LocalFileNotFoundError(GDriveUploadError):
    """Raised when a selected local path does not exist or is not a regular file."""


class TransferInitError(GDriveUploadError):
    """Raised when a resumable upload session cannot be negotiated."""


class TransferUploadError(GDriveUploadError):
    """Raised when streaming content fails or Drive returns no resulting id."""


# ----------------------------
# Non-fatal (logged and returned, never raised out of a component)
# ----------------------------
class SharingWarning(GDriveUploadError):
    """A permission grant was rejected or returned no permission id."""


class CleanupWarning(GDriveUploadError):
    """A duplicate file could not be deleted."""


# ----------------------------
# Drive API errors
# ----------------------------
class PermissionError(GDriveUploadError):
    """Raised when access is denied (HTTP 403 non-quota)."""


class InvalidArgumentError(GDriveUploadError):
    """Raised when request arguments are invalid (HTTP 400, etc.)."""


class NotFoundError(GDriveUploadError):
    """Raised when a Drive resource is not found (HTTP 404)."""


class ConflictError(GDriveUploadError):
    """Raised when a conflict occurs (HTTP 409/412)."""


class RateLimitError(GDriveUploadError):
    """Raised when rate-limited (HTTP 429)."""


class QuotaExceededError(GDriveUploadError):
    """Raised when quota is exceeded (HTTP 403 with quota-related reason)."""


class NetworkError(GDriveUploadError):
    """Raised when network/timeout issues prevent the request."""


class ApiError(GDriveUploadError):
    """Raised for unclassified API errors (5xx, unknown 4xx, etc.)."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Lightweight HTTP error information for mapping to gdriveupload exceptions."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "dailyLimitExceeded",
    "usageLimits",
    "storageQuotaExceeded",
)

# Drive reports per-user rate limiting as 403 with these reasons.
_RATE_LIMIT_REASONS: tuple[str, ...] = (
    "rateLimitExceeded",
    "userRateLimitExceeded",
)


def _is_quota_reason(reason: str | None) -> bool:
    if not reason:
        return False
    return any(key.lower() in reason.lower() for key in _QUOTA_REASON_KEYWORDS)


def _is_rate_limit_reason(reason: str | None) -> bool:
    if not reason:
        return False
    return reason in _RATE_LIMIT_REASONS


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> GDriveUploadError:
    """
    Map an HTTP error to a gdriveupload exception.

    Policy:
        - 401 -> AuthenticationError
        - 403 -> PermissionError (default), RateLimitError for rate-limit
          reasons, QuotaExceededError for other quota-related reasons
        - 404 -> NotFoundError
        - 409/412 -> ConflictError
        - 429 -> RateLimitError
        - 400 -> InvalidArgumentError
        - 5xx -> ApiError
        - otherwise -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    if info.status_code == 400:
        return InvalidArgumentError(message, details=details, cause=cause)
    if info.status_code == 401:
        return AuthenticationError(message, details=details, cause=cause)
    if info.status_code == 403:
        if _is_rate_limit_reason(info.reason):
            return RateLimitError(message, details=details, cause=cause)
        if _is_quota_reason(info.reason):
            return QuotaExceededError(message, details=details, cause=cause)
        return PermissionError(message, details=details, cause=cause)
    if info.status_code == 404:
        return NotFoundError(message, details=details, cause=cause)
    if info.status_code in (409, 412):
        return ConflictError(message, details=details, cause=cause)
    if info.status_code == 429:
        return RateLimitError(message, details=details, cause=cause)

    return ApiError(message, details=details, cause=cause)
