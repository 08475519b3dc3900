"""Google Drive API controller (internal use only)."""

from __future__ import annotations

import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional, TypeVar

from gdriveupload.errors import (
    ApiError,
    GDriveUploadError,
    HttpErrorInfo,
    NetworkError,
    RateLimitError,
    TransferInitError,
    TransferUploadError,
    map_http_error,
)
from gdriveupload.models import FolderLookup, LocalFile, RemoteLinks, RemoteObjectMetadata

from .fields import FILE_FIELDS, LINK_FIELDS, LIST_FIELDS, LIST_PAGE_SIZE, PERMISSION_FIELDS

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Resumable upload chunk size (must be a multiple of 256 KiB).
UPLOAD_CHUNK_SIZE: int = 8 * 1024 * 1024


@dataclass(frozen=True)
class RetryPolicy:
    """Bounded retries with a fixed delay between attempts."""

    max_retries: int = 3
    delay_sec: float = 2.0


class GoogleDriveController:
    """
    Drive API controller (internal only).

    Notes:
        - The Drive `service` object is NOT exposed.
        - `supports_all_drives` is applied to all requests consistently.
        - Every call goes through `_execute` (retry + error mapping).
    """

    def __init__(
        self,
        service: Any,
        *,
        supports_all_drives: bool = True,
        retry_policy: Optional[RetryPolicy] = None,
    ) -> None:
        self._service = service
        self._supports_all_drives = supports_all_drives
        self._retry_policy = retry_policy or RetryPolicy()

    @classmethod
    def from_service(
        cls,
        service: Any,
        *,
        supports_all_drives: bool = True,
        retry_policy: Optional[RetryPolicy] = None,
    ) -> "GoogleDriveController":
        """Create controller from a pre-built Drive service (useful for tests)."""
        return cls(
            service,
            supports_all_drives=supports_all_drives,
            retry_policy=retry_policy,
        )

    # ----------------------------
    # Public API
    # ----------------------------
    def get(self, file_id: str) -> RemoteObjectMetadata:
        req = self._service.files().get(
            fileId=file_id,
            fields=FILE_FIELDS,
            **self._common_get_kwargs(),
        )
        data = self._execute(req.execute)
        return _file_dict_to_metadata(data)

    def list_children(self, parent_id: str) -> FolderLookup:
        """
        List non-trashed items directly inside parent_id (single page).

        The returned lookup has an empty file_name; callers filter by name.
        `truncated` is True when Drive reports more pages than were read.
        """
        req = self._service.files().list(
            q=_build_parent_query(parent_id),
            fields=LIST_FIELDS,
            pageSize=LIST_PAGE_SIZE,
            **self._common_list_kwargs(),
        )
        data = self._execute(req.execute)
        files = [_file_dict_to_metadata(f) for f in data.get("files", []) or []]
        return FolderLookup(
            folder_id=parent_id,
            file_name="",
            matches=files,
            truncated=bool(data.get("nextPageToken")),
        )

    def create_file(self, parent_id: str, local: LocalFile) -> str:
        """
        Upload `local` as a new file in parent_id via a resumable session.

        Returns:
            The created file id.

        Raises:
            TransferInitError: session could not be negotiated.
            TransferUploadError: streaming failed or no id was returned.
        """
        body = {"name": local.name, "parents": [parent_id]}
        req = self._service.files().create(
            body=body,
            media_body=self._media_for(local),
            fields="id",
            **self._common_write_kwargs(),
        )
        return self._stream_resumable(req, local)

    def update_file_content(self, file_id: str, local: LocalFile) -> str:
        """
        Replace the content of file_id with `local` via a resumable session.

        The file keeps its id, permissions and links.

        Returns:
            The updated file id (same as file_id).
        """
        body = {"name": local.name}
        req = self._service.files().update(
            fileId=file_id,
            body=body,
            media_body=self._media_for(local),
            fields="id",
            **self._common_write_kwargs(),
        )
        return self._stream_resumable(req, local)

    def delete_permanently(self, file_id: str) -> None:
        req = self._service.files().delete(
            fileId=file_id,
            **self._common_write_kwargs(),
        )
        self._execute(req.execute)

    def create_permission(
        self,
        file_id: str,
        body: dict[str, Any],
        *,
        send_notification_email: Optional[bool] = None,
    ) -> Optional[str]:
        """Create one permission on file_id. Returns the permission id (or None)."""
        kwargs: dict[str, Any] = dict(self._common_write_kwargs())
        if send_notification_email is not None:
            kwargs["sendNotificationEmail"] = send_notification_email

        req = self._service.permissions().create(
            fileId=file_id,
            body=body,
            fields=PERMISSION_FIELDS,
            **kwargs,
        )
        data = self._execute(req.execute) or {}
        perm_id = data.get("id")
        return perm_id if isinstance(perm_id, str) and perm_id else None

    def get_links(self, file_id: str) -> RemoteLinks:
        req = self._service.files().get(
            fileId=file_id,
            fields=LINK_FIELDS,
            **self._common_get_kwargs(),
        )
        data = self._execute(req.execute) or {}
        view = data.get("webViewLink")
        download = data.get("webContentLink")
        return RemoteLinks(
            web_view_link=view if isinstance(view, str) else "",
            download_link=download if isinstance(download, str) else "",
        )

    # ----------------------------
    # Internals
    # ----------------------------
    def _common_get_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _common_list_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True, "includeItemsFromAllDrives": True}

    def _common_write_kwargs(self) -> dict[str, Any]:
        if not self._supports_all_drives:
            return {}
        return {"supportsAllDrives": True}

    def _media_for(self, local: LocalFile):
        from googleapiclient.http import MediaFileUpload

        # Size is read from the file by MediaFileUpload; mimetype is a hint.
        try:
            return MediaFileUpload(
                local.path,
                mimetype=local.mime_type,
                chunksize=UPLOAD_CHUNK_SIZE,
                resumable=True,
            )
        except OSError as exc:
            raise TransferInitError(
                f"Cannot open {local.path} for upload",
                details={"path": local.path},
                cause=exc,
            ) from exc

    def _stream_resumable(self, req: Any, local: LocalFile) -> str:
        """
        Drive a resumable request to completion.

        The first `next_chunk` negotiates the session (sets `resumable_uri`);
        later calls stream bytes. Failures are classified by whether a
        session had been obtained.
        """
        response: Optional[dict[str, Any]] = None
        while response is None:
            try:
                status, response = self._execute(req.next_chunk)
            except GDriveUploadError as exc:
                details = {"path": local.path, "name": local.name}
                details.update(exc.details)
                if getattr(req, "resumable_uri", None) is None:
                    raise TransferInitError(
                        f"Failed to start upload session for {local.name}",
                        details=details,
                        cause=exc,
                    ) from exc
                raise TransferUploadError(
                    f"Upload failed for {local.name}",
                    details=details,
                    cause=exc,
                ) from exc

            if status is not None:
                logger.debug("Uploaded %d%% of %s", int(status.progress() * 100), local.name)

        file_id = response.get("id") if isinstance(response, dict) else None
        if not isinstance(file_id, str) or not file_id:
            raise TransferUploadError(
                f"Upload response for {local.name} carried no file id",
                details={"path": local.path, "response": response},
            )
        return file_id

    def _execute(self, func: Callable[[], T]) -> T:
        policy = self._retry_policy
        for attempt in range(policy.max_retries + 1):
            try:
                return func()
            except Exception as exc:
                mapped = self._map_exception(exc)
                if self._should_retry(mapped) and attempt < policy.max_retries:
                    logger.warning(
                        "Drive call failed (%s), retrying in %.1fs (%d/%d)",
                        mapped,
                        policy.delay_sec,
                        attempt + 1,
                        policy.max_retries,
                    )
                    time.sleep(policy.delay_sec)
                    continue
                raise mapped from exc

        raise ApiError("Unexpected retry loop termination")

    def _should_retry(self, exc: Exception) -> bool:
        if isinstance(exc, RateLimitError):
            return True
        if isinstance(exc, NetworkError):
            return True
        if isinstance(exc, ApiError):
            status_code = getattr(exc, "details", {}).get("status_code")
            return isinstance(status_code, int) and 500 <= status_code <= 599
        return False

    def _map_exception(self, exc: Exception) -> Exception:
        from googleapiclient.errors import HttpError, ResumableUploadError

        if isinstance(exc, GDriveUploadError):
            return exc

        if isinstance(exc, (HttpError, ResumableUploadError)):
            info = _http_error_to_info(exc)
            return map_http_error(info, cause=exc)

        if isinstance(exc, (OSError, TimeoutError)):
            return NetworkError("Network error", cause=exc)

        return ApiError("Drive API error", cause=exc)


def _build_parent_query(parent_id: str) -> str:
    escaped = parent_id.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}' in parents and trashed=false"


def _file_dict_to_metadata(data: dict[str, Any]) -> RemoteObjectMetadata:
    file_id = data.get("id")
    name = data.get("name", "")
    mime_type = data.get("mimeType", "")
    trashed = bool(data.get("trashed", False))

    size = None
    if isinstance(data.get("size"), str) and data["size"].isdigit():
        size = int(data["size"])
    elif isinstance(data.get("size"), int):
        size = data["size"]

    md5 = data.get("md5Checksum")
    md5_checksum = md5 if isinstance(md5, str) and md5 else None

    return RemoteObjectMetadata(
        file_id=file_id if isinstance(file_id, str) else "",
        name=name if isinstance(name, str) else "",
        mime_type=mime_type if isinstance(mime_type, str) else "",
        md5_checksum=md5_checksum,
        size=size,
        trashed=trashed,
    )


def _http_error_to_info(exc: Any) -> HttpErrorInfo:
    status_code = getattr(getattr(exc, "resp", None), "status", None)
    reason = getattr(getattr(exc, "resp", None), "reason", None)

    message = None
    details: dict[str, Any] = {}

    content = getattr(exc, "content", None)
    if isinstance(content, (bytes, bytearray)):
        try:
            payload = json.loads(content.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            payload = None
        err = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(err, dict):
            message = err.get("message") or None
            errors = err.get("errors") or []
            if errors and isinstance(errors, list) and isinstance(errors[0], dict):
                details["domain"] = errors[0].get("domain")
                details["reason_detail"] = errors[0].get("reason")
                if isinstance(errors[0].get("reason"), str):
                    reason = errors[0]["reason"]

    if not isinstance(status_code, int):
        status_code = 0

    return HttpErrorInfo(
        status_code=status_code,
        reason=reason if isinstance(reason, str) else None,
        message=message,
        details=details or None,
    )
