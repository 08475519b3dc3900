"""Per-run context: decoded credentials and an authenticated Drive controller."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator

from gdriveupload.auth import ServiceAccountClient, ServiceAccountInfo
from gdriveupload.config import UploadConfig
from gdriveupload.controller import GoogleDriveController, RetryPolicy
from gdriveupload.github import mask_value

logger = logging.getLogger(__name__)

DRIVE_SCOPES: tuple[str, ...] = ("https://www.googleapis.com/auth/drive",)


@dataclass(frozen=True)
class UploadContext:
    """Everything a run shares across files. Built once, read-only afterwards."""

    controller: GoogleDriveController
    client_email: str


@contextmanager
def open_context(config: UploadConfig) -> Iterator[UploadContext]:
    """
    Decode the service account key, authenticate and build the controller.

    The decoded key material is wiped when the block exits, on success and
    on error alike.

    Raises:
        ConfigurationError: invalid credential blob.
        AuthenticationError: token exchange failed.
    """
    info = ServiceAccountInfo.from_base64(config.credentials)
    try:
        logger.info("Authenticating with Google Drive API...")
        client = ServiceAccountClient(info)
        creds = client.get_credentials(DRIVE_SCOPES)
        mask_value(creds.token)

        service = client.build_drive_service(creds, timeout_sec=config.timeout_sec)
        controller = GoogleDriveController(
            service,
            supports_all_drives=config.supports_all_drives,
            retry_policy=RetryPolicy(
                max_retries=config.max_retries,
                delay_sec=config.retry_delay_sec,
            ),
        )
        yield UploadContext(controller=controller, client_email=info.client_email)
    finally:
        info.wipe()
