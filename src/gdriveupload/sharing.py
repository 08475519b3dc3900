"""Apply the sharing policy to uploaded files."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from gdriveupload.controller import GoogleDriveController
from gdriveupload.errors import GDriveUploadError, SharingWarning
from gdriveupload.models import (
    ReconciliationDecision,
    SharingMode,
    SharingPolicy,
    SharingRole,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True, frozen=True)
class ShareOutcome:
    """
    Result of applying a policy to one file.

    applied: a grant was created (permission_id is set).
    warning: set when a grant was attempted or requested but did not succeed.
    Both unset means sharing was not requested for this file.
    """

    applied: bool = False
    permission_id: Optional[str] = None
    warning: Optional[SharingWarning] = None


@dataclass(slots=True, frozen=True)
class PermissionRequest:
    body: dict[str, Any]
    send_notification_email: Optional[bool] = None


def build_permission_request(policy: SharingPolicy) -> Optional[PermissionRequest]:
    """
    Build the single permission grant for `policy`.

    Returns None for mode 'none' and for unrecognized modes.
    """
    mode = policy.known_mode

    if mode is SharingMode.ANYONE:
        # Role is fixed to reader for anyone-with-link grants.
        return PermissionRequest(
            body={
                "type": "anyone",
                "role": SharingRole.READER.value,
                "allowFileDiscovery": policy.discoverable,
            },
        )

    if mode is SharingMode.DOMAIN:
        return PermissionRequest(
            body={
                "type": "domain",
                "role": policy.role.value,
                "domain": policy.domain,
            },
        )

    if mode is SharingMode.SPECIFIC:
        return PermissionRequest(
            body={
                "type": "user",
                "role": policy.role.value,
                "emailAddress": policy.email,
            },
            send_notification_email=False,
        )

    return None


class SharingConfigurator:
    """Create one permission per uploaded file; failures never abort the run."""

    def __init__(self, controller: GoogleDriveController) -> None:
        self._controller = controller

    def apply(
        self,
        policy: SharingPolicy,
        file_id: str,
        decision: ReconciliationDecision,
    ) -> ShareOutcome:
        if not policy.enabled or decision.is_skip:
            return ShareOutcome()

        request = build_permission_request(policy)
        if request is None:
            warning = SharingWarning(
                f"Unknown sharing mode: {policy.mode}, skipping",
                details={"mode": policy.mode, "file_id": file_id},
            )
            logger.warning("%s", warning)
            return ShareOutcome(warning=warning)

        logger.info("Configuring file sharing (mode: %s) for %s", policy.mode, file_id)
        try:
            perm_id = self._controller.create_permission(
                file_id,
                request.body,
                send_notification_email=request.send_notification_email,
            )
        except GDriveUploadError as exc:
            warning = SharingWarning(
                f"Sharing configuration failed for {file_id}: {exc}",
                details={"file_id": file_id, "mode": policy.mode, **exc.details},
                cause=exc,
            )
            logger.warning("%s", warning)
            return ShareOutcome(warning=warning)

        if not perm_id:
            warning = SharingWarning(
                f"Sharing configuration may have failed for {file_id}: no permission id returned",
                details={"file_id": file_id, "mode": policy.mode},
            )
            logger.warning("%s", warning)
            return ShareOutcome(warning=warning)

        logger.info("Sharing configured successfully (permission %s)", perm_id)
        return ShareOutcome(applied=True, permission_id=perm_id)
