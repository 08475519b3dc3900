"""Public auth exports for gdriveupload."""

from __future__ import annotations

from .service_account_client import ServiceAccountClient
from .service_account_info import ServiceAccountInfo

__all__ = ["ServiceAccountInfo", "ServiceAccountClient"]
