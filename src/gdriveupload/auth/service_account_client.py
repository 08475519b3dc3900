"""Service account credentials and Drive service construction."""

from __future__ import annotations

import logging
from typing import Sequence

from gdriveupload.errors import AuthenticationError, ConfigurationError

from .service_account_info import ServiceAccountInfo

logger = logging.getLogger(__name__)


class ServiceAccountClient:
    """Create service account credentials and Drive API service objects."""

    def __init__(self, info: ServiceAccountInfo) -> None:
        self._info = info

    def get_credentials(self, scopes: Sequence[str]):
        """
        Return fresh service account credentials for the given scopes.

        The token is exchanged eagerly so that an invalid key fails the run
        before any file is processed.

        Returns:
            google.oauth2.service_account.Credentials

        Raises:
            ConfigurationError: if scopes are invalid or the key cannot be parsed.
            AuthenticationError: if the token exchange fails.
        """
        if not scopes or not all(isinstance(s, str) and s.strip() for s in scopes):
            raise ConfigurationError("scopes must be a non-empty sequence of strings")

        from google.auth.exceptions import GoogleAuthError
        from google.auth.transport.requests import Request
        from google.oauth2 import service_account

        try:
            creds = service_account.Credentials.from_service_account_info(
                self._info.data,
                scopes=list(scopes),
            )
        except (ValueError, KeyError) as exc:
            raise ConfigurationError(
                "Invalid service account key",
                details={"client_email": self._info.client_email},
                cause=exc,
            ) from exc

        try:
            creds.refresh(Request())
        except GoogleAuthError as exc:
            raise AuthenticationError(
                "Failed to get access token",
                details={"client_email": self._info.client_email},
                cause=exc,
            ) from exc

        if not creds.token:
            raise AuthenticationError(
                "Token exchange returned no access token",
                details={"client_email": self._info.client_email},
            )

        logger.info("Authenticated as %s", self._info.client_email)
        return creds

    def build_drive_service(self, creds, *, timeout_sec: float):
        """
        Build a Drive API service resource bound to `creds`.

        Every HTTP call made through the service is bounded by `timeout_sec`.

        Returns:
            googleapiclient.discovery.Resource
        """
        import google_auth_httplib2
        import httplib2
        from googleapiclient.discovery import build

        http = google_auth_httplib2.AuthorizedHttp(
            creds,
            http=httplib2.Http(timeout=timeout_sec),
        )
        try:
            return build("drive", "v3", http=http, cache_discovery=False)
        except Exception as exc:
            raise AuthenticationError("Failed to build Drive service", cause=exc) from exc
