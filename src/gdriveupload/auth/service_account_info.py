"""Service account key material for gdriveupload."""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass
from typing import Any

from gdriveupload.errors import ConfigurationError

_REQUIRED_KEYS: tuple[str, ...] = ("client_email", "private_key")


@dataclass(slots=True, frozen=True)
class ServiceAccountInfo:
    """
    Decoded service account key (the JSON downloaded from Google Cloud).

    data must include:
        - client_email
        - private_key
    """

    data: dict[str, Any]

    def __post_init__(self) -> None:
        if not isinstance(self.data, dict):
            raise ConfigurationError("Service account key must be a JSON object")

        for key in _REQUIRED_KEYS:
            value = self.data.get(key)
            if not isinstance(value, str) or not value.strip():
                raise ConfigurationError(
                    "Invalid credentials format",
                    details={"missing": key},
                )

    @classmethod
    def from_base64(cls, blob: str) -> ServiceAccountInfo:
        """
        Decode a base64-encoded service account JSON key.

        Raises:
            ConfigurationError: on empty input, bad base64, bad JSON or missing keys.
        """
        if not blob or not blob.strip():
            raise ConfigurationError("credentials are required")

        try:
            raw = base64.b64decode("".join(blob.split()), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ConfigurationError("credentials are not valid base64", cause=exc) from exc

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise ConfigurationError("credentials are not valid JSON", cause=exc) from exc

        return cls(data=data)

    @property
    def client_email(self) -> str:
        """Service account identity (e.g. uploader@project.iam.gserviceaccount.com)."""
        return str(self.data["client_email"])

    def wipe(self) -> None:
        """Drop the in-memory key material."""
        self.data.clear()
