"""Sharing policy model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from gdriveupload.errors import ConfigurationError


class SharingMode(str, Enum):
    """Recognized sharing modes."""

    NONE = "none"
    ANYONE = "anyone"
    DOMAIN = "domain"
    SPECIFIC = "specific"


class SharingRole(str, Enum):
    """Drive permission roles accepted for grants."""

    READER = "reader"
    COMMENTER = "commenter"
    WRITER = "writer"


@dataclass(slots=True, frozen=True)
class SharingPolicy:
    """
    Access policy applied to each uploaded (non-skipped) file.

    `mode` is kept as the raw (lower-cased) string: unrecognized modes are
    not a configuration error, they are reported as a warning when sharing
    is applied.
    """

    mode: str = SharingMode.NONE.value
    role: SharingRole = SharingRole.READER
    domain: str = ""
    email: str = ""
    discoverable: bool = False

    @classmethod
    def from_inputs(
        cls,
        mode: Optional[str],
        role: Optional[str],
        *,
        domain: Optional[str] = None,
        email: Optional[str] = None,
        discoverable: bool = False,
    ) -> SharingPolicy:
        """
        Build and validate a policy from raw input strings.

        Raises:
            ConfigurationError: if role is unknown or a mode-specific field is missing.
        """
        mode_value = (mode or "").strip().lower() or SharingMode.NONE.value
        role_value = (role or "").strip().lower() or SharingRole.READER.value
        try:
            parsed_role = SharingRole(role_value)
        except ValueError as exc:
            raise ConfigurationError(
                f"Unknown sharing role: {role_value}",
                details={"allowed": [r.value for r in SharingRole]},
                cause=exc,
            ) from exc

        policy = cls(
            mode=mode_value,
            role=parsed_role,
            domain=(domain or "").strip(),
            email=(email or "").strip(),
            discoverable=discoverable,
        )
        policy.validate()
        return policy

    @property
    def known_mode(self) -> Optional[SharingMode]:
        """Return the SharingMode, or None for an unrecognized mode string."""
        try:
            return SharingMode(self.mode)
        except ValueError:
            return None

    @property
    def enabled(self) -> bool:
        return self.mode != SharingMode.NONE.value

    def validate(self) -> None:
        """Raise ConfigurationError if a mode-specific required field is empty."""
        mode = self.known_mode
        if mode is SharingMode.DOMAIN and not self.domain:
            raise ConfigurationError("sharing_domain required for domain sharing mode")
        if mode is SharingMode.SPECIFIC and not self.email:
            raise ConfigurationError("sharing_email required for specific sharing mode")
