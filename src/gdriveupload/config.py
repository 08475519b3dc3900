"""Run configuration loaded from GitHub Actions style environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from gdriveupload.errors import ConfigurationError
from gdriveupload.models import SharingPolicy

_TRUE_VALUES: frozenset[str] = frozenset({"true", "1", "yes", "on"})
_FALSE_VALUES: frozenset[str] = frozenset({"false", "0", "no", "off"})


@dataclass(frozen=True)
class UploadConfig:
    """
    Configuration for one upload run.

    Required fields have no defaults; `load_config` raises ConfigurationError
    when the corresponding environment variable is missing or empty.
    """

    # Required
    file_selector: str
    folder_id: str
    credentials: str = field(repr=False)

    # Behavior
    overwrite: bool = True
    sharing: SharingPolicy = field(default_factory=SharingPolicy)

    # Transport
    max_retries: int = 3
    retry_delay_sec: float = 2.0
    timeout_sec: float = 300.0
    supports_all_drives: bool = True

    debug: bool = False


def load_config(environ: Optional[Mapping[str, str]] = None) -> UploadConfig:
    """Construct an UploadConfig from environment variables.

    Required environment variables:
        INPUT_FILENAME: Glob pattern or newline-separated list of local paths.
        INPUT_FOLDER_ID: Target Drive folder id.
        INPUT_CREDENTIALS: Base64-encoded service account JSON key.

    Optional environment variables (with defaults):
        INPUT_OVERWRITE: Update/replace same-named files (default: true).
        INPUT_SHARING: none | anyone | domain | specific (default: none).
        INPUT_SHARING_ROLE: reader | commenter | writer (default: reader).
        INPUT_SHARING_EMAIL: Grantee email, required for 'specific'.
        INPUT_SHARING_DOMAIN: Grantee domain, required for 'domain'.
        INPUT_LINK_DISCOVERABLE: Let 'anyone' links show up in search (default: false).
        INPUT_MAX_RETRIES: Retries per Drive call (default: 3).
        INPUT_RETRY_DELAY: Seconds between retries (default: 2).
        INPUT_TIMEOUT: Seconds per HTTP call (default: 300).
        INPUT_SUPPORTS_ALL_DRIVES: Include shared drives (default: true).
        INPUT_DEBUG / RUNNER_DEBUG: Enable debug logging (default: false).

    Raises:
        ConfigurationError: on missing or malformed values.
    """
    env = os.environ if environ is None else environ

    file_selector = _required(env, "INPUT_FILENAME")
    folder_id = _required(env, "INPUT_FOLDER_ID").strip()
    credentials = _required(env, "INPUT_CREDENTIALS")

    sharing = SharingPolicy.from_inputs(
        env.get("INPUT_SHARING"),
        env.get("INPUT_SHARING_ROLE"),
        domain=env.get("INPUT_SHARING_DOMAIN"),
        email=env.get("INPUT_SHARING_EMAIL"),
        discoverable=_bool(env, "INPUT_LINK_DISCOVERABLE", False),
    )

    max_retries = _number(env, "INPUT_MAX_RETRIES", 3, int)
    if max_retries < 0:
        raise ConfigurationError("INPUT_MAX_RETRIES must be non-negative")
    retry_delay_sec = _number(env, "INPUT_RETRY_DELAY", 2.0, float)
    if retry_delay_sec < 0:
        raise ConfigurationError("INPUT_RETRY_DELAY must be non-negative")
    timeout_sec = _number(env, "INPUT_TIMEOUT", 300.0, float)
    if timeout_sec <= 0:
        raise ConfigurationError("INPUT_TIMEOUT must be positive")

    return UploadConfig(
        file_selector=file_selector,
        folder_id=folder_id,
        credentials=credentials,
        overwrite=_bool(env, "INPUT_OVERWRITE", True),
        sharing=sharing,
        max_retries=max_retries,
        retry_delay_sec=retry_delay_sec,
        timeout_sec=timeout_sec,
        supports_all_drives=_bool(env, "INPUT_SUPPORTS_ALL_DRIVES", True),
        debug=_bool(env, "INPUT_DEBUG", False) or env.get("RUNNER_DEBUG") == "1",
    )


def parse_bool(value: str, *, name: str = "value") -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be true or false, got {value!r}")


def _required(env: Mapping[str, str], name: str) -> str:
    value = env.get(name, "")
    if not value or not value.strip():
        raise ConfigurationError(f"{name} is required")
    return value


def _bool(env: Mapping[str, str], name: str, default: bool) -> bool:
    value = env.get(name, "")
    if not value.strip():
        return default
    return parse_bool(value, name=name)


def _number(env: Mapping[str, str], name: str, default, cast):
    value = env.get(name, "")
    if not value.strip():
        return default
    try:
        return cast(value.strip())
    except ValueError as exc:
        raise ConfigurationError(f"{name} must be a number, got {value!r}", cause=exc) from exc
