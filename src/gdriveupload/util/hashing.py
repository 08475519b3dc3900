from __future__ import annotations

import hashlib
import logging
from typing import Optional

logger = logging.getLogger(__name__)

_CHUNK_SIZE: int = 1024 * 1024


def md5_checksum(path: str) -> Optional[str]:
    """
    Return the lowercase hex MD5 of the file at `path`.

    Drive exposes `md5Checksum` for binary content, so MD5 is the only hash
    that can be compared against remote metadata. Returns None when MD5 is
    not available on this host (e.g. FIPS-restricted OpenSSL); the caller
    then treats the fingerprint as unknown.
    """
    try:
        hasher = hashlib.md5(usedforsecurity=False)
    except ValueError:
        logger.warning("MD5 is not available on this host; skip-on-match disabled for %s", path)
        return None

    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
            hasher.update(chunk)
    return hasher.hexdigest()
