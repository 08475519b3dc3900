from __future__ import annotations

import glob
import os

from gdriveupload.errors import ConfigurationError, LocalFileNotFoundError

_GLOB_MAGIC: tuple[str, ...] = ("*", "?", "[")


def has_glob_magic(entry: str) -> bool:
    return any(ch in entry for ch in _GLOB_MAGIC)


def resolve_file_selector(selector: str) -> list[str]:
    """
    Resolve a file selector into an ordered list of local paths.

    The selector is either a glob pattern or a newline-separated list of
    paths (entries may themselves be globs). Rules:
        - Blank lines are ignored; entries are stripped.
        - Glob entries expand recursively ('**'), sorted, regular files only.
          A glob with no matching file raises LocalFileNotFoundError.
        - Literal entries are returned as-is; existence is checked when the
          file is processed. An entry naming an existing file is literal even
          if it contains glob characters.
        - Duplicates are dropped, first occurrence wins.

    Raises:
        ConfigurationError: if the selector has no entries.
        LocalFileNotFoundError: if a glob entry matches no file.
    """
    entries = [line.strip() for line in (selector or "").splitlines()]
    entries = [e for e in entries if e]
    if not entries:
        raise ConfigurationError("file selector is empty")

    resolved: list[str] = []
    seen: set[str] = set()

    for entry in entries:
        # An existing file wins over glob expansion (e.g. "release[v2].zip").
        if has_glob_magic(entry) and not os.path.isfile(entry):
            matches = sorted(p for p in glob.glob(entry, recursive=True) if os.path.isfile(p))
            if not matches:
                raise LocalFileNotFoundError(
                    "No files match pattern",
                    details={"pattern": entry},
                )
        else:
            matches = [entry]

        for path in matches:
            if path in seen:
                continue
            seen.add(path)
            resolved.append(path)

    return resolved
