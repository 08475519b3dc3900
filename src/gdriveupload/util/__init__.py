from .hashing import md5_checksum
from .mime import (
    DEFAULT_MIME,
    FOLDER_MIME,
    guess_mime_type,
    is_folder,
)
from .paths import has_glob_magic, resolve_file_selector

__all__ = [
    "md5_checksum",
    "DEFAULT_MIME",
    "FOLDER_MIME",
    "guess_mime_type",
    "is_folder",
    "has_glob_magic",
    "resolve_file_selector",
]
