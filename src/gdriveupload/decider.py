"""Reconciliation decision table (pure, no I/O)."""

from __future__ import annotations

from gdriveupload.models import (
    FolderLookup,
    LocalFile,
    ReconciliationDecision,
    SkipReason,
)


def decide(local: LocalFile, lookup: FolderLookup, overwrite: bool) -> ReconciliationDecision:
    """
    Decide what to do with `local` given the same-named files in the folder.

    Evaluated in order:
        1. A match with a known checksum equal to the local one -> SKIP (that match)
        2. Exactly one match and overwrite -> UPDATE_IN_PLACE
        3. Two or more matches and overwrite -> PURGE_DUPLICATES_AND_CREATE (all)
        4. One or more matches and no overwrite -> SKIP (first match in
           provider order; not guaranteed stable across runs)
        5. No matches -> CREATE_NEW
    """
    matches = lookup.matches

    if local.md5_checksum:
        for match in matches:
            if match.md5_checksum and match.md5_checksum == local.md5_checksum:
                return ReconciliationDecision.skip(match.file_id, SkipReason.FINGERPRINT_MATCH)

    if len(matches) == 1 and overwrite:
        return ReconciliationDecision.update_in_place(matches[0].file_id)

    if len(matches) >= 2 and overwrite:
        return ReconciliationDecision.purge_duplicates_and_create([m.file_id for m in matches])

    if matches and not overwrite:
        return ReconciliationDecision.skip(matches[0].file_id, SkipReason.OVERWRITE_DISABLED)

    return ReconciliationDecision.create_new()
