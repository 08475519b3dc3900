"""Reconciliation decision model (explicit fields per kind)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DecisionKind(str, Enum):
    """What to do with one local file."""

    SKIP = "SKIP"
    UPDATE_IN_PLACE = "UPDATE_IN_PLACE"
    CREATE_NEW = "CREATE_NEW"
    PURGE_DUPLICATES_AND_CREATE = "PURGE_DUPLICATES_AND_CREATE"


class SkipReason(str, Enum):
    FINGERPRINT_MATCH = "fingerprint_match"
    OVERWRITE_DISABLED = "overwrite_disabled"


@dataclass(slots=True, frozen=True)
class ReconciliationDecision:
    """
    Exactly one decision per local file.

    Field usage by kind:
        - SKIP: target_id (existing file reported as-is), reason
        - UPDATE_IN_PLACE: target_id (file whose content is replaced)
        - CREATE_NEW: no fields
        - PURGE_DUPLICATES_AND_CREATE: ids_to_delete (two or more)
    """

    kind: DecisionKind
    target_id: Optional[str] = None
    ids_to_delete: tuple[str, ...] = ()
    reason: Optional[SkipReason] = None

    @classmethod
    def skip(cls, existing_id: str, reason: SkipReason) -> ReconciliationDecision:
        return cls(kind=DecisionKind.SKIP, target_id=existing_id, reason=reason)

    @classmethod
    def update_in_place(cls, target_id: str) -> ReconciliationDecision:
        return cls(kind=DecisionKind.UPDATE_IN_PLACE, target_id=target_id)

    @classmethod
    def create_new(cls) -> ReconciliationDecision:
        return cls(kind=DecisionKind.CREATE_NEW)

    @classmethod
    def purge_duplicates_and_create(cls, ids: list[str]) -> ReconciliationDecision:
        return cls(kind=DecisionKind.PURGE_DUPLICATES_AND_CREATE, ids_to_delete=tuple(ids))

    @property
    def is_skip(self) -> bool:
        return self.kind is DecisionKind.SKIP

    def validate_required_fields(self) -> None:
        """Validate required fields according to kind. Raises ValueError."""
        if self.kind in (DecisionKind.SKIP, DecisionKind.UPDATE_IN_PLACE):
            _require(self.target_id, "target_id")
            if self.kind is DecisionKind.SKIP and self.reason is None:
                raise ValueError("Missing required field: reason")
            return

        if self.kind is DecisionKind.CREATE_NEW:
            return

        if self.kind is DecisionKind.PURGE_DUPLICATES_AND_CREATE:
            if len(self.ids_to_delete) < 2:
                raise ValueError("ids_to_delete must contain two or more ids")
            for file_id in self.ids_to_delete:
                _require(file_id, "ids_to_delete[]")
            return

        raise ValueError(f"Unsupported decision kind: {self.kind}")


def _require(value: object, field_name: str) -> None:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValueError(f"Missing required field: {field_name}")
