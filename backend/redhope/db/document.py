"""Document Mapping: camelCase wire documents over typed ORM columns.

Invariants:
    - WIRE_FIELDS maps every wire key to its column attribute
    - Keys outside WIRE_FIELDS land in the `extra` JSON column, never dropped
    - `_id` and `createdAt` are assigned by the service and never patched
    - to_document() round-trips: known columns + extra merged, `_id` as string

Design Decisions:
    - Typed columns for every field that is filtered or aggregated; JSON for the
      rest so request bodies stay open-ended like documents
    - extra is reassigned (not mutated) so SQLAlchemy sees the change
"""

import uuid
from datetime import datetime
from typing import ClassVar

IMMUTABLE_WIRE_FIELDS = frozenset({"_id", "createdAt"})


class DocumentMixin:
    """Adds wire-document conversion and partial updates to an ORM model."""

    WIRE_FIELDS: ClassVar[dict[str, str]] = {}

    @classmethod
    def split_document(cls, doc: dict) -> tuple[dict, dict]:
        """Split a wire document into (column values, extra payload)."""
        columns: dict = {}
        extra: dict = {}
        for key, value in doc.items():
            if key in IMMUTABLE_WIRE_FIELDS:
                continue
            attr = cls.WIRE_FIELDS.get(key)
            if attr:
                columns[attr] = value
            else:
                extra[key] = value
        return columns, extra

    def apply_patch(self, patch: dict) -> bool:
        """Set every field in patch. Returns True if any stored value changed."""
        columns, extra_patch = self.split_document(patch)
        changed = False
        for attr, value in columns.items():
            if getattr(self, attr) != value:
                setattr(self, attr, value)
                changed = True
        if extra_patch:
            current = dict(self.extra or {})
            merged = {**current, **extra_patch}
            if merged != current:
                self.extra = merged
                changed = True
        return changed

    def to_document(self) -> dict:
        doc = dict(self.extra or {})
        doc["_id"] = str(self.id)
        for key, attr in self.WIRE_FIELDS.items():
            value = getattr(self, attr)
            if isinstance(value, datetime):
                value = value.isoformat()
            doc[key] = value
        doc["createdAt"] = self.created_at.isoformat() if self.created_at else None
        return doc


def parse_document_id(raw: str) -> uuid.UUID | None:
    """Parse a path identifier; malformed ids behave like unknown ones."""
    try:
        return uuid.UUID(raw)
    except (ValueError, TypeError, AttributeError):
        return None
