"""User ORM: registered donors, volunteers and administrators.

Invariants:
    - email is unique (registration is idempotent on it)
    - role defaults to donor, status defaults to active
    - role/status stored as plain strings matching domain_types enums
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from redhope.core.domain_types import DEFAULT_ROLE, DEFAULT_USER_STATUS
from redhope.db.base import Base
from redhope.db.document import DocumentMixin


class User(DocumentMixin, Base):
    """User account and donor profile."""
    __tablename__ = "users"

    WIRE_FIELDS = {
        "email": "email",
        "name": "name",
        "avatar": "avatar",
        "bloodGroup": "blood_group",
        "district": "district",
        "upazila": "upazila",
        "role": "role",
        "status": "status",
    }

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    avatar: Mapped[str | None] = mapped_column(Text, nullable=True)
    blood_group: Mapped[str | None] = mapped_column(String(5), nullable=True)
    district: Mapped[str | None] = mapped_column(String(100), nullable=True)
    upazila: Mapped[str | None] = mapped_column(String(100), nullable=True)
    role: Mapped[str | None] = mapped_column(
        String(20), nullable=True, default=DEFAULT_ROLE.value,
    )
    status: Mapped[str | None] = mapped_column(
        String(20), nullable=True, default=DEFAULT_USER_STATUS.value,
    )
    extra: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
