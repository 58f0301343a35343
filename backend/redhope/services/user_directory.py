"""User Directory: registration, filtered listing, role lookup and profile/admin updates.

Invariants:
    - register() is idempotent on email: an existing user is never modified
    - list_users() applies only the filters that were provided, newest first
    - get_role() never fails: unknown users are donors
    - update_profile() strips email/role/status before writing
    - set_status()/set_role() write unconditionally by id

Design Decisions:
    - A concurrent duplicate registration that trips the unique email index
      is reported as "user exists", same as the sequential case
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from redhope.core.domain_types import (
    DEFAULT_ROLE, DEFAULT_USER_STATUS, Role, UserStatus,
)
from redhope.core.errors import ResourceNotFoundError
from redhope.core.query_filters import USER_FILTER_FIELDS, build_exact_match_filter
from redhope.core.user_rules import strip_protected_fields, resolve_role
from redhope.db.document import parse_document_id
from redhope.models.user import User
from redhope.schemas.common import InsertResult, MessageResult, UpdateResult
from redhope.services.document_ops import patch_document

logger = logging.getLogger(__name__)

USER_EXISTS_MESSAGE = "user exists"


class UserDirectory:
    """User records over an injected AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def register(self, doc: dict) -> InsertResult | MessageResult:
        email = doc["email"]
        if await self._find_by_email(email):
            logger.info("Registration skipped, user exists", extra={"email": email})
            return MessageResult(message=USER_EXISTS_MESSAGE)

        columns, extra = User.split_document(doc)
        columns["role"] = DEFAULT_ROLE.value
        columns["status"] = DEFAULT_USER_STATUS.value
        user = User(**columns, extra=extra, created_at=datetime.now(timezone.utc))
        self.db.add(user)
        try:
            await self.db.commit()
        except IntegrityError:
            await self.db.rollback()
            logger.info("Registration raced, user exists", extra={"email": email})
            return MessageResult(message=USER_EXISTS_MESSAGE)
        logger.info("User registered", extra={"email": email})
        return InsertResult(inserted_id=str(user.id))

    async def list_users(self, filters: dict[str, str | None]) -> list[dict]:
        criteria = build_exact_match_filter(filters, USER_FILTER_FIELDS)
        query = select(User).order_by(User.created_at.desc())
        for column, value in criteria.items():
            query = query.where(getattr(User, column) == value)
        result = await self.db.execute(query)
        return [u.to_document() for u in result.scalars().all()]

    async def get_role(self, email: str) -> str:
        user = await self._find_by_email(email)
        return resolve_role(user.role if user else None)

    async def get_profile(self, email: str) -> dict:
        user = await self._find_by_email(email)
        if not user:
            raise ResourceNotFoundError("User", email)
        return user.to_document()

    async def update_profile(self, email: str, patch: dict) -> UpdateResult:
        user = await self._find_by_email(email)
        return await patch_document(self.db, user, strip_protected_fields(patch))

    async def set_status(self, user_id: str, status: UserStatus) -> UpdateResult:
        user = await self._find_by_id(user_id)
        return await patch_document(self.db, user, {"status": status.value})

    async def set_role(self, user_id: str, role: Role) -> UpdateResult:
        user = await self._find_by_id(user_id)
        return await patch_document(self.db, user, {"role": role.value})

    async def _find_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def _find_by_id(self, user_id: str) -> User | None:
        uid = parse_document_id(user_id)
        if uid is None:
            return None
        return await self.db.get(User, uid)
