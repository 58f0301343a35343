"""Donation Request Registry: create, filtered listing, lookup, partial update, delete.

Invariants:
    - create() stamps createdAt and defaults status to pending; nothing is required
    - list_requests() matches email against the requester and district/upazila against the
      recipient location, newest first
    - update() writes any sent field, status included; no ownership or transition checks
"""

import logging
from datetime import datetime, timezone

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from redhope.core.domain_types import DEFAULT_DONATION_STATUS
from redhope.core.errors import ResourceNotFoundError
from redhope.core.query_filters import (
    DONATION_REQUEST_FILTER_FIELDS, build_exact_match_filter,
)
from redhope.db.document import parse_document_id
from redhope.models.donation_request import DonationRequest
from redhope.schemas.common import InsertResult, UpdateResult, DeleteResult
from redhope.services.document_ops import patch_document, delete_document

logger = logging.getLogger(__name__)


class DonationRegistry:
    """Donation requests over an injected AsyncSession."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, doc: dict) -> InsertResult:
        columns, extra = DonationRequest.split_document(doc)
        if not columns.get("status"):
            columns["status"] = DEFAULT_DONATION_STATUS.value
        request = DonationRequest(
            **columns, extra=extra, created_at=datetime.now(timezone.utc),
        )
        self.db.add(request)
        await self.db.commit()
        logger.info(
            "Donation request created",
            extra={"email": request.requester_email},
        )
        return InsertResult(inserted_id=str(request.id))

    async def list_requests(self, filters: dict[str, str | None]) -> list[dict]:
        criteria = build_exact_match_filter(filters, DONATION_REQUEST_FILTER_FIELDS)
        query = select(DonationRequest).order_by(DonationRequest.created_at.desc())
        for column, value in criteria.items():
            query = query.where(getattr(DonationRequest, column) == value)
        result = await self.db.execute(query)
        return [r.to_document() for r in result.scalars().all()]

    async def get_by_id(self, request_id: str) -> dict:
        request = await self._find(request_id)
        if not request:
            raise ResourceNotFoundError("Donation request", request_id)
        return request.to_document()

    async def update(self, request_id: str, patch: dict) -> UpdateResult:
        request = await self._find(request_id)
        return await patch_document(self.db, request, patch)

    async def delete(self, request_id: str) -> DeleteResult:
        request = await self._find(request_id)
        return await delete_document(self.db, request)

    async def _find(self, request_id: str) -> DonationRequest | None:
        rid = parse_document_id(request_id)
        if rid is None:
            return None
        return await self.db.get(DonationRequest, rid)
