"""Document Operations: shared partial-update and delete helpers for ORM documents.

Invariants:
    - A missing row is reported as matched_count=0 / deleted_count=0, never an error
    - modified_count is 1 only when a stored value actually changed
"""

from sqlalchemy.ext.asyncio import AsyncSession

from redhope.db.document import DocumentMixin
from redhope.schemas.common import UpdateResult, DeleteResult


async def patch_document(
    db: AsyncSession, row: DocumentMixin | None, patch: dict,
) -> UpdateResult:
    """Apply patch to row (if any) and commit."""
    if row is None:
        return UpdateResult(matched_count=0, modified_count=0)
    changed = row.apply_patch(patch)
    if changed:
        await db.commit()
    return UpdateResult(matched_count=1, modified_count=int(changed))


async def delete_document(db: AsyncSession, row) -> DeleteResult:
    if row is None:
        return DeleteResult(deleted_count=0)
    await db.delete(row)
    await db.commit()
    return DeleteResult(deleted_count=1)
