"""Common Schemas: camelCase base models and store write results.

Invariants:
    - Write results mirror document-store acknowledgements (insertedId, matchedCount, ...)
    - Open documents keep unknown keys (extra="allow") so they reach the opaque payload
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for all API models: camelCase aliases, snake_case attributes."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OpenDocument(WireModel):
    """Request body that accepts fields beyond the declared ones."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow",
    )

    def to_wire(self) -> dict:
        """Fields the client actually sent, keyed by wire name."""
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")


class InsertResult(WireModel):
    acknowledged: bool = True
    inserted_id: str


class UpdateResult(WireModel):
    acknowledged: bool = True
    matched_count: int
    modified_count: int


class DeleteResult(WireModel):
    acknowledged: bool = True
    deleted_count: int


class MessageResult(WireModel):
    message: str
