"""
Collection and override models.

Wire field names are snake_case and match the attribute names, so models are
dumped and validated without aliases. Optional fields left unset are dropped
from request bodies (``exclude_none=True`` in the request builder).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


# =============================================================================
# Collection Schema
# =============================================================================


class CollectionField(BaseModel):
    """A single attribute of a collection's documents."""

    name: str
    type: str
    facet: bool = False


class CollectionSchema(BaseModel):
    """Definition of a collection to create.

    Name and fields default to empty on purpose: TypesenseClient validates
    them before sending and raises the dedicated name/fields errors.
    """

    name: str = ""
    fields: list[CollectionField] = Field(default_factory=list)
    default_sorting_field: str | None = None


class Collection(CollectionSchema):
    """Server-side snapshot of a collection.

    Frozen: the client only ever receives fresh snapshots from responses.
    """

    model_config = ConfigDict(frozen=True)

    num_documents: int = Field(default=0, ge=0)
    created_at: int = 0

    def as_schema(self) -> CollectionSchema:
        """Return the schema part of this collection."""
        return CollectionSchema(
            name=self.name,
            fields=list(self.fields),
            default_sorting_field=self.default_sorting_field,
        )


# =============================================================================
# Overrides
# =============================================================================


class OverrideRule(BaseModel):
    """Query pattern an override applies to.

    Attributes:
        match: Match mode, e.g. "exact" or "contains".
        query: Query text to match.
    """

    match: str
    query: str


class OverrideDocID(BaseModel):
    """Document pinned (include) or hidden (exclude) by an override."""

    id: str
    position: int | None = None


class Override(BaseModel):
    """Rule forcing documents into or out of the results for a query."""

    id: str
    rule: OverrideRule
    includes: list[OverrideDocID] | None = None
    excludes: list[OverrideDocID] | None = None


class OverrideList(BaseModel):
    """Body of GET /collections/{name}/overrides."""

    overrides: list[Override]

    @field_validator("overrides", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        """A null list means the collection has no overrides."""
        return [] if value is None else value


# =============================================================================
# Export All
# =============================================================================

__all__ = [
    "CollectionField",
    "CollectionSchema",
    "Collection",
    "OverrideRule",
    "OverrideDocID",
    "Override",
    "OverrideList",
]
