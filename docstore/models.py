from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, field_validator


def as_utc(value: datetime | None) -> datetime | None:
    # Naive values are taken to already be UTC.
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Author(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str | None = None


class Document(BaseModel):
    """
    Immutable document record. Updates build a new instance, stored values are never mutated.
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    title: str | None = None
    content: str | None = None
    author: Author | None = None
    created: datetime | None = None

    @field_validator("created")
    @classmethod
    def _created_as_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)


class SearchRequest(BaseModel):
    """
    Filter for DocumentStore.search. Every field is optional; None or an empty
    list means the criterion imposes no constraint.

      title_prefixes     title starts with any of these
      contains_contents  content contains all of these
      author_ids         author.id is any of these
      created_from       created >= bound (inclusive)
      created_to         created <= bound (inclusive)
    """

    model_config = ConfigDict(frozen=True)

    title_prefixes: list[str] | None = None
    contains_contents: list[str] | None = None
    author_ids: list[str] | None = None
    created_from: datetime | None = None
    created_to: datetime | None = None

    @field_validator("created_from", "created_to")
    @classmethod
    def _bounds_as_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)
