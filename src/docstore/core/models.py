"""Document, author, and search request models"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Read naive datetimes as UTC so every timestamp is a comparable point in time."""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Author(BaseModel):
    """Immutable author value embedded in a Document."""
    model_config = ConfigDict(frozen=True)

    id:   Optional[str] = None
    name: Optional[str] = None


class Document(BaseModel):
    """A stored record; id is None until the store assigns one."""
    model_config = ConfigDict(validate_assignment=True)

    id:      Optional[str] = None
    title:   Optional[str] = None
    content: Optional[str] = None
    author:  Optional[Author] = None
    created: Optional[datetime] = None

    @field_validator("id", mode="before")
    @classmethod
    def _int_id_to_str(cls, v: Any) -> Any:
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("created")
    @classmethod
    def _created_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(v)


class SearchRequest(BaseModel):
    """Filter descriptor for search; None or empty fields place no constraint."""
    model_config = ConfigDict(validate_assignment=True)

    author_ids:        Optional[list[str]] = None
    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    created_from:      Optional[datetime] = None
    created_to:        Optional[datetime] = None

    @field_validator("created_from", "created_to")
    @classmethod
    def _bounds_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return _as_utc(v)
