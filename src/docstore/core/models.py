"""Document, author, and search request models"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

from docstore.core.utils.clock import as_utc


class Author(BaseModel):
    """Immutable author reference; id is what author filters match on."""
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    name: str = ""


class Document(BaseModel):
    """A stored record. id and created are assigned by the repository on save."""
    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: Optional[str] = None
    title: str = ""
    content: str = ""
    author: Optional[Author] = None
    created: Optional[datetime] = None

    @field_validator("created")
    @classmethod
    def created_as_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)


class SearchRequest(BaseModel):
    """Optional search criteria. None skips a criterion; an empty list rejects every document."""
    model_config = ConfigDict(frozen=True)

    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids:        Optional[list[str]] = None
    created_from:      Optional[datetime] = None     # inclusive
    created_to:        Optional[datetime] = None     # inclusive

    @field_validator("created_from", "created_to")
    @classmethod
    def bounds_as_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)
