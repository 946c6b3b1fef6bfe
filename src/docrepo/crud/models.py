"""Document, author and search request records held by the repository"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize a timestamp to UTC; naive values are taken to be UTC already."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Author(BaseModel):
    """Author embedded by value in a Document"""
    model_config = ConfigDict(frozen=True)
    id: str
    name: str


class Document(BaseModel):
    """A stored document; id stays None until the first save. created is always UTC-aware."""
    model_config = ConfigDict(frozen=True)
    id: Optional[str] = None
    title: Optional[str] = None
    content: Optional[str] = None
    author: Optional[Author] = None
    created: Optional[datetime] = None

    @field_validator("created")
    @classmethod
    def utc_created(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class SearchRequest(BaseModel):
    """Conjunction of optional filters; None or empty skips a clause"""
    model_config = ConfigDict(frozen=True)
    title_prefixes: Optional[list[str]] = Field(default=None, description="Title must start with one of these")
    contains_contents: Optional[list[str]] = Field(default=None, description="Content must start with one of these")
    author_ids: Optional[list[str]] = Field(default=None, description="Id prefixes, see author_match")
    created_from: Optional[datetime] = Field(default=None, description="Inclusive lower bound on created, UTC")
    created_to: Optional[datetime] = Field(default=None, description="Inclusive upper bound on created, UTC")

    @field_validator("created_from", "created_to")
    @classmethod
    def utc_bounds(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)
