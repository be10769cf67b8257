from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime

from app.schemas.content import ContentBlock

ANONYMOUS_AUTHOR = "Anonymous"


def _require_text(value: str, field_name: str) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{field_name} is required")
    return value


def _blank_to_none(value: Optional[str]) -> Optional[str]:
    # An empty excerpt is stored as null
    return value or None


# --- Posts ---
class Post(BaseModel):
    id: str
    slug: str
    title: str
    content: str
    excerpt: Optional[str] = None
    published: bool = False
    author_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PostCreate(BaseModel):
    title: str
    content: str
    excerpt: Optional[str] = None
    published: bool = False

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v):
        return _require_text(v, "Title")

    @field_validator("content")
    @classmethod
    def content_not_empty(cls, v):
        return _require_text(v, "Content")

    @field_validator("excerpt")
    @classmethod
    def excerpt_blank_to_none(cls, v):
        return _blank_to_none(v)


class PostUpdate(BaseModel):
    """Partial update; only fields sent by the client are applied."""
    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    published: Optional[bool] = None

    @field_validator("title")
    @classmethod
    def title_not_empty(cls, v):
        return _require_text(v, "Title")

    @field_validator("content")
    @classmethod
    def content_not_empty(cls, v):
        return _require_text(v, "Content")

    @field_validator("excerpt")
    @classmethod
    def excerpt_blank_to_none(cls, v):
        return _blank_to_none(v)


class PostSummary(BaseModel):
    id: str
    slug: str
    title: str
    excerpt: Optional[str] = None
    created_at: Optional[datetime] = None
    author_name: str = ANONYMOUS_AUTHOR


class PostDetail(Post):
    author_name: str = ANONYMOUS_AUTHOR
    author_initial: str = "A"
    reading_time_minutes: int = 1
    blocks: List[ContentBlock] = Field(default_factory=list)


class Dashboard(BaseModel):
    posts: List[Post]
    total: int
    published: int
    drafts: int
