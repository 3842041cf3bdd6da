# src/profile_stage/schemas/post.py
"""Content item Pydantic schemas."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from profile_stage.db.time import as_utc


class MediaReference(BaseModel):
    """Reference to an uploaded media object."""

    # Missing while an upload is still being processed.
    url: str | None = Field(None, description="Public URL of the media object")
    type: str | None = Field(None, description="Media kind, e.g. image or video")

    model_config = ConfigDict(extra="allow")


class AuthorSummary(BaseModel):
    """Author fields shown next to a content item."""

    id: uuid.UUID
    username: str
    display_name: str | None = None
    avatar_url: str | None = None

    model_config = ConfigDict(from_attributes=True)


class ContentItemResponse(BaseModel):
    """Schema for a post or thread returned by the API."""

    id: int
    user_id: uuid.UUID
    text: str | None
    media: list[MediaReference] = Field(default_factory=list)
    created_at: datetime
    like_count: int = 0
    comment_count: int = 0
    share_count: int = 0
    save_count: int = 0
    author: AuthorSummary | None = None

    @field_validator("media", mode="before")
    @classmethod
    def _default_media(cls, v: object) -> object:
        return [] if v is None else v

    @field_validator("created_at")
    @classmethod
    def _utc_created_at(cls, v: datetime) -> datetime:
        return as_utc(v)

    @field_validator("like_count", "comment_count", "share_count", "save_count", mode="before")
    @classmethod
    def _default_counter(cls, v: object) -> object:
        return 0 if v is None else v

    model_config = ConfigDict(from_attributes=True)
