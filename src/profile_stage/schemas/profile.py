# src/profile_stage/schemas/profile.py
"""Profile page Pydantic schemas."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from profile_stage.db.time import as_utc

from profile_stage.schemas.post import ContentItemResponse
from profile_stage.services.visibility import AccessResult

PROFILE_TABS = ["posts", "threads", "saved", "tagged"]


class ProfileHeader(BaseModel):
    """Header block of a profile page."""

    id: uuid.UUID
    username: str
    display_name: str | None
    avatar_url: str | None
    bio: str | None
    website: str | None
    location: str | None
    created_at: datetime
    posts_count: int = Field(..., description="Posts and threads combined")
    followers_count: int
    following_count: int
    is_private: bool
    is_verified: bool = False

    @field_validator("created_at")
    @classmethod
    def _utc_created_at(cls, v: datetime) -> datetime:
        return as_utc(v)


class ProfilePageResponse(BaseModel):
    """Profile header plus the content the viewer is allowed to see."""

    profile: ProfileHeader
    is_owner: bool
    is_following: bool
    can_view_content: bool
    tabs: list[str] = Field(default_factory=list)
    posts: list[ContentItemResponse] = Field(default_factory=list)
    threads: list[ContentItemResponse] = Field(default_factory=list)

    @classmethod
    def from_access(cls, result: AccessResult) -> ProfilePageResponse:
        """Build the page body from a resolved access decision."""
        profile = result.profile
        header = ProfileHeader(
            id=profile.id,
            username=profile.username,
            display_name=profile.display_name,
            avatar_url=profile.avatar_url,
            bio=profile.bio,
            website=profile.website,
            location=profile.location,
            created_at=profile.created_at,
            posts_count=result.posts_count,
            followers_count=profile.follower_count or 0,
            following_count=profile.following_count or 0,
            is_private=result.is_private,
        )
        return cls(
            profile=header,
            is_owner=result.is_owner,
            is_following=result.is_following,
            can_view_content=result.can_view_content,
            tabs=list(PROFILE_TABS) if result.can_view_content else [],
            posts=[ContentItemResponse.model_validate(p) for p in result.posts],
            threads=[ContentItemResponse.model_validate(t) for t in result.threads],
        )


class ProfilePostsResponse(BaseModel):
    """Full content listing of a profile, newest first."""

    username: str
    posts: list[ContentItemResponse] = Field(default_factory=list)
