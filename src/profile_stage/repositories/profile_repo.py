"""Read-only data access for profile pages."""
from __future__ import annotations

import uuid
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.orm import Session

from profile_stage.models.follow import FOLLOW_STATUS_ACCEPTED, Follow
from profile_stage.models.post import Post
from profile_stage.models.privacy import PrivacySetting
from profile_stage.models.profile import Profile

__all__ = ["ProfileDataSource", "ProfileRepository"]


class ProfileDataSource(Protocol):
    """Lookups the visibility resolver depends on."""

    def find_profile_by_username(self, username: str) -> Profile | None: ...

    def find_privacy_setting(self, user_id: uuid.UUID) -> PrivacySetting | None: ...

    def find_accepted_follow_edge(
        self, follower_id: uuid.UUID, following_id: uuid.UUID
    ) -> bool: ...

    def list_content_by_author(self, user_id: uuid.UUID) -> list[Post]: ...


class ProfileRepository:
    """Thin wrapper around database access for profile page data."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def find_profile_by_username(self, username: str) -> Profile | None:
        """Return the profile owning ``username``."""
        result = self.session.execute(select(Profile).where(Profile.username == username))
        return result.scalars().first()

    def find_profile_by_id(self, user_id: uuid.UUID) -> Profile | None:
        """Return a profile by identifier."""
        return self.session.get(Profile, user_id)

    def find_privacy_setting(self, user_id: uuid.UUID) -> PrivacySetting | None:
        """Return the privacy row for a profile, if one exists."""
        result = self.session.execute(
            select(PrivacySetting).where(PrivacySetting.user_id == user_id)
        )
        return result.scalars().first()

    def find_accepted_follow_edge(self, follower_id: uuid.UUID, following_id: uuid.UUID) -> bool:
        """Return True if ``follower_id`` has an accepted follow on ``following_id``."""
        result = self.session.execute(
            select(Follow.follower_id).where(
                Follow.follower_id == follower_id,
                Follow.following_id == following_id,
                Follow.status == FOLLOW_STATUS_ACCEPTED,
            )
        )
        return result.first() is not None

    def list_content_by_author(self, user_id: uuid.UUID) -> list[Post]:
        """Return every item authored by ``user_id``, newest first.

        Items sharing a timestamp are ordered by descending id.
        """
        result = self.session.execute(
            select(Post)
            .where(Post.user_id == user_id)
            .order_by(Post.created_at.desc(), Post.id.desc())
        )
        return list(result.scalars())
