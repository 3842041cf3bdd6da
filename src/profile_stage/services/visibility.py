"""Access control for profile content.

A profile's posts and threads are visible when the profile is public, when
the viewer owns it, or when the viewer has an accepted follow on it. The
decision is a pure predicate (:func:`can_view`) fed by three lookups; content
is only fetched once the decision allows it.
"""
from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field

from sqlalchemy.exc import SQLAlchemyError

from profile_stage.models.post import Post
from profile_stage.models.privacy import VISIBILITY_PRIVATE, PrivacySetting
from profile_stage.models.profile import Profile
from profile_stage.repositories.profile_repo import ProfileDataSource

__all__ = [
    "AccessResult",
    "ProfileNotFoundError",
    "can_view",
    "partition_content",
    "resolve_profile_access",
]

logger = logging.getLogger(__name__)


class ProfileNotFoundError(LookupError):
    """Raised when a username does not resolve to a profile."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Profile not found: {username}")
        self.username = username


@dataclass(frozen=True)
class AccessResult:
    """Outcome of resolving a viewer's access to a profile."""

    profile: Profile
    is_private: bool
    is_owner: bool
    is_following: bool
    can_view_content: bool
    posts: list[Post] = field(default_factory=list)
    threads: list[Post] = field(default_factory=list)
    # Total of posts and threads, shown as the profile's post count.
    posts_count: int = 0
    content: list[Post] = field(default_factory=list)


def can_view(is_private: bool, is_owner: bool, is_following: bool) -> bool:
    """Return True if content of a profile may be shown to the viewer."""
    return not is_private or is_owner or is_following


def partition_content(items: Iterable[Post]) -> tuple[list[Post], list[Post]]:
    """Split items into media posts and text threads in one pass.

    Relative order is preserved within both lists.
    """
    posts: list[Post] = []
    threads: list[Post] = []
    for item in items:
        if item.media:
            posts.append(item)
        else:
            threads.append(item)
    return posts, threads


def _resolve_is_private(setting: PrivacySetting | None) -> bool:
    # No row means no restriction.
    if setting is None:
        return False
    return setting.profile_visibility == VISIBILITY_PRIVATE


def resolve_profile_access(
    repo: ProfileDataSource,
    viewer_id: uuid.UUID | None,
    username: str,
) -> AccessResult:
    """Decide what ``viewer_id`` may see of the profile named ``username``.

    Args:
        repo: Read-only data source for profiles, privacy, follows and content.
        viewer_id: Identifier of the requesting profile, or None when anonymous.
        username: Username of the profile being viewed.

    Returns:
        The access decision together with the visible content. ``posts`` and
        ``threads`` are empty when the content is not visible.

    Raises:
        ProfileNotFoundError: If ``username`` does not resolve to a profile.
    """
    try:
        profile = repo.find_profile_by_username(username)
    except SQLAlchemyError as err:
        logger.warning("Profile lookup for %r failed: %s", username, err)
        raise ProfileNotFoundError(username) from err
    if profile is None:
        logger.info("Profile %r not found", username)
        raise ProfileNotFoundError(username)

    is_private = _resolve_is_private(repo.find_privacy_setting(profile.id))
    is_owner = viewer_id is not None and viewer_id == profile.id

    is_following = False
    if viewer_id is not None and not is_owner:
        is_following = repo.find_accepted_follow_edge(viewer_id, profile.id)

    visible = can_view(is_private, is_owner, is_following)
    logger.debug(
        "Access to %s: private=%s owner=%s following=%s visible=%s",
        profile.id,
        is_private,
        is_owner,
        is_following,
        visible,
    )
    if not visible:
        return AccessResult(
            profile=profile,
            is_private=is_private,
            is_owner=is_owner,
            is_following=is_following,
            can_view_content=False,
        )

    content = repo.list_content_by_author(profile.id)
    posts, threads = partition_content(content)
    return AccessResult(
        profile=profile,
        is_private=is_private,
        is_owner=is_owner,
        is_following=is_following,
        can_view_content=True,
        posts=posts,
        threads=threads,
        posts_count=len(content),
        content=list(content),
    )
