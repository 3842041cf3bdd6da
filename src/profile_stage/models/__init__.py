# src/profile_stage/models/__init__.py
"""SQLAlchemy models for the Profile Stage application."""

from .follow import FOLLOW_STATUS_ACCEPTED, FOLLOW_STATUS_PENDING, Follow
from .post import Post
from .privacy import VISIBILITY_PRIVATE, VISIBILITY_PUBLIC, PrivacySetting
from .profile import Profile

__all__ = [
    "Follow", "FOLLOW_STATUS_ACCEPTED", "FOLLOW_STATUS_PENDING",
    "Post",
    "PrivacySetting", "VISIBILITY_PRIVATE", "VISIBILITY_PUBLIC",
    "Profile",
]
