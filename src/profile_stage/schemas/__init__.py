# src/profile_stage/schemas/__init__.py
"""
Pydantic schemas for API responses.

These schemas define the structure of API data for serialization.
"""

from .post import AuthorSummary, ContentItemResponse, MediaReference
from .profile import ProfileHeader, ProfilePageResponse, ProfilePostsResponse

__all__ = [
    "AuthorSummary", "ContentItemResponse", "MediaReference",
    "ProfileHeader", "ProfilePageResponse", "ProfilePostsResponse",
]
