# src/profile_stage/services/__init__.py
"""Business logic services for the Profile Stage application."""

from .visibility import (
    AccessResult,
    ProfileNotFoundError,
    can_view,
    partition_content,
    resolve_profile_access,
)

__all__ = [
    "AccessResult",
    "ProfileNotFoundError",
    "can_view",
    "partition_content",
    "resolve_profile_access",
]
