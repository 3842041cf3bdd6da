# src/profile_stage/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import profiles_router

__all__ = ["profiles_router"]
