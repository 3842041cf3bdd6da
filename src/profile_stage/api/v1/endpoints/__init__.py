# src/profile_stage/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .profiles import router as profiles_router

__all__ = ["profiles_router"]
