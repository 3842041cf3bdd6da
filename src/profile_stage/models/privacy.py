# src/profile_stage/models/privacy.py
"""Per-profile privacy settings."""

from __future__ import annotations

import uuid

from sqlalchemy import ForeignKey, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from profile_stage.db.session import Base

VISIBILITY_PUBLIC = "public"
VISIBILITY_PRIVATE = "private"


class PrivacySetting(Base):
    """Visibility preferences, one row per profile at most.

    A profile without a row is public.
    """

    __tablename__ = "privacy_settings"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        primary_key=True,
    )
    profile_visibility: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        default=VISIBILITY_PUBLIC,
    )
