# src/profile_stage/models/profile.py
"""SQLAlchemy model for user profiles."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from profile_stage.db.session import Base
from profile_stage.db.time import utcnow


class Profile(Base):
    """Public identity record of a user, looked up by username."""

    __tablename__ = "profiles"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    username: Mapped[str] = mapped_column(Text, unique=True, nullable=False, index=True)
    display_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    avatar_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    website: Mapped[str | None] = mapped_column(Text, nullable=True)
    location: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    # Maintained by the follow flows elsewhere; may be NULL on fresh rows.
    follower_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    following_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
