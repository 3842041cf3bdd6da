# src/profile_stage/models/post.py
"""SQLAlchemy models for posts and threads."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import JSON, DateTime, ForeignKey, Index, Integer, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from profile_stage.db.session import Base
from profile_stage.db.time import utcnow
from profile_stage.models.profile import Profile


class Post(Base):
    """Content item authored by a profile.

    Items carrying media are shown as posts; items without media are threads.
    """

    __tablename__ = "posts"
    __table_args__ = (Index("ix_posts_user_id_created_at", "user_id", "created_at"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        nullable=False,
    )
    text: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Ordered list of {"url": ..., "type": ...} references into the media bucket.
    media: Mapped[list[dict[str, Any]] | None] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    # Engagement counters are maintained elsewhere and passed through as-is.
    like_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    comment_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    share_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)
    save_count: Mapped[int | None] = mapped_column(Integer, nullable=True, default=0)

    author: Mapped[Profile] = relationship("Profile", lazy="joined")
