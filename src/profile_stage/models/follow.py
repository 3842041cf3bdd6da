# src/profile_stage/models/follow.py
"""Directed follow relationships between profiles."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from profile_stage.db.session import Base
from profile_stage.db.time import utcnow

FOLLOW_STATUS_PENDING = "pending"
FOLLOW_STATUS_ACCEPTED = "accepted"


class Follow(Base):
    """Follow edge from ``follower_id`` to ``following_id``.

    Requests to private profiles start out pending; only accepted edges
    grant access to private content.
    """

    __tablename__ = "follows"
    __table_args__ = (Index("ix_follows_following_id", "following_id"),)

    follower_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        primary_key=True,
    )
    following_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("profiles.id", ondelete="CASCADE"),
        primary_key=True,
    )

    # Composite primary key allows a single edge per direction.

    status: Mapped[str] = mapped_column(Text, nullable=False, default=FOLLOW_STATUS_PENDING)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
