"""
Test database model.

Questions are embedded in the test row as a JSON list, so a test and its
questions are always read and written as one document.
"""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import TYPE_CHECKING

import sqlalchemy as sa
from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from exambuilder.database import Base

if TYPE_CHECKING:
    from exambuilder.models.db.admin import Admin


class Test(Base):
    """
    A titled collection of multiple-choice questions owned by one admin.

    Each entry of ``questions`` is a dict with ``id``, ``questionText``,
    ``options`` (keys A-D), ``correctAnswer`` and ``createdAt``. The list is
    replaced as a whole on every mutation.
    """

    __tablename__ = "tests"

    id: Mapped[str] = mapped_column(
        String(32), primary_key=True, default=lambda: uuid.uuid4().hex
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    questions: Mapped[list[dict]] = mapped_column(sa.JSON, default=list, nullable=False)
    created_by: Mapped[str] = mapped_column(
        ForeignKey("admins.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    # Relationships
    owner: Mapped["Admin"] = relationship("Admin", back_populates="tests")

    def __repr__(self) -> str:
        return f"<Test(id='{self.id}', title='{self.title}', created_by='{self.created_by}')>"
