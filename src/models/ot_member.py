# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Orientation-training member and session models."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import date, datetime, time
from typing import TYPE_CHECKING

from sqlalchemy import (
    JSON,
    Boolean,
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    Time,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin
from src.models.enums import OTStatus

if TYPE_CHECKING:
    from src.models.staff import Staff


class OTMember(Base, TimestampMixin):
    """New gym member waiting for, or going through, orientation training."""

    __tablename__ = "ot_members"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str] = mapped_column(String(30), nullable=False)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    status: Mapped[OTStatus] = mapped_column(
        Enum(OTStatus),
        default=OTStatus.PENDING,
        nullable=False,
    )
    preferred_days: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    preferred_times: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    ot_count: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    assigned_staff_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("staff.id", ondelete="SET NULL"),
        nullable=True,
    )
    department: Mapped[str | None] = mapped_column(String(50), nullable=True)
    contact_made: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    contact_date: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    contact_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    assigned_staff: Mapped[Staff | None] = relationship("Staff")
    sessions: Mapped[list[OTSession]] = relationship(
        "OTSession",
        back_populates="member",
        cascade="all, delete-orphan",
        order_by="OTSession.session_date",
    )

    @property
    def completed_sessions(self) -> int:
        return sum(1 for s in self.sessions if s.completed)


class OTSession(Base):
    """Single orientation-training session."""

    __tablename__ = "ot_sessions"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    member_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("ot_members.id", ondelete="CASCADE"),
        nullable=False,
    )
    staff_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("staff.id", ondelete="SET NULL"),
        nullable=True,
    )
    session_date: Mapped[date] = mapped_column(Date, nullable=False)
    session_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Relationships
    member: Mapped[OTMember] = relationship("OTMember", back_populates="sessions")
