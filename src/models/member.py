# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Member (customer) and consulting record models."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import date, datetime
from typing import TYPE_CHECKING

from sqlalchemy import (
    Date,
    DateTime,
    Enum,
    ForeignKey,
    Integer,
    String,
    Text,
    Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin
from src.models.enums import MembershipType, MemberStatus, RegisterSource

if TYPE_CHECKING:
    from src.models.staff import Staff


class Member(Base, TimestampMixin):
    """Fitness center customer with membership and lesson counters."""

    __tablename__ = "members"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    phone: Mapped[str] = mapped_column(String(30), nullable=False, index=True)
    email: Mapped[str | None] = mapped_column(String(255), nullable=True)
    membership_type: Mapped[MembershipType] = mapped_column(
        Enum(MembershipType), nullable=False
    )
    membership_start: Mapped[date | None] = mapped_column(Date, nullable=True)
    membership_end: Mapped[date | None] = mapped_column(Date, nullable=True)
    pt_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    ot_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    lesson_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    status: Mapped[MemberStatus] = mapped_column(
        Enum(MemberStatus),
        default=MemberStatus.ACTIVE,
        nullable=False,
    )
    register_source: Mapped[RegisterSource | None] = mapped_column(
        Enum(RegisterSource), nullable=True
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    department: Mapped[str] = mapped_column(String(50), nullable=False)
    consultant_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("staff.id", ondelete="SET NULL"),
        nullable=True,
    )
    registered_by_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("staff.id", ondelete="SET NULL"),
        nullable=True,
    )

    # Relationships
    consultant: Mapped[Staff | None] = relationship(
        "Staff", foreign_keys=[consultant_id]
    )
    consulting_records: Mapped[list[ConsultingRecord]] = relationship(
        "ConsultingRecord",
        back_populates="member",
        cascade="all, delete-orphan",
        order_by="ConsultingRecord.consulted_at",
    )


class ConsultingRecord(Base):
    """One consultation held with a member."""

    __tablename__ = "consulting_records"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    member_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("members.id", ondelete="CASCADE"),
        nullable=False,
    )
    consultant_id: Mapped[uuid_lib.UUID | None] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("staff.id", ondelete="SET NULL"),
        nullable=True,
    )
    consulted_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    result: Mapped[str | None] = mapped_column(String(200), nullable=True)

    # Relationships
    member: Mapped[Member] = relationship("Member", back_populates="consulting_records")
