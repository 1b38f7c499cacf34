# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Schedule model for PT, OT, group and consultation sessions."""

from __future__ import annotations

import uuid as uuid_lib
from datetime import date, time
from typing import TYPE_CHECKING

from sqlalchemy import Boolean, Date, Enum, ForeignKey, String, Text, Time, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin
from src.models.enums import RecurrenceType, SessionType

if TYPE_CHECKING:
    from src.models.staff import Staff


class Schedule(Base, TimestampMixin):
    """Session booked for a trainer with a client."""

    __tablename__ = "schedules"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    trainer_id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("staff.id", ondelete="CASCADE"),
        nullable=False,
    )
    client_name: Mapped[str] = mapped_column(String(100), nullable=False)
    client_id: Mapped[str | None] = mapped_column(String(50), nullable=True)
    session_type: Mapped[SessionType] = mapped_column(
        Enum(SessionType),
        default=SessionType.PT,
        nullable=False,
    )
    session_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    start_time: Mapped[time] = mapped_column(Time, nullable=False)
    end_time: Mapped[time] = mapped_column(Time, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    recurrence: Mapped[RecurrenceType] = mapped_column(
        Enum(RecurrenceType),
        default=RecurrenceType.NONE,
        nullable=False,
    )
    recurrence_end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    is_completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    department: Mapped[str] = mapped_column(String(50), nullable=False)

    # Relationships
    trainer: Mapped[Staff] = relationship("Staff")
