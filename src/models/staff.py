# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Staff model: the subjects of every access decision."""

from __future__ import annotations

import uuid as uuid_lib
from typing import TYPE_CHECKING

from sqlalchemy import JSON, Boolean, Enum, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin
from src.models.enums import Position, StaffRole

if TYPE_CHECKING:
    from src.models.session import Session


class Staff(Base, TimestampMixin):
    """Staff member with department role, position and permission overrides."""

    __tablename__ = "staff"

    id: Mapped[uuid_lib.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid_lib.uuid4,
    )
    username: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    full_name: Mapped[str | None] = mapped_column(String(200), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(30), nullable=True)
    role: Mapped[StaffRole] = mapped_column(Enum(StaffRole), nullable=False)
    position: Mapped[Position | None] = mapped_column(Enum(Position), nullable=True)
    department: Mapped[str] = mapped_column(String(50), nullable=False)
    # Extra permission codes granted on top of the role's base set
    permission_overrides: Mapped[list[str]] = mapped_column(
        JSON, default=list, nullable=False
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    sessions: Mapped[list[Session]] = relationship(
        "Session",
        back_populates="staff",
        cascade="all, delete-orphan",
    )

    @property
    def display_name(self) -> str:
        return self.full_name or self.username
