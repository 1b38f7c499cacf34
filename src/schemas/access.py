# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Schemas describing access decisions for the dashboard."""
import uuid

from pydantic import BaseModel

from src.models.enums import DataAccessLevel, Position, StaffRole


class PermissionSchema(BaseModel):
    """Catalog entry for a permission."""

    code: str
    module: str
    description: str | None


class AccessProfile(BaseModel):
    """Everything the dashboard needs to decide what to render."""

    staff_id: uuid.UUID
    role: StaffRole
    position: Position | None
    position_level: int | None
    department: str
    department_name: str
    can_manage_team: bool
    permissions: list[str]
    data_access: dict[str, DataAccessLevel]


class PageAccessResponse(BaseModel):
    """Route guard decision for one page path."""

    path: str
    allowed: bool
    redirect_to: str | None = None
    reason: str | None = None


class PermissionCheckResponse(BaseModel):
    """Permission decision with an advisory reason."""

    permission: str
    allowed: bool
    reason: str


class DataAccessResponse(BaseModel):
    """Data access level for one data type."""

    data_type: str
    level: DataAccessLevel
