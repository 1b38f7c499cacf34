# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Staff schemas."""
import datetime
import re
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from src.models.enums import Position, StaffRole
from src.rbac.permissions import parse_permissions

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")


def _validate_overrides(codes: Optional[list[str]]) -> Optional[list[str]]:
    if codes is None:
        return None
    _, invalid = parse_permissions(codes)
    if invalid:
        raise ValueError(f"Unknown permissions: {', '.join(invalid)}")
    # Keep the first occurrence of each code
    return list(dict.fromkeys(codes))


class StaffBase(BaseModel):
    """Base staff schema."""

    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    full_name: Optional[str] = Field(None, max_length=200)
    phone: Optional[str] = Field(None, max_length=30)

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        if not USERNAME_PATTERN.match(v):
            raise ValueError("Username must contain only alphanumeric characters and underscores")
        return v


class StaffCreate(StaffBase):
    """Schema for creating a staff member.

    ``department`` defaults to the role name when omitted.
    """

    role: StaffRole
    position: Optional[Position] = None
    department: Optional[str] = Field(None, min_length=1, max_length=50)
    permission_overrides: list[str] = []

    @field_validator("permission_overrides")
    @classmethod
    def validate_overrides(cls, v: list[str]) -> list[str]:
        return _validate_overrides(v)


class StaffUpdate(BaseModel):
    """Schema for updating profile fields of a staff member."""

    email: Optional[EmailStr] = None
    full_name: Optional[str] = Field(None, max_length=200)
    phone: Optional[str] = Field(None, max_length=30)


class StaffAccessUpdate(BaseModel):
    """Schema for changing what a staff member is allowed to do (admin use)."""

    role: Optional[StaffRole] = None
    position: Optional[Position] = None
    department: Optional[str] = Field(None, min_length=1, max_length=50)
    permission_overrides: Optional[list[str]] = None

    @field_validator("permission_overrides")
    @classmethod
    def validate_overrides(cls, v: Optional[list[str]]) -> Optional[list[str]]:
        return _validate_overrides(v)


class StaffResponse(BaseModel):
    """Schema for staff response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    username: str
    email: str
    full_name: Optional[str] = None
    phone: Optional[str] = None
    role: StaffRole
    position: Optional[Position] = None
    department: str
    permission_overrides: list[str]
    is_active: bool
    created_at: datetime.datetime
    updated_at: datetime.datetime
