# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Member and consulting record schemas."""
import datetime
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator

from src.models.enums import MembershipType, MemberStatus, RegisterSource


class MemberBase(BaseModel):
    """Base member schema."""

    name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=30)
    email: Optional[EmailStr] = None
    membership_type: MembershipType
    membership_start: Optional[datetime.date] = None
    membership_end: Optional[datetime.date] = None
    pt_count: int = Field(0, ge=0)
    ot_count: int = Field(0, ge=0)
    lesson_count: int = Field(0, ge=0)
    register_source: Optional[RegisterSource] = None
    notes: Optional[str] = None

    @model_validator(mode="after")
    def validate_membership_period(self) -> "MemberBase":
        if (
            self.membership_start
            and self.membership_end
            and self.membership_end < self.membership_start
        ):
            raise ValueError("membership_end must not be before membership_start")
        return self


class MemberCreate(MemberBase):
    """Schema for registering a member.

    Without ``department`` the member belongs to the department of their
    membership type, or to the registering staff member's for combos.
    """

    consultant_id: Optional[uuid.UUID] = None
    department: Optional[str] = Field(None, min_length=1, max_length=50)


class MemberUpdate(BaseModel):
    """Schema for updating a member. Period order is checked by the service."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = Field(None, min_length=1, max_length=30)
    email: Optional[EmailStr] = None
    membership_type: Optional[MembershipType] = None
    membership_start: Optional[datetime.date] = None
    membership_end: Optional[datetime.date] = None
    pt_count: Optional[int] = Field(None, ge=0)
    ot_count: Optional[int] = Field(None, ge=0)
    lesson_count: Optional[int] = Field(None, ge=0)
    status: Optional[MemberStatus] = None
    register_source: Optional[RegisterSource] = None
    consultant_id: Optional[uuid.UUID] = None
    notes: Optional[str] = None


class ConsultingRecordCreate(BaseModel):
    """Schema for adding a consultation to a member's history."""

    content: str = Field(..., min_length=1)
    result: Optional[str] = Field(None, max_length=200)
    consulted_at: Optional[datetime.datetime] = None


class ConsultingRecordResponse(BaseModel):
    """Schema for consulting record response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    member_id: uuid.UUID
    consultant_id: Optional[uuid.UUID]
    consulted_at: datetime.datetime
    content: str
    result: Optional[str]


class MemberResponse(BaseModel):
    """Schema for member response including consulting history."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    phone: str
    email: Optional[str]
    membership_type: MembershipType
    membership_start: Optional[datetime.date]
    membership_end: Optional[datetime.date]
    pt_count: int
    ot_count: int
    lesson_count: int
    status: MemberStatus
    register_source: Optional[RegisterSource]
    notes: Optional[str]
    department: str
    consultant_id: Optional[uuid.UUID]
    registered_by_id: Optional[uuid.UUID]
    consulting_records: list[ConsultingRecordResponse] = []
    created_at: datetime.datetime
    updated_at: datetime.datetime
