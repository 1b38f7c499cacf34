# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Orientation-training schemas."""
import datetime
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from src.models.enums import OTStatus


class OTMemberCreate(BaseModel):
    """Schema for registering a member for orientation training."""

    name: str = Field(..., min_length=1, max_length=100)
    phone: str = Field(..., min_length=1, max_length=30)
    email: Optional[EmailStr] = None
    preferred_days: list[str] = []
    preferred_times: list[str] = []
    notes: Optional[str] = None
    ot_count: int = Field(1, ge=1, le=20)


class OTMemberUpdate(BaseModel):
    """Schema for updating an OT member."""

    name: Optional[str] = Field(None, min_length=1, max_length=100)
    phone: Optional[str] = Field(None, min_length=1, max_length=30)
    email: Optional[EmailStr] = None
    preferred_days: Optional[list[str]] = None
    preferred_times: Optional[list[str]] = None
    notes: Optional[str] = None
    ot_count: Optional[int] = Field(None, ge=1, le=20)


class OTAssign(BaseModel):
    """Schema for assigning an OT member to a staff member."""

    staff_id: uuid.UUID


class OTContact(BaseModel):
    """Schema for recording the first contact with a member."""

    contact_notes: Optional[str] = None
    contact_date: Optional[datetime.datetime] = None


class OTSessionCreate(BaseModel):
    """Schema for recording an OT session."""

    session_date: datetime.date
    session_time: Optional[datetime.time] = None
    completed: bool = False
    notes: Optional[str] = None


class OTSessionUpdate(BaseModel):
    """Schema for updating an OT session."""

    session_date: Optional[datetime.date] = None
    session_time: Optional[datetime.time] = None
    completed: Optional[bool] = None
    notes: Optional[str] = None


class OTSessionResponse(BaseModel):
    """Schema for OT session response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    member_id: uuid.UUID
    staff_id: Optional[uuid.UUID]
    session_date: datetime.date
    session_time: Optional[datetime.time]
    completed: bool
    notes: Optional[str]


class OTMemberResponse(BaseModel):
    """Schema for OT member response including sessions."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    phone: str
    email: Optional[str]
    status: OTStatus
    preferred_days: list[str]
    preferred_times: list[str]
    notes: Optional[str]
    ot_count: int
    completed_sessions: int
    assigned_staff_id: Optional[uuid.UUID]
    department: Optional[str]
    contact_made: bool
    contact_date: Optional[datetime.datetime]
    contact_notes: Optional[str]
    sessions: list[OTSessionResponse] = []
    created_at: datetime.datetime
    updated_at: datetime.datetime
