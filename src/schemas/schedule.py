# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Schedule schemas."""
import datetime
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.models.enums import RecurrenceType, SessionType


class ScheduleBase(BaseModel):
    """Base schedule schema."""

    client_name: str = Field(..., min_length=1, max_length=100)
    client_id: Optional[str] = Field(None, max_length=50)
    session_type: SessionType = SessionType.PT
    session_date: datetime.date
    start_time: datetime.time
    end_time: datetime.time
    notes: Optional[str] = None
    recurrence: RecurrenceType = RecurrenceType.NONE
    recurrence_end_date: Optional[datetime.date] = None

    @model_validator(mode="after")
    def validate_times(self) -> "ScheduleBase":
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        if self.recurrence_end_date and self.recurrence_end_date < self.session_date:
            raise ValueError("recurrence_end_date must not be before session_date")
        return self


class ScheduleCreate(ScheduleBase):
    """Schema for booking a session.

    Without ``trainer_id`` the session is booked for the caller.
    """

    trainer_id: Optional[uuid.UUID] = None


class ScheduleUpdate(BaseModel):
    """Schema for updating a session. Time order is checked by the service."""

    client_name: Optional[str] = Field(None, min_length=1, max_length=100)
    client_id: Optional[str] = Field(None, max_length=50)
    session_type: Optional[SessionType] = None
    session_date: Optional[datetime.date] = None
    start_time: Optional[datetime.time] = None
    end_time: Optional[datetime.time] = None
    notes: Optional[str] = None
    recurrence: Optional[RecurrenceType] = None
    recurrence_end_date: Optional[datetime.date] = None
    is_completed: Optional[bool] = None


class ScheduleResponse(BaseModel):
    """Schema for schedule response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    trainer_id: uuid.UUID
    client_name: str
    client_id: Optional[str]
    session_type: SessionType
    session_date: datetime.date
    start_time: datetime.time
    end_time: datetime.time
    notes: Optional[str]
    recurrence: RecurrenceType
    recurrence_end_date: Optional[datetime.date]
    is_completed: bool
    department: str
    created_at: datetime.datetime
    updated_at: datetime.datetime
