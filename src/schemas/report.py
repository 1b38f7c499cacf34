# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work report schemas."""
import datetime
import uuid
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.models.enums import ReportCategory, ReportStatus, ReportType


class ReportCreate(BaseModel):
    """Schema for creating a draft report."""

    title: str = Field(..., min_length=1, max_length=200)
    content: str = ""
    report_type: ReportType = ReportType.DAILY
    category: ReportCategory = ReportCategory.OPERATIONAL
    period_start: Optional[datetime.date] = None
    period_end: Optional[datetime.date] = None
    metrics: dict[str, Any] = {}

    @model_validator(mode="after")
    def validate_period(self) -> "ReportCreate":
        if self.period_start and self.period_end and self.period_end < self.period_start:
            raise ValueError("period_end must not be before period_start")
        return self


class ReportUpdate(BaseModel):
    """Schema for editing a draft or rejected report."""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = None
    report_type: Optional[ReportType] = None
    category: Optional[ReportCategory] = None
    period_start: Optional[datetime.date] = None
    period_end: Optional[datetime.date] = None
    metrics: Optional[dict[str, Any]] = None


class ReportReview(BaseModel):
    """Schema for approving or rejecting a submitted report."""

    approved: bool
    comment: Optional[str] = None


class ReportResponse(BaseModel):
    """Schema for report response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    content: str
    report_type: ReportType
    category: ReportCategory
    status: ReportStatus
    created_by_id: uuid.UUID
    department: str
    period_start: Optional[datetime.date]
    period_end: Optional[datetime.date]
    metrics: dict[str, Any]
    submitted_at: Optional[datetime.datetime]
    reviewed_at: Optional[datetime.datetime]
    reviewed_by_id: Optional[uuid.UUID]
    review_comment: Optional[str]
    created_at: datetime.datetime
    updated_at: datetime.datetime


class ReportStats(BaseModel):
    """Report counts for a period."""

    total: int
    by_status: dict[str, int]
    by_type: dict[str, int]
