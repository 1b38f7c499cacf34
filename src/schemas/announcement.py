# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Announcement schemas."""
import datetime
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.models.enums import AnnouncementPriority


class AnnouncementBase(BaseModel):
    """Base announcement schema."""

    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    priority: AnnouncementPriority = AnnouncementPriority.MEDIUM
    category: Optional[str] = Field(None, max_length=50)
    tags: list[str] = []
    show_in_banner: bool = False
    start_date: Optional[datetime.datetime] = None
    end_date: Optional[datetime.datetime] = None

    @model_validator(mode="after")
    def validate_dates(self) -> "AnnouncementBase":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class AnnouncementCreate(AnnouncementBase):
    """Schema for creating an announcement."""

    is_published: bool = False


class AnnouncementUpdate(BaseModel):
    """Schema for updating an announcement."""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    content: Optional[str] = Field(None, min_length=1)
    priority: Optional[AnnouncementPriority] = None
    category: Optional[str] = Field(None, max_length=50)
    tags: Optional[list[str]] = None
    show_in_banner: Optional[bool] = None
    start_date: Optional[datetime.datetime] = None
    end_date: Optional[datetime.datetime] = None


class AnnouncementPublish(BaseModel):
    """Schema for publishing or withdrawing an announcement."""

    is_published: bool = True


class AnnouncementResponse(BaseModel):
    """Schema for announcement response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    content: str
    author_id: Optional[uuid.UUID]
    priority: AnnouncementPriority
    category: Optional[str]
    tags: list[str]
    is_published: bool
    show_in_banner: bool
    start_date: Optional[datetime.datetime]
    end_date: Optional[datetime.datetime]
    read_by: list[str]
    created_at: datetime.datetime
    updated_at: datetime.datetime
