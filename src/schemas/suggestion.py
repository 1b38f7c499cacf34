# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Suggestion schemas."""
import datetime
import uuid
from typing import Literal, Optional

from pydantic import BaseModel, Field

from src.models import Suggestion
from src.models.enums import SuggestionStatus


class SuggestionCreate(BaseModel):
    """Schema for submitting a suggestion."""

    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)
    is_anonymous: bool = False


class SuggestionRespond(BaseModel):
    """Schema for answering or rejecting a suggestion."""

    reply: str = Field(..., min_length=1)
    status: Literal[SuggestionStatus.ANSWERED, SuggestionStatus.REJECTED] = (
        SuggestionStatus.ANSWERED
    )


class SuggestionResponse(BaseModel):
    """Schema for suggestion response. The author is hidden when anonymous."""

    id: uuid.UUID
    title: str
    content: str
    created_by_id: Optional[uuid.UUID]
    is_anonymous: bool
    status: SuggestionStatus
    reply: Optional[str]
    replied_by_id: Optional[uuid.UUID]
    replied_at: Optional[datetime.datetime]
    created_at: datetime.datetime

    @classmethod
    def from_suggestion(cls, suggestion: Suggestion) -> "SuggestionResponse":
        return cls(
            id=suggestion.id,
            title=suggestion.title,
            content=suggestion.content,
            created_by_id=None if suggestion.is_anonymous else suggestion.created_by_id,
            is_anonymous=suggestion.is_anonymous,
            status=suggestion.status,
            reply=suggestion.reply,
            replied_by_id=suggestion.replied_by_id,
            replied_at=suggestion.replied_at,
            created_at=suggestion.created_at,
        )
