# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Suggestion box API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, log_access_denied, require_permission
from src.models import Staff, Suggestion
from src.models.enums import SuggestionStatus
from src.schemas.suggestion import (
    SuggestionCreate,
    SuggestionRespond,
    SuggestionResponse,
)
from src.services import auth_service, suggestion_service

router = APIRouter()


def _get_visible_suggestion(
    db: Session, suggestion_id: uuid.UUID, current_staff: Staff, action: str
) -> Suggestion:
    suggestion = suggestion_service.get_suggestion(db, suggestion_id)
    if not suggestion:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Suggestion not found",
        )
    if not suggestion_service.can_access(auth_service.subject_for(current_staff), suggestion):
        log_access_denied(current_staff, action, f"suggestion {suggestion_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Suggestion not found",
        )
    return suggestion


@router.get("", response_model=list[SuggestionResponse])
def list_suggestions(
    status_filter: SuggestionStatus | None = Query(None, alias="status"),
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("suggestions.read")),
) -> list[SuggestionResponse]:
    """List suggestions. Staff see their own, management sees all."""
    suggestions = suggestion_service.get_suggestions(
        db, auth_service.subject_for(current_staff), status=status_filter
    )
    return [SuggestionResponse.from_suggestion(s) for s in suggestions]


@router.post("", response_model=SuggestionResponse, status_code=status.HTTP_201_CREATED)
def create_suggestion(
    data: SuggestionCreate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("suggestions.create")),
) -> SuggestionResponse:
    """Submit a suggestion, optionally anonymous."""
    suggestion = suggestion_service.create_suggestion(db, data, current_staff)
    return SuggestionResponse.from_suggestion(suggestion)


@router.get("/{suggestion_id}", response_model=SuggestionResponse)
def get_suggestion(
    suggestion_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("suggestions.read")),
) -> SuggestionResponse:
    """Get a suggestion."""
    return SuggestionResponse.from_suggestion(
        _get_visible_suggestion(db, suggestion_id, current_staff, "suggestions.read")
    )


@router.post("/{suggestion_id}/respond", response_model=SuggestionResponse)
def respond_to_suggestion(
    suggestion_id: uuid.UUID,
    data: SuggestionRespond,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("suggestions.respond")),
) -> SuggestionResponse:
    """Answer or reject a suggestion."""
    suggestion = _get_visible_suggestion(
        db, suggestion_id, current_staff, "suggestions.respond"
    )
    suggestion = suggestion_service.respond_to_suggestion(
        db, suggestion, data, current_staff.id
    )
    return SuggestionResponse.from_suggestion(suggestion)


@router.delete("/{suggestion_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_suggestion(
    suggestion_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("suggestions.delete")),
) -> None:
    """Delete a suggestion."""
    suggestion = _get_visible_suggestion(
        db, suggestion_id, current_staff, "suggestions.delete"
    )
    suggestion_service.delete_suggestion(db, suggestion)
