# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Suggestion box service."""

import logging
import uuid
from datetime import datetime

from sqlalchemy.orm import Session

from src.events import AppEvent, event_bus
from src.models import Staff, Suggestion
from src.models.enums import SuggestionStatus
from src.rbac import Subject, can_modify_data, filter_by_access
from src.schemas.suggestion import SuggestionCreate, SuggestionRespond

logger = logging.getLogger(__name__)

DATA_TYPE = "suggestions"


def can_access(subject: Subject | None, suggestion: Suggestion) -> bool:
    """Check whether the subject may see a suggestion."""
    return can_modify_data(
        subject,
        DATA_TYPE,
        owner_id=suggestion.created_by_id,
        department=suggestion.department,
    )


def get_suggestions(
    db: Session,
    subject: Subject | None,
    status: SuggestionStatus | None = None,
) -> list[Suggestion]:
    """Get suggestions visible to the subject, newest first."""
    query = db.query(Suggestion)
    if status:
        query = query.filter(Suggestion.status == status)
    suggestions = query.order_by(Suggestion.created_at.desc()).all()
    return filter_by_access(
        suggestions, subject, DATA_TYPE, owner_field="created_by_id"
    )


def get_suggestion(db: Session, suggestion_id: uuid.UUID) -> Suggestion | None:
    """Get a suggestion by ID."""
    return db.query(Suggestion).filter(Suggestion.id == suggestion_id).first()


def create_suggestion(db: Session, data: SuggestionCreate, author: Staff) -> Suggestion:
    """Submit a suggestion.

    The author is stored even when anonymous so it stays in the author's own
    list; it is never included in the published event.
    """
    suggestion = Suggestion(
        title=data.title,
        content=data.content,
        created_by_id=author.id,
        is_anonymous=data.is_anonymous,
        status=SuggestionStatus.PENDING,
        department=author.department,
    )
    db.add(suggestion)
    db.commit()
    db.refresh(suggestion)

    event_bus.publish_sync(
        AppEvent.SUGGESTION_CREATED,
        {
            "suggestion_id": str(suggestion.id),
            "title": suggestion.title,
            "author_id": None if suggestion.is_anonymous else str(author.id),
        },
    )
    return suggestion


def respond_to_suggestion(
    db: Session,
    suggestion: Suggestion,
    data: SuggestionRespond,
    responder_id: uuid.UUID,
) -> Suggestion:
    """Answer or reject a suggestion. A later reply replaces an earlier one."""
    suggestion.reply = data.reply
    suggestion.status = data.status
    suggestion.replied_by_id = responder_id
    suggestion.replied_at = datetime.utcnow()
    db.commit()
    db.refresh(suggestion)

    logger.info(f"Suggestion {suggestion.id} marked {suggestion.status.value}")
    event_bus.publish_sync(
        AppEvent.SUGGESTION_RESPONDED,
        {
            "suggestion_id": str(suggestion.id),
            "status": suggestion.status.value,
            "author_id": (
                None if suggestion.is_anonymous else str(suggestion.created_by_id)
            ),
        },
        actor_id=str(responder_id),
    )
    return suggestion


def delete_suggestion(db: Session, suggestion: Suggestion) -> None:
    """Delete a suggestion."""
    db.delete(suggestion)
    db.commit()
