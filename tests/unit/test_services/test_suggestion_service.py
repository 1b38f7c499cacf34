# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for suggestion_service."""

import pytest
from pydantic import ValidationError

from src.events import AppEvent, event_bus
from src.models.enums import SuggestionStatus
from src.schemas.suggestion import SuggestionCreate, SuggestionRespond, SuggestionResponse
from src.services import auth_service, suggestion_service


def test_staff_only_see_their_own(db_session, admin_staff, fitness_trainer, tennis_coach):
    suggestion_service.create_suggestion(
        db_session, SuggestionCreate(title="More mats", content="Please"), fitness_trainer
    )
    suggestion_service.create_suggestion(
        db_session, SuggestionCreate(title="New nets", content="Torn"), tennis_coach
    )

    mine = suggestion_service.get_suggestions(
        db_session, auth_service.subject_for(fitness_trainer)
    )
    everything = suggestion_service.get_suggestions(
        db_session, auth_service.subject_for(admin_staff)
    )

    assert [s.title for s in mine] == ["More mats"]
    assert len(everything) == 2


def test_anonymous_author_is_hidden(db_session, fitness_trainer):
    received = []
    event_bus.subscribe(AppEvent.SUGGESTION_CREATED, received.append)

    suggestion = suggestion_service.create_suggestion(
        db_session,
        SuggestionCreate(title="Pay", content="Raise", is_anonymous=True),
        fitness_trainer,
    )

    assert suggestion.created_by_id == fitness_trainer.id
    assert received[0].data["author_id"] is None
    assert SuggestionResponse.from_suggestion(suggestion).created_by_id is None
    assert suggestion_service.can_access(
        auth_service.subject_for(fitness_trainer), suggestion
    )


def test_respond_to_suggestion(db_session, admin_staff, fitness_trainer):
    suggestion = suggestion_service.create_suggestion(
        db_session, SuggestionCreate(title="Water", content="Cooler broken"), fitness_trainer
    )
    suggestion = suggestion_service.respond_to_suggestion(
        db_session,
        suggestion,
        SuggestionRespond(reply="Fixed tomorrow"),
        admin_staff.id,
    )
    assert suggestion.status is SuggestionStatus.ANSWERED
    assert suggestion.replied_by_id == admin_staff.id
    assert suggestion.replied_at is not None


def test_respond_cannot_reset_to_pending():
    with pytest.raises(ValidationError):
        SuggestionRespond(reply="x", status=SuggestionStatus.PENDING)
