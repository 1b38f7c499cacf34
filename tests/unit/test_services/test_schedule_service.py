# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for schedule_service."""

from datetime import date, time

import pytest
from pydantic import ValidationError

from src.events import AppEvent, event_bus
from src.models.enums import RecurrenceType
from src.schemas.schedule import ScheduleCreate, ScheduleUpdate
from src.services import auth_service, schedule_service

SESSION_DAY = date(2025, 3, 10)


def _book(db_session, trainer, start, end, client="Client A", day=SESSION_DAY):
    return schedule_service.create_schedule(
        db_session,
        ScheduleCreate(
            client_name=client,
            session_date=day,
            start_time=start,
            end_time=end,
        ),
        trainer,
        trainer.id,
    )


def test_create_schedule(db_session, fitness_trainer):
    received = []
    event_bus.subscribe(AppEvent.SCHEDULE_CREATED, received.append)

    schedule = _book(db_session, fitness_trainer, time(9), time(10))

    assert schedule.trainer_id == fitness_trainer.id
    assert schedule.department == "fitness"
    assert received[0].data["session_date"] == "2025-03-10"


def test_overlapping_booking_is_rejected(db_session, fitness_trainer):
    _book(db_session, fitness_trainer, time(9), time(10))
    with pytest.raises(ValueError, match="already has a session"):
        _book(db_session, fitness_trainer, time(9, 30), time(10, 30))


def test_adjacent_bookings_are_allowed(db_session, fitness_trainer, fitness_lead):
    _book(db_session, fitness_trainer, time(9), time(10))
    _book(db_session, fitness_trainer, time(10), time(11))
    _book(db_session, fitness_lead, time(9), time(10))
    assert len(schedule_service.get_schedules(
        db_session, auth_service.subject_for(fitness_lead)
    )) == 3


def test_schema_rejects_reversed_times():
    with pytest.raises(ValidationError):
        ScheduleCreate(
            client_name="x",
            session_date=SESSION_DAY,
            start_time=time(11),
            end_time=time(10),
        )


def test_schedules_are_scoped_to_department(db_session, fitness_trainer, tennis_coach):
    _book(db_session, fitness_trainer, time(9), time(10), client="Gym client")
    _book(db_session, tennis_coach, time(9), time(10), client="Court client")

    visible = schedule_service.get_schedules(
        db_session, auth_service.subject_for(tennis_coach)
    )
    assert [s.client_name for s in visible] == ["Court client"]


def test_get_schedules_date_range(db_session, fitness_trainer):
    _book(db_session, fitness_trainer, time(9), time(10), day=date(2025, 3, 10))
    _book(db_session, fitness_trainer, time(9), time(10), day=date(2025, 3, 20))
    subject = auth_service.subject_for(fitness_trainer)

    march_early = schedule_service.get_schedules(
        db_session, subject, date_from=date(2025, 3, 1), date_to=date(2025, 3, 15)
    )
    assert [s.session_date for s in march_early] == [date(2025, 3, 10)]


def test_update_schedule_checks_conflicts(db_session, fitness_trainer):
    _book(db_session, fitness_trainer, time(9), time(10))
    second = _book(db_session, fitness_trainer, time(11), time(12))

    with pytest.raises(ValueError):
        schedule_service.update_schedule(
            db_session, second, ScheduleUpdate(start_time=time(9, 30))
        )
    with pytest.raises(ValueError):
        schedule_service.update_schedule(
            db_session, second, ScheduleUpdate(end_time=time(10, 30))
        )

    moved = schedule_service.update_schedule(
        db_session, second, ScheduleUpdate(start_time=time(10), is_completed=True)
    )
    assert moved.start_time == time(10)
    assert moved.is_completed is True


def test_delete_schedule(db_session, fitness_trainer):
    schedule = _book(db_session, fitness_trainer, time(9), time(10))
    schedule_id = schedule.id
    schedule_service.delete_schedule(db_session, schedule, fitness_trainer.id)
    assert schedule_service.get_schedule(db_session, schedule_id) is None


def _book_weekly(db_session, trainer, start, end, first, last):
    return schedule_service.create_schedule(
        db_session,
        ScheduleCreate(
            client_name="Client W",
            session_date=first,
            start_time=start,
            end_time=end,
            recurrence=RecurrenceType.WEEKLY,
            recurrence_end_date=last,
        ),
        trainer,
        trainer.id,
    )


def test_weekly_booking_creates_every_occurrence(db_session, fitness_trainer):
    received = []
    event_bus.subscribe(AppEvent.SCHEDULE_CREATED, received.append)

    first = _book_weekly(
        db_session, fitness_trainer, time(10), time(11), date(2026, 1, 5), date(2026, 2, 2)
    )

    entries = schedule_service.get_schedules(
        db_session, auth_service.subject_for(fitness_trainer)
    )
    assert first.session_date == date(2026, 1, 5)
    assert [s.session_date for s in entries] == [
        date(2026, 1, 5),
        date(2026, 1, 12),
        date(2026, 1, 19),
        date(2026, 1, 26),
        date(2026, 2, 2),
    ]
    assert all(s.recurrence == RecurrenceType.WEEKLY for s in entries)
    assert len(received) == 5


def test_later_occurrence_blocks_double_booking(db_session, fitness_trainer):
    _book_weekly(
        db_session, fitness_trainer, time(10), time(11), date(2026, 1, 5), date(2026, 2, 2)
    )

    with pytest.raises(ValueError, match="2026-01-12"):
        _book(db_session, fitness_trainer, time(10, 30), time(11, 30), day=date(2026, 1, 12))


def test_recurring_booking_is_all_or_nothing(db_session, fitness_trainer):
    _book(db_session, fitness_trainer, time(10), time(11), day=date(2026, 1, 19))

    with pytest.raises(ValueError, match="2026-01-19"):
        _book_weekly(
            db_session,
            fitness_trainer,
            time(10, 30),
            time(11, 30),
            date(2026, 1, 5),
            date(2026, 2, 2),
        )

    entries = schedule_service.get_schedules(
        db_session, auth_service.subject_for(fitness_trainer)
    )
    assert [s.session_date for s in entries] == [date(2026, 1, 19)]


@pytest.mark.parametrize(
    "recurrence,end,expected",
    [
        (RecurrenceType.NONE, date(2026, 3, 1), [date(2026, 1, 30)]),
        (RecurrenceType.WEEKLY, None, [date(2026, 1, 30)]),
        (
            RecurrenceType.DAILY,
            date(2026, 2, 1),
            [date(2026, 1, 30), date(2026, 1, 31), date(2026, 2, 1)],
        ),
        (
            RecurrenceType.MONTHLY,
            date(2026, 4, 30),
            [date(2026, 1, 30), date(2026, 2, 28), date(2026, 3, 30), date(2026, 4, 30)],
        ),
    ],
)
def test_expand_occurrences(recurrence, end, expected):
    assert schedule_service.expand_occurrences(date(2026, 1, 30), recurrence, end) == expected


def test_expand_occurrences_is_bounded():
    with pytest.raises(ValueError, match="exceeds"):
        schedule_service.expand_occurrences(
            date(2026, 1, 1), RecurrenceType.DAILY, date(2028, 1, 1)
        )
