# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Schedule service for trainer sessions."""

import calendar
import logging
import uuid
from datetime import date, time, timedelta

from sqlalchemy import or_
from sqlalchemy.orm import Session

from src.events import AppEvent, event_bus
from src.models import Schedule, Staff
from src.models.enums import RecurrenceType, SessionType
from src.rbac import Subject, can_modify_data, filter_by_access
from src.schemas.schedule import ScheduleCreate, ScheduleUpdate

logger = logging.getLogger(__name__)

DATA_TYPE = "schedules"

MAX_OCCURRENCES = 366


def can_access(subject: Subject | None, schedule: Schedule) -> bool:
    """Check whether the subject may see or edit a schedule entry."""
    return can_modify_data(
        subject,
        DATA_TYPE,
        owner_id=schedule.trainer_id,
        department=schedule.department,
    )


def get_schedules(
    db: Session,
    subject: Subject | None,
    date_from: date | None = None,
    date_to: date | None = None,
    trainer_id: uuid.UUID | None = None,
    session_type: SessionType | None = None,
    search: str | None = None,
) -> list[Schedule]:
    """Get schedule entries visible to the subject, in calendar order."""
    query = db.query(Schedule)
    if date_from:
        query = query.filter(Schedule.session_date >= date_from)
    if date_to:
        query = query.filter(Schedule.session_date <= date_to)
    if trainer_id:
        query = query.filter(Schedule.trainer_id == trainer_id)
    if session_type:
        query = query.filter(Schedule.session_type == session_type)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(Schedule.client_name.ilike(pattern), Schedule.notes.ilike(pattern))
        )

    schedules = query.order_by(Schedule.session_date, Schedule.start_time).all()
    return filter_by_access(schedules, subject, DATA_TYPE, owner_field="trainer_id")


def get_schedule(db: Session, schedule_id: uuid.UUID) -> Schedule | None:
    """Get a schedule entry by ID."""
    return db.query(Schedule).filter(Schedule.id == schedule_id).first()


def find_conflicts(
    db: Session,
    trainer_id: uuid.UUID,
    session_date: date,
    start_time: time,
    end_time: time,
    exclude_id: uuid.UUID | None = None,
) -> list[Schedule]:
    """Find entries of the same trainer overlapping the given time range."""
    query = db.query(Schedule).filter(
        Schedule.trainer_id == trainer_id,
        Schedule.session_date == session_date,
        Schedule.start_time < end_time,
        Schedule.end_time > start_time,
    )
    if exclude_id:
        query = query.filter(Schedule.id != exclude_id)
    return query.all()


def expand_occurrences(
    session_date: date,
    recurrence: RecurrenceType,
    recurrence_end_date: date | None,
) -> list[date]:
    """List the dates a booking falls on.

    Daily and weekly repeats step by one and seven days. Monthly repeats keep
    the day of month, clamped to the last day of shorter months. Without an
    end date a booking happens once.

    Raises:
        ValueError: If the series has more than MAX_OCCURRENCES dates
    """
    if recurrence is RecurrenceType.NONE or recurrence_end_date is None:
        return [session_date]

    dates: list[date] = []
    current = session_date
    while current <= recurrence_end_date:
        dates.append(current)
        if len(dates) > MAX_OCCURRENCES:
            raise ValueError(
                f"Recurring booking exceeds {MAX_OCCURRENCES} sessions"
            )
        if recurrence is RecurrenceType.DAILY:
            current = current + timedelta(days=1)
        elif recurrence is RecurrenceType.WEEKLY:
            current = current + timedelta(days=7)
        else:
            months = session_date.month - 1 + len(dates)
            year = session_date.year + months // 12
            month = months % 12 + 1
            day = min(session_date.day, calendar.monthrange(year, month)[1])
            current = date(year, month, day)
    return dates


def create_schedule(
    db: Session, data: ScheduleCreate, trainer: Staff, actor_id: uuid.UUID
) -> Schedule:
    """Book a session for a trainer.

    Recurring bookings are stored as one entry per occurrence up to
    ``recurrence_end_date``. Nothing is booked unless every occurrence is
    free. Returns the first entry.

    Raises:
        ValueError: If the trainer already has a session in that time range
            on any of the dates
    """
    dates = expand_occurrences(
        data.session_date, data.recurrence, data.recurrence_end_date
    )
    for session_date in dates:
        if find_conflicts(db, trainer.id, session_date, data.start_time, data.end_time):
            raise ValueError(
                f"Trainer already has a session at this time on {session_date.isoformat()}"
            )

    schedules = [
        Schedule(
            trainer_id=trainer.id,
            client_name=data.client_name,
            client_id=data.client_id,
            session_type=data.session_type,
            session_date=session_date,
            start_time=data.start_time,
            end_time=data.end_time,
            notes=data.notes,
            recurrence=data.recurrence,
            recurrence_end_date=data.recurrence_end_date,
            is_completed=False,
            department=trainer.department,
        )
        for session_date in dates
    ]
    db.add_all(schedules)
    db.commit()
    for schedule in schedules:
        db.refresh(schedule)

    logger.info(
        f"Booked {len(schedules)} session(s) for {trainer.username} "
        f"from {dates[0]} to {dates[-1]}"
    )
    for schedule in schedules:
        event_bus.publish_sync(
            AppEvent.SCHEDULE_CREATED,
            {
                "schedule_id": str(schedule.id),
                "trainer_id": str(trainer.id),
                "session_date": schedule.session_date.isoformat(),
                "session_type": schedule.session_type.value,
            },
            actor_id=str(actor_id),
        )
    return schedules[0]


def update_schedule(
    db: Session,
    schedule: Schedule,
    data: ScheduleUpdate,
    actor_id: uuid.UUID | None = None,
) -> Schedule:
    """Update a schedule entry.

    Raises:
        ValueError: If the new times are out of order or overlap another entry
    """
    update_data = {
        field: value
        for field, value in data.model_dump(exclude_unset=True).items()
        if value is not None or field in ("client_id", "notes", "recurrence_end_date")
    }
    session_date = update_data.get("session_date", schedule.session_date)
    start_time = update_data.get("start_time", schedule.start_time)
    end_time = update_data.get("end_time", schedule.end_time)
    if end_time <= start_time:
        raise ValueError("end_time must be after start_time")
    if find_conflicts(
        db, schedule.trainer_id, session_date, start_time, end_time, exclude_id=schedule.id
    ):
        raise ValueError("Trainer already has a session at this time")

    for field, value in update_data.items():
        setattr(schedule, field, value)
    db.commit()
    db.refresh(schedule)

    event_bus.publish_sync(
        AppEvent.SCHEDULE_UPDATED,
        {"schedule_id": str(schedule.id), "is_completed": schedule.is_completed},
        actor_id=str(actor_id) if actor_id else None,
    )
    return schedule


def delete_schedule(
    db: Session, schedule: Schedule, actor_id: uuid.UUID | None = None
) -> None:
    """Delete a schedule entry."""
    schedule_id = str(schedule.id)
    db.delete(schedule)
    db.commit()

    logger.info(f"Schedule {schedule_id} deleted")
    event_bus.publish_sync(
        AppEvent.SCHEDULE_DELETED,
        {"schedule_id": schedule_id},
        actor_id=str(actor_id) if actor_id else None,
    )
