# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Schedule API endpoints."""

import uuid
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import (
    get_current_staff,
    get_db,
    log_access_denied,
    require_any_permission,
    require_permission,
)
from src.models import Schedule, Staff
from src.models.enums import SessionType
from src.rbac import can_modify_data
from src.schemas.schedule import ScheduleCreate, ScheduleResponse, ScheduleUpdate
from src.services import auth_service, schedule_service, staff_service

router = APIRouter()


def _get_visible_schedule(
    db: Session, schedule_id: uuid.UUID, current_staff: Staff, action: str
) -> Schedule:
    schedule = schedule_service.get_schedule(db, schedule_id)
    if not schedule:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Schedule not found",
        )
    if not schedule_service.can_access(auth_service.subject_for(current_staff), schedule):
        log_access_denied(current_staff, action, f"schedule {schedule_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Schedule not found",
        )
    return schedule


@router.get("", response_model=list[ScheduleResponse])
def list_schedules(
    date_from: date | None = None,
    date_to: date | None = None,
    trainer_id: uuid.UUID | None = None,
    session_type: SessionType | None = None,
    search: str | None = None,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(
        require_any_permission(
            "schedules.read",
            "schedules.view_all",
            "schedules.view_department",
            "schedules.view_own",
        )
    ),
) -> list[ScheduleResponse]:
    """List schedule entries visible to the current staff member."""
    schedules = schedule_service.get_schedules(
        db,
        auth_service.subject_for(current_staff),
        date_from=date_from,
        date_to=date_to,
        trainer_id=trainer_id,
        session_type=session_type,
        search=search,
    )
    return [ScheduleResponse.model_validate(s) for s in schedules]


@router.post("", response_model=ScheduleResponse, status_code=status.HTTP_201_CREATED)
def create_schedule(
    data: ScheduleCreate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("schedules.create")),
) -> ScheduleResponse:
    """Book a session for the caller or for a trainer the caller can see."""
    trainer = current_staff
    if data.trainer_id and data.trainer_id != current_staff.id:
        trainer = staff_service.get_staff(db, data.trainer_id)
        if not trainer or not trainer.is_active:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Trainer not found",
            )
        if not can_modify_data(
            auth_service.subject_for(current_staff),
            schedule_service.DATA_TYPE,
            owner_id=trainer.id,
            department=trainer.department,
        ):
            log_access_denied(current_staff, "schedules.create", f"trainer {trainer.id}")
            raise HTTPException(status_code=403, detail="Permission denied: schedules.create")

    try:
        schedule = schedule_service.create_schedule(db, data, trainer, current_staff.id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return ScheduleResponse.model_validate(schedule)


@router.get("/{schedule_id}", response_model=ScheduleResponse)
def get_schedule(
    schedule_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(get_current_staff),
) -> ScheduleResponse:
    """Get a schedule entry."""
    return ScheduleResponse.model_validate(
        _get_visible_schedule(db, schedule_id, current_staff, "schedules.read")
    )


@router.put("/{schedule_id}", response_model=ScheduleResponse)
def update_schedule(
    schedule_id: uuid.UUID,
    data: ScheduleUpdate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("schedules.update")),
) -> ScheduleResponse:
    """Update a schedule entry."""
    schedule = _get_visible_schedule(db, schedule_id, current_staff, "schedules.update")
    try:
        schedule = schedule_service.update_schedule(
            db, schedule, data, actor_id=current_staff.id
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return ScheduleResponse.model_validate(schedule)


@router.post("/{schedule_id}/complete", response_model=ScheduleResponse)
def complete_schedule(
    schedule_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("schedules.update")),
) -> ScheduleResponse:
    """Mark a session as held."""
    schedule = _get_visible_schedule(db, schedule_id, current_staff, "schedules.update")
    schedule = schedule_service.update_schedule(
        db, schedule, ScheduleUpdate(is_completed=True), actor_id=current_staff.id
    )
    return ScheduleResponse.model_validate(schedule)


@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_schedule(
    schedule_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("schedules.delete")),
) -> None:
    """Delete a schedule entry."""
    schedule = _get_visible_schedule(db, schedule_id, current_staff, "schedules.delete")
    schedule_service.delete_schedule(db, schedule, actor_id=current_staff.id)
