# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Staff directory API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import (
    get_current_staff,
    get_db,
    log_access_denied,
    require_any_permission,
    require_permission,
)
from src.models import Staff
from src.models.enums import StaffRole
from src.rbac import has_permission
from src.schemas.staff import StaffAccessUpdate, StaffCreate, StaffResponse, StaffUpdate
from src.services import auth_service, staff_service

router = APIRouter()


def _get_visible_staff(db: Session, staff_id: uuid.UUID, current_staff: Staff) -> Staff:
    staff = staff_service.get_staff(db, staff_id)
    if not staff:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Staff member not found",
        )
    if not staff_service.can_access(auth_service.subject_for(current_staff), staff):
        log_access_denied(current_staff, "users.read", f"staff {staff_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Staff member not found",
        )
    return staff


@router.get("", response_model=list[StaffResponse])
def list_staff(
    role: StaffRole | None = None,
    search: str | None = None,
    include_inactive: bool = False,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(
        require_any_permission("users.read", "users.view_all", "users.view_own")
    ),
) -> list[StaffResponse]:
    """List staff members. Staff without ``users.view_all`` only see themselves."""
    records = staff_service.get_staff_list(
        db,
        auth_service.subject_for(current_staff),
        role=role,
        search=search,
        include_inactive=include_inactive,
    )
    return [StaffResponse.model_validate(s) for s in records]


@router.post("", response_model=StaffResponse, status_code=status.HTTP_201_CREATED)
def create_staff(
    data: StaffCreate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("users.create")),
) -> StaffResponse:
    """Create a staff member."""
    try:
        staff = staff_service.create_staff(db, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return StaffResponse.model_validate(staff)


@router.get("/{staff_id}", response_model=StaffResponse)
def get_staff(
    staff_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(get_current_staff),
) -> StaffResponse:
    """Get a staff member."""
    return StaffResponse.model_validate(_get_visible_staff(db, staff_id, current_staff))


@router.put("/{staff_id}", response_model=StaffResponse)
def update_staff(
    staff_id: uuid.UUID,
    data: StaffUpdate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(get_current_staff),
) -> StaffResponse:
    """Update profile fields. Everyone may edit their own profile."""
    subject = auth_service.subject_for(current_staff)
    if staff_id != current_staff.id and not has_permission(subject, "users.update"):
        log_access_denied(current_staff, "users.update", f"staff {staff_id}")
        raise HTTPException(status_code=403, detail="Permission denied: users.update")

    staff = _get_visible_staff(db, staff_id, current_staff)
    try:
        staff = staff_service.update_staff(db, staff, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return StaffResponse.model_validate(staff)


@router.put("/{staff_id}/access", response_model=StaffResponse)
def update_staff_access(
    staff_id: uuid.UUID,
    data: StaffAccessUpdate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("users.update")),
) -> StaffResponse:
    """Change role, position, department or individual permissions (admin only)."""
    if not auth_service.subject_for(current_staff).is_admin:
        log_access_denied(current_staff, "users.update_access", f"staff {staff_id}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )

    staff = _get_visible_staff(db, staff_id, current_staff)
    try:
        staff = staff_service.update_access(db, staff, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return StaffResponse.model_validate(staff)


@router.delete("/{staff_id}", status_code=status.HTTP_204_NO_CONTENT)
def deactivate_staff(
    staff_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("users.delete")),
) -> None:
    """Deactivate a staff member."""
    if staff_id == current_staff.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot deactivate yourself",
        )
    staff = _get_visible_staff(db, staff_id, current_staff)
    staff_service.deactivate_staff(db, staff)
