# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Member (customer) API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.api.deps import (
    get_db,
    log_access_denied,
    require_any_permission,
    require_permission,
)
from src.models import Member, Staff
from src.models.enums import MembershipType, MemberStatus
from src.schemas.member import (
    ConsultingRecordCreate,
    ConsultingRecordResponse,
    MemberCreate,
    MemberResponse,
    MemberUpdate,
)
from src.services import auth_service, member_service, staff_service

router = APIRouter()


def _get_visible_member(
    db: Session, member_id: uuid.UUID, current_staff: Staff, action: str
) -> Member:
    member = member_service.get_member(db, member_id)
    if not member:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Member not found",
        )
    if not member_service.can_access(auth_service.subject_for(current_staff), member):
        log_access_denied(current_staff, action, f"member {member_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Member not found",
        )
    return member


def _check_consultant(db: Session, consultant_id: uuid.UUID | None) -> None:
    if consultant_id is None:
        return
    consultant = staff_service.get_staff(db, consultant_id)
    if not consultant or not consultant.is_active:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Consultant not found",
        )


@router.get("", response_model=list[MemberResponse])
def list_members(
    status_filter: MemberStatus | None = Query(None, alias="status"),
    membership_type: MembershipType | None = None,
    consultant_id: uuid.UUID | None = None,
    search: str | None = None,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(
        require_any_permission(
            "members.read",
            "members.view_all",
            "members.view_department",
            "members.view_assigned",
        )
    ),
) -> list[MemberResponse]:
    """List members visible to the current staff member."""
    members = member_service.get_members(
        db,
        auth_service.subject_for(current_staff),
        status=status_filter,
        membership_type=membership_type,
        consultant_id=consultant_id,
        search=search,
    )
    return [MemberResponse.model_validate(m) for m in members]


@router.post("", response_model=MemberResponse, status_code=status.HTTP_201_CREATED)
def create_member(
    data: MemberCreate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("members.create")),
) -> MemberResponse:
    """Register a member."""
    _check_consultant(db, data.consultant_id)
    member = member_service.create_member(db, data, current_staff)
    return MemberResponse.model_validate(member)


@router.get("/{member_id}", response_model=MemberResponse)
def get_member(
    member_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("members.read")),
) -> MemberResponse:
    """Get a member with their consulting history."""
    return MemberResponse.model_validate(
        _get_visible_member(db, member_id, current_staff, "members.read")
    )


@router.put("/{member_id}", response_model=MemberResponse)
def update_member(
    member_id: uuid.UUID,
    data: MemberUpdate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("members.update")),
) -> MemberResponse:
    """Update a member."""
    member = _get_visible_member(db, member_id, current_staff, "members.update")
    _check_consultant(db, data.consultant_id)
    try:
        member = member_service.update_member(
            db, member, data, actor_id=current_staff.id
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return MemberResponse.model_validate(member)


@router.post(
    "/{member_id}/consulting",
    response_model=ConsultingRecordResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_consulting_record(
    member_id: uuid.UUID,
    data: ConsultingRecordCreate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("members.update")),
) -> ConsultingRecordResponse:
    """Add a consultation to a member's history."""
    member = _get_visible_member(db, member_id, current_staff, "members.update")
    record = member_service.add_consulting_record(db, member, data, current_staff.id)
    return ConsultingRecordResponse.model_validate(record)


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_member(
    member_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("members.delete")),
) -> None:
    """Delete a member."""
    member = _get_visible_member(db, member_id, current_staff, "members.delete")
    member_service.delete_member(db, member, actor_id=current_staff.id)
