# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Orientation-training API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.api.deps import (
    get_current_staff,
    get_db,
    log_access_denied,
    require_any_permission,
    require_permission,
)
from src.models import OTMember, Staff
from src.models.enums import OTStatus
from src.schemas.ot import (
    OTAssign,
    OTContact,
    OTMemberCreate,
    OTMemberResponse,
    OTMemberUpdate,
    OTSessionCreate,
    OTSessionResponse,
    OTSessionUpdate,
)
from src.services import auth_service, ot_service, staff_service

router = APIRouter()


def _get_visible_member(
    db: Session, member_id: uuid.UUID, current_staff: Staff, action: str
) -> OTMember:
    member = ot_service.get_member(db, member_id)
    if not member:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="OT member not found",
        )
    if not ot_service.can_access(auth_service.subject_for(current_staff), member):
        log_access_denied(current_staff, action, f"ot member {member_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="OT member not found",
        )
    return member


@router.get("", response_model=list[OTMemberResponse])
def list_members(
    status_filter: OTStatus | None = Query(None, alias="status"),
    assigned_staff_id: uuid.UUID | None = None,
    search: str | None = None,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(
        require_any_permission("ot.read", "ot.view_all", "ot.view_assigned")
    ),
) -> list[OTMemberResponse]:
    """List OT members. Trainers only see members assigned to them."""
    members = ot_service.get_members(
        db,
        auth_service.subject_for(current_staff),
        status=status_filter,
        assigned_staff_id=assigned_staff_id,
        search=search,
    )
    return [OTMemberResponse.model_validate(m) for m in members]


@router.post("", response_model=OTMemberResponse, status_code=status.HTTP_201_CREATED)
def create_member(
    data: OTMemberCreate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("ot.create")),
) -> OTMemberResponse:
    """Register a member for orientation training."""
    member = ot_service.create_member(db, data, actor_id=current_staff.id)
    return OTMemberResponse.model_validate(member)


@router.get("/{member_id}", response_model=OTMemberResponse)
def get_member(
    member_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(get_current_staff),
) -> OTMemberResponse:
    """Get an OT member with their sessions."""
    return OTMemberResponse.model_validate(
        _get_visible_member(db, member_id, current_staff, "ot.read")
    )


@router.put("/{member_id}", response_model=OTMemberResponse)
def update_member(
    member_id: uuid.UUID,
    data: OTMemberUpdate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("ot.update")),
) -> OTMemberResponse:
    """Update an OT member."""
    member = _get_visible_member(db, member_id, current_staff, "ot.update")
    member = ot_service.update_member(db, member, data)
    return OTMemberResponse.model_validate(member)


@router.post("/{member_id}/assign", response_model=OTMemberResponse)
def assign_member(
    member_id: uuid.UUID,
    data: OTAssign,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("ot.assign")),
) -> OTMemberResponse:
    """Assign an OT member to a trainer."""
    member = _get_visible_member(db, member_id, current_staff, "ot.assign")
    staff = staff_service.get_staff(db, data.staff_id)
    if not staff:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Staff member not found",
        )
    try:
        member = ot_service.assign_member(db, member, staff, current_staff.id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return OTMemberResponse.model_validate(member)


@router.post("/{member_id}/contact", response_model=OTMemberResponse)
def record_contact(
    member_id: uuid.UUID,
    data: OTContact,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("ot.progress_update")),
) -> OTMemberResponse:
    """Record that the member has been contacted."""
    member = _get_visible_member(db, member_id, current_staff, "ot.progress_update")
    member = ot_service.record_contact(db, member, data)
    return OTMemberResponse.model_validate(member)


@router.post(
    "/{member_id}/sessions",
    response_model=OTSessionResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_session(
    member_id: uuid.UUID,
    data: OTSessionCreate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("ot.progress_update")),
) -> OTSessionResponse:
    """Record an OT session."""
    member = _get_visible_member(db, member_id, current_staff, "ot.progress_update")
    session = ot_service.add_session(db, member, data, current_staff.id)
    return OTSessionResponse.model_validate(session)


@router.put("/{member_id}/sessions/{session_id}", response_model=OTSessionResponse)
def update_session(
    member_id: uuid.UUID,
    session_id: uuid.UUID,
    data: OTSessionUpdate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("ot.progress_update")),
) -> OTSessionResponse:
    """Update an OT session."""
    member = _get_visible_member(db, member_id, current_staff, "ot.progress_update")
    session = ot_service.get_session(db, member, session_id)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="OT session not found",
        )
    session = ot_service.update_session(db, member, session, data, current_staff.id)
    return OTSessionResponse.model_validate(session)


@router.delete("/{member_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_member(
    member_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("ot.delete")),
) -> None:
    """Delete an OT member."""
    member = _get_visible_member(db, member_id, current_staff, "ot.delete")
    ot_service.delete_member(db, member)
