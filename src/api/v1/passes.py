# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pass price list API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import (
    get_db,
    log_access_denied,
    require_any_permission,
    require_permission,
)
from src.models import Pass, Staff
from src.schemas.sale import PassCreate, PassResponse, PassUpdate
from src.services import auth_service, pass_service

router = APIRouter()


def _get_visible_pass(
    db: Session, pass_id: uuid.UUID, current_staff: Staff, action: str
) -> Pass:
    pass_ = pass_service.get_pass(db, pass_id)
    if not pass_:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Pass not found",
        )
    if not pass_service.can_access(auth_service.subject_for(current_staff), pass_):
        log_access_denied(current_staff, action, f"pass {pass_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Pass not found",
        )
    return pass_


@router.get("", response_model=list[PassResponse])
def list_passes(
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_any_permission("pass.read", "pass.view_all")),
) -> list[PassResponse]:
    """List the pass price list."""
    passes = pass_service.get_passes(db, auth_service.subject_for(current_staff))
    return [PassResponse.model_validate(p) for p in passes]


@router.post("", response_model=PassResponse, status_code=status.HTTP_201_CREATED)
def create_pass(
    data: PassCreate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("pass.create")),
) -> PassResponse:
    """Add a pass to the price list."""
    try:
        pass_ = pass_service.create_pass(db, data, current_staff)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return PassResponse.model_validate(pass_)


@router.put("/{pass_id}", response_model=PassResponse)
def update_pass(
    pass_id: uuid.UUID,
    data: PassUpdate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("pass.update")),
) -> PassResponse:
    """Update a pass."""
    pass_ = _get_visible_pass(db, pass_id, current_staff, "pass.update")
    try:
        pass_ = pass_service.update_pass(db, pass_, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return PassResponse.model_validate(pass_)


@router.delete("/{pass_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pass(
    pass_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("pass.delete")),
) -> None:
    """Remove a pass from the price list."""
    pass_ = _get_visible_pass(db, pass_id, current_staff, "pass.delete")
    pass_service.delete_pass(db, pass_, actor_id=current_staff.id)
