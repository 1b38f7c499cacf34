# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Session endpoints for the authenticated staff member."""

from fastapi import APIRouter, Cookie, Depends, Response, status
from sqlalchemy.orm import Session

from src.api.deps import get_current_staff, get_db
from src.models import Staff
from src.schemas.staff import StaffResponse
from src.services import auth_service

router = APIRouter()


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(
    response: Response,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(get_current_staff),
    session: str | None = Cookie(default=None),
) -> None:
    """End the current session and clear the cookie."""
    if session:
        auth_service.delete_session(db, session)
    response.delete_cookie(key="session")


@router.get("/me", response_model=StaffResponse)
def get_current_staff_info(
    current_staff: Staff = Depends(get_current_staff),
) -> StaffResponse:
    """Get current authenticated staff member."""
    return StaffResponse.model_validate(current_staff)
