# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

import logging

from fastapi import Cookie, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.database import get_db
from src.models import Staff
from src.rbac import Subject, has_any_permission, has_permission
from src.services import auth_service

logger = logging.getLogger(__name__)

__all__ = [
    "get_current_staff",
    "get_db",
    "get_optional_staff",
    "get_subject",
    "log_access_denied",
    "require_any_permission",
    "require_permission",
]


def get_current_staff(
    db: Session = Depends(get_db),
    session: str | None = Cookie(default=None),
) -> Staff:
    """Get current authenticated staff member from session cookie."""
    if not session:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )

    session_obj = auth_service.get_session(db, session)
    if not session_obj:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired session",
        )

    staff = auth_service.get_staff_by_id(db, session_obj.staff_id)
    if not staff or not staff.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Staff member not found or inactive",
        )

    return staff


def get_optional_staff(
    db: Session = Depends(get_db),
    session: str | None = Cookie(default=None),
) -> Staff | None:
    """Get current staff member if authenticated, otherwise return None."""
    if not session:
        return None

    session_obj = auth_service.get_session(db, session)
    if not session_obj:
        return None

    staff = auth_service.get_staff_by_id(db, session_obj.staff_id)
    if not staff or not staff.is_active:
        return None

    return staff


def get_subject(current_staff: Staff = Depends(get_current_staff)) -> Subject:
    """Evaluator snapshot of the authenticated staff member."""
    return auth_service.subject_for(current_staff)


def log_access_denied(staff: Staff | None, action: str, target: str) -> None:
    """Log a denied request the same way for every router."""
    if staff is None:
        logger.warning(f"ACCESS DENIED: anonymous -> {action} on {target}")
        return
    logger.warning(
        f"ACCESS DENIED: staff={staff.id} role={staff.role.value} "
        f"position={staff.position.value if staff.position else None} "
        f"-> {action} on {target}"
    )


def require_permission(permission_code: str):
    """Dependency for permission-based authorization."""

    def dependency(current_staff: Staff = Depends(get_current_staff)) -> Staff:
        if not has_permission(auth_service.subject_for(current_staff), permission_code):
            log_access_denied(current_staff, permission_code, "endpoint")
            raise HTTPException(
                status_code=403, detail=f"Permission denied: {permission_code}"
            )
        return current_staff

    return dependency


def require_any_permission(*permission_codes: str):
    """Dependency that passes when at least one of the permissions is held."""

    def dependency(current_staff: Staff = Depends(get_current_staff)) -> Staff:
        if not has_any_permission(
            auth_service.subject_for(current_staff), permission_codes
        ):
            log_access_denied(current_staff, " | ".join(permission_codes), "endpoint")
            raise HTTPException(
                status_code=403,
                detail=f"Permission denied: {' | '.join(permission_codes)}",
            )
        return current_staff

    return dependency
