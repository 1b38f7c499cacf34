# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Session handling and subject snapshots for authenticated staff.

Issuing sessions after credential checks belongs to the identity layer in
front of this service; it calls :func:`create_session` once a staff member
has been authenticated.
"""

import logging
import uuid
from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from src.config import settings
from src.events import AppEvent, event_bus
from src.models import Staff
from src.models.session import Session as SessionModel
from src.rbac import Subject

logger = logging.getLogger(__name__)


def create_session(db: Session, staff_id: uuid.UUID) -> str:
    """Create a new session for a staff member."""
    token = str(uuid.uuid4())
    expires_at = datetime.utcnow() + timedelta(days=settings.session_expiry_days)

    session = SessionModel(
        staff_id=staff_id,
        token=token,
        expires_at=expires_at,
    )
    db.add(session)
    db.commit()

    logger.info(f"Session created for staff {staff_id}")
    event_bus.publish_sync(AppEvent.STAFF_LOGIN, {"staff_id": str(staff_id)})

    return token


def get_session(db: Session, token: str) -> SessionModel | None:
    """Get a valid session by token."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if not session:
        return None
    if session.expires_at < datetime.utcnow():
        db.delete(session)
        db.commit()
        return None
    return session


def delete_session(db: Session, token: str) -> bool:
    """Delete a session by token."""
    session = db.query(SessionModel).filter(SessionModel.token == token).first()
    if session:
        staff_id = session.staff_id
        db.delete(session)
        db.commit()
        event_bus.publish_sync(AppEvent.STAFF_LOGOUT, {"staff_id": str(staff_id)})
        return True
    return False


def delete_sessions_for_staff(db: Session, staff_id: uuid.UUID) -> int:
    """Drop every session of a staff member. Returns count of deleted sessions."""
    count = (
        db.query(SessionModel)
        .filter(SessionModel.staff_id == staff_id)
        .delete()
    )
    db.commit()
    return count


def cleanup_expired_sessions(db: Session) -> int:
    """Delete all expired sessions. Returns count of deleted sessions."""
    count = (
        db.query(SessionModel)
        .filter(SessionModel.expires_at < datetime.utcnow())
        .delete()
    )
    db.commit()
    return count


def get_staff_by_id(db: Session, staff_id: uuid.UUID) -> Staff | None:
    """Get a staff member by ID."""
    return db.query(Staff).filter(Staff.id == staff_id).first()


def subject_for(staff: Staff | None) -> Subject | None:
    """Build the evaluator snapshot for a staff member."""
    if staff is None:
        return None
    return Subject(
        role=staff.role,
        position=staff.position,
        overrides=frozenset(staff.permission_overrides or ()),
        id=staff.id,
        department=staff.department,
    )
