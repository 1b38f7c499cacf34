# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Orientation-training (OT) service.

New members are registered by the front desk, assigned to a trainer and
tracked session by session until the agreed number of OT sessions is done.
"""

import logging
import uuid
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from src.events import AppEvent, event_bus
from src.models import OTMember, OTSession, Staff
from src.models.enums import OTStatus
from src.rbac import Subject, can_modify_data, filter_by_access
from src.schemas.ot import (
    OTContact,
    OTMemberCreate,
    OTMemberUpdate,
    OTSessionCreate,
    OTSessionUpdate,
)

logger = logging.getLogger(__name__)

DATA_TYPE = "ot"


def can_access(subject: Subject | None, member: OTMember) -> bool:
    """Check whether the subject may see or update an OT member."""
    return can_modify_data(
        subject,
        DATA_TYPE,
        owner_id=member.assigned_staff_id,
        department=member.department,
        assigned_ids=[member.assigned_staff_id] if member.assigned_staff_id else [],
    )


def get_members(
    db: Session,
    subject: Subject | None,
    status: OTStatus | None = None,
    assigned_staff_id: uuid.UUID | None = None,
    search: str | None = None,
) -> list[OTMember]:
    """Get OT members visible to the subject."""
    query = db.query(OTMember)
    if status:
        query = query.filter(OTMember.status == status)
    if assigned_staff_id:
        query = query.filter(OTMember.assigned_staff_id == assigned_staff_id)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(OTMember.name.ilike(pattern), OTMember.phone.ilike(pattern))
        )

    members = query.order_by(OTMember.created_at.desc()).all()
    return filter_by_access(
        members,
        subject,
        DATA_TYPE,
        owner_field="assigned_staff_id",
        assigned_field="assigned_staff_id",
    )


def get_member(db: Session, member_id: uuid.UUID) -> OTMember | None:
    """Get an OT member by ID."""
    return db.query(OTMember).filter(OTMember.id == member_id).first()


def create_member(
    db: Session, data: OTMemberCreate, actor_id: uuid.UUID | None = None
) -> OTMember:
    """Register a member for orientation training."""
    member = OTMember(
        name=data.name,
        phone=data.phone,
        email=data.email,
        status=OTStatus.PENDING,
        preferred_days=list(data.preferred_days),
        preferred_times=list(data.preferred_times),
        notes=data.notes,
        ot_count=data.ot_count,
    )
    db.add(member)
    db.commit()
    db.refresh(member)

    logger.info(f"OT member {member.id} registered")
    event_bus.publish_sync(
        AppEvent.OT_MEMBER_CREATED,
        {"member_id": str(member.id), "name": member.name},
        actor_id=str(actor_id) if actor_id else None,
    )
    return member


def update_member(db: Session, member: OTMember, data: OTMemberUpdate) -> OTMember:
    """Update an OT member. Changing the OT count re-evaluates completion."""
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and field in ("name", "phone", "ot_count"):
            continue
        if field in ("preferred_days", "preferred_times"):
            value = list(value or [])
        setattr(member, field, value)
    _refresh_status(member)
    db.commit()
    db.refresh(member)
    return member


def assign_member(
    db: Session, member: OTMember, staff: Staff, actor_id: uuid.UUID
) -> OTMember:
    """Assign an OT member to a trainer.

    Raises:
        ValueError: If the staff member is inactive
    """
    if not staff.is_active:
        raise ValueError("Cannot assign to an inactive staff member")

    member.assigned_staff_id = staff.id
    member.department = staff.department
    if member.status == OTStatus.PENDING:
        member.status = OTStatus.ASSIGNED
    db.commit()
    db.refresh(member)

    logger.info(f"OT member {member.id} assigned to {staff.username}")
    event_bus.publish_sync(
        AppEvent.OT_ASSIGNED,
        {"member_id": str(member.id), "staff_id": str(staff.id)},
        actor_id=str(actor_id),
    )
    return member


def record_contact(db: Session, member: OTMember, data: OTContact) -> OTMember:
    """Record that the assigned trainer has reached the member."""
    member.contact_made = True
    member.contact_date = data.contact_date or datetime.utcnow()
    member.contact_notes = data.contact_notes
    db.commit()
    db.refresh(member)

    event_bus.publish_sync(
        AppEvent.OT_PROGRESS_UPDATED,
        {"member_id": str(member.id), "contact_made": True},
    )
    return member


def get_session(
    db: Session, member: OTMember, session_id: uuid.UUID
) -> OTSession | None:
    """Get one OT session of a member."""
    return (
        db.query(OTSession)
        .filter(OTSession.id == session_id, OTSession.member_id == member.id)
        .first()
    )


def add_session(
    db: Session, member: OTMember, data: OTSessionCreate, staff_id: uuid.UUID
) -> OTSession:
    """Record an OT session for a member."""
    session = OTSession(
        member_id=member.id,
        staff_id=staff_id,
        session_date=data.session_date,
        session_time=data.session_time,
        completed=data.completed,
        notes=data.notes,
    )
    member.sessions.append(session)
    _refresh_status(member)
    db.commit()
    db.refresh(session)
    db.refresh(member)

    _publish_progress(member, staff_id)
    return session


def update_session(
    db: Session,
    member: OTMember,
    session: OTSession,
    data: OTSessionUpdate,
    staff_id: uuid.UUID,
) -> OTSession:
    """Update an OT session and re-evaluate completion."""
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and field in ("session_date", "completed"):
            continue
        setattr(session, field, value)
    _refresh_status(member)
    db.commit()
    db.refresh(session)
    db.refresh(member)

    _publish_progress(member, staff_id)
    return session


def delete_member(db: Session, member: OTMember) -> None:
    """Delete an OT member together with their sessions."""
    member_id = str(member.id)
    db.delete(member)
    db.commit()
    logger.info(f"OT member {member_id} deleted")


def _refresh_status(member: OTMember) -> None:
    if member.completed_sessions >= member.ot_count:
        member.status = OTStatus.COMPLETED
    elif member.assigned_staff_id:
        member.status = OTStatus.ASSIGNED
    else:
        member.status = OTStatus.PENDING


def _publish_progress(member: OTMember, staff_id: uuid.UUID) -> None:
    event = (
        AppEvent.OT_COMPLETED
        if member.status == OTStatus.COMPLETED
        else AppEvent.OT_PROGRESS_UPDATED
    )
    event_bus.publish_sync(
        event,
        {
            "member_id": str(member.id),
            "completed_sessions": member.completed_sessions,
            "ot_count": member.ot_count,
        },
        actor_id=str(staff_id),
    )
