# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Member (customer) service.

Members are registered by the front desk or by coaches, belong to the
department of their membership and may have a consultant who follows them
up. Consultations are appended to the member's history.
"""

import logging
import uuid
from datetime import date, datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from src.events import AppEvent, event_bus
from src.models import ConsultingRecord, Member, Sale, Staff
from src.models.enums import MembershipType, MemberStatus
from src.rbac import Subject, can_modify_data, filter_by_access
from src.schemas.member import ConsultingRecordCreate, MemberCreate, MemberUpdate

logger = logging.getLogger(__name__)

DATA_TYPE = "members"

MEMBERSHIP_DEPARTMENTS = {
    MembershipType.FITNESS: "fitness",
    MembershipType.TENNIS: "tennis",
    MembershipType.GOLF: "golf",
}


def can_access(subject: Subject | None, member: Member) -> bool:
    """Check whether the subject may see or edit a member."""
    return can_modify_data(
        subject,
        DATA_TYPE,
        owner_id=member.registered_by_id,
        department=member.department,
        assigned_ids=[member.consultant_id] if member.consultant_id else [],
    )


def get_members(
    db: Session,
    subject: Subject | None,
    status: MemberStatus | None = None,
    membership_type: MembershipType | None = None,
    consultant_id: uuid.UUID | None = None,
    search: str | None = None,
) -> list[Member]:
    """Get members visible to the subject.

    ``search`` matches name, phone or email.
    """
    query = db.query(Member)
    if status:
        query = query.filter(Member.status == status)
    if membership_type:
        query = query.filter(Member.membership_type == membership_type)
    if consultant_id:
        query = query.filter(Member.consultant_id == consultant_id)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(
                Member.name.ilike(pattern),
                Member.phone.ilike(pattern),
                Member.email.ilike(pattern),
            )
        )

    members = query.order_by(Member.created_at.desc()).all()
    return filter_by_access(
        members,
        subject,
        DATA_TYPE,
        owner_field="registered_by_id",
        assigned_field="consultant_id",
    )


def get_member(db: Session, member_id: uuid.UUID) -> Member | None:
    """Get a member by ID."""
    return db.query(Member).filter(Member.id == member_id).first()


def create_member(db: Session, data: MemberCreate, registered_by: Staff) -> Member:
    """Register a member."""
    department = (
        data.department
        or MEMBERSHIP_DEPARTMENTS.get(data.membership_type)
        or registered_by.department
    )
    member = Member(
        name=data.name,
        phone=data.phone,
        email=data.email,
        membership_type=data.membership_type,
        membership_start=data.membership_start,
        membership_end=data.membership_end,
        pt_count=data.pt_count,
        ot_count=data.ot_count,
        lesson_count=data.lesson_count,
        status=MemberStatus.ACTIVE,
        register_source=data.register_source,
        notes=data.notes,
        department=department,
        consultant_id=data.consultant_id,
        registered_by_id=registered_by.id,
    )
    db.add(member)
    db.commit()
    db.refresh(member)

    logger.info(f"Member {member.id} registered in {member.department}")
    event_bus.publish_sync(
        AppEvent.MEMBER_CREATED,
        {
            "member_id": str(member.id),
            "name": member.name,
            "membership_type": member.membership_type.value,
            "department": member.department,
        },
        actor_id=str(registered_by.id),
    )
    return member


def update_member(
    db: Session,
    member: Member,
    data: MemberUpdate,
    actor_id: uuid.UUID | None = None,
) -> Member:
    """Update a member.

    Raises:
        ValueError: If the membership period ends before it starts
    """
    update_data = data.model_dump(exclude_unset=True)
    start = update_data.get("membership_start", member.membership_start)
    end = update_data.get("membership_end", member.membership_end)
    if start and end and end < start:
        raise ValueError("membership_end must not be before membership_start")

    for field, value in update_data.items():
        if value is None and field in (
            "name",
            "phone",
            "membership_type",
            "status",
            "pt_count",
            "ot_count",
            "lesson_count",
        ):
            continue
        setattr(member, field, value)
    db.commit()
    db.refresh(member)

    event_bus.publish_sync(
        AppEvent.MEMBER_UPDATED,
        {"member_id": str(member.id), "status": member.status.value},
        actor_id=str(actor_id) if actor_id else None,
    )
    return member


def add_consulting_record(
    db: Session,
    member: Member,
    data: ConsultingRecordCreate,
    consultant_id: uuid.UUID,
) -> ConsultingRecord:
    """Append a consultation to the member's history."""
    record = ConsultingRecord(
        member_id=member.id,
        consultant_id=consultant_id,
        consulted_at=data.consulted_at or datetime.utcnow(),
        content=data.content,
        result=data.result,
    )
    member.consulting_records.append(record)
    db.commit()
    db.refresh(record)

    logger.info(f"Consultation recorded for member {member.id}")
    event_bus.publish_sync(
        AppEvent.MEMBER_CONSULTED,
        {"member_id": str(member.id), "record_id": str(record.id)},
        actor_id=str(consultant_id),
    )
    return record


def expire_memberships(db: Session, today: date | None = None) -> int:
    """Mark active members whose membership ended before ``today`` as expired.

    Returns:
        Number of members changed
    """
    today = today or date.today()
    expired = (
        db.query(Member)
        .filter(
            Member.status == MemberStatus.ACTIVE,
            Member.membership_end.is_not(None),
            Member.membership_end < today,
        )
        .all()
    )
    for member in expired:
        member.status = MemberStatus.EXPIRED
    db.commit()
    return len(expired)


def delete_member(
    db: Session, member: Member, actor_id: uuid.UUID | None = None
) -> None:
    """Delete a member together with their consulting history.

    Sales to the member are kept under the recorded customer name.
    """
    member_id = str(member.id)
    db.query(Sale).filter(Sale.member_id == member.id).update({Sale.member_id: None})
    db.delete(member)
    db.commit()

    logger.info(f"Member {member_id} deleted")
    event_bus.publish_sync(
        AppEvent.MEMBER_DELETED,
        {"member_id": member_id},
        actor_id=str(actor_id) if actor_id else None,
    )
