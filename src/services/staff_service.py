# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Staff directory service."""

import logging
import uuid

from sqlalchemy import or_
from sqlalchemy.orm import Session

from src.events import AppEvent, event_bus
from src.models import Staff
from src.models.enums import StaffRole
from src.rbac import Subject, can_modify_data, filter_by_access
from src.schemas.staff import StaffAccessUpdate, StaffCreate, StaffUpdate
from src.services import auth_service

logger = logging.getLogger(__name__)

DATA_TYPE = "users"


def can_access(subject: Subject | None, staff: Staff) -> bool:
    """Check whether the subject may see or edit a staff record."""
    return can_modify_data(
        subject, DATA_TYPE, owner_id=staff.id, department=staff.department
    )


def get_staff_list(
    db: Session,
    subject: Subject | None,
    role: StaffRole | None = None,
    search: str | None = None,
    include_inactive: bool = False,
) -> list[Staff]:
    """List staff members visible to the subject."""
    query = db.query(Staff)
    if role:
        query = query.filter(Staff.role == role)
    if not include_inactive:
        query = query.filter(Staff.is_active == True)  # noqa: E712 - SQLAlchemy requires == for comparison
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(Staff.username.ilike(pattern), Staff.full_name.ilike(pattern))
        )
    records = query.order_by(Staff.username).all()
    return filter_by_access(records, subject, DATA_TYPE, owner_field="id")


def get_staff(db: Session, staff_id: uuid.UUID) -> Staff | None:
    """Get a staff member by ID."""
    return db.query(Staff).filter(Staff.id == staff_id).first()


def create_staff(db: Session, data: StaffCreate) -> Staff:
    """Create a staff member.

    Raises:
        ValueError: If the username or email is already taken
    """
    existing = (
        db.query(Staff)
        .filter(or_(Staff.username == data.username, Staff.email == data.email))
        .first()
    )
    if existing:
        raise ValueError("Username or email already registered")

    staff = Staff(
        username=data.username,
        email=data.email,
        full_name=data.full_name,
        phone=data.phone,
        role=data.role,
        position=data.position,
        department=data.department or data.role.value,
        permission_overrides=list(data.permission_overrides),
        is_active=True,
    )
    db.add(staff)
    db.commit()
    db.refresh(staff)

    logger.info(f"Created staff {staff.username} ({staff.role.value})")
    event_bus.publish_sync(
        AppEvent.STAFF_CREATED,
        {
            "staff_id": str(staff.id),
            "username": staff.username,
            "role": staff.role.value,
        },
    )

    return staff


def update_staff(db: Session, staff: Staff, data: StaffUpdate) -> Staff:
    """Update profile fields of a staff member."""
    update_data = data.model_dump(exclude_unset=True)
    if update_data.get("email", staff.email) is None:
        # Email is required on the record; a null leaves it unchanged
        del update_data["email"]
    if "email" in update_data and update_data["email"] != staff.email:
        taken = (
            db.query(Staff)
            .filter(Staff.email == update_data["email"], Staff.id != staff.id)
            .first()
        )
        if taken:
            raise ValueError("Email already registered")

    for field, value in update_data.items():
        setattr(staff, field, value)
    db.commit()
    db.refresh(staff)

    event_bus.publish_sync(AppEvent.STAFF_UPDATED, {"staff_id": str(staff.id)})
    return staff


def update_access(db: Session, staff: Staff, data: StaffAccessUpdate) -> Staff:
    """Change role, position, department or permission overrides."""
    update_data = data.model_dump(exclude_unset=True)
    if "role" in update_data and update_data["role"] is None:
        raise ValueError("Role cannot be removed")
    if "department" in update_data and not update_data["department"]:
        raise ValueError("Department cannot be removed")
    if "permission_overrides" in update_data:
        # JSON columns are only persisted when reassigned
        update_data["permission_overrides"] = list(
            update_data["permission_overrides"] or []
        )

    for field, value in update_data.items():
        setattr(staff, field, value)
    db.commit()
    db.refresh(staff)

    logger.info(
        f"Access changed for staff {staff.username}: role={staff.role.value}, "
        f"position={staff.position.value if staff.position else None}, "
        f"overrides={staff.permission_overrides}"
    )
    event_bus.publish_sync(
        AppEvent.STAFF_ACCESS_CHANGED,
        {
            "staff_id": str(staff.id),
            "role": staff.role.value,
            "position": staff.position.value if staff.position else None,
            "department": staff.department,
        },
    )
    return staff


def deactivate_staff(db: Session, staff: Staff) -> Staff:
    """Deactivate a staff member and end their sessions."""
    staff.is_active = False
    db.commit()
    auth_service.delete_sessions_for_staff(db, staff.id)
    db.refresh(staff)

    logger.info(f"Deactivated staff {staff.username}")
    event_bus.publish_sync(AppEvent.STAFF_DEACTIVATED, {"staff_id": str(staff.id)})
    return staff
