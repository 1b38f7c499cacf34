# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pass (membership ticket) price list service."""

import logging
import uuid

from sqlalchemy.orm import Session

from src.events import AppEvent, event_bus
from src.models import Pass, Sale, Staff
from src.rbac import Subject, can_modify_data, filter_by_access
from src.schemas.sale import PassCreate, PassUpdate

logger = logging.getLogger(__name__)

DATA_TYPE = "pass"


def can_access(subject: Subject | None, pass_: Pass) -> bool:
    """Check whether the subject may see or edit a pass."""
    return can_modify_data(
        subject, DATA_TYPE, owner_id=pass_.created_by_id, department=pass_.department
    )


def get_passes(db: Session, subject: Subject | None) -> list[Pass]:
    """Get passes visible to the subject, ordered by name."""
    passes = db.query(Pass).order_by(Pass.name).all()
    return filter_by_access(passes, subject, DATA_TYPE, owner_field="created_by_id")


def get_pass(db: Session, pass_id: uuid.UUID) -> Pass | None:
    """Get a pass by ID."""
    return db.query(Pass).filter(Pass.id == pass_id).first()


def _name_taken(db: Session, name: str, exclude_id: uuid.UUID | None = None) -> bool:
    query = db.query(Pass).filter(Pass.name == name)
    if exclude_id:
        query = query.filter(Pass.id != exclude_id)
    return query.first() is not None


def create_pass(db: Session, data: PassCreate, created_by: Staff) -> Pass:
    """Add a pass to the price list.

    Raises:
        ValueError: If a pass with that name already exists
    """
    if _name_taken(db, data.name):
        raise ValueError(f"Pass '{data.name}' already exists")

    pass_ = Pass(
        name=data.name,
        amount=data.amount,
        description=data.description,
        department=created_by.department,
        created_by_id=created_by.id,
    )
    db.add(pass_)
    db.commit()
    db.refresh(pass_)

    logger.info(f"Pass {pass_.name} created at {pass_.amount}")
    event_bus.publish_sync(
        AppEvent.PASS_CREATED,
        {"pass_id": str(pass_.id), "name": pass_.name, "amount": pass_.amount},
        actor_id=str(created_by.id),
    )
    return pass_


def update_pass(db: Session, pass_: Pass, data: PassUpdate) -> Pass:
    """Update a pass. Recorded sales keep the amount they were sold at.

    Raises:
        ValueError: If the new name belongs to another pass
    """
    update_data = data.model_dump(exclude_unset=True)
    if update_data.get("name") and _name_taken(db, update_data["name"], pass_.id):
        raise ValueError(f"Pass '{update_data['name']}' already exists")

    for field, value in update_data.items():
        if value is None and field in ("name", "amount"):
            continue
        setattr(pass_, field, value)
    db.commit()
    db.refresh(pass_)
    return pass_


def delete_pass(db: Session, pass_: Pass, actor_id: uuid.UUID | None = None) -> None:
    """Remove a pass from the price list. Its sales stay, without the pass."""
    pass_id = str(pass_.id)
    db.query(Sale).filter(Sale.pass_id == pass_.id).update({Sale.pass_id: None})
    db.delete(pass_)
    db.commit()

    logger.info(f"Pass {pass_id} deleted")
    event_bus.publish_sync(
        AppEvent.PASS_DELETED,
        {"pass_id": pass_id},
        actor_id=str(actor_id) if actor_id else None,
    )
