# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Announcement service."""

import logging
import uuid
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from src.events import AppEvent, event_bus
from src.models import Announcement
from src.rbac import Subject, filter_by_access
from src.schemas.announcement import AnnouncementCreate, AnnouncementUpdate

logger = logging.getLogger(__name__)

DATA_TYPE = "announcements"


def get_announcements(
    db: Session,
    subject: Subject | None,
    include_unpublished: bool = False,
    banner_only: bool = False,
    category: str | None = None,
) -> list[Announcement]:
    """Get announcements visible to the subject.

    Readers only get published announcements inside their display window;
    editors pass ``include_unpublished`` to see drafts and expired entries.
    """
    query = db.query(Announcement)
    if not include_unpublished:
        now = datetime.utcnow()
        query = query.filter(
            Announcement.is_published == True,  # noqa: E712 - SQLAlchemy requires == for comparison
            or_(Announcement.start_date.is_(None), Announcement.start_date <= now),
            or_(Announcement.end_date.is_(None), Announcement.end_date >= now),
        )
    if banner_only:
        query = query.filter(Announcement.show_in_banner == True)  # noqa: E712
    if category:
        query = query.filter(Announcement.category == category)

    announcements = query.order_by(Announcement.created_at.desc()).all()
    return filter_by_access(
        announcements, subject, DATA_TYPE, owner_field="author_id"
    )


def get_announcement(db: Session, announcement_id: uuid.UUID) -> Announcement | None:
    """Get an announcement by ID."""
    return db.query(Announcement).filter(Announcement.id == announcement_id).first()


def is_visible(announcement: Announcement, now: datetime | None = None) -> bool:
    """Published and inside its display window, as readers see the list."""
    if not announcement.is_published:
        return False
    now = now or datetime.utcnow()
    if announcement.start_date and announcement.start_date > now:
        return False
    if announcement.end_date and announcement.end_date < now:
        return False
    return True


def create_announcement(
    db: Session, data: AnnouncementCreate, author_id: uuid.UUID
) -> Announcement:
    """Create an announcement."""
    announcement = Announcement(
        title=data.title,
        content=data.content,
        author_id=author_id,
        priority=data.priority,
        category=data.category,
        tags=list(data.tags),
        is_published=data.is_published,
        show_in_banner=data.show_in_banner,
        start_date=data.start_date,
        end_date=data.end_date,
        read_by=[],
    )
    db.add(announcement)
    db.commit()
    db.refresh(announcement)

    logger.info(f"Announcement {announcement.id} created")
    event_bus.publish_sync(
        AppEvent.ANNOUNCEMENT_CREATED,
        {
            "announcement_id": str(announcement.id),
            "title": announcement.title,
            "is_published": announcement.is_published,
        },
        actor_id=str(author_id),
    )
    return announcement


def update_announcement(
    db: Session, announcement: Announcement, data: AnnouncementUpdate
) -> Announcement:
    """Update an announcement.

    Raises:
        ValueError: If the resulting display window ends before it starts
    """
    update_data = data.model_dump(exclude_unset=True)
    start = update_data.get("start_date", announcement.start_date)
    end = update_data.get("end_date", announcement.end_date)
    if start and end and end < start:
        raise ValueError("end_date must not be before start_date")

    for field, value in update_data.items():
        if value is None and field in ("title", "content", "priority", "show_in_banner"):
            continue
        if field == "tags":
            value = list(value or [])
        setattr(announcement, field, value)
    db.commit()
    db.refresh(announcement)
    return announcement


def set_published(
    db: Session, announcement: Announcement, is_published: bool
) -> Announcement:
    """Publish or withdraw an announcement."""
    was_published = announcement.is_published
    announcement.is_published = is_published
    db.commit()
    db.refresh(announcement)

    if is_published and not was_published:
        logger.info(f"Announcement {announcement.id} published")
        event_bus.publish_sync(
            AppEvent.ANNOUNCEMENT_PUBLISHED,
            {"announcement_id": str(announcement.id), "title": announcement.title},
        )
    return announcement


def mark_read(
    db: Session, announcement: Announcement, staff_id: uuid.UUID
) -> Announcement:
    """Record that a staff member has read an announcement. Idempotent."""
    reader = str(staff_id)
    if reader not in announcement.read_by:
        # JSON columns are only persisted when reassigned
        announcement.read_by = [*announcement.read_by, reader]
        db.commit()
        db.refresh(announcement)
    return announcement


def delete_announcement(db: Session, announcement: Announcement) -> None:
    """Delete an announcement."""
    announcement_id = str(announcement.id)
    db.delete(announcement)
    db.commit()

    logger.info(f"Announcement {announcement_id} deleted")
    event_bus.publish_sync(
        AppEvent.ANNOUNCEMENT_DELETED, {"announcement_id": announcement_id}
    )
