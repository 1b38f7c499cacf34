# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Announcement API endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from src.api.deps import get_db, require_permission
from src.models import Announcement, Staff
from src.rbac import has_any_permission
from src.schemas.announcement import (
    AnnouncementCreate,
    AnnouncementPublish,
    AnnouncementResponse,
    AnnouncementUpdate,
)
from src.services import announcement_service, auth_service

router = APIRouter()

EDITOR_PERMISSIONS = (
    "announcements.create",
    "announcements.update",
    "announcements.delete",
    "announcements.publish",
)


def _get_announcement(
    db: Session, announcement_id: uuid.UUID, current_staff: Staff
) -> Announcement:
    announcement = announcement_service.get_announcement(db, announcement_id)
    is_editor = has_any_permission(
        auth_service.subject_for(current_staff), EDITOR_PERMISSIONS
    )
    if not announcement or (
        not is_editor and not announcement_service.is_visible(announcement)
    ):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Announcement not found",
        )
    return announcement


@router.get("", response_model=list[AnnouncementResponse])
def list_announcements(
    banner_only: bool = False,
    category: str | None = None,
    include_unpublished: bool = False,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("announcements.read")),
) -> list[AnnouncementResponse]:
    """List announcements. Only editors can include drafts."""
    subject = auth_service.subject_for(current_staff)
    announcements = announcement_service.get_announcements(
        db,
        subject,
        include_unpublished=include_unpublished
        and has_any_permission(subject, EDITOR_PERMISSIONS),
        banner_only=banner_only,
        category=category,
    )
    return [AnnouncementResponse.model_validate(a) for a in announcements]


@router.post("", response_model=AnnouncementResponse, status_code=status.HTTP_201_CREATED)
def create_announcement(
    data: AnnouncementCreate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("announcements.create")),
) -> AnnouncementResponse:
    """Create an announcement."""
    announcement = announcement_service.create_announcement(db, data, current_staff.id)
    return AnnouncementResponse.model_validate(announcement)


@router.get("/{announcement_id}", response_model=AnnouncementResponse)
def get_announcement(
    announcement_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("announcements.read")),
) -> AnnouncementResponse:
    """Get an announcement."""
    return AnnouncementResponse.model_validate(
        _get_announcement(db, announcement_id, current_staff)
    )


@router.put("/{announcement_id}", response_model=AnnouncementResponse)
def update_announcement(
    announcement_id: uuid.UUID,
    data: AnnouncementUpdate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("announcements.update")),
) -> AnnouncementResponse:
    """Update an announcement."""
    announcement = _get_announcement(db, announcement_id, current_staff)
    try:
        announcement = announcement_service.update_announcement(db, announcement, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return AnnouncementResponse.model_validate(announcement)


@router.post("/{announcement_id}/publish", response_model=AnnouncementResponse)
def publish_announcement(
    announcement_id: uuid.UUID,
    data: AnnouncementPublish,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("announcements.publish")),
) -> AnnouncementResponse:
    """Publish or withdraw an announcement."""
    announcement = _get_announcement(db, announcement_id, current_staff)
    announcement = announcement_service.set_published(db, announcement, data.is_published)
    return AnnouncementResponse.model_validate(announcement)


@router.post("/{announcement_id}/read", response_model=AnnouncementResponse)
def mark_announcement_read(
    announcement_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("announcements.read")),
) -> AnnouncementResponse:
    """Mark an announcement as read by the current staff member."""
    announcement = _get_announcement(db, announcement_id, current_staff)
    announcement = announcement_service.mark_read(db, announcement, current_staff.id)
    return AnnouncementResponse.model_validate(announcement)


@router.delete("/{announcement_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_announcement(
    announcement_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("announcements.delete")),
) -> None:
    """Delete an announcement."""
    announcement = _get_announcement(db, announcement_id, current_staff)
    announcement_service.delete_announcement(db, announcement)
