# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work report API endpoints."""

import uuid
from datetime import date

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.api.deps import (
    get_current_staff,
    get_db,
    log_access_denied,
    require_any_permission,
    require_permission,
)
from src.models import Report, Staff
from src.models.enums import ReportCategory, ReportStatus, ReportType
from src.rbac import has_permission
from src.schemas.report import (
    ReportCreate,
    ReportResponse,
    ReportReview,
    ReportStats,
    ReportUpdate,
)
from src.services import auth_service, report_service

router = APIRouter()

READ_PERMISSIONS = (
    "reports.read",
    "reports.view_all",
    "reports.view_department",
    "reports.view_own",
)


def _get_visible_report(
    db: Session, report_id: uuid.UUID, current_staff: Staff, action: str
) -> Report:
    report = report_service.get_report(db, report_id)
    if not report:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Report not found",
        )
    if not report_service.can_access(auth_service.subject_for(current_staff), report):
        log_access_denied(current_staff, action, f"report {report_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Report not found",
        )
    return report


def _ensure_author_or_editor(report: Report, current_staff: Staff) -> None:
    """Only the author edits and submits a report, unless ``reports.update`` is held."""
    if report.created_by_id == current_staff.id:
        return
    if has_permission(auth_service.subject_for(current_staff), "reports.update"):
        return
    log_access_denied(current_staff, "reports.update", f"report {report.id}")
    raise HTTPException(status_code=403, detail="Permission denied: reports.update")


@router.get("", response_model=list[ReportResponse])
def list_reports(
    status_filter: ReportStatus | None = Query(None, alias="status"),
    report_type: ReportType | None = None,
    category: ReportCategory | None = None,
    created_by_id: uuid.UUID | None = None,
    period_from: date | None = None,
    period_to: date | None = None,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_any_permission(*READ_PERMISSIONS)),
) -> list[ReportResponse]:
    """List reports visible to the current staff member."""
    reports = report_service.get_reports(
        db,
        auth_service.subject_for(current_staff),
        status=status_filter,
        report_type=report_type,
        category=category,
        created_by_id=created_by_id,
        period_from=period_from,
        period_to=period_to,
    )
    return [ReportResponse.model_validate(r) for r in reports]


@router.get("/stats", response_model=ReportStats)
def get_report_stats(
    period_from: date | None = None,
    period_to: date | None = None,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_any_permission(*READ_PERMISSIONS)),
) -> ReportStats:
    """Count visible reports by status and type."""
    return report_service.get_report_stats(
        db,
        auth_service.subject_for(current_staff),
        period_from=period_from,
        period_to=period_to,
    )


@router.post("", response_model=ReportResponse, status_code=status.HTTP_201_CREATED)
def create_report(
    data: ReportCreate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("reports.create")),
) -> ReportResponse:
    """Create a draft report."""
    report = report_service.create_report(db, data, current_staff)
    return ReportResponse.model_validate(report)


@router.get("/{report_id}", response_model=ReportResponse)
def get_report(
    report_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(get_current_staff),
) -> ReportResponse:
    """Get a report."""
    return ReportResponse.model_validate(
        _get_visible_report(db, report_id, current_staff, "reports.read")
    )


@router.put("/{report_id}", response_model=ReportResponse)
def update_report(
    report_id: uuid.UUID,
    data: ReportUpdate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("reports.create")),
) -> ReportResponse:
    """Edit a draft or rejected report."""
    report = _get_visible_report(db, report_id, current_staff, "reports.update")
    _ensure_author_or_editor(report, current_staff)
    try:
        report = report_service.update_report(db, report, data)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return ReportResponse.model_validate(report)


@router.post("/{report_id}/submit", response_model=ReportResponse)
def submit_report(
    report_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("reports.create")),
) -> ReportResponse:
    """Submit a report for review."""
    report = _get_visible_report(db, report_id, current_staff, "reports.submit")
    _ensure_author_or_editor(report, current_staff)
    try:
        report = report_service.submit_report(db, report)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return ReportResponse.model_validate(report)


@router.post("/{report_id}/review", response_model=ReportResponse)
def review_report(
    report_id: uuid.UUID,
    data: ReportReview,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("reports.approve")),
) -> ReportResponse:
    """Approve or reject a submitted report."""
    report = _get_visible_report(db, report_id, current_staff, "reports.approve")
    try:
        report = report_service.review_report(
            db, report, current_staff.id, data.approved, data.comment
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return ReportResponse.model_validate(report)


@router.delete("/{report_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_report(
    report_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("reports.delete")),
) -> None:
    """Delete a report."""
    report = _get_visible_report(db, report_id, current_staff, "reports.delete")
    report_service.delete_report(db, report)
