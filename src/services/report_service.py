# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Work report service.

Reports move through ``draft -> submitted -> approved | rejected``. Rejected
reports can be edited and submitted again.
"""

import logging
import uuid
from collections import Counter
from datetime import date, datetime

from sqlalchemy.orm import Session

from src.events import AppEvent, event_bus
from src.models import Report, Staff
from src.models.enums import ReportCategory, ReportStatus, ReportType
from src.rbac import Subject, can_modify_data, filter_by_access
from src.schemas.report import ReportCreate, ReportStats, ReportUpdate

logger = logging.getLogger(__name__)

DATA_TYPE = "reports"

EDITABLE_STATUSES = (ReportStatus.DRAFT, ReportStatus.REJECTED)


def can_access(subject: Subject | None, report: Report) -> bool:
    """Check whether the subject may see a report."""
    return can_modify_data(
        subject,
        DATA_TYPE,
        owner_id=report.created_by_id,
        department=report.department,
    )


def get_reports(
    db: Session,
    subject: Subject | None,
    status: ReportStatus | None = None,
    report_type: ReportType | None = None,
    category: ReportCategory | None = None,
    created_by_id: uuid.UUID | None = None,
    period_from: date | None = None,
    period_to: date | None = None,
) -> list[Report]:
    """Get reports visible to the subject, newest first."""
    query = db.query(Report)
    if status:
        query = query.filter(Report.status == status)
    if report_type:
        query = query.filter(Report.report_type == report_type)
    if category:
        query = query.filter(Report.category == category)
    if created_by_id:
        query = query.filter(Report.created_by_id == created_by_id)
    if period_from:
        query = query.filter(Report.period_start >= period_from)
    if period_to:
        query = query.filter(Report.period_end <= period_to)

    reports = query.order_by(Report.created_at.desc()).all()
    return filter_by_access(reports, subject, DATA_TYPE, owner_field="created_by_id")


def get_report(db: Session, report_id: uuid.UUID) -> Report | None:
    """Get a report by ID."""
    return db.query(Report).filter(Report.id == report_id).first()


def create_report(db: Session, data: ReportCreate, author: Staff) -> Report:
    """Create a draft report in the author's department."""
    report = Report(
        title=data.title,
        content=data.content,
        report_type=data.report_type,
        category=data.category,
        status=ReportStatus.DRAFT,
        created_by_id=author.id,
        department=author.department,
        period_start=data.period_start,
        period_end=data.period_end,
        metrics=dict(data.metrics),
    )
    db.add(report)
    db.commit()
    db.refresh(report)

    logger.info(f"Report {report.id} drafted by {author.username}")
    return report


def update_report(db: Session, report: Report, data: ReportUpdate) -> Report:
    """Edit a draft or rejected report.

    Raises:
        ValueError: If the report is submitted or approved
    """
    if report.status not in EDITABLE_STATUSES:
        raise ValueError(f"Cannot edit a {report.status.value} report")

    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and field in ("title", "content", "report_type", "category"):
            continue
        if field == "metrics":
            value = dict(value or {})
        setattr(report, field, value)
    db.commit()
    db.refresh(report)
    return report


def submit_report(db: Session, report: Report) -> Report:
    """Submit a report for review.

    Raises:
        ValueError: If the report is not a draft or rejected report
    """
    if report.status not in EDITABLE_STATUSES:
        raise ValueError(f"Cannot submit a {report.status.value} report")

    report.status = ReportStatus.SUBMITTED
    report.submitted_at = datetime.utcnow()
    report.reviewed_at = None
    report.reviewed_by_id = None
    report.review_comment = None
    db.commit()
    db.refresh(report)

    logger.info(f"Report {report.id} submitted")
    event_bus.publish_sync(
        AppEvent.REPORT_SUBMITTED,
        {
            "report_id": str(report.id),
            "created_by_id": str(report.created_by_id),
            "department": report.department,
        },
        actor_id=str(report.created_by_id),
    )
    return report


def review_report(
    db: Session,
    report: Report,
    reviewer_id: uuid.UUID,
    approved: bool,
    comment: str | None = None,
) -> Report:
    """Approve or reject a submitted report.

    Raises:
        ValueError: If the report has not been submitted
    """
    if report.status != ReportStatus.SUBMITTED:
        raise ValueError(f"Cannot review a {report.status.value} report")

    report.status = ReportStatus.APPROVED if approved else ReportStatus.REJECTED
    report.reviewed_at = datetime.utcnow()
    report.reviewed_by_id = reviewer_id
    report.review_comment = comment
    db.commit()
    db.refresh(report)

    logger.info(f"Report {report.id} {report.status.value}")
    event_bus.publish_sync(
        AppEvent.REPORT_REVIEWED,
        {
            "report_id": str(report.id),
            "status": report.status.value,
            "created_by_id": str(report.created_by_id),
        },
        actor_id=str(reviewer_id),
    )
    return report


def delete_report(db: Session, report: Report) -> None:
    """Delete a report."""
    report_id = str(report.id)
    db.delete(report)
    db.commit()
    logger.info(f"Report {report_id} deleted")


def get_report_stats(
    db: Session,
    subject: Subject | None,
    period_from: date | None = None,
    period_to: date | None = None,
) -> ReportStats:
    """Count the visible reports of a period by status and type."""
    reports = get_reports(db, subject, period_from=period_from, period_to=period_to)
    by_status = Counter(r.status.value for r in reports)
    by_type = Counter(r.report_type.value for r in reports)
    return ReportStats(
        total=len(reports),
        by_status={s.value: by_status.get(s.value, 0) for s in ReportStatus},
        by_type={t.value: by_type.get(t.value, 0) for t in ReportType},
    )
