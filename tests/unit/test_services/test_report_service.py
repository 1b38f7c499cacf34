# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for report_service."""

import pytest

from src.events import AppEvent, event_bus
from src.models.enums import ReportStatus, ReportType
from src.schemas.report import ReportCreate, ReportUpdate
from src.services import auth_service, report_service


def _draft(db_session, author, title="Daily report", **kwargs):
    return report_service.create_report(
        db_session, ReportCreate(title=title, **kwargs), author
    )


def test_create_report_is_draft(db_session, fitness_trainer):
    report = _draft(db_session, fitness_trainer, metrics={"sessions": 5})
    assert report.status is ReportStatus.DRAFT
    assert report.department == "fitness"
    assert report.metrics == {"sessions": 5}


def test_submit_and_approve(db_session, fitness_trainer, admin_staff):
    submitted = []
    reviewed = []
    event_bus.subscribe(AppEvent.REPORT_SUBMITTED, submitted.append)
    event_bus.subscribe(AppEvent.REPORT_REVIEWED, reviewed.append)

    report = _draft(db_session, fitness_trainer)
    report = report_service.submit_report(db_session, report)
    assert report.status is ReportStatus.SUBMITTED
    assert report.submitted_at is not None

    report = report_service.review_report(db_session, report, admin_staff.id, approved=True)
    assert report.status is ReportStatus.APPROVED
    assert report.reviewed_by_id == admin_staff.id
    assert len(submitted) == 1
    assert reviewed[0].data["status"] == "approved"


def test_rejected_report_can_be_resubmitted(db_session, fitness_trainer, admin_staff):
    report = report_service.submit_report(db_session, _draft(db_session, fitness_trainer))
    report = report_service.review_report(
        db_session, report, admin_staff.id, approved=False, comment="Missing numbers"
    )
    assert report.review_comment == "Missing numbers"

    report = report_service.update_report(db_session, report, ReportUpdate(content="Numbers"))
    report = report_service.submit_report(db_session, report)

    assert report.status is ReportStatus.SUBMITTED
    assert report.review_comment is None
    assert report.reviewed_by_id is None


def test_submitted_report_is_locked(db_session, fitness_trainer):
    report = report_service.submit_report(db_session, _draft(db_session, fitness_trainer))
    with pytest.raises(ValueError):
        report_service.update_report(db_session, report, ReportUpdate(title="Changed"))
    with pytest.raises(ValueError):
        report_service.submit_report(db_session, report)


def test_only_submitted_reports_are_reviewed(db_session, fitness_trainer, admin_staff):
    report = _draft(db_session, fitness_trainer)
    with pytest.raises(ValueError):
        report_service.review_report(db_session, report, admin_staff.id, approved=True)


def test_reports_are_scoped_to_department(
    db_session, fitness_trainer, fitness_lead, tennis_coach
):
    _draft(db_session, fitness_trainer, title="Fitness")
    _draft(db_session, tennis_coach, title="Tennis")

    visible = report_service.get_reports(db_session, auth_service.subject_for(fitness_lead))
    assert [r.title for r in visible] == ["Fitness"]


def test_report_stats(db_session, fitness_trainer, admin_staff):
    _draft(db_session, fitness_trainer)
    _draft(db_session, fitness_trainer, report_type=ReportType.WEEKLY)
    report_service.submit_report(db_session, _draft(db_session, fitness_trainer))

    stats = report_service.get_report_stats(db_session, auth_service.subject_for(admin_staff))

    assert stats.total == 3
    assert stats.by_status == {
        "draft": 2,
        "submitted": 1,
        "approved": 0,
        "rejected": 0,
    }
    assert stats.by_type["daily"] == 2
    assert stats.by_type["weekly"] == 1
    assert stats.by_type["incident"] == 0
