# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Database models package."""

from src.models.announcement import Announcement
from src.models.base import Base, TimestampMixin
from src.models.enums import (
    AnnouncementPriority,
    DataAccessLevel,
    MembershipType,
    MemberStatus,
    OTStatus,
    PaymentMethod,
    Position,
    RecurrenceType,
    RegisterSource,
    ReportCategory,
    ReportStatus,
    ReportType,
    SessionType,
    StaffRole,
    SuggestionStatus,
    TaskCategory,
    TaskPriority,
    TaskStatus,
)
from src.models.member import ConsultingRecord, Member
from src.models.ot_member import OTMember, OTSession
from src.models.report import Report
from src.models.sale import Pass, Sale
from src.models.schedule import Schedule
from src.models.session import Session
from src.models.staff import Staff
from src.models.suggestion import Suggestion
from src.models.task import Task, TaskComment

__all__ = [
    "Announcement",
    "AnnouncementPriority",
    "Base",
    "ConsultingRecord",
    "DataAccessLevel",
    "Member",
    "MemberStatus",
    "MembershipType",
    "OTMember",
    "OTSession",
    "OTStatus",
    "Pass",
    "PaymentMethod",
    "Position",
    "RecurrenceType",
    "RegisterSource",
    "Report",
    "ReportCategory",
    "ReportStatus",
    "ReportType",
    "Sale",
    "Schedule",
    "Session",
    "SessionType",
    "Staff",
    "StaffRole",
    "Suggestion",
    "SuggestionStatus",
    "Task",
    "TaskCategory",
    "TaskComment",
    "TaskPriority",
    "TaskStatus",
    "TimestampMixin",
]
