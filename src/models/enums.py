# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for database models."""

from enum import Enum


class StaffRole(str, Enum):
    """Department role enumeration.

    The role decides the base permission set of a staff member.
    """

    ADMIN = "admin"
    RECEPTION = "reception"
    FITNESS = "fitness"
    TENNIS = "tennis"
    GOLF = "golf"


class Position(str, Enum):
    """Rank of a staff member inside their department."""

    TEAM_LEAD = "팀장"
    DEPUTY_TEAM_LEAD = "부팀장"
    MANAGER = "매니저"
    SECTION_CHIEF = "과장"
    SENIOR_TRAINER = "시니어 트레이너"
    TRAINER = "트레이너"
    PERSONAL_TRAINER = "퍼스널 트레이너"
    INTERN_TRAINER = "인턴 트레이너"
    RECEPTION_MANAGER = "리셉션 매니저"
    RECEPTION_STAFF = "리셉션 직원"
    COACH = "코치"
    TENNIS_COACH = "테니스 코치"
    ASSISTANT_COACH = "어시스턴트 코치"
    PRO = "프로"
    GOLF_PRO = "골프 프로"
    ASSISTANT_PRO = "어시스턴트 프로"
    STAFF = "사원"
    INTERN = "인턴"


class DataAccessLevel(str, Enum):
    """How much of an entity collection a role may see or modify."""

    ALL = "all"
    DEPARTMENT = "department"
    ASSIGNED = "assigned"
    OWN = "own"
    NONE = "none"


class TaskStatus(str, Enum):
    """Task status enumeration."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class TaskPriority(str, Enum):
    """Task priority enumeration."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class TaskCategory(str, Enum):
    """Task category enumeration."""

    MAINTENANCE = "maintenance"
    ADMINISTRATIVE = "administrative"
    CLIENT = "client"
    TRAINING = "training"
    GENERAL = "general"


class AnnouncementPriority(str, Enum):
    """Announcement priority enumeration."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SuggestionStatus(str, Enum):
    """Suggestion status enumeration."""

    PENDING = "pending"
    ANSWERED = "answered"
    REJECTED = "rejected"


class SessionType(str, Enum):
    """Kind of scheduled session."""

    PT = "PT"
    OT = "OT"
    GROUP = "GROUP"
    CONSULT = "CONSULT"


class RecurrenceType(str, Enum):
    """Schedule recurrence enumeration."""

    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class ReportType(str, Enum):
    """Report type enumeration."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    PERFORMANCE = "performance"
    INCIDENT = "incident"
    CUSTOM = "custom"


class ReportCategory(str, Enum):
    """Report category enumeration."""

    TRAINER = "trainer"
    FACILITY = "facility"
    CLIENT = "client"
    FINANCIAL = "financial"
    OPERATIONAL = "operational"


class ReportStatus(str, Enum):
    """Report status enumeration.

    Status flow:
        DRAFT → SUBMITTED → APPROVED
                    ↓
                REJECTED → (edit) → SUBMITTED
    """

    DRAFT = "draft"
    SUBMITTED = "submitted"
    APPROVED = "approved"
    REJECTED = "rejected"


class OTStatus(str, Enum):
    """Orientation-training member status enumeration."""

    PENDING = "pending"
    ASSIGNED = "assigned"
    COMPLETED = "completed"


class MembershipType(str, Enum):
    """Membership product a member signed up for."""

    FITNESS = "fitness"
    TENNIS = "tennis"
    GOLF = "golf"
    COMBO = "combo"


class MemberStatus(str, Enum):
    """Member status enumeration."""

    ACTIVE = "active"
    EXPIRED = "expired"
    PAUSED = "paused"
    WITHDRAWN = "withdrawn"


class RegisterSource(str, Enum):
    """Channel a member was acquired through."""

    OFFLINE = "offline"
    PHONE = "phone"
    INQUIRY = "inquiry"
    CONSULTING = "consulting"
    MEMBERSHIP = "membership"
    ONLINE = "online"
    VISIT = "visit"
    REFERRAL = "referral"


class PaymentMethod(str, Enum):
    """Payment method enumeration."""

    CARD = "card"
    CASH = "cash"
    TRANSFER = "transfer"
