"""Initial staff management schema

Revision ID: 3f6a1c9d2e41
Revises:
Create Date: 2026-02-02 09:12:31.418220

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f6a1c9d2e41"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ENUM_TYPES = (
    "staffrole",
    "position",
    "taskstatus",
    "taskpriority",
    "taskcategory",
    "announcementpriority",
    "suggestionstatus",
    "sessiontype",
    "recurrencetype",
    "reporttype",
    "reportcategory",
    "reportstatus",
    "otstatus",
)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "staff",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("username", sa.String(length=50), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=200), nullable=True),
        sa.Column("phone", sa.String(length=30), nullable=True),
        sa.Column(
            "role",
            sa.Enum("ADMIN", "RECEPTION", "FITNESS", "TENNIS", "GOLF", name="staffrole"),
            nullable=False,
        ),
        sa.Column(
            "position",
            sa.Enum(
                "TEAM_LEAD",
                "DEPUTY_TEAM_LEAD",
                "MANAGER",
                "SECTION_CHIEF",
                "SENIOR_TRAINER",
                "TRAINER",
                "PERSONAL_TRAINER",
                "INTERN_TRAINER",
                "RECEPTION_MANAGER",
                "RECEPTION_STAFF",
                "COACH",
                "TENNIS_COACH",
                "ASSISTANT_COACH",
                "PRO",
                "GOLF_PRO",
                "ASSISTANT_PRO",
                "STAFF",
                "INTERN",
                name="position",
            ),
            nullable=True,
        ),
        sa.Column("department", sa.String(length=50), nullable=False),
        sa.Column("permission_overrides", sa.JSON(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("username"),
        sa.UniqueConstraint("email"),
    )

    op.create_table(
        "sessions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("staff_id", sa.Uuid(), nullable=False),
        sa.Column("token", sa.String(length=36), nullable=False),
        sa.Column("expires_at", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["staff_id"], ["staff.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token"),
    )

    op.create_table(
        "tasks",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column(
            "status",
            sa.Enum("PENDING", "IN_PROGRESS", "COMPLETED", "CANCELLED", name="taskstatus"),
            nullable=False,
        ),
        sa.Column(
            "priority",
            sa.Enum("LOW", "MEDIUM", "HIGH", "URGENT", name="taskpriority"),
            nullable=False,
        ),
        sa.Column(
            "category",
            sa.Enum(
                "MAINTENANCE",
                "ADMINISTRATIVE",
                "CLIENT",
                "TRAINING",
                "GENERAL",
                name="taskcategory",
            ),
            nullable=False,
        ),
        sa.Column("due_date", sa.DateTime(), nullable=True),
        sa.Column("assigned_to_id", sa.Uuid(), nullable=True),
        sa.Column("assigned_by_id", sa.Uuid(), nullable=True),
        sa.Column("department", sa.String(length=50), nullable=False),
        sa.Column("completed_at", sa.DateTime(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["assigned_to_id"], ["staff.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["assigned_by_id"], ["staff.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "task_comments",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("task_id", sa.Uuid(), nullable=False),
        sa.Column("author_id", sa.Uuid(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.ForeignKeyConstraint(["task_id"], ["tasks.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["author_id"], ["staff.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "announcements",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("author_id", sa.Uuid(), nullable=True),
        sa.Column(
            "priority",
            sa.Enum("LOW", "MEDIUM", "HIGH", name="announcementpriority"),
            nullable=False,
        ),
        sa.Column("category", sa.String(length=50), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=False),
        sa.Column("is_published", sa.Boolean(), nullable=False),
        sa.Column("show_in_banner", sa.Boolean(), nullable=False),
        sa.Column("start_date", sa.DateTime(), nullable=True),
        sa.Column("end_date", sa.DateTime(), nullable=True),
        sa.Column("read_by", sa.JSON(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["staff.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "suggestions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_by_id", sa.Uuid(), nullable=True),
        sa.Column("is_anonymous", sa.Boolean(), nullable=False),
        sa.Column(
            "status",
            sa.Enum("PENDING", "ANSWERED", "REJECTED", name="suggestionstatus"),
            nullable=False,
        ),
        sa.Column("reply", sa.Text(), nullable=True),
        sa.Column("replied_by_id", sa.Uuid(), nullable=True),
        sa.Column("replied_at", sa.DateTime(), nullable=True),
        sa.Column("department", sa.String(length=50), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["created_by_id"], ["staff.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["replied_by_id"], ["staff.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "schedules",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("trainer_id", sa.Uuid(), nullable=False),
        sa.Column("client_name", sa.String(length=100), nullable=False),
        sa.Column("client_id", sa.String(length=50), nullable=True),
        sa.Column(
            "session_type",
            sa.Enum("PT", "OT", "GROUP", "CONSULT", name="sessiontype"),
            nullable=False,
        ),
        sa.Column("session_date", sa.Date(), nullable=False),
        sa.Column("start_time", sa.Time(), nullable=False),
        sa.Column("end_time", sa.Time(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "recurrence",
            sa.Enum("NONE", "DAILY", "WEEKLY", "MONTHLY", name="recurrencetype"),
            nullable=False,
        ),
        sa.Column("recurrence_end_date", sa.Date(), nullable=True),
        sa.Column("is_completed", sa.Boolean(), nullable=False),
        sa.Column("department", sa.String(length=50), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["trainer_id"], ["staff.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_schedules_session_date"),
        "schedules",
        ["session_date"],
        unique=False,
    )

    op.create_table(
        "reports",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "report_type",
            sa.Enum(
                "DAILY",
                "WEEKLY",
                "MONTHLY",
                "PERFORMANCE",
                "INCIDENT",
                "CUSTOM",
                name="reporttype",
            ),
            nullable=False,
        ),
        sa.Column(
            "category",
            sa.Enum(
                "TRAINER",
                "FACILITY",
                "CLIENT",
                "FINANCIAL",
                "OPERATIONAL",
                name="reportcategory",
            ),
            nullable=False,
        ),
        sa.Column(
            "status",
            sa.Enum("DRAFT", "SUBMITTED", "APPROVED", "REJECTED", name="reportstatus"),
            nullable=False,
        ),
        sa.Column("created_by_id", sa.Uuid(), nullable=False),
        sa.Column("department", sa.String(length=50), nullable=False),
        sa.Column("period_start", sa.Date(), nullable=True),
        sa.Column("period_end", sa.Date(), nullable=True),
        sa.Column("metrics", sa.JSON(), nullable=False),
        sa.Column("submitted_at", sa.DateTime(), nullable=True),
        sa.Column("reviewed_at", sa.DateTime(), nullable=True),
        sa.Column("reviewed_by_id", sa.Uuid(), nullable=True),
        sa.Column("review_comment", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["created_by_id"], ["staff.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["reviewed_by_id"], ["staff.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "ot_members",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("phone", sa.String(length=30), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column(
            "status",
            sa.Enum("PENDING", "ASSIGNED", "COMPLETED", name="otstatus"),
            nullable=False,
        ),
        sa.Column("preferred_days", sa.JSON(), nullable=False),
        sa.Column("preferred_times", sa.JSON(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("ot_count", sa.Integer(), nullable=False),
        sa.Column("assigned_staff_id", sa.Uuid(), nullable=True),
        sa.Column("department", sa.String(length=50), nullable=True),
        sa.Column("contact_made", sa.Boolean(), nullable=False),
        sa.Column("contact_date", sa.DateTime(), nullable=True),
        sa.Column("contact_notes", sa.Text(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ["assigned_staff_id"], ["staff.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "ot_sessions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("member_id", sa.Uuid(), nullable=False),
        sa.Column("staff_id", sa.Uuid(), nullable=True),
        sa.Column("session_date", sa.Date(), nullable=False),
        sa.Column("session_time", sa.Time(), nullable=True),
        sa.Column("completed", sa.Boolean(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(["member_id"], ["ot_members.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["staff_id"], ["staff.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("ot_sessions")
    op.drop_table("ot_members")
    op.drop_table("reports")
    op.drop_index(op.f("ix_schedules_session_date"), table_name="schedules")
    op.drop_table("schedules")
    op.drop_table("suggestions")
    op.drop_table("announcements")
    op.drop_table("task_comments")
    op.drop_table("tasks")
    op.drop_table("sessions")
    op.drop_table("staff")
    # Enum types only exist as separate objects on PostgreSQL
    if op.get_bind().dialect.name == "postgresql":
        for enum_type in ENUM_TYPES:
            op.execute(f"DROP TYPE IF EXISTS {enum_type}")
