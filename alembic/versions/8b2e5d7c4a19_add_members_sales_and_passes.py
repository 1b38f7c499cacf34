"""add members, consulting records, passes and sales

Revision ID: 8b2e5d7c4a19
Revises: 3f6a1c9d2e41
Create Date: 2026-10-18 10:04:52.731904

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "8b2e5d7c4a19"
down_revision: str | None = "3f6a1c9d2e41"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

ENUM_TYPES = ("membershiptype", "memberstatus", "registersource", "paymentmethod")


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "members",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("phone", sa.String(length=30), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column(
            "membership_type",
            sa.Enum("FITNESS", "TENNIS", "GOLF", "COMBO", name="membershiptype"),
            nullable=False,
        ),
        sa.Column("membership_start", sa.Date(), nullable=True),
        sa.Column("membership_end", sa.Date(), nullable=True),
        sa.Column("pt_count", sa.Integer(), nullable=False),
        sa.Column("ot_count", sa.Integer(), nullable=False),
        sa.Column("lesson_count", sa.Integer(), nullable=False),
        sa.Column(
            "status",
            sa.Enum("ACTIVE", "EXPIRED", "PAUSED", "WITHDRAWN", name="memberstatus"),
            nullable=False,
        ),
        sa.Column(
            "register_source",
            sa.Enum(
                "OFFLINE",
                "PHONE",
                "INQUIRY",
                "CONSULTING",
                "MEMBERSHIP",
                "ONLINE",
                "VISIT",
                "REFERRAL",
                name="registersource",
            ),
            nullable=True,
        ),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("department", sa.String(length=50), nullable=False),
        sa.Column("consultant_id", sa.Uuid(), nullable=True),
        sa.Column("registered_by_id", sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["consultant_id"], ["staff.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(
            ["registered_by_id"], ["staff.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_members_phone"), "members", ["phone"], unique=False)

    op.create_table(
        "consulting_records",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("member_id", sa.Uuid(), nullable=False),
        sa.Column("consultant_id", sa.Uuid(), nullable=True),
        sa.Column("consulted_at", sa.DateTime(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("result", sa.String(length=200), nullable=True),
        sa.ForeignKeyConstraint(["member_id"], ["members.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["consultant_id"], ["staff.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "passes",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("department", sa.String(length=50), nullable=False),
        sa.Column("created_by_id", sa.Uuid(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["created_by_id"], ["staff.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    op.create_table(
        "sales",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("customer_name", sa.String(length=100), nullable=False),
        sa.Column("member_id", sa.Uuid(), nullable=True),
        sa.Column("pass_id", sa.Uuid(), nullable=True),
        sa.Column("amount", sa.Integer(), nullable=False),
        sa.Column("sale_date", sa.DateTime(), nullable=False),
        sa.Column(
            "payment_method",
            sa.Enum("CARD", "CASH", "TRANSFER", name="paymentmethod"),
            nullable=True,
        ),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("staff_id", sa.Uuid(), nullable=True),
        sa.Column("department", sa.String(length=50), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["member_id"], ["members.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["pass_id"], ["passes.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["staff_id"], ["staff.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_sales_sale_date"), "sales", ["sale_date"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_sales_sale_date"), table_name="sales")
    op.drop_table("sales")
    op.drop_table("passes")
    op.drop_table("consulting_records")
    op.drop_index(op.f("ix_members_phone"), table_name="members")
    op.drop_table("members")
    # Enum types only exist as separate objects on PostgreSQL
    if op.get_bind().dialect.name == "postgresql":
        for enum_type in ENUM_TYPES:
            op.execute(f"DROP TYPE IF EXISTS {enum_type}")
