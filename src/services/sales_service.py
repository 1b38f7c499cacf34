# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Sales service: recording sales and summarising revenue."""

import logging
import uuid
from collections import defaultdict
from datetime import date, datetime, time, timedelta

from sqlalchemy.orm import Session

from src.events import AppEvent, event_bus
from src.models import Member, Pass, Sale, Staff
from src.rbac import Subject, can_modify_data, filter_by_access
from src.schemas.sale import PassSalesTotal, SaleCreate, SalesSummary, SaleUpdate

logger = logging.getLogger(__name__)

DATA_TYPE = "sales"


def can_access(subject: Subject | None, sale: Sale) -> bool:
    """Check whether the subject may see or edit a sale."""
    return can_modify_data(
        subject, DATA_TYPE, owner_id=sale.staff_id, department=sale.department
    )


def get_sales(
    db: Session,
    subject: Subject | None,
    date_from: date | None = None,
    date_to: date | None = None,
    pass_id: uuid.UUID | None = None,
    staff_id: uuid.UUID | None = None,
) -> list[Sale]:
    """Get sales visible to the subject, newest first.

    ``date_from`` and ``date_to`` are inclusive calendar days.
    """
    query = db.query(Sale)
    if date_from:
        query = query.filter(Sale.sale_date >= datetime.combine(date_from, time.min))
    if date_to:
        query = query.filter(
            Sale.sale_date < datetime.combine(date_to + timedelta(days=1), time.min)
        )
    if pass_id:
        query = query.filter(Sale.pass_id == pass_id)
    if staff_id:
        query = query.filter(Sale.staff_id == staff_id)

    sales = query.order_by(Sale.sale_date.desc()).all()
    return filter_by_access(sales, subject, DATA_TYPE, owner_field="staff_id")


def get_sale(db: Session, sale_id: uuid.UUID) -> Sale | None:
    """Get a sale by ID."""
    return db.query(Sale).filter(Sale.id == sale_id).first()


def create_sale(
    db: Session,
    data: SaleCreate,
    seller: Staff,
    pass_: Pass | None = None,
    member: Member | None = None,
) -> Sale:
    """Record a sale made by ``seller``.

    The sale belongs to the seller's department. Without an explicit amount
    the pass price is charged.

    Raises:
        ValueError: If neither an amount nor a pass is given, or neither a
            customer name nor a member
    """
    amount = data.amount
    if amount is None:
        if pass_ is None:
            raise ValueError("Sale needs an amount or a pass")
        amount = pass_.amount
    customer_name = data.customer_name or (member.name if member else None)
    if not customer_name:
        raise ValueError("Sale needs a customer name or a member")

    sale = Sale(
        customer_name=customer_name,
        member_id=member.id if member else None,
        pass_id=pass_.id if pass_ else None,
        amount=amount,
        sale_date=data.sale_date or datetime.utcnow(),
        payment_method=data.payment_method,
        notes=data.notes,
        staff_id=seller.id,
        department=seller.department,
    )
    db.add(sale)
    db.commit()
    db.refresh(sale)

    logger.info(f"Sale {sale.id} of {sale.amount} recorded by {seller.username}")
    event_bus.publish_sync(
        AppEvent.SALE_RECORDED,
        {
            "sale_id": str(sale.id),
            "amount": sale.amount,
            "pass_id": str(sale.pass_id) if sale.pass_id else None,
            "department": sale.department,
        },
        actor_id=str(seller.id),
    )
    return sale


def update_sale(db: Session, sale: Sale, data: SaleUpdate) -> Sale:
    """Correct a recorded sale."""
    for field, value in data.model_dump(exclude_unset=True).items():
        if value is None and field in ("customer_name", "amount", "sale_date"):
            continue
        setattr(sale, field, value)
    db.commit()
    db.refresh(sale)
    return sale


def delete_sale(db: Session, sale: Sale, actor_id: uuid.UUID | None = None) -> None:
    """Delete a sale."""
    sale_id = str(sale.id)
    db.delete(sale)
    db.commit()

    logger.info(f"Sale {sale_id} deleted")
    event_bus.publish_sync(
        AppEvent.SALE_DELETED,
        {"sale_id": sale_id},
        actor_id=str(actor_id) if actor_id else None,
    )


def summarize_sales(sales: list[Sale]) -> SalesSummary:
    """Total revenue overall, per pass and per department.

    Passes are listed by revenue, highest first; sales without a pass are
    grouped under ``pass_id=None``.
    """
    per_pass: dict[uuid.UUID | None, PassSalesTotal] = {}
    by_department: dict[str, int] = defaultdict(int)

    for sale in sales:
        entry = per_pass.setdefault(
            sale.pass_id,
            PassSalesTotal(
                pass_id=sale.pass_id, pass_name=sale.pass_name, count=0, total=0
            ),
        )
        entry.count += 1
        entry.total += sale.amount
        by_department[sale.department] += sale.amount

    return SalesSummary(
        count=len(sales),
        total=sum(sale.amount for sale in sales),
        by_pass=sorted(per_pass.values(), key=lambda e: e.total, reverse=True),
        by_department=dict(by_department),
    )
