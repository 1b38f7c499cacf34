# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for sales_service."""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from src.events import AppEvent, event_bus
from src.schemas.member import MemberCreate
from src.schemas.sale import PassCreate, SaleCreate, SaleUpdate
from src.services import auth_service, member_service, pass_service, sales_service


def _sell(db_session, seller, amount=50000, customer="Walk-in", **kwargs):
    return sales_service.create_sale(
        db_session,
        SaleCreate(customer_name=customer, amount=amount, **kwargs),
        seller,
    )


def test_sale_belongs_to_seller_department(db_session, fitness_trainer):
    received = []
    event_bus.subscribe(AppEvent.SALE_RECORDED, received.append)

    sale = _sell(db_session, fitness_trainer)

    assert sale.department == "fitness"
    assert sale.staff_id == fitness_trainer.id
    assert received[0].data["amount"] == 50000


def test_pass_price_and_member_name_are_defaults(db_session, reception_staff):
    pass_ = pass_service.create_pass(
        db_session, PassCreate(name="Golf 1 month", amount=300000), reception_staff
    )
    member = member_service.create_member(
        db_session,
        MemberCreate(name="Yoo Jihoon", phone="010-0123-4567", membership_type="golf"),
        reception_staff,
    )

    sale = sales_service.create_sale(
        db_session,
        SaleCreate(pass_id=pass_.id, member_id=member.id),
        reception_staff,
        pass_=pass_,
        member=member,
    )

    assert sale.amount == 300000
    assert sale.customer_name == "Yoo Jihoon"
    assert sale.pass_name == "Golf 1 month"


def test_sale_without_amount_or_pass_is_rejected(db_session, reception_staff):
    with pytest.raises(ValidationError):
        SaleCreate(customer_name="Kim")
    with pytest.raises(ValueError, match="amount or a pass"):
        sales_service.create_sale(
            db_session,
            SaleCreate(customer_name="Kim", pass_id=reception_staff.id),
            reception_staff,
        )


def test_sales_are_scoped_by_department(
    db_session, reception_staff, fitness_trainer, fitness_lead, tennis_coach
):
    _sell(db_session, fitness_trainer, customer="Fitness A")
    _sell(db_session, fitness_lead, customer="Fitness B")
    _sell(db_session, tennis_coach, customer="Tennis A")
    _sell(db_session, reception_staff, customer="Front desk")

    def customers(staff):
        subject = auth_service.subject_for(staff)
        return {s.customer_name for s in sales_service.get_sales(db_session, subject)}

    assert customers(reception_staff) == {"Fitness A", "Fitness B", "Tennis A", "Front desk"}
    assert customers(fitness_trainer) == {"Fitness A", "Fitness B"}
    assert customers(tennis_coach) == {"Tennis A"}


def test_can_access_follows_department(db_session, fitness_trainer, tennis_coach, reception_staff):
    sale = _sell(db_session, fitness_trainer)
    assert sales_service.can_access(auth_service.subject_for(reception_staff), sale)
    assert sales_service.can_access(auth_service.subject_for(fitness_trainer), sale)
    assert not sales_service.can_access(auth_service.subject_for(tennis_coach), sale)


def test_date_range_is_inclusive(db_session, reception_staff):
    _sell(db_session, reception_staff, customer="Before", sale_date=datetime(2026, 3, 31, 23, 59))
    _sell(db_session, reception_staff, customer="First", sale_date=datetime(2026, 4, 1, 0, 0))
    _sell(db_session, reception_staff, customer="Last", sale_date=datetime(2026, 4, 30, 22, 0))
    _sell(db_session, reception_staff, customer="After", sale_date=datetime(2026, 5, 1, 9, 0))

    sales = sales_service.get_sales(
        db_session,
        auth_service.subject_for(reception_staff),
        date_from=date(2026, 4, 1),
        date_to=date(2026, 4, 30),
    )
    assert [s.customer_name for s in sales] == ["Last", "First"]


def test_update_sale_skips_null_amount(db_session, reception_staff):
    sale = _sell(db_session, reception_staff)
    updated = sales_service.update_sale(
        db_session, sale, SaleUpdate(amount=None, notes="Paid in two parts")
    )
    assert updated.amount == 50000
    assert updated.notes == "Paid in two parts"


def test_summarize_sales(db_session, reception_staff, fitness_trainer):
    pt = pass_service.create_pass(
        db_session, PassCreate(name="PT 10", amount=700000), reception_staff
    )
    day = pass_service.create_pass(
        db_session, PassCreate(name="Day pass", amount=20000), reception_staff
    )
    sales_service.create_sale(
        db_session, SaleCreate(customer_name="A", pass_id=pt.id), fitness_trainer, pass_=pt
    )
    sales_service.create_sale(
        db_session, SaleCreate(customer_name="B", pass_id=day.id), reception_staff, pass_=day
    )
    sales_service.create_sale(
        db_session, SaleCreate(customer_name="C", pass_id=day.id), reception_staff, pass_=day
    )
    _sell(db_session, reception_staff, amount=5000, customer="Towel")

    summary = sales_service.summarize_sales(
        sales_service.get_sales(db_session, auth_service.subject_for(reception_staff))
    )

    assert summary.count == 4
    assert summary.total == 745000
    assert [(e.pass_name, e.count, e.total) for e in summary.by_pass] == [
        ("PT 10", 1, 700000),
        ("Day pass", 2, 40000),
        (None, 1, 5000),
    ]
    assert summary.by_department == {"fitness": 700000, "reception": 45000}


def test_summarize_nothing():
    summary = sales_service.summarize_sales([])
    assert summary.count == 0
    assert summary.total == 0
    assert summary.by_pass == []
    assert summary.by_department == {}


def test_delete_member_keeps_sale(db_session, reception_staff):
    member = member_service.create_member(
        db_session,
        MemberCreate(name="Choi", phone="010-9999-0000", membership_type="fitness"),
        reception_staff,
    )
    sale = sales_service.create_sale(
        db_session, SaleCreate(member_id=member.id, amount=1000), reception_staff, member=member
    )

    member_service.delete_member(db_session, member)
    db_session.refresh(sale)

    assert sale.member_id is None
    assert sale.customer_name == "Choi"
