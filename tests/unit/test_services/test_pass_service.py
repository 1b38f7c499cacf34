# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for pass_service."""

import pytest

from src.events import AppEvent, event_bus
from src.schemas.sale import PassCreate, PassUpdate, SaleCreate
from src.services import auth_service, pass_service, sales_service


def _pass(db_session, staff, name="PT 10 sessions", amount=700000):
    return pass_service.create_pass(db_session, PassCreate(name=name, amount=amount), staff)


def test_create_pass(db_session, reception_staff):
    received = []
    event_bus.subscribe(AppEvent.PASS_CREATED, received.append)

    pass_ = _pass(db_session, reception_staff)

    assert pass_.department == "reception"
    assert pass_.created_by_id == reception_staff.id
    assert received[0].data == {
        "pass_id": str(pass_.id),
        "name": "PT 10 sessions",
        "amount": 700000,
    }


def test_duplicate_name_is_rejected(db_session, reception_staff):
    _pass(db_session, reception_staff)
    with pytest.raises(ValueError, match="already exists"):
        _pass(db_session, reception_staff, amount=1)


def test_rename_to_existing_name_is_rejected(db_session, reception_staff):
    _pass(db_session, reception_staff, name="Fitness 3 months")
    other = _pass(db_session, reception_staff, name="Fitness 6 months")
    with pytest.raises(ValueError):
        pass_service.update_pass(db_session, other, PassUpdate(name="Fitness 3 months"))


def test_update_pass_keeps_amount_on_null(db_session, reception_staff):
    pass_ = _pass(db_session, reception_staff)
    updated = pass_service.update_pass(
        db_session, pass_, PassUpdate(amount=None, description="Valid 6 months")
    )
    assert updated.amount == 700000
    assert updated.description == "Valid 6 months"


def test_price_list_is_hidden_from_coaches(
    db_session, reception_staff, admin_staff, fitness_trainer
):
    _pass(db_session, reception_staff, name="B pass")
    _pass(db_session, admin_staff, name="A pass")

    def names(staff):
        subject = auth_service.subject_for(staff)
        return [p.name for p in pass_service.get_passes(db_session, subject)]

    assert names(reception_staff) == ["A pass", "B pass"]
    assert names(admin_staff) == ["A pass", "B pass"]
    assert names(fitness_trainer) == []


def test_delete_pass_keeps_sales(db_session, reception_staff):
    pass_ = _pass(db_session, reception_staff)
    sale = sales_service.create_sale(
        db_session, SaleCreate(customer_name="Kim", pass_id=pass_.id), reception_staff, pass_=pass_
    )

    pass_service.delete_pass(db_session, pass_, actor_id=reception_staff.id)
    db_session.refresh(sale)

    assert sale.pass_id is None
    assert sale.pass_name is None
    assert sale.amount == 700000
