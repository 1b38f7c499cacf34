# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for task_service."""

import uuid

import pytest

from src.events import AppEvent, event_bus
from src.models.enums import TaskPriority, TaskStatus
from src.schemas.task import TaskCreate, TaskUpdate
from src.services import auth_service, task_service


def test_create_task_defaults_to_creator(db_session, fitness_trainer):
    task = task_service.create_task(db_session, TaskCreate(title="Clean racks"), fitness_trainer)
    assert task.assigned_to_id == fitness_trainer.id
    assert task.assigned_by_id == fitness_trainer.id
    assert task.department == "fitness"
    assert task.status is TaskStatus.PENDING


def test_create_task_unknown_assignee(db_session, fitness_lead):
    with pytest.raises(ValueError, match="Assignee not found"):
        task_service.create_task(
            db_session,
            TaskCreate(title="Audit", assigned_to_id=uuid.uuid4()),
            fitness_lead,
        )


def test_tasks_are_scoped_to_department(
    db_session, fitness_trainer, fitness_lead, tennis_coach, admin_staff
):
    task_service.create_task(db_session, TaskCreate(title="Fitness task"), fitness_lead)
    task_service.create_task(db_session, TaskCreate(title="Tennis task"), tennis_coach)

    trainer_tasks = task_service.get_tasks(
        db_session, auth_service.subject_for(fitness_trainer)
    )
    admin_tasks = task_service.get_tasks(db_session, auth_service.subject_for(admin_staff))

    assert [t.title for t in trainer_tasks] == ["Fitness task"]
    assert len(admin_tasks) == 2
    assert task_service.get_tasks(db_session, None) == []


def test_can_access_other_department(db_session, fitness_lead, tennis_coach):
    task = task_service.create_task(db_session, TaskCreate(title="Court prep"), tennis_coach)
    assert task_service.can_access(auth_service.subject_for(tennis_coach), task)
    assert not task_service.can_access(auth_service.subject_for(fitness_lead), task)


def test_get_tasks_filters(db_session, fitness_lead):
    task_service.create_task(
        db_session,
        TaskCreate(title="Fix treadmill", priority=TaskPriority.URGENT),
        fitness_lead,
    )
    task_service.create_task(db_session, TaskCreate(title="Order towels"), fitness_lead)
    subject = auth_service.subject_for(fitness_lead)

    urgent = task_service.get_tasks(db_session, subject, priority=TaskPriority.URGENT)
    searched = task_service.get_tasks(db_session, subject, search="towel")

    assert [t.title for t in urgent] == ["Fix treadmill"]
    assert [t.title for t in searched] == ["Order towels"]


def test_completing_task_stamps_completed_at(db_session, fitness_trainer):
    received = []
    event_bus.subscribe(AppEvent.TASK_COMPLETED, received.append)
    task = task_service.create_task(db_session, TaskCreate(title="Mop floor"), fitness_trainer)

    task = task_service.update_task(
        db_session, task, TaskUpdate(status=TaskStatus.COMPLETED), fitness_trainer.id
    )
    assert task.completed_at is not None
    assert len(received) == 1

    task = task_service.update_task(
        db_session, task, TaskUpdate(status=TaskStatus.IN_PROGRESS), fitness_trainer.id
    )
    assert task.completed_at is None


def test_update_ignores_null_status(db_session, fitness_trainer):
    task = task_service.create_task(db_session, TaskCreate(title="Restock"), fitness_trainer)
    task = task_service.update_task(db_session, task, TaskUpdate(status=None, title="Restock gym"))
    assert task.status is TaskStatus.PENDING
    assert task.title == "Restock gym"


def test_assign_task(db_session, fitness_lead, fitness_trainer):
    received = []
    event_bus.subscribe(AppEvent.TASK_ASSIGNED, received.append)
    task = task_service.create_task(db_session, TaskCreate(title="Inventory"), fitness_lead)

    task = task_service.assign_task(db_session, task, fitness_trainer.id, fitness_lead.id)

    assert task.assigned_to_id == fitness_trainer.id
    assert received[0].actor_id == str(fitness_lead.id)


def test_assign_task_to_inactive_staff(db_session, fitness_lead, fitness_trainer):
    fitness_trainer.is_active = False
    db_session.commit()
    task = task_service.create_task(db_session, TaskCreate(title="Inventory"), fitness_lead)
    with pytest.raises(ValueError):
        task_service.assign_task(db_session, task, fitness_trainer.id, fitness_lead.id)


def test_comments_and_delete(db_session, fitness_trainer):
    task = task_service.create_task(db_session, TaskCreate(title="Check lockers"), fitness_trainer)
    task_service.add_comment(db_session, task, fitness_trainer.id, "Locker 12 is broken")
    db_session.refresh(task)
    assert [c.content for c in task.comments] == ["Locker 12 is broken"]

    task_id = task.id
    task_service.delete_task(db_session, task)
    assert task_service.get_task(db_session, task_id) is None
