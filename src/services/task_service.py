# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Task service for assigning and tracking staff work items."""

import logging
import uuid
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session

from src.events import AppEvent, event_bus
from src.models import Staff, Task, TaskComment
from src.models.enums import TaskCategory, TaskPriority, TaskStatus
from src.rbac import Subject, can_modify_data, filter_by_access
from src.schemas.task import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)

DATA_TYPE = "tasks"


def can_access(subject: Subject | None, task: Task) -> bool:
    """Check whether the subject may see or edit a task."""
    return can_modify_data(
        subject,
        DATA_TYPE,
        owner_id=task.assigned_by_id,
        department=task.department,
        assigned_ids=[task.assigned_to_id] if task.assigned_to_id else [],
    )


def get_tasks(
    db: Session,
    subject: Subject | None,
    status: TaskStatus | None = None,
    priority: TaskPriority | None = None,
    category: TaskCategory | None = None,
    assigned_to_id: uuid.UUID | None = None,
    search: str | None = None,
    due_from: datetime | None = None,
    due_to: datetime | None = None,
) -> list[Task]:
    """Get the tasks visible to the subject with optional filters."""
    query = db.query(Task)
    if status:
        query = query.filter(Task.status == status)
    if priority:
        query = query.filter(Task.priority == priority)
    if category:
        query = query.filter(Task.category == category)
    if assigned_to_id:
        query = query.filter(Task.assigned_to_id == assigned_to_id)
    if search:
        pattern = f"%{search}%"
        query = query.filter(
            or_(Task.title.ilike(pattern), Task.description.ilike(pattern))
        )
    if due_from:
        query = query.filter(Task.due_date >= due_from)
    if due_to:
        query = query.filter(Task.due_date <= due_to)

    tasks = query.order_by(Task.created_at.desc()).all()
    return filter_by_access(
        tasks,
        subject,
        DATA_TYPE,
        owner_field="assigned_by_id",
        assigned_field="assigned_to_id",
    )


def get_task(db: Session, task_id: uuid.UUID) -> Task | None:
    """Get a task by ID."""
    return db.query(Task).filter(Task.id == task_id).first()


def create_task(db: Session, data: TaskCreate, creator: Staff) -> Task:
    """Create a task in the creator's department.

    Raises:
        ValueError: If the assignee does not exist or is inactive
    """
    assignee_id = data.assigned_to_id or creator.id
    if assignee_id != creator.id:
        _get_active_staff(db, assignee_id)

    task = Task(
        title=data.title,
        description=data.description,
        priority=data.priority,
        category=data.category,
        due_date=data.due_date,
        status=TaskStatus.PENDING,
        assigned_to_id=assignee_id,
        assigned_by_id=creator.id,
        department=creator.department,
    )
    db.add(task)
    db.commit()
    db.refresh(task)

    logger.info(f"Task {task.id} created by {creator.username}")
    event_bus.publish_sync(
        AppEvent.TASK_CREATED,
        {
            "task_id": str(task.id),
            "title": task.title,
            "assigned_to_id": str(task.assigned_to_id),
            "department": task.department,
        },
        actor_id=str(creator.id),
    )
    return task


def update_task(
    db: Session, task: Task, data: TaskUpdate, actor_id: uuid.UUID | None = None
) -> Task:
    """Update a task. Moving to completed stamps ``completed_at``."""
    update_data = data.model_dump(exclude_unset=True)
    previous_status = task.status

    for field, value in update_data.items():
        if value is None and field in ("title", "status", "priority", "category"):
            continue
        setattr(task, field, value)

    if task.status != previous_status:
        if task.status == TaskStatus.COMPLETED:
            task.completed_at = datetime.utcnow()
        else:
            task.completed_at = None

    db.commit()
    db.refresh(task)

    completed_now = (
        task.status == TaskStatus.COMPLETED and previous_status != TaskStatus.COMPLETED
    )
    event_bus.publish_sync(
        AppEvent.TASK_COMPLETED if completed_now else AppEvent.TASK_UPDATED,
        {"task_id": str(task.id), "status": task.status.value},
        actor_id=str(actor_id) if actor_id else None,
    )
    return task


def assign_task(
    db: Session, task: Task, assignee_id: uuid.UUID, actor_id: uuid.UUID
) -> Task:
    """Hand a task to another staff member.

    Raises:
        ValueError: If the assignee does not exist or is inactive
    """
    assignee = _get_active_staff(db, assignee_id)
    task.assigned_to_id = assignee.id
    db.commit()
    db.refresh(task)

    logger.info(f"Task {task.id} assigned to {assignee.username}")
    event_bus.publish_sync(
        AppEvent.TASK_ASSIGNED,
        {"task_id": str(task.id), "assigned_to_id": str(assignee.id)},
        actor_id=str(actor_id),
    )
    return task


def add_comment(
    db: Session, task: Task, author_id: uuid.UUID, content: str
) -> TaskComment:
    """Add a comment to a task."""
    comment = TaskComment(task_id=task.id, author_id=author_id, content=content)
    db.add(comment)
    db.commit()
    db.refresh(comment)

    event_bus.publish_sync(
        AppEvent.TASK_COMMENTED,
        {"task_id": str(task.id), "comment_id": str(comment.id)},
        actor_id=str(author_id),
    )
    return comment


def delete_task(db: Session, task: Task, actor_id: uuid.UUID | None = None) -> None:
    """Delete a task together with its comments."""
    task_id = str(task.id)
    db.delete(task)
    db.commit()

    logger.info(f"Task {task_id} deleted")
    event_bus.publish_sync(
        AppEvent.TASK_DELETED,
        {"task_id": task_id},
        actor_id=str(actor_id) if actor_id else None,
    )


def _get_active_staff(db: Session, staff_id: uuid.UUID) -> Staff:
    staff = db.query(Staff).filter(Staff.id == staff_id).first()
    if not staff or not staff.is_active:
        raise ValueError("Assignee not found")
    return staff
