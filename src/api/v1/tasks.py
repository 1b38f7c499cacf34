# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Task API endpoints."""

import uuid
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from src.api.deps import (
    get_current_staff,
    get_db,
    log_access_denied,
    require_any_permission,
    require_permission,
)
from src.models import Staff, Task
from src.models.enums import TaskCategory, TaskPriority, TaskStatus
from src.rbac import has_permission
from src.schemas.task import (
    TaskAssign,
    TaskCommentCreate,
    TaskCommentResponse,
    TaskCreate,
    TaskResponse,
    TaskUpdate,
)
from src.services import auth_service, task_service

router = APIRouter()


def _get_visible_task(
    db: Session, task_id: uuid.UUID, current_staff: Staff, action: str
) -> Task:
    task = task_service.get_task(db, task_id)
    if not task:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )
    if not task_service.can_access(auth_service.subject_for(current_staff), task):
        log_access_denied(current_staff, action, f"task {task_id}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Task not found",
        )
    return task


@router.get("", response_model=list[TaskResponse])
def list_tasks(
    status_filter: TaskStatus | None = Query(None, alias="status"),
    priority: TaskPriority | None = None,
    category: TaskCategory | None = None,
    assigned_to_id: uuid.UUID | None = None,
    search: str | None = None,
    due_from: datetime | None = None,
    due_to: datetime | None = None,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(
        require_any_permission(
            "tasks.read",
            "tasks.view_all",
            "tasks.view_department",
            "tasks.view_assigned",
            "tasks.view_own",
        )
    ),
) -> list[TaskResponse]:
    """List tasks visible to the current staff member."""
    tasks = task_service.get_tasks(
        db,
        auth_service.subject_for(current_staff),
        status=status_filter,
        priority=priority,
        category=category,
        assigned_to_id=assigned_to_id,
        search=search,
        due_from=due_from,
        due_to=due_to,
    )
    return [TaskResponse.model_validate(t) for t in tasks]


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
def create_task(
    data: TaskCreate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("tasks.create")),
) -> TaskResponse:
    """Create a task. Assigning it to someone else requires ``tasks.assign``."""
    if data.assigned_to_id and data.assigned_to_id != current_staff.id:
        if not has_permission(auth_service.subject_for(current_staff), "tasks.assign"):
            log_access_denied(current_staff, "tasks.assign", "new task")
            raise HTTPException(status_code=403, detail="Permission denied: tasks.assign")

    try:
        task = task_service.create_task(db, data, current_staff)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return TaskResponse.model_validate(task)


@router.get("/{task_id}", response_model=TaskResponse)
def get_task(
    task_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(get_current_staff),
) -> TaskResponse:
    """Get a task."""
    return TaskResponse.model_validate(
        _get_visible_task(db, task_id, current_staff, "tasks.read")
    )


@router.put("/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: uuid.UUID,
    data: TaskUpdate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("tasks.update")),
) -> TaskResponse:
    """Update a task."""
    task = _get_visible_task(db, task_id, current_staff, "tasks.update")
    task = task_service.update_task(db, task, data, actor_id=current_staff.id)
    return TaskResponse.model_validate(task)


@router.post("/{task_id}/assign", response_model=TaskResponse)
def assign_task(
    task_id: uuid.UUID,
    data: TaskAssign,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("tasks.assign")),
) -> TaskResponse:
    """Hand a task to another staff member."""
    task = _get_visible_task(db, task_id, current_staff, "tasks.assign")
    try:
        task = task_service.assign_task(db, task, data.assigned_to_id, current_staff.id)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return TaskResponse.model_validate(task)


@router.post(
    "/{task_id}/comments",
    response_model=TaskCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
def add_comment(
    task_id: uuid.UUID,
    data: TaskCommentCreate,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("tasks.comment")),
) -> TaskCommentResponse:
    """Comment on a task."""
    task = _get_visible_task(db, task_id, current_staff, "tasks.comment")
    comment = task_service.add_comment(db, task, current_staff.id, data.content)
    return TaskCommentResponse.model_validate(comment)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(
    task_id: uuid.UUID,
    db: Session = Depends(get_db),
    current_staff: Staff = Depends(require_permission("tasks.delete")),
) -> None:
    """Delete a task."""
    task = _get_visible_task(db, task_id, current_staff, "tasks.delete")
    task_service.delete_task(db, task, actor_id=current_staff.id)
