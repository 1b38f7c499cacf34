# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Task schemas."""
import datetime
import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from src.models.enums import TaskCategory, TaskPriority, TaskStatus


class TaskBase(BaseModel):
    """Base task schema."""

    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    priority: TaskPriority = TaskPriority.MEDIUM
    category: TaskCategory = TaskCategory.GENERAL
    due_date: Optional[datetime.datetime] = None


class TaskCreate(TaskBase):
    """Schema for creating a task.

    Without ``assigned_to_id`` the task is assigned to its creator.
    """

    assigned_to_id: Optional[uuid.UUID] = None


class TaskUpdate(BaseModel):
    """Schema for updating a task."""

    title: Optional[str] = Field(None, min_length=1, max_length=200)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    category: Optional[TaskCategory] = None
    due_date: Optional[datetime.datetime] = None


class TaskAssign(BaseModel):
    """Schema for handing a task to another staff member."""

    assigned_to_id: uuid.UUID


class TaskCommentCreate(BaseModel):
    """Schema for commenting on a task."""

    content: str = Field(..., min_length=1, max_length=2000)


class TaskCommentResponse(BaseModel):
    """Schema for task comment response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    task_id: uuid.UUID
    author_id: Optional[uuid.UUID]
    content: str
    created_at: datetime.datetime


class TaskResponse(BaseModel):
    """Schema for task response."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    description: Optional[str]
    status: TaskStatus
    priority: TaskPriority
    category: TaskCategory
    due_date: Optional[datetime.datetime]
    assigned_to_id: Optional[uuid.UUID]
    assigned_by_id: Optional[uuid.UUID]
    department: str
    completed_at: Optional[datetime.datetime]
    comments: list[TaskCommentResponse] = []
    created_at: datetime.datetime
    updated_at: datetime.datetime
