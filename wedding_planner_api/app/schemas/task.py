"""
Pydantic models for planning tasks.

A task is an item on the wedding checklist or timeline.  It has a
title, an optional due date, a priority and a progress status.  The
``category`` and ``assignedTo`` fields are free text used by clients
to group tasks and show who is responsible for them.
"""

from datetime import date
from typing import Literal, Optional

from pydantic import Field

from .common import CamelModel, PartialUpdate

TaskPriority = Literal["low", "medium", "high"]
TaskStatus = Literal["pending", "in-progress", "completed"]


class TaskCreate(CamelModel):
    """Schema for creating a task."""

    title: str = Field(..., min_length=1, examples=["Book florist"])
    description: Optional[str] = None
    due_date: Optional[date] = None
    priority: TaskPriority = "medium"
    status: TaskStatus = "pending"
    category: Optional[str] = None
    assigned_to: Optional[str] = None


class TaskUpdate(PartialUpdate):
    """Schema for updating a task.

    All fields are optional; only provided values will be updated.
    ``title``, ``priority`` and ``status`` cannot be cleared.
    """

    non_nullable = frozenset({"title", "priority", "status"})

    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    due_date: Optional[date] = None
    priority: Optional[TaskPriority] = None
    status: Optional[TaskStatus] = None
    category: Optional[str] = None
    assigned_to: Optional[str] = None


class TaskRead(TaskCreate):
    """Schema for a task returned by the tasks API."""

    id: int
