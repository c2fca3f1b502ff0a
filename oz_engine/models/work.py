"""Work items — raw records supplied by the data-fetch layer, and their counts."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class ProjectRecord(BaseModel):
    """A project as returned by the backend."""

    id: str
    created_at: datetime
    is_completed: bool = False
    name: Optional[str] = None


class TaskRecord(BaseModel):
    """An action item as returned by the backend."""

    id: Optional[str] = None
    is_completed: bool = False
    due_date: Optional[datetime] = None
    blocked_by: Optional[str] = None        # ID of the blocking item, if any
    is_setback: bool = False
    project_id: Optional[str] = None


class BrainDumpRecord(BaseModel):
    """A brain dump entry. Unprocessed until it carries an AI summary."""

    id: Optional[str] = None
    ai_summary: Optional[str] = None


class WorkItemCounts(BaseModel):
    """Counts of open work. Recomputed on every evaluation."""

    open_projects: int = Field(ge=0, default=0)
    open_tasks: int = Field(ge=0, default=0)
    unprocessed_dumps: int = Field(ge=0, default=0)
    overdue_tasks: int = Field(ge=0, default=0)
    blocked_tasks: int = Field(ge=0, default=0)
    setback_tasks: int = Field(ge=0, default=0)
