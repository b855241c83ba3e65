from pydantic import BaseModel, Field
from typing import Optional


class TaskBase(BaseModel):
    """Wire representation of a task.

    ``column_name`` travels as ``columnName``; the snake_case name is also
    accepted on input so ORM rows validate directly.
    """
    title: Optional[str] = None
    description: Optional[str] = None
    column_name: Optional[str] = Field(default=None, alias="columnName")

    class Config:
        from_attributes = True
        populate_by_name = True


class TaskCreate(TaskBase):
    """Schema for creating new tasks. A client-sent id is accepted and ignored."""
    id: Optional[int] = None


class TaskUpdate(TaskCreate):
    """Schema for updating tasks. Only title and columnName are applied."""
    pass


class Task(TaskBase):
    """Complete task schema with all fields."""
    id: Optional[int] = None
