from sqlmodel import SQLModel, Field
from typing import Optional

# Conventional board columns. Not enforced on column_name.
DEFAULT_COLUMNS = ("To Do", "In Progress", "Done")


class Task(SQLModel, table=True):
    """A kanban card. Every field except the id is free text and nullable."""
    __tablename__ = "tasks"

    id: Optional[int] = Field(default=None, primary_key=True)
    title: Optional[str] = None
    description: Optional[str] = None
    column_name: Optional[str] = None
