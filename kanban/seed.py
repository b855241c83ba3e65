"""Populate an empty board with one sample task per default column.

Usage:
    python -m kanban.seed
"""
import logging

from sqlalchemy.orm import Session

from .config import LOG_FILE, LOG_LEVEL
from .database import create_db_engine, create_tables, get_session
from .logging_setup import setup_logging
from .models import DEFAULT_COLUMNS, Task
from .repository import TaskRepository

logger = logging.getLogger(__name__)

SAMPLE_TASKS = {
    "To Do": ("Write spec", "Describe the task API contract"),
    "In Progress": ("Build API", None),
    "Done": ("Set up repository", None),
}


def seed_tasks(session: Session) -> int:
    """Insert the sample tasks if the board is empty. Returns how many were added."""
    repo = TaskRepository(session)
    if repo.list_all():
        logger.info("Tasks already present, skipping seed")
        return 0

    for column in DEFAULT_COLUMNS:
        title, description = SAMPLE_TASKS[column]
        repo.save(Task(title=title, description=description, column_name=column))
    logger.info("Seeded %d tasks", len(DEFAULT_COLUMNS))
    return len(DEFAULT_COLUMNS)


def main() -> None:
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)
    engine = create_db_engine()
    create_tables(engine)
    with get_session(engine) as session:
        added = seed_tasks(session)
    print(f"Seeded {added} task(s)")


if __name__ == "__main__":
    main()
