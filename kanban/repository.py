import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from .models import Task

logger = logging.getLogger(__name__)


class TaskRepository:
    """Keyed access to stored tasks over a single SQLAlchemy session.

    Every mutating call commits. Nothing here guards the lookup-then-write
    sequences the HTTP layer performs.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[Task]:
        return self.db.query(Task).order_by(Task.id).all()

    def save(self, task: Task) -> Task:
        """Insert ``task`` when it has no id, otherwise overwrite the row with that id."""
        if task.id is None:
            self.db.add(task)
        else:
            task = self.db.merge(task)
        self.db.commit()
        self.db.refresh(task)
        return task

    def find_by_id(self, task_id: int) -> Optional[Task]:
        return self.db.get(Task, task_id)

    def exists_by_id(self, task_id: int) -> bool:
        return self.db.query(Task.id).filter(Task.id == task_id).first() is not None

    def delete_by_id(self, task_id: int) -> None:
        """Remove the task; a missing id is a no-op."""
        deleted = self.db.query(Task).filter(Task.id == task_id).delete()
        self.db.commit()
        if not deleted:
            logger.debug("delete_by_id(%s) matched no rows", task_id)
