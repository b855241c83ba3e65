import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..models import Task as TaskModel
from ..repository import TaskRepository
from ..schemas.task import Task as TaskSchema, TaskCreate, TaskUpdate

router = APIRouter()

logger = logging.getLogger(__name__)


def get_task_repository(db: Session = Depends(get_db)) -> TaskRepository:
    """Dependency handing each request a store bound to its own session."""
    return TaskRepository(db)


@router.get("/tasks", response_model=List[TaskSchema])
def get_all_tasks(repo: TaskRepository = Depends(get_task_repository)):
    """Return every task. No filtering, sorting or paging."""
    tasks = repo.list_all()
    logger.debug("Listing %d tasks", len(tasks))
    return tasks


@router.post("/tasks", response_model=TaskSchema)
def create_task(
    task: TaskCreate,
    repo: TaskRepository = Depends(get_task_repository),
):
    """Create a task. The store assigns the id; any id in the body is ignored."""
    db_task = TaskModel(
        title=task.title,
        description=task.description,
        column_name=task.column_name,
    )
    db_task = repo.save(db_task)
    logger.info("Created task %s in column %r", db_task.id, db_task.column_name)
    return db_task


@router.put("/tasks/{task_id}", response_model=TaskSchema)
def update_task(
    task_id: int,
    task_update: TaskUpdate,
    repo: TaskRepository = Depends(get_task_repository),
):
    """Overwrite title and columnName of an existing task.

    The description is left as stored, and fields missing from the body are
    written as null.
    """
    existing = repo.find_by_id(task_id)
    if existing is None:
        logger.warning("Update of unknown task %s", task_id)
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    existing.title = task_update.title
    existing.column_name = task_update.column_name
    existing = repo.save(existing)
    logger.info("Updated task %s, column now %r", task_id, existing.column_name)
    return existing


@router.delete(
    "/tasks/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
def delete_task(
    task_id: int,
    repo: TaskRepository = Depends(get_task_repository),
):
    if not repo.exists_by_id(task_id):
        logger.warning("Delete of unknown task %s", task_id)
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    repo.delete_by_id(task_id)
    logger.info("Deleted task %s", task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
