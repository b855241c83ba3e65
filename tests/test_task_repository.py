# tests/test_task_repository.py

from __future__ import annotations

from sqlalchemy.orm import Session

from kanban.models import Task
from kanban.repository import TaskRepository


def test_save_assigns_ids_and_list_all_returns_everything(session: Session) -> None:
    repo = TaskRepository(session)

    first = repo.save(Task(title="a", column_name="To Do"))
    second = repo.save(Task(title="b", column_name="Done"))

    assert first.id is not None
    assert second.id is not None
    assert first.id != second.id
    assert [t.title for t in repo.list_all()] == ["a", "b"]


def test_save_with_existing_id_overwrites_row(session: Session) -> None:
    repo = TaskRepository(session)
    created = repo.save(Task(title="old", description="keep", column_name="To Do"))
    task_id = created.id
    session.expunge_all()

    repo.save(Task(id=task_id, title="new", description="keep", column_name="Done"))

    stored = repo.find_by_id(task_id)
    assert stored is not None
    assert stored.title == "new"
    assert stored.column_name == "Done"
    assert len(repo.list_all()) == 1


def test_find_and_exists_by_id(session: Session) -> None:
    repo = TaskRepository(session)
    task = repo.save(Task(title="x"))

    assert repo.find_by_id(task.id) is task
    assert repo.exists_by_id(task.id) is True
    assert repo.find_by_id(task.id + 100) is None
    assert repo.exists_by_id(task.id + 100) is False


def test_delete_by_id_removes_row_and_ignores_unknown_ids(session: Session) -> None:
    repo = TaskRepository(session)
    keep = repo.save(Task(title="keep"))
    drop = repo.save(Task(title="drop"))

    repo.delete_by_id(drop.id)
    repo.delete_by_id(9999)

    assert repo.exists_by_id(drop.id) is False
    assert [t.id for t in repo.list_all()] == [keep.id]


def test_nullable_fields_round_trip_as_none(session: Session) -> None:
    repo = TaskRepository(session)
    task = repo.save(Task())

    assert task.id is not None
    assert task.title is None
    assert task.description is None
    assert task.column_name is None
