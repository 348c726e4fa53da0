from datetime import date
from sqlalchemy import select
from sqlalchemy.orm import Session
import logging
from ..models.task import Task

logger = logging.getLogger(__name__)

class TaskRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def _list(self, *criteria) -> list[Task]:
        stmt = select(Task).where(*criteria).order_by(Task.id)
        return list(self.db.execute(stmt).scalars())

    def save(self, task: Task) -> Task:
        try:
            self.db.add(task)
            self.db.commit()
            self.db.refresh(task)
            return task
        except Exception as e:
            logger.error(f"Error saving task {task.title!r}: {str(e)}", exc_info=True)
            self.db.rollback()
            raise

    def find_by_id(self, task_id: int) -> Task | None:
        return self.db.get(Task, task_id)

    def delete_by_id(self, task_id: int) -> None:
        task = self.find_by_id(task_id)
        if not task:
            return
        try:
            self.db.delete(task)
            self.db.commit()
        except Exception as e:
            logger.error(f"Error deleting task {task_id}: {str(e)}", exc_info=True)
            self.db.rollback()
            raise

    def find_by_person_id(self, person_id: int) -> list[Task]:
        return self._list(Task.person_id == person_id)

    def find_by_deadline_between(self, start: date, end: date) -> list[Task]:
        return self._list(Task.deadline.between(start, end))

    def find_by_person_is_null(self) -> list[Task]:
        return self._list(Task.person_id.is_(None))

    def select_unfinished_and_overdue(self, today: date | None = None) -> list[Task]:
        today = today or date.today()
        return self._list(Task.done.is_(False), Task.deadline < today)
