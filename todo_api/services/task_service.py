import logging
from datetime import date
from typing import Callable

from ..core.exceptions import DataNotFoundError
from ..models.task import Task
from ..repositories.protocols import PersonStore, TaskStore
from ..schemas.person import PersonView
from ..schemas.task import TaskForm, TaskView

logger = logging.getLogger(__name__)


def to_task_view(task: Task) -> TaskView:
    person = PersonView(id=task.person.id, name=task.person.name) if task.person else None
    return TaskView(
        id=task.id,
        title=task.title,
        description=task.description,
        deadline=task.deadline,
        done=task.done,
        person=person,
    )


def to_task_views(tasks: list[Task]) -> list[TaskView]:
    return [to_task_view(t) for t in tasks]


class TaskService:
    """Task operations on top of a task store and a person store.

    Holds no state of its own between calls; everything lives in the stores.
    """

    def __init__(
        self,
        task_repository: TaskStore,
        person_repository: PersonStore,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.task_repository = task_repository
        self.person_repository = person_repository
        self.today = today

    def create(self, form: TaskForm) -> TaskView:
        if form.person is None:
            raise ValueError("Task must reference a person")

        person = self.person_repository.find_by_id(form.person.id)
        if not person:
            logger.warning(f"Create task failed: no person with id={form.person.id}")
            raise DataNotFoundError("No Person matching that ID")

        task = Task(
            title=form.title,
            description=form.description,
            deadline=form.deadline,
            done=form.done,
            person=person,
        )
        saved = self.task_repository.save(task)
        logger.info(f"Task created: id={saved.id}, person_id={person.id}")
        return to_task_view(saved)

    def find_by_id(self, task_id: int) -> TaskView:
        task = self.task_repository.find_by_id(task_id)
        if not task:
            logger.warning(f"Task not found: id={task_id}")
            raise DataNotFoundError("Task not found")
        return to_task_view(task)

    def update(self, form: TaskForm) -> None:
        if form.id is None:
            raise ValueError("Task id is required for update")

        existing = self.task_repository.find_by_id(form.id)
        if not existing:
            logger.warning(f"Update failed: task not found id={form.id}")
            raise DataNotFoundError("Task not found")

        # owner is never changed on update
        existing.title = form.title
        existing.description = form.description
        existing.deadline = form.deadline
        existing.done = form.done

        self.task_repository.save(existing)
        logger.info(f"Task updated: id={existing.id}")

    def delete(self, task_id: int) -> None:
        self.task_repository.delete_by_id(task_id)
        logger.info(f"Task deleted (if present): id={task_id}")

    def find_tasks_by_person_id(self, person_id: int) -> list[TaskView]:
        return to_task_views(self.task_repository.find_by_person_id(person_id))

    def find_tasks_between_start_and_end_date(self, start: date, end: date) -> list[TaskView]:
        return to_task_views(self.task_repository.find_by_deadline_between(start, end))

    def find_all_unassigned_todo_items(self) -> list[TaskView]:
        return to_task_views(self.task_repository.find_by_person_is_null())

    def find_all_unfinished_and_overdue(self) -> list[TaskView]:
        return to_task_views(self.task_repository.select_unfinished_and_overdue(self.today()))
