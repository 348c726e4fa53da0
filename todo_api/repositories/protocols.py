"""Store interfaces used by the services.

Structural types, so any object with these methods can stand in for the
SQLAlchemy repositories.
"""

from datetime import date
from typing import Protocol

from ..models.person import Person
from ..models.task import Task


class PersonStore(Protocol):
    def find_by_id(self, person_id: int) -> Person | None:
        ...

    def find_all(self) -> list[Person]:
        ...

    def save(self, person: Person) -> Person:
        ...

    def delete_by_id(self, person_id: int) -> None:
        ...


class TaskStore(Protocol):
    def save(self, task: Task) -> Task:
        ...

    def find_by_id(self, task_id: int) -> Task | None:
        ...

    def delete_by_id(self, task_id: int) -> None:
        """No-op when the task does not exist."""
        ...

    def find_by_person_id(self, person_id: int) -> list[Task]:
        ...

    def find_by_deadline_between(self, start: date, end: date) -> list[Task]:
        """Inclusive on both ends."""
        ...

    def find_by_person_is_null(self) -> list[Task]:
        ...

    def select_unfinished_and_overdue(self, today: date | None = None) -> list[Task]:
        """Tasks not done whose deadline is strictly before ``today``."""
        ...
