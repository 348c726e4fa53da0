from .person_repository import PersonRepository
from .protocols import PersonStore, TaskStore
from .task_repository import TaskRepository

__all__ = [
    "PersonRepository",
    "TaskRepository",
    "PersonStore",
    "TaskStore",
]
