from .person import Person
from .task import Task
