from datetime import date
from pydantic import BaseModel, Field
from .common import ORMModel
from .person import PersonRef, PersonView
class TaskForm(BaseModel):
    id: int | None = None
    title: str = Field(min_length=1, max_length=200)
    description: str | None = None
    deadline: date | None = None
    done: bool = False
    person: PersonRef | None = None
class TaskView(ORMModel):
    id: int
    title: str
    description: str | None = None
    deadline: date | None = None
    done: bool
    person: PersonView | None = None
