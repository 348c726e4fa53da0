from ..models.person import Person
from ..models.task import Task
from ..db.base_class import Base
