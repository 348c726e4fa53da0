from pydantic import BaseModel, Field
from .common import ORMModel
class PersonForm(BaseModel):
    name: str = Field(min_length=1, max_length=128)
class PersonRef(BaseModel):
    id: int
class PersonView(ORMModel):
    id: int
    name: str
