from typing import TYPE_CHECKING
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from ..db.base_class import Base

if TYPE_CHECKING:
    from .task import Task

class Person(Base):
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(128), index=True, nullable=False)

    tasks: Mapped[list["Task"]] = relationship(back_populates="person")
