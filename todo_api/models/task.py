from datetime import date
from typing import TYPE_CHECKING
from sqlalchemy import Date, ForeignKey, Integer, String, Text, Boolean
from sqlalchemy.orm import Mapped, mapped_column, relationship

from ..db.base_class import Base

if TYPE_CHECKING:
    from .person import Person

class Task(Base):
    # store-assigned, increasing with insertion, so ordering by id is store order
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    deadline: Mapped[date | None] = mapped_column(Date, index=True)
    done: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    person_id: Mapped[int | None] = mapped_column(Integer, ForeignKey("person.id", ondelete="SET NULL"), index=True)
    person: Mapped["Person | None"] = relationship(back_populates="tasks")
