from sqlalchemy import select
from sqlalchemy.orm import Session
import logging
from ..models.person import Person

logger = logging.getLogger(__name__)

class PersonRepository:
    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, person_id: int) -> Person | None:
        return self.db.get(Person, person_id)

    def find_all(self) -> list[Person]:
        return list(self.db.execute(select(Person).order_by(Person.name, Person.id)).scalars())

    def save(self, person: Person) -> Person:
        try:
            self.db.add(person)
            self.db.commit()
            self.db.refresh(person)
            return person
        except Exception as e:
            logger.error(f"Error saving person {person.name!r}: {str(e)}", exc_info=True)
            self.db.rollback()
            raise

    def delete_by_id(self, person_id: int) -> None:
        person = self.find_by_id(person_id)
        if not person:
            return
        try:
            self.db.delete(person)
            self.db.commit()
        except Exception as e:
            logger.error(f"Error deleting person {person_id}: {str(e)}", exc_info=True)
            self.db.rollback()
            raise
