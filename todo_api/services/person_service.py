import logging

from ..core.exceptions import DataNotFoundError
from ..models.person import Person
from ..repositories.protocols import PersonStore
from ..schemas.person import PersonForm, PersonView

logger = logging.getLogger(__name__)


class PersonService:
    def __init__(self, person_repository: PersonStore) -> None:
        self.person_repository = person_repository

    def create(self, form: PersonForm) -> PersonView:
        person = self.person_repository.save(Person(name=form.name))
        logger.info(f"Person created: id={person.id}, name={person.name}")
        return PersonView.model_validate(person)

    def find_by_id(self, person_id: int) -> PersonView:
        person = self.person_repository.find_by_id(person_id)
        if not person:
            logger.warning(f"Person not found: id={person_id}")
            raise DataNotFoundError("No Person matching that ID")
        return PersonView.model_validate(person)

    def find_all(self) -> list[PersonView]:
        return [PersonView.model_validate(p) for p in self.person_repository.find_all()]

    def delete(self, person_id: int) -> None:
        # owned tasks are kept and become unassigned
        self.person_repository.delete_by_id(person_id)
        logger.info(f"Person deleted (if present): id={person_id}")
