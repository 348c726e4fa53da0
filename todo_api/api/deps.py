from typing import Generator
from fastapi import Depends
from sqlalchemy.orm import Session
from ..db.session import SessionLocal
from ..repositories import PersonRepository, TaskRepository
from ..services.person_service import PersonService
from ..services.task_service import TaskService
def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
def get_task_service(db: Session = Depends(get_db)) -> TaskService:
    return TaskService(TaskRepository(db), PersonRepository(db))
def get_person_service(db: Session = Depends(get_db)) -> PersonService:
    return PersonService(PersonRepository(db))
