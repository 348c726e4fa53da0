"""Shared fixtures: in-memory SQLite per test, seeded people, HTTP client."""

from collections.abc import Generator
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from todo_api.api.deps import get_db
from todo_api.db.base import Base
from todo_api.db.session import enable_sqlite_foreign_keys
from todo_api.main import app
from todo_api.models.person import Person
from todo_api.repositories import PersonRepository, TaskRepository
from todo_api.services.person_service import PersonService
from todo_api.services.task_service import TaskService

TODAY = date(2024, 5, 10)


@pytest.fixture()
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def db(engine) -> Generator[Session, None, None]:
    session = sessionmaker(bind=engine, autoflush=False, autocommit=False)()
    yield session
    session.close()


@pytest.fixture()
def task_repository(db: Session) -> TaskRepository:
    return TaskRepository(db)


@pytest.fixture()
def person_repository(db: Session) -> PersonRepository:
    return PersonRepository(db)


@pytest.fixture()
def task_service(task_repository, person_repository) -> TaskService:
    return TaskService(task_repository, person_repository, today=lambda: TODAY)


@pytest.fixture()
def person_service(person_repository) -> PersonService:
    return PersonService(person_repository)


@pytest.fixture()
def alice(person_repository) -> Person:
    return person_repository.save(Person(name="Alice"))


@pytest.fixture()
def bob(person_repository) -> Person:
    return person_repository.save(Person(name="Bob"))


@pytest.fixture()
def client(engine) -> Generator[TestClient, None, None]:
    testing_session = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    def override_get_db():
        session = testing_session()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
