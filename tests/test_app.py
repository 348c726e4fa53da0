import logging

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, inspect
from sqlalchemy.pool import StaticPool

from todo_api.db import session
from todo_api.db.init_db import init_db
from todo_api.main import create_app


def test_init_db_is_idempotent(engine):
    init_db(engine)

    assert {"person", "task"} <= set(inspect(engine).get_table_names())


def test_create_app_leaves_root_logger_alone():
    root = logging.getLogger()
    marker = logging.NullHandler()
    root.addHandler(marker)
    try:
        create_app()
        assert marker in root.handlers
    finally:
        root.removeHandler(marker)


def test_lifespan_sets_up_logging_and_schema(monkeypatch):
    fresh = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    monkeypatch.setattr(session, "engine", fresh)

    with TestClient(create_app()) as client:
        assert {"person", "task"} <= set(inspect(fresh).get_table_names())
        assert any(isinstance(h, logging.StreamHandler) for h in logging.getLogger().handlers)
        assert client.get("/persons").json() == []

    fresh.dispose()
