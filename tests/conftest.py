import logging
from logging.handlers import RotatingFileHandler

import pytest
from sqlalchemy import text

from hello_service.config import DBSettings
from hello_service.db import build_engine


def sqlite_settings(path) -> DBSettings:
    return DBSettings(
        host="",
        port=0,
        database="",
        user="",
        password="",
        url=f"sqlite:///{path}",
    )


@pytest.fixture
def db_settings(tmp_path) -> DBSettings:
    return sqlite_settings(tmp_path / "hello.db")


@pytest.fixture
def missing_db_settings(tmp_path) -> DBSettings:
    # sqlite cannot create a file inside a directory that does not exist
    return sqlite_settings(tmp_path / "missing" / "hello.db")


@pytest.fixture
def engine(db_settings):
    engine = build_engine(db_settings)
    yield engine
    engine.dispose()


@pytest.fixture
def users_engine(engine):
    with engine.begin() as conn:
        conn.execute(text("CREATE TABLE users (first_name TEXT, last_name TEXT)"))
        conn.execute(
            text("INSERT INTO users (first_name, last_name) VALUES (:f, :l)"),
            [{"f": "Lee", "l": "Earth"}, {"f": "Ada", "l": "Byron"}],
        )
    return engine


@pytest.fixture(autouse=True)
def reset_root_handlers():
    root = logging.getLogger()
    before = list(root.handlers)
    level = root.level
    yield
    root.setLevel(level)
    for h in list(root.handlers):
        if h not in before and type(h) in (logging.StreamHandler, RotatingFileHandler):
            root.removeHandler(h)
            h.close()
