import json
import os
from unittest import mock

from sqlalchemy import text

from hello_service import users


def test_list_users_sorted(users_engine):
    rows = users.list_users(users_engine)
    assert rows == [users.User("Ada", "Byron"), users.User("Lee", "Earth")]


def test_user_to_dict():
    assert users.User("Lee", "Earth").to_dict() == {"first_name": "Lee", "last_name": "Earth"}


def test_main_prints_json(tmp_path, capsys):
    path = tmp_path / "users.db"
    env = {"DATABASE_URL": f"sqlite:///{path}"}
    with mock.patch.dict(os.environ, env, clear=True):
        engine = users.build_engine()
        with engine.begin() as conn:
            conn.execute(text("CREATE TABLE users (first_name TEXT, last_name TEXT)"))
            conn.execute(text("INSERT INTO users VALUES ('Lee', 'Earth')"))
        engine.dispose()

        assert users.main() == 0

    assert json.loads(capsys.readouterr().out) == [{"first_name": "Lee", "last_name": "Earth"}]


def test_main_missing_table(tmp_path, capsys):
    env = {"DATABASE_URL": f"sqlite:///{tmp_path / 'empty.db'}"}
    with mock.patch.dict(os.environ, env, clear=True):
        assert users.main() == 1
    assert capsys.readouterr().out == ""


def test_main_config_error(capsys):
    with mock.patch.dict(os.environ, {}, clear=True):
        assert users.main() == 2
    assert capsys.readouterr().out == ""


def test_main_malformed_url(capsys):
    with mock.patch.dict(os.environ, {"DATABASE_URL": "not a url"}, clear=True):
        assert users.main() == 1
    assert capsys.readouterr().out == ""
