import json
import logging
from dataclasses import asdict, dataclass
from typing import Dict, List

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from hello_service.config import ConfigError
from hello_service.db import build_engine
from hello_service.logging import setup_logging

log = logging.getLogger("hello.users")


@dataclass(frozen=True)
class User:
    first_name: str
    last_name: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


def list_users(engine: Engine) -> List[User]:
    q = text("""
        SELECT first_name, last_name
        FROM users
        ORDER BY last_name, first_name
    """)
    with engine.connect() as conn:
        rows = conn.execute(q).mappings().all()
    return [User(first_name=r["first_name"], last_name=r["last_name"]) for r in rows]


def main() -> int:
    setup_logging()
    try:
        engine = build_engine()
    except ConfigError as e:
        log.error("Invalid configuration: %s", e)
        return 2
    except SQLAlchemyError as e:
        log.error("Invalid database URL or driver: %s", e)
        return 1

    try:
        users = list_users(engine)
    except SQLAlchemyError as e:
        log.exception("Could not read users: %s", e)
        return 1
    finally:
        engine.dispose()

    print(json.dumps([u.to_dict() for u in users]))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
