import logging
from typing import Optional, Union

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine, URL, make_url
from sqlalchemy.exc import OperationalError
from tenacity import retry_if_exception_type, Retrying, stop_after_attempt, wait_exponential

from hello_service.config import DBSettings, get_db_settings

log = logging.getLogger("hello.db")


def build_url(settings: Optional[DBSettings] = None) -> URL:
    """
    Connection string for the configured database.
    DATABASE_URL wins when set; otherwise it is composed from the PG* settings,
    so passwords with special characters need no manual quoting.
    """
    s = settings or get_db_settings()
    if s.url:
        return make_url(s.url)
    return URL.create(
        s.driver,
        username=s.user,
        password=s.password,
        host=s.host,
        port=s.port,
        database=s.database,
    )


def build_engine(settings: Optional[DBSettings] = None) -> Engine:
    s = settings or get_db_settings()
    url = build_url(s)

    connect_args = {}
    if url.get_backend_name() == "postgresql":
        connect_args["connect_timeout"] = s.connect_timeout

    engine = create_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=1800,
        connect_args=connect_args,
    )
    return engine


def check_connection(engine: Engine) -> None:
    with engine.connect() as conn:
        conn.execute(text("SELECT 1"))


def connect_with_retry(engine: Engine, attempts: int = 1) -> None:
    retrying = Retrying(
        wait=wait_exponential(multiplier=1, min=1, max=10),
        stop=stop_after_attempt(max(1, attempts)),
        retry=retry_if_exception_type((OperationalError, OSError)),
        before_sleep=lambda state: log.warning(
            "Connect attempt %d/%d failed: %s",
            state.attempt_number, attempts, state.outcome.exception(),
        ),
        reraise=True,
    )
    retrying(check_connection, engine)


def describe_error(exc: BaseException) -> str:
    cls = type(exc)
    name = cls.__qualname__ if cls.__module__ == "builtins" else f"{cls.__module__}.{cls.__qualname__}"
    return f"{name}: {exc}"


def safe_url(engine: Union[Engine, URL]) -> str:
    url = getattr(engine, "url", engine)
    return url.render_as_string(hide_password=True)
