import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


class ConfigError(RuntimeError):
    """Missing or invalid configuration."""


def _env_int(var: str, default: int) -> int:
    try:
        return int(os.environ.get(var, default))
    except (TypeError, ValueError):
        return default


def _env_required(var: str) -> str:
    value = os.environ.get(var, "")
    if not value:
        raise ConfigError(f"{var} is not set (define it in the environment or .env)")
    return value


@dataclass(frozen=True)
class DBSettings:
    host: str
    port: int
    database: str
    user: str
    password: str
    driver: str = "postgresql+psycopg2"
    connect_timeout: int = 10
    connect_attempts: int = 1
    url: Optional[str] = None


@dataclass(frozen=True)
class LogSettings:
    level: str = "INFO"
    file: Optional[str] = None


@dataclass(frozen=True)
class ApiSettings:
    host: str = "0.0.0.0"
    port: int = 8000


def get_db_settings() -> DBSettings:
    url = os.environ.get("DATABASE_URL", "").strip() or None
    return DBSettings(
        host=os.environ.get("PGHOST", "localhost"),
        port=_env_int("PGPORT", 5432),
        database=os.environ.get("PGDATABASE", "testdb"),
        user=os.environ.get("PGUSER", "postgres"),
        # a full URL carries its own credentials
        password=os.environ.get("PGPASSWORD", "") if url else _env_required("PGPASSWORD"),
        driver=os.environ.get("DB_DRIVER", "postgresql+psycopg2"),
        connect_timeout=_env_int("DB_CONNECT_TIMEOUT", 10),
        connect_attempts=max(1, _env_int("DB_CONNECT_ATTEMPTS", 1)),
        url=url,
    )


def get_log_settings() -> LogSettings:
    return LogSettings(
        level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        file=os.environ.get("LOG_FILE") or None,
    )


def get_api_settings() -> ApiSettings:
    return ApiSettings(
        host=os.environ.get("API_HOST", "0.0.0.0"),
        port=_env_int("API_PORT", 8000),
    )
