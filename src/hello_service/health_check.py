import argparse
import logging
import sys
import traceback
from typing import List, Optional, TextIO

from hello_service.config import ConfigError, DBSettings, get_db_settings
from hello_service.db import build_engine, connect_with_retry, describe_error, safe_url
from hello_service.logging import setup_logging

log = logging.getLogger("hello.health_check")

SUCCESS_MESSAGE = "Opened database successfully"

EXIT_OK = 0
EXIT_CONNECT_FAILED = 1
EXIT_CONFIG = 2


def run_db_check(
    settings: Optional[DBSettings] = None,
    attempts: Optional[int] = None,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> int:
    """
    Open one connection to the configured database and release it.

    Prints SUCCESS_MESSAGE on `out` when the connection opens. Any failure
    writes the traceback plus a "<ExceptionClass>: <message>" line on `err`
    and maps to a non-zero exit code.
    """
    out = out or sys.stdout
    err = err or sys.stderr

    try:
        s = settings or get_db_settings()
    except ConfigError as e:
        log.error("Invalid configuration: %s", e)
        print(describe_error(e), file=err)
        return EXIT_CONFIG

    if attempts is None:
        attempts = s.connect_attempts
    engine = None
    try:
        engine = build_engine(s)
        log.info("Connecting | url=%s | attempts=%d", safe_url(engine), attempts)
        connect_with_retry(engine, attempts)
    except Exception as e:
        log.error("Database connection failed: %s", e)
        traceback.print_exc(file=err)
        print(describe_error(e), file=err)
        return EXIT_CONNECT_FAILED
    finally:
        if engine is not None:
            engine.dispose()

    print(SUCCESS_MESSAGE, file=out)
    return EXIT_OK


def _attempts(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return n


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Check that the configured database accepts connections.")
    parser.add_argument(
        "--attempts",
        type=_attempts,
        default=None,
        help="connection attempts before giving up (default: DB_CONNECT_ATTEMPTS or 1)",
    )
    args = parser.parse_args(argv)

    setup_logging()
    return run_db_check(attempts=args.attempts)


if __name__ == "__main__":
    raise SystemExit(main())
