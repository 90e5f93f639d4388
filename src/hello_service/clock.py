from datetime import datetime, time
from typing import Callable, Optional

SUFFIX = " - hello world"


def current_local_time(now: Optional[Callable[[], datetime]] = None) -> time:
    """Local time of day, no date and no tz offset."""
    dt = (now or datetime.now)()
    return dt.time()


def format_local_time(t: time) -> str:
    # HH:MM:SS.mmm, always with milliseconds
    return t.isoformat(timespec="milliseconds")


def hello_line(t: Optional[time] = None) -> str:
    if t is None:
        t = current_local_time()
    return f"{format_local_time(t)}{SUFFIX}"


def main() -> int:
    print(hello_line())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
