import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

from hello_service.config import get_log_settings

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Root logger -> stderr, plus a rotating file when LOG_FILE is set.
    stdout stays free for the command output. Safe to call more than once.
    """
    settings = get_log_settings()
    level = (level or settings.level).upper()
    log_file = log_file or settings.file

    root = logging.getLogger()
    resolved = logging.getLevelName(level)
    if not isinstance(resolved, int):
        resolved = logging.INFO
    root.setLevel(resolved)

    formatter = logging.Formatter(FORMAT)

    if log_file and not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        fh = RotatingFileHandler(log_file, maxBytes=5_000_000, backupCount=5, encoding="utf-8")
        fh.setFormatter(formatter)
        root.addHandler(fh)

    if not any(type(h) is logging.StreamHandler for h in root.handlers):
        sh = logging.StreamHandler()
        sh.setFormatter(formatter)
        root.addHandler(sh)

    # engine echo is noisy at INFO
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
