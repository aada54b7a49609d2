from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(*, level: str = "INFO", log_dir: str | Path = ".local/tasks") -> Path:
    """
    Configure root logging with a console handler and a rotating file handler.

    Safe to call more than once: handlers installed by a previous call are
    replaced, not duplicated. Returns the log file path.
    """
    lvl = getattr(logging, level.upper(), logging.INFO)

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    logfile = log_dir / "tasks.log"

    root = logging.getLogger()
    root.setLevel(lvl)

    for h in list(root.handlers):
        if getattr(h, "_tasks_handler", False):
            root.removeHandler(h)
            h.close()

    fmt = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    # File: rotate at 5MB, keep 7 backups
    fh = RotatingFileHandler(logfile, maxBytes=5_000_000, backupCount=7, encoding="utf-8")
    fh.setFormatter(fmt)
    fh.setLevel(lvl)
    fh._tasks_handler = True  # type: ignore[attr-defined]
    root.addHandler(fh)

    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    ch.setLevel(lvl)
    ch._tasks_handler = True  # type: ignore[attr-defined]
    root.addHandler(ch)

    logging.captureWarnings(True)

    logging.getLogger(__name__).info("Logging initialized at %s; file: %s", level.upper(), logfile)
    return logfile
