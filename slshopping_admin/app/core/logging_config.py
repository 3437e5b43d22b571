"""
Root logger setup for the admin console.

Console output always, plus a file when ``LOG_FILE`` is configured.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Form parsing logs every multipart chunk at DEBUG.
QUIET_LOGGERS = ("multipart", "python_multipart")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Attach the console handlers to the root logger, once per process.

    ``level`` is a level name in any case; unknown names mean INFO.  The
    directory of ``logfile`` is created if needed.
    """
    root = logging.getLogger()
    if root.handlers:
        # pytest, or a second create_app() call
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(root.level, logging.WARNING))
