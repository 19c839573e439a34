from __future__ import annotations
import logging

from exambuilder.config import LOG_LEVEL

# Third-party loggers that are too chatty below WARNING
_QUIET_LOGGERS = ("multipart", "python_multipart")


def setup_console_logging(level: int | str | None = None) -> None:
    """
    Call once at app start. Prints logs to console at LOG_LEVEL unless a
    level is given.
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    root = logging.getLogger()
    if root.handlers:
        # already configured by uvicorn or pytest
        root.setLevel(level)
        return

    root.setLevel(level)
    h = logging.StreamHandler()
    fmt = logging.Formatter(
        "[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    h.setFormatter(fmt)
    root.addHandler(h)
