"""Route package and uvicorn log records through one shared set of handlers."""

import logging
from pathlib import Path
from typing import Optional, Union

from .config import I18nOptions

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PACKAGE_LOGGER = "universe_i18n"
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_HANDLER_MARK = "_universe_i18n_handler"


def resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def _build_handlers(log_dir: Optional[str]) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_dir:
        log_path = Path(log_dir) / f"{PACKAGE_LOGGER}.log"
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    formatter = logging.Formatter(LOG_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARK, True)
    return handlers


def configure_logging(options: I18nOptions, *, level: Union[int, str, None] = None) -> list[logging.Handler]:
    """
    Attach stream (and, with ``options.log_dir``, file) handlers to the
    package logger and to uvicorn's loggers.

    Handlers installed by an earlier call are replaced, so reconfiguring does
    not duplicate output. Returns the installed handlers.
    """
    resolved = resolve_level(options.log_level if level is None else level)
    handlers = _build_handlers(options.log_dir)

    stale: set[logging.Handler] = set()
    for name in (PACKAGE_LOGGER, *SERVER_LOGGERS):
        logger = logging.getLogger(name)
        for handler in [h for h in logger.handlers if getattr(h, _HANDLER_MARK, False)]:
            logger.removeHandler(handler)
            stale.add(handler)
        for handler in handlers:
            logger.addHandler(handler)
        logger.setLevel(resolved)
        logger.propagate = False

    for handler in stale:
        handler.close()
    return handlers
