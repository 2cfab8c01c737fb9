from __future__ import annotations

"""
Logging Lifecycle.

Records are handed to a QueueHandler on the root logger and written to
stderr (and the optional log file) by a QueueListener thread. The CLI
configures logging once per run and calls shutdown_logging() before
returning its exit code, so every diagnostic is written by then.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from dirlevels.infra.logging.config import LoggingConfig
from dirlevels.infra.logging.handlers import create_console_handler, create_file_handler

# Handler and listener installed by the current configuration, if any
_queue_handler: Optional[QueueHandler] = None
_listener: Optional[QueueListener] = None


def configure_logging(cfg: LoggingConfig) -> logging.Logger:
    """
    Route root logger records through a queue to stderr and the optional log file.

    Calling it again replaces the previous configuration.

    Args:
        cfg: Settings for this run.

    Returns:
        logging.Logger: The root logger.
    """
    global _queue_handler, _listener

    shutdown_logging()

    level = _parse_level(cfg.level)
    root = logging.getLogger()
    root.setLevel(level)

    handlers: List[logging.Handler] = [create_console_handler(level)]
    if cfg.log_file:
        fh = create_file_handler(cfg.log_file, level, cfg.max_bytes, cfg.backup_count)
        if fh is not None:
            handlers.append(fh)

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    _queue_handler = QueueHandler(log_queue)
    _listener = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _listener.start()
    root.addHandler(_queue_handler)

    return root


def get_logger(name: str) -> logging.Logger:
    """Return the named logger (usually ``__name__``)."""
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """
    Drain pending records, then detach and close the installed handlers.

    Safe to call when logging was never configured or is already shut down.
    """
    global _queue_handler, _listener

    if _queue_handler is not None:
        logging.getLogger().removeHandler(_queue_handler)
        _queue_handler.close()
        _queue_handler = None

    if _listener is not None:
        _listener.stop()
        for handler in _listener.handlers:
            handler.close()
        _listener = None


def _parse_level(level: str) -> int:
    value = logging.getLevelName(str(level or "INFO").strip().upper())
    return value if isinstance(value, int) else logging.INFO


# Flush records still queued when the interpreter exits without shutdown_logging()
atexit.register(shutdown_logging)
