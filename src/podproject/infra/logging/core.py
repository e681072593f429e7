from __future__ import annotations

"""
Logging Lifecycle.

Idempotent setup of the root logger for CLI runs. Records are pushed onto a
queue by a single QueueHandler and written by a QueueListener thread to
stderr and, when requested, a rotating log file. Every handler installed here
is tagged so teardown never touches handlers owned by the host application.
"""

import atexit
import logging
import os
import queue
import sys
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from typing import List, Optional

from podproject.infra.logging.config import LoggingConfig

_HANDLER_TAG_ATTR: str = "_podproject_handler"
_CONFIGURED_FLAG_ATTR: str = "_podproject_configured"
_QUEUE_LISTENER_ATTR: str = "_podproject_queue_listener"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once; later calls are no-ops unless `force` is set.

    Args:
        cfg: Logging settings.
        force: Tear down our previous handlers and listener, then rebuild them.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    shutdown_logging()
    level = logging.getLevelName(str(cfg.level).upper())
    if not isinstance(level, int):
        level = logging.INFO
    root.setLevel(level)

    sinks: List[logging.Handler] = []
    if cfg.console:
        sinks.append(_tagged(logging.StreamHandler(sys.stderr), level, cfg.console_fmt))
    if cfg.log_file:
        fh = _open_log_file(cfg)
        if fh is not None:
            sinks.append(_tagged(fh, level, cfg.file_fmt))
    if not sinks:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(log_queue, *sinks, respect_handler_level=True)
    listener.start()
    atexit.register(_stop_listener, listener)

    queue_handler = QueueHandler(log_queue)
    setattr(queue_handler, _HANDLER_TAG_ATTR, True)
    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def shutdown_logging() -> None:
    """Flush pending records and detach everything configure_logging installed."""
    root = logging.getLogger()

    _stop_listener(getattr(root, _QUEUE_LISTENER_ATTR, None))
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    for h in list(root.handlers):
        if getattr(h, _HANDLER_TAG_ATTR, False):
            root.removeHandler(h)
            h.close()

    if hasattr(root, _CONFIGURED_FLAG_ATTR):
        delattr(root, _CONFIGURED_FLAG_ATTR)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _tagged(handler: logging.Handler, level: int, fmt: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt))
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def _open_log_file(cfg: LoggingConfig) -> Optional[RotatingFileHandler]:
    """Open the rotating log file; None (with a stderr warning) when it cannot be created."""
    try:
        os.makedirs(os.path.dirname(os.path.abspath(cfg.log_file)), exist_ok=True)
        return RotatingFileHandler(
            cfg.log_file,
            maxBytes=cfg.max_bytes,
            backupCount=cfg.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{cfg.log_file}': {e}\n")
        return None


def _stop_listener(listener: Optional[QueueListener]) -> None:
    # atexit may fire for a listener a test already stopped
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
