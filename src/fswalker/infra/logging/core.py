from __future__ import annotations

"""
Logging Core Orchestrator.

Idempotent setup of the root logger. Records are pushed through a queue
and written by a background QueueListener, so a slow log file never
stalls a directory walk.
"""

import atexit
import logging
import os
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from fswalker.domain.constants import APP_NAME
from fswalker.infra.fs import get_user_data_dir
from fswalker.infra.logging.config import _LEVEL_MAP, LoggingConfig
from fswalker.infra.logging.handlers import (
    _create_rotating_file_handler,
    _create_stream_handler,
    _is_our_handler,
    _tag_handler,
)

_CONFIGURED_FLAG_ATTR: str = "_fswalker_configured"
_QUEUE_LISTENER_ATTR: str = "_fswalker_queue_listener"

# ==============================================================================
# PUBLIC API
# ==============================================================================

def get_default_log_path(file_name: str = f"{APP_NAME}.log") -> str:
    """Standard diagnostic log path inside the user data directory."""
    return os.path.join(get_user_data_dir(), "logs", file_name)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Configure the root logger once.

    Later calls are no-ops unless force is set, in which case the handlers
    installed previously are detached and their listener stopped first.

    Args:
        cfg: Logging settings.
        force: Re-initialize even if already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)

    shutdown_logging()

    handlers_list: List[logging.Handler] = []
    if cfg.console:
        handlers_list.append(_create_stream_handler(level_int, logging.Formatter(cfg.console_fmt)))

    if cfg.log_file:
        fh = _create_rotating_file_handler(
            cfg.log_file,
            level_int,
            logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt),
            cfg.max_bytes,
            cfg.backup_count,
        )
        if fh:
            handlers_list.append(fh)

    if not handlers_list:
        return root

    log_queue: queue.Queue = queue.Queue(-1)
    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()
    root.addHandler(queue_handler)

    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    atexit.register(_safe_stop_listener, listener)

    return root


def shutdown_logging() -> None:
    """
    Flush pending records and detach every handler fswalker installed.

    Safe to call repeatedly, or when logging was never configured.
    """
    root = logging.getLogger()

    listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
    _safe_stop_listener(listener)
    setattr(root, _QUEUE_LISTENER_ATTR, None)

    if listener is not None:
        for h in listener.handlers:
            h.close()

    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()

    setattr(root, _CONFIGURED_FLAG_ATTR, False)


def get_logger(name: str) -> logging.Logger:
    """Named logger under the globally configured root."""
    return logging.getLogger(name)

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a QueueListener, tolerating one that was already stopped."""
    if listener is None:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()
