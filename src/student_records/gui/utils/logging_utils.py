"""
Logging utilities for redirecting logs to a queue for GUI display.
"""
from __future__ import annotations

import logging
from queue import Queue, Empty
from typing import Callable, Optional

APP_LOGGER = "student_records"


class QueueLogHandler(logging.Handler):
    """
    A logging handler that sends log records to a queue.

    Used to capture logs from the record service and display them in the
    GUI console.
    """

    def __init__(self, log_queue: Queue, level: int = logging.INFO):
        super().__init__(level)
        self.log_queue = log_queue
        self.setFormatter(logging.Formatter("%(message)s"))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
            level = record.levelname
            # Map DEBUG to INFO for GUI display
            if level == "DEBUG":
                level = "INFO"
            self.log_queue.put((message, level))
        except Exception:
            self.handleError(record)


def attach_queue_handler(log_queue: Queue, logger_name: Optional[str] = APP_LOGGER) -> QueueLogHandler:
    """
    Attach a QueueLogHandler to the specified logger (the app logger by default).

    The logger level is lowered to INFO if it would otherwise drop INFO records.

    Args:
        log_queue: Queue to send log messages to.
        logger_name: Name of logger to attach to. None = root logger.

    Returns:
        The attached handler (for later removal).
    """
    logger = logging.getLogger(logger_name)
    handler = QueueLogHandler(log_queue)
    logger.addHandler(handler)
    if logger.getEffectiveLevel() > logging.INFO:
        logger.setLevel(logging.INFO)
    return handler


def detach_queue_handler(handler: QueueLogHandler, logger_name: Optional[str] = APP_LOGGER) -> None:
    """
    Remove a QueueLogHandler from the specified logger.

    Args:
        handler: The handler to remove.
        logger_name: Name of logger to detach from. None = root logger.
    """
    logger = logging.getLogger(logger_name)
    logger.removeHandler(handler)


def drain_log_queue(log_queue: Queue, sink: Callable[[str, str], None], limit: int = 200) -> int:
    """
    Pass queued (message, level) pairs to sink as (level, message).

    Args:
        log_queue: Queue filled by QueueLogHandler.
        sink: Callable receiving level and message, e.g. ConsoleWidget.append_log.
        limit: Maximum entries handled per call, so the GUI stays responsive.

    Returns:
        Number of entries drained.
    """
    drained = 0
    while drained < limit:
        try:
            message, level = log_queue.get_nowait()
        except Empty:
            break
        sink(level, message)
        drained += 1
    return drained
