"""Unit tests for queue-based log forwarding."""

import logging
import queue

import pytest

from student_records.gui.utils.logging_utils import (
    APP_LOGGER, QueueLogHandler, attach_queue_handler, detach_queue_handler, drain_log_queue,
)


@pytest.fixture
def log_queue():
    return queue.Queue()


class TestQueueLogHandler:
    """Tests for QueueLogHandler and helpers."""

    def test_emit_when_debug_then_mapped_to_info(self, log_queue):
        handler = QueueLogHandler(log_queue, level=logging.DEBUG)
        record = logging.LogRecord("x", logging.DEBUG, __file__, 1, "hello %s", ("world",), None)
        handler.emit(record)
        assert log_queue.get_nowait() == ("hello world", "INFO")

    def test_attach_when_child_logs_then_queued(self, log_queue):
        handler = attach_queue_handler(log_queue)
        try:
            logging.getLogger(f"{APP_LOGGER}.core.service").warning("disk full")
        finally:
            detach_queue_handler(handler)
        assert log_queue.get_nowait() == ("disk full", "WARNING")

    def test_detach_when_removed_then_nothing_queued(self, log_queue):
        handler = attach_queue_handler(log_queue)
        detach_queue_handler(handler)
        logging.getLogger(APP_LOGGER).warning("ignored")
        assert log_queue.empty()

    def test_drain_when_entries_then_sink_gets_level_first(self, log_queue):
        log_queue.put(("one", "INFO"))
        log_queue.put(("two", "ERROR"))
        received = []
        assert drain_log_queue(log_queue, lambda level, msg: received.append((level, msg))) == 2
        assert received == [("INFO", "one"), ("ERROR", "two")]

    def test_drain_when_limit_then_rest_kept(self, log_queue):
        for i in range(5):
            log_queue.put((str(i), "INFO"))
        assert drain_log_queue(log_queue, lambda level, msg: None, limit=3) == 3
        assert log_queue.qsize() == 2
