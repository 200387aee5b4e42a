"""
Tests for log capture into the GUI console.
"""

import logging
import queue

from composer_quiz.gui.utils.logging_utils import attach_queue_handler, detach_queue_handler
from composer_quiz.gui.widgets.console_widget import ConsoleWidget


class TestQueueLogHandler:
    """Records are forwarded as (message, level) tuples."""

    def test_emit_when_warning_logged_then_queued_with_level(self):
        log_queue = queue.Queue()
        handler = attach_queue_handler(log_queue, "composer_quiz.test")
        try:
            logging.getLogger("composer_quiz.test").warning("Could not restore composer options")
        finally:
            detach_queue_handler(handler, "composer_quiz.test")

        assert log_queue.get_nowait() == ("Could not restore composer options", "WARNING")

    def test_emit_when_detached_then_nothing_queued(self):
        log_queue = queue.Queue()
        handler = attach_queue_handler(log_queue, "composer_quiz.test")
        detach_queue_handler(handler, "composer_quiz.test")

        logging.getLogger("composer_quiz.test").error("dropped")

        assert log_queue.empty()


class TestConsoleWidget:
    """Console display."""

    def test_append_log_when_called_then_text_shown(self, qtbot):
        console = ConsoleWidget()
        qtbot.addWidget(console)

        console.append_log("ERROR", "Failed to load composers")

        assert "[ERROR] Failed to load composers" in console.text_edit.toPlainText()

    def test_append_log_when_level_suppressed_then_skipped(self, qtbot):
        console = ConsoleWidget()
        qtbot.addWidget(console)
        console.suppressed_levels = {"info"}

        console.append_log("INFO", "hidden")

        assert console.text_edit.toPlainText() == ""
