"""
Console widget for displaying logs.
"""
from typing import Set
from datetime import datetime
from PySide6.QtWidgets import QGroupBox, QVBoxLayout, QPlainTextEdit, QSizePolicy
from PySide6.QtGui import QTextCursor, QColor, QTextCharFormat, QFontDatabase
from PySide6.QtCore import Slot

# Set of log levels to suppress from GUI console display.
CONSOLE_SUPPRESSED_LEVELS: Set[str] = set()

MAX_LINES = 500


class ConsoleWidget(QGroupBox):
    def __init__(self, parent=None):
        super().__init__("Console Log", parent)

        # Can be overridden per instance: console.suppressed_levels = {"info"}
        self.suppressed_levels: Set[str] = CONSOLE_SUPPRESSED_LEVELS.copy()

        self.setMinimumHeight(40)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)

        self.layout = QVBoxLayout(self)
        self.layout.setContentsMargins(0, 0, 0, 0)

        self.text_edit = QPlainTextEdit()
        self.text_edit.setReadOnly(True)
        self.text_edit.setLineWrapMode(QPlainTextEdit.LineWrapMode.WidgetWidth)
        self.text_edit.setFont(QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont))
        self.layout.addWidget(self.text_edit)

        self.format_info = QTextCharFormat()

        self.format_error = QTextCharFormat()
        self.format_error.setForeground(QColor("#dc2626"))

        self.format_warning = QTextCharFormat()
        self.format_warning.setForeground(QColor("#d97706"))

        self.format_success = QTextCharFormat()
        self.format_success.setForeground(QColor("#16a34a"))

    @Slot(str, str)
    def append_log(self, level: str, message: str):
        """Appends a log message with color coding based on level."""
        if level.lower() in self.suppressed_levels:
            return

        cursor = self.text_edit.textCursor()
        cursor.movePosition(QTextCursor.MoveOperation.End)

        fmt = self.format_info
        if level.lower() in ("error", "critical"):
            fmt = self.format_error
        elif level.lower() in ("warning", "warn"):
            fmt = self.format_warning
        elif level.lower() in ("success", "ok"):
            fmt = self.format_success

        timestamp = datetime.now().strftime("%H:%M:%S")
        cursor.insertText(f"[{timestamp}] [{level.upper()}] {message}\n", fmt)

        self.text_edit.setTextCursor(cursor)
        self.text_edit.ensureCursorVisible()

        doc = self.text_edit.document()
        if doc.lineCount() > MAX_LINES:
            cursor = self.text_edit.textCursor()
            cursor.movePosition(QTextCursor.MoveOperation.Start)
            cursor.movePosition(QTextCursor.MoveOperation.Down, QTextCursor.MoveMode.KeepAnchor, doc.lineCount() - MAX_LINES)
            cursor.removeSelectedText()

    def clear(self):
        self.text_edit.clear()
