"""
Entry point for the PySide6 GUI.
"""
import logging
import os
import sys


def run():
    """
    Main entry point for the GUI application.
    """
    from PySide6.QtWidgets import QApplication
    from composer_quiz.gui.main_window import MainWindow
    from composer_quiz.gui.utils.logging_utils import configure_logging

    configure_logging(logging.DEBUG if os.environ.get("COMPOSER_QUIZ_DEBUG") else logging.INFO)

    app = QApplication(sys.argv)
    app.setApplicationName("Composer Quiz")
    app.setApplicationDisplayName("Composer Quiz")
    app.setOrganizationName("Composer Quiz")

    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
