"""
Main Window for the Composer Quiz GUI.
"""
import logging
import queue
from typing import List, Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QLabel, QScrollArea, QSplitter,
)
from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QAction, QKeySequence

from composer_quiz import __version__
from composer_quiz.core.models import Guess, Verdict
from composer_quiz.gui.utils.logging_utils import attach_queue_handler, detach_queue_handler
from composer_quiz.gui.widgets.console_widget import ConsoleWidget
from composer_quiz.gui.widgets.guess_card import GuessCard
from composer_quiz.gui.widgets.guess_input import GuessInput
from composer_quiz.providers import (
    CatalogConfig, DailyPuzzleOracle, JsonCatalogProvider, QueryRunner,
)
from composer_quiz.selection import SelectionEngine

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, config: Optional[CatalogConfig] = None, runner: Optional[QueryRunner] = None):
        super().__init__()
        self.config = config or CatalogConfig.from_env()

        self.setWindowTitle("Composer Quiz")
        self.resize(760, 640)

        # --- Menu Bar ---
        file_menu = self.menuBar().addMenu("File")
        exit_action = QAction("Quit", self)
        exit_action.setShortcut(QKeySequence.StandardKey.Quit)
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # Initialize Logging
        self.log_queue = queue.Queue()
        self._log_handler = attach_queue_handler(self.log_queue)
        self.log_timer = QTimer(self)
        self.log_timer.timeout.connect(self._drain_log_queue)
        self.log_timer.start(100)

        # --- Collaborators ---
        self.runner = runner or QueryRunner(parent=self)
        self.provider = JsonCatalogProvider(self.config)
        self.oracle = DailyPuzzleOracle(
            self.provider, self.config.effective_date, self.config.puzzle_seed
        )
        self.engine = SelectionEngine(self.provider, self.oracle, self.runner, parent=self)
        self.guesses: List[GuessCard] = []

        # --- Layout ---
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        title = QLabel(f"Daily puzzle for {self.config.effective_date.isoformat()}")
        title.setObjectName("puzzleTitle")
        layout.addWidget(title)

        self.guess_input = GuessInput(self.engine)
        layout.addWidget(self.guess_input)

        splitter = QSplitter(Qt.Orientation.Vertical)
        self.history = QWidget()
        self.history_layout = QVBoxLayout(self.history)
        self.history_layout.addStretch()
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self.history)
        splitter.addWidget(scroll)

        self.console = ConsoleWidget()
        splitter.addWidget(self.console)
        splitter.setSizes([420, 160])
        layout.addWidget(splitter, 1)

        self.statusBar().showMessage(f"Composer Quiz v{__version__}")

        self.engine.guessJudged.connect(self._on_guess_judged)
        self.engine.roundFinished.connect(self._on_round_finished)

        self.oracle.load_with(self.runner)
        self.engine.start()

    def _on_guess_judged(self, guess: Guess, verdict: Verdict) -> None:
        card = GuessCard(guess, verdict)
        # Newest guess on top
        self.history_layout.insertWidget(0, card)
        self.guesses.append(card)
        if verdict is Verdict.COMPOSER_ONLY:
            self.statusBar().showMessage(f"{guess.composer.full_name} is right. Now pick the work.")
        elif verdict is Verdict.MISS:
            self.statusBar().showMessage("Not quite. Try another composer.")

    def _on_round_finished(self, guess: Guess) -> None:
        count = len(self.guesses)
        self.statusBar().showMessage(
            f"Solved in {count} {'guess' if count == 1 else 'guesses'}: {guess}"
        )
        logger.info(f"Puzzle solved after {count} guesses")

    def _drain_log_queue(self):
        while True:
            try:
                msg = self.log_queue.get_nowait()
                if isinstance(msg, tuple) and len(msg) == 2:
                    text, level = msg
                    self.console.append_log(level, text)
                else:
                    self.console.append_log("INFO", str(msg))
                self.log_queue.task_done()
            except queue.Empty:
                break

    def closeEvent(self, event):
        self.log_timer.stop()
        self.runner.wait()
        detach_queue_handler(self._log_handler)
        super().closeEvent(event)
