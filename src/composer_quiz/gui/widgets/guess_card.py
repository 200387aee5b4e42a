"""
Card showing one submitted guess and which halves of it were right.
"""
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QVBoxLayout

from composer_quiz.core.models import Guess, Verdict

CORRECT_MARK = "✅"
WRONG_MARK = "❌"


class GuessCard(QFrame):
    """Composer and work of a guess, each with a correctness mark."""

    def __init__(self, guess: Guess, verdict: Verdict, parent=None):
        super().__init__(parent)
        self.guess = guess
        self.verdict = verdict
        self.setObjectName("guessCard")
        self.setStyleSheet("#guessCard { background-color: #06b6d4; border-radius: 8px; } QLabel { color: #fafafa; }")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)
        self.composer_title, self.composer_value = self._add_section(
            layout, "Composer", guess.composer.full_name, self.composer_correct
        )
        self.work_title, self.work_value = self._add_section(
            layout, "Work", guess.work.work_title, self.work_correct
        )

    @property
    def composer_correct(self) -> bool:
        return self.verdict in (Verdict.CORRECT, Verdict.COMPOSER_ONLY)

    @property
    def work_correct(self) -> bool:
        return self.verdict is Verdict.CORRECT

    def _add_section(self, layout, title: str, value: str, correct: bool):
        section = QVBoxLayout()
        title_label = QLabel(f"<b>{title}</b> {CORRECT_MARK if correct else WRONG_MARK}")
        value_label = QLabel(value)
        value_label.setWordWrap(True)
        section.addWidget(title_label)
        section.addWidget(value_label)
        layout.addLayout(section, 1)
        return title_label, value_label
