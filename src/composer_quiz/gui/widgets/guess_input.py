"""
Guess input widget: composer/work picker with selection chips.

The widget holds no selection logic. It forwards user actions to a
SelectionEngine and redraws itself from the engine's signals.
"""
from __future__ import annotations

from typing import List

from PySide6.QtCore import Qt, QEvent, Signal, Slot
from PySide6.QtWidgets import (
    QComboBox, QCompleter, QFrame, QHBoxLayout, QLabel, QPushButton,
    QToolButton, QVBoxLayout, QWidget,
)

from composer_quiz.core.models import ChoiceOption
from composer_quiz.selection import SelectionEngine


class SelectionChip(QFrame):
    """A selected entry. Fixed entries are highlighted and cannot be removed."""

    removeRequested = Signal(object)  # ChoiceOption

    def __init__(self, option: ChoiceOption, parent=None):
        super().__init__(parent)
        self.option = option
        self.setObjectName("fixedChip" if option.is_fixed else "chip")
        self.setFrameShape(QFrame.Shape.StyledPanel)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(6, 2, 2, 2)
        layout.setSpacing(4)

        self.label = QLabel(option.label)
        if option.is_fixed:
            font = self.label.font()
            font.setBold(True)
            self.label.setFont(font)
            self.setStyleSheet("#fixedChip { background-color: #06b6d4; border-radius: 4px; } QLabel { color: white; }")
        layout.addWidget(self.label)

        self.remove_btn = None
        if not option.is_fixed:
            self.remove_btn = QToolButton()
            self.remove_btn.setText("×")
            self.remove_btn.setAutoRaise(True)
            self.remove_btn.clicked.connect(lambda: self.removeRequested.emit(self.option))
            layout.addWidget(self.remove_btn)


class GuessInput(QWidget):
    """
    Multi-value picker for a (composer, work) guess.

    Example:
        >>> widget = GuessInput(engine)
        >>> widget.combo.count()  # options of the current stage
        11
    """

    def __init__(self, engine: SelectionEngine, parent=None):
        super().__init__(parent)
        self.engine = engine
        self._options: List[ChoiceOption] = []
        self.chips: List[SelectionChip] = []

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.chip_bar = QWidget()
        self.chip_layout = QHBoxLayout(self.chip_bar)
        self.chip_layout.setContentsMargins(0, 0, 0, 0)
        self.chip_layout.addStretch()
        layout.addWidget(self.chip_bar)

        row = QHBoxLayout()
        self.combo = QComboBox()
        self.combo.setEditable(True)
        self.combo.setInsertPolicy(QComboBox.InsertPolicy.NoInsert)
        self.combo.setMinimumWidth(420)
        completer = self.combo.completer()
        completer.setFilterMode(Qt.MatchFlag.MatchContains)
        completer.setCaseSensitivity(Qt.CaseSensitivity.CaseInsensitive)
        completer.setCompletionMode(QCompleter.CompletionMode.PopupCompletion)
        self.combo.lineEdit().installEventFilter(self)
        self.combo.activated.connect(self._on_option_activated)
        row.addWidget(self.combo, 1)

        self.submit_btn = QPushButton("Guess!")
        self.submit_btn.clicked.connect(self._on_submit_clicked)
        row.addWidget(self.submit_btn)
        layout.addLayout(row)

        engine.optionsChanged.connect(self._set_options)
        engine.selectionChanged.connect(self._set_selection)
        engine.placeholderChanged.connect(self._set_placeholder)
        engine.roundFinished.connect(self._on_round_finished)

        self._set_options(engine.options)
        self._set_selection(list(engine.selection))
        self._set_placeholder(engine.placeholder)

    @property
    def placeholder_text(self) -> str:
        return self.combo.lineEdit().placeholderText()

    @Slot(list)
    def _set_options(self, options: List[ChoiceOption]) -> None:
        self._options = list(options)
        self.combo.blockSignals(True)
        self.combo.clear()
        for option in self._options:
            self.combo.addItem(option.label)
        self.combo.setCurrentIndex(-1)
        self.combo.clearEditText()
        self.combo.blockSignals(False)

    @Slot(list)
    def _set_selection(self, selection: List[ChoiceOption]) -> None:
        for chip in self.chips:
            self.chip_layout.removeWidget(chip)
            chip.deleteLater()
        self.chips = []
        for index, option in enumerate(selection):
            chip = SelectionChip(option)
            chip.removeRequested.connect(self.engine.remove)
            self.chip_layout.insertWidget(index, chip)
            self.chips.append(chip)

    @Slot(str)
    def _set_placeholder(self, text: str) -> None:
        self.combo.lineEdit().setPlaceholderText(text)

    def _on_option_activated(self, index: int) -> None:
        if 0 <= index < len(self._options):
            self.engine.select(self._options[index])
        self.combo.setCurrentIndex(-1)
        self.combo.clearEditText()

    def _on_submit_clicked(self) -> None:
        self.engine.submit()

    def _on_round_finished(self, guess) -> None:
        self.combo.setEnabled(False)
        self.submit_btn.setEnabled(False)

    def eventFilter(self, obj, event):
        """Backspace in an empty input removes the last entry."""
        if (
            obj is self.combo.lineEdit()
            and event.type() == QEvent.Type.KeyPress
            and event.key() == Qt.Key.Key_Backspace
            and not self.combo.lineEdit().text()
        ):
            self.engine.pop()
            return True
        return super().eventFilter(obj, event)
