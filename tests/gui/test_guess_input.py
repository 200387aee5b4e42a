"""
Tests for the GuessInput widget.
"""

import pytest
from PySide6.QtCore import Qt

from composer_quiz.gui.widgets.guess_input import GuessInput
from composer_quiz.selection import SelectionEngine


@pytest.fixture
def engine(provider, oracle, inline_runner):
    engine = SelectionEngine(provider, oracle, inline_runner)
    engine.start()
    return engine


@pytest.fixture
def widget(qtbot, engine):
    widget = GuessInput(engine)
    qtbot.addWidget(widget)
    return widget


def _labels(widget):
    return [widget.combo.itemText(i) for i in range(widget.combo.count())]


def _activate(widget, label):
    widget._on_option_activated(_labels(widget).index(label))


class TestGuessInput:
    """Widget mirrors engine state and forwards user actions."""

    def test_init_when_composers_loaded_then_combo_filled(self, widget):
        assert _labels(widget) == ["Bach", "Mozart"]
        assert widget.placeholder_text == "Enter composer..."
        assert widget.chips == []

    def test_activate_when_composer_then_chip_and_work_options(self, widget):
        # Act
        _activate(widget, "Bach")

        # Assert
        assert [chip.option.value for chip in widget.chips] == [1]
        assert widget.placeholder_text == "Select a work..."
        assert _labels(widget) == ["(BWV 1007) Cello Suite", "(BWV 1048) Brandenburg Concerto No. 3"]

    def test_chip_remove_when_clicked_then_selection_cleared(self, widget, engine, qtbot):
        _activate(widget, "Bach")

        widget.chips[0].remove_btn.click()

        assert engine.selection == ()
        assert widget.chips == []
        assert _labels(widget) == ["Bach", "Mozart"]

    def test_backspace_when_input_empty_then_last_entry_removed(self, widget, engine, qtbot):
        _activate(widget, "Bach")
        _activate(widget, "(BWV 1007) Cello Suite")

        qtbot.keyClick(widget.combo.lineEdit(), Qt.Key.Key_Backspace)

        assert [o.value for o in engine.selection] == [1]

    def test_submit_when_composer_only_then_chip_fixed(self, widget, engine, qtbot):
        _activate(widget, "Bach")
        _activate(widget, "(BWV 1048) Brandenburg Concerto No. 3")

        widget.submit_btn.click()

        (chip,) = widget.chips
        assert chip.objectName() == "fixedChip"
        assert chip.remove_btn is None
        assert widget.placeholder_text == "Select a work..."

    def test_submit_when_correct_then_input_disabled(self, widget, qtbot):
        _activate(widget, "Bach")
        _activate(widget, "(BWV 1007) Cello Suite")

        widget.submit_btn.click()

        assert not widget.combo.isEnabled()
        assert not widget.submit_btn.isEnabled()
        assert widget.chips == []
