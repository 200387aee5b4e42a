"""
Tests for GuessCard correctness marks.
"""

import pytest

from composer_quiz.core.models import Guess, Verdict
from composer_quiz.gui.widgets.guess_card import CORRECT_MARK, WRONG_MARK, GuessCard


@pytest.mark.parametrize(
    "verdict, composer_mark, work_mark",
    [
        (Verdict.CORRECT, CORRECT_MARK, CORRECT_MARK),
        (Verdict.COMPOSER_ONLY, CORRECT_MARK, WRONG_MARK),
        (Verdict.MISS, WRONG_MARK, WRONG_MARK),
    ],
)
def test_guess_card_when_judged_then_marks_each_half(qtbot, bach, cello_suite, verdict, composer_mark, work_mark):
    card = GuessCard(Guess(bach, cello_suite), verdict)
    qtbot.addWidget(card)

    assert composer_mark in card.composer_title.text()
    assert work_mark in card.work_title.text()
    assert card.composer_value.text() == "Bach"
    assert card.work_value.text() == "Cello Suite"
