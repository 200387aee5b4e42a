"""
Tests for guess resolution and the selection that follows a verdict.
"""

import pytest

from composer_quiz.core.errors import UnresolvedSelectionError
from composer_quiz.core.models import ChoiceOption, Guess, Verdict
from composer_quiz.selection import resolve_guess, selection_after

BACH = ChoiceOption(1, "Bach")
SUITE = ChoiceOption(10, "(BWV 1007) Cello Suite")


class TestResolveGuess:
    """Joining selected ids back to provider records."""

    def test_resolve_when_ids_known_then_returns_guess(self, bach, mozart, cello_suite, brandenburg):
        guess = resolve_guess((BACH, SUITE), [mozart, bach], [cello_suite, brandenburg])

        assert guess == Guess(bach, cello_suite)

    def test_resolve_when_work_missing_then_raises_error(self, bach, brandenburg):
        with pytest.raises(UnresolvedSelectionError, match="Could not find work with ID 10"):
            resolve_guess((BACH, SUITE), [bach], [brandenburg])

    def test_resolve_when_composer_missing_then_raises_error(self, mozart, cello_suite):
        with pytest.raises(UnresolvedSelectionError) as exc_info:
            resolve_guess((BACH, SUITE), [mozart], [cello_suite])

        assert exc_info.value.kind == "composer"
        assert exc_info.value.identifier == 1

    def test_resolve_when_work_of_other_composer_then_raises_error(self, bach, nachtmusik):
        """A work id is only meaningful together with its composer."""
        selection = (BACH, ChoiceOption(20, "(K. 525) Eine kleine Nachtmusik"))

        with pytest.raises(UnresolvedSelectionError):
            resolve_guess(selection, [bach], [nachtmusik])

    def test_resolve_when_incomplete_then_raises_value_error(self, bach):
        with pytest.raises(ValueError, match="composer and a work"):
            resolve_guess((BACH,), [bach], [])


class TestSelectionAfter:
    """Selection after a judged guess."""

    def test_selection_after_when_composer_only_then_composer_locked(self):
        assert selection_after(Verdict.COMPOSER_ONLY, (BACH, SUITE)) == (BACH.fixed(),)

    @pytest.mark.parametrize("verdict", [Verdict.CORRECT, Verdict.MISS])
    def test_selection_after_when_correct_or_miss_then_cleared(self, verdict):
        assert selection_after(verdict, (BACH, SUITE)) == ()
