"""
Unit tests for the pure selection state machine.
"""

import pytest

from composer_quiz.core.models import ChoiceOption
from composer_quiz.selection import (
    SelectionAction,
    SelectionEvent,
    TransitionKind,
    apply_selection_change,
    order_options,
)

BACH = ChoiceOption(1, "Bach")
SUITE = ChoiceOption(10, "(BWV 1007) Cello Suite")
CONCERTO = ChoiceOption(11, "(BWV 1048) Brandenburg Concerto No. 3")


class TestSelect:
    """Adding options."""

    def test_select_when_empty_then_composer_chosen(self):
        # Act
        result = apply_selection_change((), SelectionEvent.select(BACH))

        # Assert
        assert result.kind is TransitionKind.COMPOSER_CHOSEN
        assert result.selection == (BACH,)
        assert result.composer == BACH

    def test_select_when_composer_chosen_then_pair_chosen(self):
        result = apply_selection_change((BACH,), SelectionEvent.select(SUITE))

        assert result.kind is TransitionKind.PAIR_CHOSEN
        assert result.selection == (BACH, SUITE)

    def test_select_when_pair_chosen_then_work_replaced(self):
        """A third entry replaces the work and keeps the composer."""
        result = apply_selection_change((BACH, SUITE), SelectionEvent.select(CONCERTO))

        assert result.kind is TransitionKind.PAIR_CHOSEN
        assert result.selection == (BACH, CONCERTO)

    def test_select_when_fixed_composer_and_pair_then_fixed_entry_kept(self):
        fixed = BACH.fixed()

        result = apply_selection_change((fixed, SUITE), SelectionEvent.select(CONCERTO))

        assert result.selection == (fixed, CONCERTO)

    def test_select_when_already_selected_then_rejected(self):
        result = apply_selection_change((BACH, SUITE), SelectionEvent.select(SUITE))

        assert result.kind is TransitionKind.REJECTED
        assert result.selection == (BACH, SUITE)
        assert result.changed is False


class TestRemove:
    """Removing options."""

    def test_remove_when_only_composer_then_reset(self):
        result = apply_selection_change((BACH,), SelectionEvent.remove(BACH))

        assert result.kind is TransitionKind.RESET
        assert result.selection == ()

    def test_remove_when_work_then_composer_chosen(self):
        result = apply_selection_change((BACH, SUITE), SelectionEvent.remove(SUITE))

        assert result.kind is TransitionKind.COMPOSER_CHOSEN
        assert result.selection == (BACH,)

    def test_remove_when_composer_with_work_then_reset(self):
        """A staged work cannot outlive its composer."""
        result = apply_selection_change((BACH, SUITE), SelectionEvent.remove(BACH))

        assert result.kind is TransitionKind.RESET
        assert result.selection == ()

    def test_remove_when_fixed_then_rejected(self):
        fixed = BACH.fixed()

        result = apply_selection_change((fixed,), SelectionEvent.remove(fixed))

        assert result.kind is TransitionKind.REJECTED
        assert result.selection == (fixed,)

    def test_remove_when_not_selected_then_rejected(self):
        result = apply_selection_change((BACH,), SelectionEvent.remove(SUITE))

        assert result.kind is TransitionKind.REJECTED

    def test_pop_when_pair_then_work_removed(self):
        result = apply_selection_change((BACH, SUITE), SelectionEvent.pop())

        assert result.kind is TransitionKind.COMPOSER_CHOSEN
        assert result.selection == (BACH,)

    def test_pop_when_fixed_last_then_rejected(self):
        fixed = BACH.fixed()

        result = apply_selection_change((fixed,), SelectionEvent.pop())

        assert result.kind is TransitionKind.REJECTED

    def test_pop_when_empty_then_rejected(self):
        result = apply_selection_change((), SelectionEvent.pop())

        assert result.kind is TransitionKind.REJECTED
        assert result.selection == ()


class TestFixedImmutability:
    """No sequence of removals drops below the fixed entries."""

    @pytest.mark.parametrize(
        "events",
        [
            [SelectionEvent.pop()] * 4,
            [SelectionEvent.remove(SUITE), SelectionEvent.pop(), SelectionEvent.pop()],
            [SelectionEvent.remove(BACH.fixed()), SelectionEvent.pop(), SelectionEvent.remove(BACH.fixed())],
        ],
    )
    def test_removals_when_fixed_composer_then_composer_survives(self, events):
        selection = (BACH.fixed(), SUITE)

        for event in events:
            selection = apply_selection_change(selection, event).selection

        assert len(selection) >= 1
        assert selection[0] == BACH.fixed()


class TestOrdering:
    """Fixed entries always come first."""

    def test_order_options_when_fixed_last_then_moved_first(self):
        fixed = BACH.fixed()

        assert order_options([SUITE, fixed]) == (fixed, SUITE)

    def test_order_options_when_no_fixed_then_order_kept(self):
        assert order_options([SUITE, CONCERTO]) == (SUITE, CONCERTO)


class TestSelectionEvent:
    """Event construction."""

    def test_init_when_select_without_option_then_raises_error(self):
        with pytest.raises(ValueError, match="requires an option"):
            SelectionEvent(SelectionAction.SELECT)

    def test_pop_when_created_then_has_no_option(self):
        assert SelectionEvent.pop().option is None
