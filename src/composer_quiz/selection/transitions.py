"""
Module: selection.transitions

Purpose:
    The selection state machine as a pure function. Given the current
    selection and a user event, returns the next selection and the kind
    of transition the engine must act on. No rendering, no providers.

States (by selection length):
    - S0: empty (initial, and after any reset)
    - S1: composer chosen (entry 0 may be fixed)
    - S2: composer + work chosen, ready for submission

Key Functions:
    - apply_selection_change(): Next selection for an event
    - order_options(): Stable partition, fixed entries first

Dependencies:
    - core.models: ChoiceOption, Selection

Used By:
    - selection.engine: SelectionEngine
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from composer_quiz.core.models import ChoiceOption, Selection

MAX_ENTRIES = 2


class SelectionAction(str, Enum):
    """User action that changes the selection."""
    SELECT = "select-option"  # Add an option
    REMOVE = "remove-value"   # Remove a specific entry
    POP = "pop-value"         # Remove the last entry (backspace)

    def __str__(self) -> str:
        return self.value


class TransitionKind(str, Enum):
    """What the engine has to do after a selection change."""
    REJECTED = "rejected"                # No state change
    RESET = "reset"                      # Back to S0
    COMPOSER_CHOSEN = "composer_chosen"  # S1: commit composer, query its works
    PAIR_CHOSEN = "pair_chosen"          # S2: ready to submit

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SelectionEvent:
    """
    A single selection change requested by the user.

    Attributes:
        action: SELECT, REMOVE or POP
        option: Option being added or removed (None for POP)
    """

    action: SelectionAction
    option: Optional[ChoiceOption] = None

    def __post_init__(self) -> None:
        if self.action is not SelectionAction.POP and self.option is None:
            raise ValueError(f"{self.action} event requires an option")

    @classmethod
    def select(cls, option: ChoiceOption) -> SelectionEvent:
        return cls(SelectionAction.SELECT, option)

    @classmethod
    def remove(cls, option: ChoiceOption) -> SelectionEvent:
        return cls(SelectionAction.REMOVE, option)

    @classmethod
    def pop(cls) -> SelectionEvent:
        return cls(SelectionAction.POP)


@dataclass(frozen=True)
class SelectionTransition:
    """
    Result of applying an event.

    Attributes:
        kind: Transition the engine must act on
        selection: Next selection (unchanged when REJECTED)
    """

    kind: TransitionKind
    selection: Selection

    @property
    def composer(self) -> Optional[ChoiceOption]:
        return self.selection[0] if self.selection else None

    @property
    def changed(self) -> bool:
        return self.kind is not TransitionKind.REJECTED


def order_options(values: Iterable[ChoiceOption]) -> Selection:
    """
    Place fixed entries before non-fixed ones.

    Stable partition, not a sort: relative order inside each group is kept.
    """
    values = tuple(values)
    return tuple(v for v in values if v.is_fixed) + tuple(v for v in values if not v.is_fixed)


def _removal_target(selection: Selection, event: SelectionEvent) -> Optional[int]:
    """Index of the entry an event removes, or None if it removes nothing."""
    if event.action is SelectionAction.POP:
        return len(selection) - 1 if selection else None
    for index, entry in enumerate(selection):
        if entry == event.option:
            return index
    return None


def apply_selection_change(
    selection: Selection,
    event: SelectionEvent,
    max_entries: int = MAX_ENTRIES,
) -> SelectionTransition:
    """
    Apply a user selection event.

    Rules, in order:
        1. Selecting an entry twice or removing a fixed entry is rejected.
        2. Removing the composer while a work is staged resets, since
           the work only makes sense for that composer.
        3. An empty result resets to S0.
        4. A third entry replaces the work (entry 1), keeping entry 0.
        5. The result is partitioned so fixed entries come first.

    Args:
        selection: Current selection (length 0-2)
        event: Requested change
        max_entries: Entries in a complete selection

    Returns:
        SelectionTransition describing the next state

    Example:
        >>> bach = ChoiceOption(1, "Bach")
        >>> apply_selection_change((), SelectionEvent.select(bach)).kind
        <TransitionKind.COMPOSER_CHOSEN: 'composer_chosen'>
    """
    unchanged = SelectionTransition(TransitionKind.REJECTED, selection)

    if event.action is SelectionAction.SELECT:
        if event.option in selection:
            return unchanged
        raw = selection + (event.option,)
    else:
        index = _removal_target(selection, event)
        if index is None:
            return unchanged
        if selection[index].is_fixed:
            return unchanged
        if index == 0 and len(selection) > 1:
            return SelectionTransition(TransitionKind.RESET, ())
        raw = selection[:index] + selection[index + 1:]

    if not raw:
        return SelectionTransition(TransitionKind.RESET, ())

    if len(raw) > max_entries:
        # Keep the composer and the newest work
        raw = (raw[0], raw[-1])

    ordered = order_options(raw)
    kind = TransitionKind.COMPOSER_CHOSEN if len(ordered) == 1 else TransitionKind.PAIR_CHOSEN
    return SelectionTransition(kind, ordered)
