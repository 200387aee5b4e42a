"""
Module: options

Purpose:
    Provides ChoiceOption - the presentation-level projection of a
    Composer or Work into a selectable entry, and the Selection alias.

Key Functions:
    - ChoiceOption.fixed(): Copy of the option locked against removal

Dependencies:
    - dataclasses (std)

Used By:
    - selection.options: Option derivation
    - selection.transitions: Selection state machine
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Tuple


@dataclass(frozen=True, slots=True)
class ChoiceOption:
    """
    Selectable entry shown to the user.

    Attributes:
        value: Composer or work identifier
        label: Display text
        is_fixed: Confirmed correct for its stage; cannot be removed
    """

    value: int
    label: str
    is_fixed: bool = False

    def fixed(self) -> ChoiceOption:
        """Return a copy of this option with ``is_fixed=True``."""
        return replace(self, is_fixed=True)


# Position 0 is the composer, position 1 the work. Length is 0, 1 or 2.
Selection = Tuple[ChoiceOption, ...]
