"""
Module: selection

Purpose:
    Two-stage composer/work selection. A user picks a composer, then one
    of that composer's works, and submits the pair as a guess against
    the day's answer.

Key Functions:
    - apply_selection_change(): Pure selection state machine
    - derive_options(): Option list for the active stage
    - resolve_guess(): Join a selection back to provider records

Key Classes:
    - SelectionEngine: Stateful engine driving providers and signals
    - SelectionConfig: Prompts and catalog defaults

Used By:
    - composer_quiz.gui: GUI integration
"""

from .config import SelectionConfig
from .engine import SelectionEngine
from .options import COMPOSER_STAGE, Stage, derive_options, render_work_label
from .submission import resolve_guess, selection_after
from .transitions import (
    SelectionAction,
    SelectionEvent,
    SelectionTransition,
    TransitionKind,
    apply_selection_change,
    order_options,
)

__all__ = [
    "SelectionConfig",
    "SelectionEngine",
    "COMPOSER_STAGE",
    "Stage",
    "derive_options",
    "render_work_label",
    "resolve_guess",
    "selection_after",
    "SelectionAction",
    "SelectionEvent",
    "SelectionTransition",
    "TransitionKind",
    "apply_selection_change",
    "order_options",
]
