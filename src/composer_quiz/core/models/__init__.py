"""
Core Models Package

Immutable data models shared by the selection engine, the providers
and the GUI.

All models in this package are frozen dataclasses. Changing an entry
(e.g. locking a ChoiceOption) always produces a new instance, so option
lists and selections can be regenerated instead of patched in place.
"""

from .catalog import Composer, Work
from .guess import Guess, PuzzleAnswer, Verdict, is_composer_correct, judge
from .options import ChoiceOption, Selection
from .query import QueryResult, QueryStatus

__all__ = [
    "Composer",
    "Work",
    "Guess",
    "PuzzleAnswer",
    "Verdict",
    "is_composer_correct",
    "judge",
    "ChoiceOption",
    "Selection",
    "QueryResult",
    "QueryStatus",
]
