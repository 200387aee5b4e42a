"""
Composer Quiz Core Package

Shared data models and exception types. These models are the single
source of truth for the selection engine, providers and GUI.
"""

from .errors import CatalogError, ComposerQuizError, UnresolvedSelectionError
from .models import (
    ChoiceOption,
    Composer,
    Guess,
    PuzzleAnswer,
    QueryResult,
    QueryStatus,
    Verdict,
    Work,
)

__all__ = [
    "CatalogError",
    "ComposerQuizError",
    "UnresolvedSelectionError",
    "ChoiceOption",
    "Composer",
    "Guess",
    "PuzzleAnswer",
    "QueryResult",
    "QueryStatus",
    "Verdict",
    "Work",
]
