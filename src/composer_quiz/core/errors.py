"""
Exception types raised inside composer_quiz.

None of these reach the end user: the engine logs them and keeps its
current state.
"""

from __future__ import annotations


class ComposerQuizError(Exception):
    """Base class for all composer_quiz errors."""


class CatalogError(ComposerQuizError):
    """Raised when catalog or prefix data is missing or malformed."""


class UnresolvedSelectionError(ComposerQuizError):
    """
    Raised when a selected identifier is absent from the cached provider data.

    Attributes:
        kind: "composer" or "work"
        identifier: The identifier that could not be resolved
    """

    def __init__(self, kind: str, identifier: int):
        super().__init__(f"Could not find {kind} with ID {identifier}")
        self.kind = kind
        self.identifier = identifier
