"""
Module: guess

Purpose:
    Provides the Guess and PuzzleAnswer dataclasses and the single
    equality rule used to judge one against the other.

Key Functions:
    - PuzzleAnswer.matches(guess): Full (composer AND work) equality
    - PuzzleAnswer.composer_matches(composer_id): Composer-only check
    - judge(guess, answer): Classify a guess as a Verdict

Dependencies:
    - dataclasses (std)
    - enum (std)
    - .catalog: Composer, Work
    - .query: QueryResult

Used By:
    - selection.submission: Submission and resolution
    - gui.widgets.guess_card: Correctness marks
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .catalog import Composer, Work
from .query import QueryResult


class Verdict(str, Enum):
    """Outcome of judging a guess against the puzzle answer."""
    CORRECT = "correct"              # Composer and work both match
    COMPOSER_ONLY = "composer_only"  # Composer matches, work does not
    MISS = "miss"                    # Composer does not match (or no answer yet)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class Guess:
    """
    A fully resolved (composer, work) guess.

    Only produced at submission time, by joining the selected
    identifiers back against the provider's cached records.

    Invariants:
        - work.composer_id == composer.id
    """

    composer: Composer
    work: Work

    def __post_init__(self) -> None:
        if self.work.composer_id != self.composer.id:
            raise ValueError(
                f"Work {self.work.id} belongs to composer {self.work.composer_id}, "
                f"not {self.composer.id}"
            )

    @property
    def key(self) -> tuple[int, int]:
        """(composer id, work id) identity of this guess."""
        return (self.composer.id, self.work.id)

    def __str__(self) -> str:
        return f"{self.composer.full_name}: {self.work.work_title}"


@dataclass(frozen=True, slots=True)
class PuzzleAnswer:
    """
    The correct (composer, work) pair for the round (immutable).

    Equality with a guess is defined once here: composer identity AND
    work identity must match. Work ids are only unique per composer,
    so both are always compared.
    """

    composer_id: int
    work: Work

    def __post_init__(self) -> None:
        if self.work.composer_id != self.composer_id:
            raise ValueError(
                f"Answer work {self.work.id} does not belong to composer {self.composer_id}"
            )

    @property
    def key(self) -> tuple[int, int]:
        return (self.composer_id, self.work.id)

    def composer_matches(self, composer_id: int) -> bool:
        return composer_id == self.composer_id

    def matches(self, guess: Guess) -> bool:
        return guess.key == self.key


def is_composer_correct(composer_id: int, answer: QueryResult[PuzzleAnswer]) -> bool:
    """
    Check a composer id against the answer.

    Short-circuits to False while the answer is pending or errored.
    """
    if not answer.is_success or answer.data is None:
        return False
    return answer.data.composer_matches(composer_id)


def judge(guess: Guess, answer: QueryResult[PuzzleAnswer]) -> Verdict:
    """
    Classify a guess against the (possibly not yet loaded) answer.

    Args:
        guess: Resolved guess
        answer: Current answer query result

    Returns:
        CORRECT for a full match, COMPOSER_ONLY when only the composer
        matches, MISS otherwise (including pending/error answers)
    """
    if not answer.is_success or answer.data is None:
        return Verdict.MISS
    if answer.data.matches(guess):
        return Verdict.CORRECT
    if answer.data.composer_matches(guess.composer.id):
        return Verdict.COMPOSER_ONLY
    return Verdict.MISS
