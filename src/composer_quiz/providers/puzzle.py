"""
Module: providers.puzzle

Purpose:
    Daily puzzle answer oracle. Draws the day's (composer, work) pair
    deterministically from the candidate provider, so every player sees
    the same answer on the same date.

Key Classes:
    - DailyPuzzleOracle: AnswerOracle with pending/error/success state

Key Functions:
    - draw_answer(): Deterministic pick for a date and seed

Dependencies:
    - random (std): Seeded draw
    - providers.base: CandidateProvider, AnswerOracle
    - providers.queries: QueryRunner (background loading)

Used By:
    - selection.engine: SelectionEngine (consulted on submission)
    - gui.main_window: MainWindow
"""

from __future__ import annotations

import logging
import random
from datetime import date
from typing import Hashable, Optional

from composer_quiz.core.errors import CatalogError
from composer_quiz.core.models import PuzzleAnswer, QueryResult

from .base import AnswerOracle, CandidateProvider
from .queries import QueryRunner

logger = logging.getLogger(__name__)


def draw_answer(provider: CandidateProvider, puzzle_date: date, seed: int = 0) -> PuzzleAnswer:
    """
    Draw the answer for a date.

    Composers without works are skipped. The draw depends only on the
    catalog contents, the date and the seed.

    Args:
        provider: Candidate provider to draw from
        puzzle_date: Day of the puzzle
        seed: Offset mixed into the date ordinal

    Returns:
        PuzzleAnswer for the day

    Raises:
        CatalogError: If no composer has any works
    """
    rng = random.Random(puzzle_date.toordinal() + seed)

    candidates = []
    for composer in sorted(provider.list_composers(), key=lambda c: c.id):
        works = provider.list_works_by_composer(composer.id)
        if works:
            candidates.append((composer, sorted(works, key=lambda w: w.id)))

    if not candidates:
        raise CatalogError("Catalog has no works to draw a puzzle from")

    composer, works = rng.choice(candidates)
    work = rng.choice(works)
    return PuzzleAnswer(composer_id=composer.id, work=work)


class DailyPuzzleOracle(AnswerOracle):
    """
    Answer oracle for the daily puzzle.

    Starts pending. ``load()`` draws synchronously; ``load_with(runner)``
    draws on a worker thread. Failures leave the oracle in the error
    state; they are logged, never raised to callers of current_answer().

    Example:
        >>> oracle = DailyPuzzleOracle(provider, date(2024, 3, 1))
        >>> oracle.current_answer().is_pending
        True
        >>> oracle.load().is_success
        True
    """

    def __init__(
        self,
        provider: CandidateProvider,
        puzzle_date: Optional[date] = None,
        seed: int = 0,
    ):
        self.provider = provider
        self.puzzle_date = puzzle_date or date.today()
        self.seed = seed
        self._result: QueryResult[PuzzleAnswer] = QueryResult.pending()
        self._runner: Optional[QueryRunner] = None

    @property
    def query_key(self) -> Hashable:
        return ("puzzle", self.puzzle_date.isoformat())

    def current_answer(self) -> QueryResult[PuzzleAnswer]:
        return self._result

    def load(self) -> QueryResult[PuzzleAnswer]:
        """Draw the answer now and store the result."""
        try:
            answer = draw_answer(self.provider, self.puzzle_date, self.seed)
        except CatalogError as e:
            self._on_failed(self.query_key, str(e))
        else:
            self._on_loaded(self.query_key, answer)
        return self._result

    def load_with(self, runner: QueryRunner) -> None:
        """
        Draw the answer through a query runner.

        The oracle listens to the runner only until its own key resolves.
        """
        self._runner = runner
        runner.succeeded.connect(self._on_loaded)
        runner.failed.connect(self._on_failed)
        runner.submit(
            self.query_key,
            lambda: draw_answer(self.provider, self.puzzle_date, self.seed),
        )

    def _on_loaded(self, key: Hashable, answer: object) -> None:
        if key != self.query_key:
            return
        self._detach_runner()
        self._result = QueryResult.success(answer)
        logger.info(f"Puzzle for {self.puzzle_date.isoformat()} ready")

    def _on_failed(self, key: Hashable, message: str) -> None:
        if key != self.query_key:
            return
        self._detach_runner()
        self._result = QueryResult.failure(message)
        logger.error(f"Could not load puzzle for {self.puzzle_date.isoformat()}: {message}")

    def _detach_runner(self) -> None:
        if self._runner is None:
            return
        self._runner.succeeded.disconnect(self._on_loaded)
        self._runner.failed.disconnect(self._on_failed)
        self._runner = None
