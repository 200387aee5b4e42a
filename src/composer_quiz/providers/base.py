"""
Module: providers.base

Purpose:
    Abstract interfaces for the collaborators the selection engine
    depends on: the candidate provider (composers and their works) and
    the answer oracle (the round's correct pair).

Key Classes:
    - CandidateProvider: Composer and work listings plus catalog prefixes
    - AnswerOracle: Current puzzle answer as a QueryResult

Dependencies:
    - core.models: Composer, Work, PuzzleAnswer, QueryResult

Used By:
    - selection.engine: SelectionEngine
    - providers.catalog: JsonCatalogProvider
    - providers.puzzle: DailyPuzzleOracle
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Mapping

from composer_quiz.core.models import Composer, PuzzleAnswer, QueryResult, Work


class CandidateProvider(ABC):
    """
    Source of truth for composers and their works.

    Calls may block; the engine always issues them through a QueryRunner.
    """

    @abstractmethod
    def list_composers(self) -> List[Composer]:
        """
        Get every composer that can be guessed.

        Returns:
            Composers in provider order (the engine sorts them)
        """

    @abstractmethod
    def list_works_by_composer(self, composer_id: int) -> List[Work]:
        """
        Get the works of a composer.

        Args:
            composer_id: Composer identifier

        Returns:
            Works in provider order (empty if the composer has none)
        """

    @property
    @abstractmethod
    def catalog_prefixes(self) -> Mapping[int, str]:
        """
        Catalog prefix overrides keyed by composer id, e.g. {1: "BWV "}.

        Composers without an entry use the default "Op. " prefix.
        """


class AnswerOracle(ABC):
    """Supplies the correct (composer, work) pair for the current round."""

    @abstractmethod
    def current_answer(self) -> QueryResult[PuzzleAnswer]:
        """
        Get the answer for the current round.

        Returns:
            Pending until loaded, then success or error. Never raises.
        """
