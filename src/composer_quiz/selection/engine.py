"""
Module: selection.engine

Purpose:
    The Selection Engine: owns the option list, the current selection
    and the placeholder prompt, drives provider queries and judges
    submitted guesses against the puzzle answer.

Key Classes:
    - SelectionEngine: QObject publishing state changes as Qt signals

Dependencies:
    - PySide6.QtCore: QObject, Signal
    - selection.transitions: Pure selection state machine
    - selection.options: Option derivation
    - selection.submission: Guess resolution
    - providers: CandidateProvider, AnswerOracle, QueryRunner

Used By:
    - gui.main_window: MainWindow
    - gui.widgets.guess_input: GuessInput

Concurrency:
    All methods run on the owner's (GUI) thread. Provider calls go
    through a QueryRunner and come back keyed; a work list whose
    composer is no longer committed is discarded.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable, Dict, Hashable, List, Optional

from PySide6.QtCore import QObject, Signal

from composer_quiz.core.errors import UnresolvedSelectionError
from composer_quiz.core.models import (
    ChoiceOption,
    Composer,
    Guess,
    QueryResult,
    Selection,
    Verdict,
    Work,
    is_composer_correct,
    judge,
)
from composer_quiz.providers.base import AnswerOracle, CandidateProvider
from composer_quiz.providers.queries import COMPOSERS_KEY, QueryRunner, works_key

from .config import SelectionConfig
from .options import COMPOSER_STAGE, Stage, derive_options
from .submission import resolve_guess, selection_after
from .transitions import (
    SelectionEvent,
    SelectionAction,
    SelectionTransition,
    TransitionKind,
    apply_selection_change,
)

logger = logging.getLogger(__name__)


def _is_works_key(key: Hashable) -> bool:
    return isinstance(key, tuple) and len(key) == 2 and key[0] == "works"


class SelectionEngine(QObject):
    """
    Two-stage composer/work selection state machine.

    Signals:
        optionsChanged(list): Option list regenerated
        selectionChanged(list): Selection changed
        placeholderChanged(str): Prompt text changed
        guessSubmitted(object): Resolved Guess, once per valid submission
        guessJudged(object, object): Guess and its Verdict
        roundFinished(object): Correct Guess; the round is over

    Example:
        >>> engine = SelectionEngine(provider, oracle, QueryRunner(threaded=False))
        >>> engine.start()
        >>> engine.select(engine.options[0])
        >>> engine.placeholder
        'Select a work...'
    """

    optionsChanged = Signal(list)
    selectionChanged = Signal(list)
    placeholderChanged = Signal(str)
    guessSubmitted = Signal(object)
    guessJudged = Signal(object, object)
    roundFinished = Signal(object)

    def __init__(
        self,
        provider: CandidateProvider,
        oracle: AnswerOracle,
        runner: Optional[QueryRunner] = None,
        config: Optional[SelectionConfig] = None,
        guess_sink: Optional[Callable[[Guess], None]] = None,
        parent: Optional[QObject] = None,
    ):
        """
        Initialize the engine. No request is issued until start().

        Args:
            provider: Candidate provider for composers and works
            oracle: Answer oracle, consulted only on submission
            runner: Query runner (threaded by default)
            config: Prompts and catalog defaults
            guess_sink: Optional callable receiving every submitted Guess
            parent: Qt parent
        """
        super().__init__(parent)
        self.provider = provider
        self.oracle = oracle
        self.config = config or SelectionConfig()
        self.runner = runner or QueryRunner(parent=self)

        self._composers: QueryResult[List[Composer]] = QueryResult.pending()
        self._works: Dict[int, QueryResult[List[Work]]] = {}
        self._stage: Stage = COMPOSER_STAGE
        self._options: List[ChoiceOption] = []
        self._selection: Selection = ()
        self._placeholder = self.config.default_placeholder
        self._started = False

        self.runner.succeeded.connect(self._on_query_succeeded)
        self.runner.failed.connect(self._on_query_failed)
        if guess_sink is not None:
            self.guessSubmitted.connect(guess_sink)

    # ─────────────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def options(self) -> List[ChoiceOption]:
        return list(self._options)

    @property
    def selection(self) -> Selection:
        return self._selection

    @property
    def placeholder(self) -> str:
        return self._placeholder

    @property
    def stage(self) -> Stage:
        return self._stage

    @property
    def committed_composer_id(self) -> Optional[int]:
        return self._stage.composer_id

    @property
    def composers(self) -> QueryResult[List[Composer]]:
        return self._composers

    @property
    def works(self) -> QueryResult[List[Work]]:
        """Work list query result for the committed composer."""
        if self._stage.composer_id is None:
            return QueryResult.pending()
        return self._works.get(self._stage.composer_id, QueryResult.pending())

    @property
    def can_submit(self) -> bool:
        return len(self._selection) == self.config.max_entries

    def is_composer_correct(self, composer_id: int) -> bool:
        """False while the answer is pending or errored."""
        return is_composer_correct(composer_id, self.oracle.current_answer())

    # ─────────────────────────────────────────────────────────────────────────
    # Lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def start(self) -> None:
        """Issue the composer list request (once)."""
        if self._started:
            return
        self._started = True
        logger.info("Loading composers...")
        self.runner.submit(COMPOSERS_KEY, self.provider.list_composers)

    def reset(self) -> None:
        """Return to the empty selection with composer options."""
        self._reset()

    # ─────────────────────────────────────────────────────────────────────────
    # Selection Events
    # ─────────────────────────────────────────────────────────────────────────

    def select(self, option: ChoiceOption) -> SelectionTransition:
        return self.apply_event(SelectionEvent.select(option))

    def remove(self, option: ChoiceOption) -> SelectionTransition:
        return self.apply_event(SelectionEvent.remove(option))

    def pop(self) -> SelectionTransition:
        return self.apply_event(SelectionEvent.pop())

    def apply_event(self, event: SelectionEvent) -> SelectionTransition:
        """
        Apply a user selection event and its side effects.

        Args:
            event: SELECT, REMOVE or POP event

        Returns:
            The transition that was applied (REJECTED if nothing changed)
        """
        if event.action is SelectionAction.SELECT and event.option not in self._options:
            logger.warning(f"Ignoring selection of unavailable option {event.option}")
            return SelectionTransition(TransitionKind.REJECTED, self._selection)

        transition = apply_selection_change(self._selection, event, self.config.max_entries)

        if transition.kind is TransitionKind.REJECTED:
            logger.debug(f"Rejected {event.action} event")
        elif transition.kind is TransitionKind.RESET:
            self._reset()
        elif transition.kind is TransitionKind.COMPOSER_CHOSEN:
            self._set_selection(transition.selection)
            self._set_placeholder(self.config.work_placeholder)
            self._commit_composer(transition.selection[0].value)
        else:
            self._set_selection(transition.selection)
            self._set_placeholder("")

        return transition

    # ─────────────────────────────────────────────────────────────────────────
    # Submission
    # ─────────────────────────────────────────────────────────────────────────

    def submit(self) -> Optional[Verdict]:
        """
        Submit the staged (composer, work) pair.

        Returns:
            The Verdict, or None when nothing was submitted (incomplete
            selection or unresolvable identifiers)
        """
        if not self.can_submit:
            logger.debug(f"Ignoring submission with {len(self._selection)} selected entries")
            return None

        composer_id = self._selection[0].value
        works = self._works.get(composer_id, QueryResult.pending())
        try:
            guess = resolve_guess(
                self._selection,
                self._composers.data or [],
                works.data or [],
            )
        except UnresolvedSelectionError as e:
            logger.error(f"Submission aborted: {e}")
            return None

        self.guessSubmitted.emit(guess)

        verdict = judge(guess, self.oracle.current_answer())
        logger.info(f"Guess '{guess}' judged {verdict}")

        if verdict is Verdict.CORRECT:
            self._reset()
            self._set_placeholder("")
        elif verdict is Verdict.COMPOSER_ONLY:
            locked = selection_after(verdict, self._selection)
            self._set_selection(locked)
            self._set_placeholder(self.config.work_placeholder)
            self._commit_composer(locked[0].value)
        else:
            self._reset()

        self.guessJudged.emit(guess, verdict)
        if verdict is Verdict.CORRECT:
            self.roundFinished.emit(guess)
        return verdict

    # ─────────────────────────────────────────────────────────────────────────
    # Internal
    # ─────────────────────────────────────────────────────────────────────────

    def _reset(self) -> None:
        if not self._composers.is_success:
            logger.warning("Could not restore composer options: composer list not loaded")
        self._stage = COMPOSER_STAGE
        self._set_selection(())
        self._regenerate_options()
        self._set_placeholder(self.config.default_placeholder)

    def _commit_composer(self, composer_id: int) -> None:
        """
        Make ``composer_id`` the active work stage.

        Cached work lists are reused; otherwise the work list query is issued.
        """
        self._stage = Stage(composer_id)
        cached = self._works.get(composer_id)
        if cached is not None and not cached.is_error:
            self._regenerate_options()
            return

        self._works[composer_id] = QueryResult.pending()
        self._regenerate_options()
        logger.debug(f"Loading works for composer {composer_id}")
        self.runner.submit(
            works_key(composer_id),
            partial(self.provider.list_works_by_composer, composer_id),
        )

    def _regenerate_options(self) -> None:
        self._options = derive_options(
            self._stage,
            self._composers,
            self.works,
            self.provider.catalog_prefixes,
            self.config.default_catalog_prefix,
        )
        self.optionsChanged.emit(list(self._options))

    def _set_selection(self, selection: Selection) -> None:
        if selection == self._selection:
            return
        self._selection = selection
        self.selectionChanged.emit(list(selection))

    def _set_placeholder(self, text: str) -> None:
        if text == self._placeholder:
            return
        self._placeholder = text
        self.placeholderChanged.emit(text)

    def _on_query_succeeded(self, key: Hashable, data: object) -> None:
        if key == COMPOSERS_KEY:
            self._composers = QueryResult.success(list(data))
            logger.info(f"Loaded {len(self._composers.data)} composers")
            if self._stage.is_composer_stage:
                self._regenerate_options()
            return
        if not _is_works_key(key):
            return

        composer_id = key[1]
        if composer_id != self._stage.composer_id:
            logger.debug(f"Discarding stale work list for composer {composer_id}")
            self._works.pop(composer_id, None)
            return

        self._works[composer_id] = QueryResult.success(list(data))
        logger.debug(f"Loaded {len(data)} works for composer {composer_id}")
        self._regenerate_options()

    def _on_query_failed(self, key: Hashable, message: str) -> None:
        if key == COMPOSERS_KEY:
            self._composers = QueryResult.failure(message)
            logger.error(f"Failed to load composers: {message}")
            if self._stage.is_composer_stage:
                self._regenerate_options()
            return
        if not _is_works_key(key):
            return

        composer_id = key[1]
        if composer_id != self._stage.composer_id:
            self._works.pop(composer_id, None)
            return

        self._works[composer_id] = QueryResult.failure(message)
        logger.error(f"Failed to load works for composer {composer_id}: {message}")
        self._regenerate_options()
