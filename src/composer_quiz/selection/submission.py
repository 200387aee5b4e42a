"""
Module: selection.submission

Purpose:
    Resolves a complete selection into a Guess and computes the
    selection that follows a judged guess.

Key Functions:
    - resolve_guess(): Join selected identifiers back to provider records
    - selection_after(): Next selection for a Verdict

Dependencies:
    - core.models: Guess, Verdict, Composer, Work
    - core.errors: UnresolvedSelectionError

Used By:
    - selection.engine: SelectionEngine.submit()
"""

from __future__ import annotations

from typing import Sequence

from composer_quiz.core.errors import UnresolvedSelectionError
from composer_quiz.core.models import Composer, Guess, Selection, Verdict, Work


def resolve_guess(
    selection: Selection,
    composers: Sequence[Composer],
    works: Sequence[Work],
) -> Guess:
    """
    Resolve a two-entry selection against cached provider data.

    Args:
        selection: Exactly two entries, composer then work
        composers: Cached composer list
        works: Cached works of the selected composer

    Returns:
        Guess holding the full Composer and Work records

    Raises:
        ValueError: If the selection does not hold exactly two entries
        UnresolvedSelectionError: If either identifier is not in the data
    """
    if len(selection) != 2:
        raise ValueError(f"Selection must hold a composer and a work, got {len(selection)} entries")

    composer_id = selection[0].value
    work_id = selection[1].value

    work = next(
        (w for w in works if w.id == work_id and w.composer_id == composer_id),
        None,
    )
    if work is None:
        raise UnresolvedSelectionError("work", work_id)

    composer = next((c for c in composers if c.id == composer_id), None)
    if composer is None:
        raise UnresolvedSelectionError("composer", composer_id)

    return Guess(composer=composer, work=work)


def selection_after(verdict: Verdict, selection: Selection) -> Selection:
    """
    Selection that follows a judged submission.

    CORRECT and MISS clear the selection. COMPOSER_ONLY keeps just the
    composer, locked so it cannot be removed while the work is retried.
    """
    if verdict is Verdict.COMPOSER_ONLY:
        return (selection[0].fixed(),)
    return ()
