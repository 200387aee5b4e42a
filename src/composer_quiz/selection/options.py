"""
Module: selection.options

Purpose:
    Derives the list of selectable ChoiceOptions for the current stage.
    Option lists are always recomputed from provider data, never patched
    in place.

Key Functions:
    - derive_options(): Option list for a stage and the cached provider data
    - composer_options(): Alphabetic composer options
    - work_options(): Work options in provider order
    - render_work_label(): "(<prefix><opus>[ #<n>]) <title>"

Dependencies:
    - PySide6.QtCore: QCollator, QLocale (locale-aware ordering)
    - core.models: ChoiceOption, Composer, Work, QueryResult

Used By:
    - selection.engine: SelectionEngine
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cmp_to_key
from typing import List, Mapping, Optional, Sequence

from PySide6.QtCore import QCollator, QLocale, Qt

from composer_quiz.core.models import ChoiceOption, Composer, QueryResult, Work

DEFAULT_CATALOG_PREFIX = "Op. "


@dataclass(frozen=True)
class Stage:
    """
    Active selection stage.

    ``composer_id is None`` is the composer stage; otherwise the user is
    choosing among the works of that composer.
    """

    composer_id: Optional[int] = None

    @property
    def is_composer_stage(self) -> bool:
        return self.composer_id is None

    @property
    def is_work_stage(self) -> bool:
        return self.composer_id is not None


COMPOSER_STAGE = Stage()


def collator(locale: Optional[QLocale] = None) -> QCollator:
    """
    Case-insensitive collator for display names.

    The system locale is used unless one is given. The "C" locale only
    compares code points, so English collation stands in for it.
    """
    if locale is None:
        locale = QLocale()
    if locale.language() == QLocale.Language.C:
        locale = QLocale(QLocale.Language.English, QLocale.Country.UnitedStates)
    result = QCollator(locale)
    result.setCaseSensitivity(Qt.CaseSensitivity.CaseInsensitive)
    return result


def _compare_labels(coll: QCollator, left: str, right: str) -> int:
    order = coll.compare(left, right)
    if order:
        return order
    # Deterministic tiebreak for labels that collate equal
    return (left > right) - (left < right)


def composer_options(
    composers: Sequence[Composer],
    locale: Optional[QLocale] = None,
) -> List[ChoiceOption]:
    """
    Map composers to options sorted by display name.

    Order is alphabetic for the locale (accents and case are secondary)
    regardless of the order the provider returned.
    """
    options = [
        ChoiceOption(value=composer.id, label=composer.full_name, is_fixed=False)
        for composer in composers
    ]
    coll = collator(locale)
    return sorted(
        options,
        key=cmp_to_key(lambda a, b: _compare_labels(coll, a.label, b.label)),
    )


def render_work_label(
    work: Work,
    composer_id: int,
    prefixes: Mapping[int, str],
    default_prefix: str = DEFAULT_CATALOG_PREFIX,
) -> str:
    """
    Render the display label for a work.

    Args:
        work: Work to render
        composer_id: Committed composer (selects the catalog prefix)
        prefixes: Composer-specific catalog prefix overrides
        default_prefix: Prefix used when no override exists

    Returns:
        Label such as "(BWV 1007) Cello Suite No. 1" or
        "(Op. 27 #2) Piano Sonata No. 14"
    """
    prefix = prefixes.get(composer_id, default_prefix)
    suffix = f" #{work.opus_number}" if work.has_opus_number else ""
    return f"({prefix}{work.opus}{suffix}) {work.work_title}"


def work_options(
    works: Sequence[Work],
    composer_id: int,
    prefixes: Mapping[int, str],
    default_prefix: str = DEFAULT_CATALOG_PREFIX,
) -> List[ChoiceOption]:
    """Map works to options, keeping provider order."""
    return [
        ChoiceOption(
            value=work.id,
            label=render_work_label(work, composer_id, prefixes, default_prefix),
            is_fixed=False,
        )
        for work in works
    ]


def derive_options(
    stage: Stage,
    composers: QueryResult[List[Composer]],
    works: QueryResult[List[Work]],
    prefixes: Mapping[int, str],
    default_prefix: str = DEFAULT_CATALOG_PREFIX,
) -> List[ChoiceOption]:
    """
    Compute the option list for the active stage.

    Pending or failed sources yield an empty list.

    Args:
        stage: Composer stage or work stage for a committed composer
        composers: Composer list query result
        works: Work list query result for ``stage.composer_id``
        prefixes: Catalog prefix overrides keyed by composer id
        default_prefix: Prefix used without an override

    Returns:
        Freshly built list of ChoiceOptions
    """
    if stage.is_composer_stage:
        if not composers.is_success or composers.data is None:
            return []
        return composer_options(composers.data)

    if not works.is_success or works.data is None:
        return []
    return work_options(works.data, stage.composer_id, prefixes, default_prefix)
