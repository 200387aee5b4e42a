"""
Module: selection.config

Purpose:
    Configuration dataclass for the selection engine.
    Immutable configuration with validation on construction.

Key Classes:
    - SelectionConfig: Prompts, default catalog prefix and selection size

Dependencies:
    - dataclasses (std)
    - selection.options: DEFAULT_CATALOG_PREFIX
    - selection.transitions: MAX_ENTRIES

Used By:
    - selection.engine: SelectionEngine
"""

from __future__ import annotations

from dataclasses import dataclass

from .options import DEFAULT_CATALOG_PREFIX
from .transitions import MAX_ENTRIES


@dataclass(frozen=True)
class SelectionConfig:
    """
    Configuration for the selection engine (immutable).

    Attributes:
        default_placeholder: Prompt shown while choosing a composer
        work_placeholder: Prompt shown once a composer is chosen
        default_catalog_prefix: Prefix used when a composer has no override
        max_entries: Entries in a complete selection (composer + work)

    Invariants:
        - default_placeholder and work_placeholder are non-empty
        - max_entries == 2

    Example:
        >>> config = SelectionConfig()
        >>> config.default_catalog_prefix
        'Op. '
    """

    default_placeholder: str = "Enter composer..."
    work_placeholder: str = "Select a work..."
    default_catalog_prefix: str = DEFAULT_CATALOG_PREFIX
    max_entries: int = MAX_ENTRIES

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if not self.default_placeholder:
            raise ValueError("default_placeholder must be non-empty")
        if not self.work_placeholder:
            raise ValueError("work_placeholder must be non-empty")
        if self.max_entries != MAX_ENTRIES:
            raise ValueError(
                f"max_entries must be {MAX_ENTRIES} (composer + work): {self.max_entries}"
            )
