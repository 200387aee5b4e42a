"""
Module: providers.config

Purpose:
    Configuration dataclass for the bundled catalog and daily puzzle.
    Immutable configuration with validation on construction.

Key Classes:
    - CatalogConfig: Catalog paths and puzzle date/seed

Dependencies:
    - dataclasses (std)
    - pathlib (std)

Used By:
    - providers.catalog: JsonCatalogProvider
    - providers.puzzle: DailyPuzzleOracle
    - gui.main_window: MainWindow
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Mapping, Optional

ENV_CATALOG = "COMPOSER_QUIZ_CATALOG"
ENV_PREFIXES = "COMPOSER_QUIZ_PREFIXES"
ENV_DATE = "COMPOSER_QUIZ_DATE"
ENV_SEED = "COMPOSER_QUIZ_SEED"


def bundled_data_dir() -> Path:
    """Directory holding the bundled JSON data (dev or frozen)."""
    if hasattr(sys, "_MEIPASS"):
        return Path(sys._MEIPASS) / "composer_quiz" / "data"
    return Path(__file__).resolve().parent.parent / "data"


@dataclass(frozen=True)
class CatalogConfig:
    """
    Configuration for catalog loading and puzzle selection (immutable).

    Attributes:
        catalog_path: JSON catalog of composers and their works
        prefixes_path: JSON mapping of composer id to catalog prefix
        puzzle_date: Day the puzzle is drawn for (None = today)
        puzzle_seed: Offset mixed into the daily draw

    Example:
        >>> config = CatalogConfig(puzzle_date=date(2024, 3, 1))
        >>> config.catalog_path.name
        'composers.json'
    """

    catalog_path: Path = field(default_factory=lambda: bundled_data_dir() / "composers.json")
    prefixes_path: Path = field(default_factory=lambda: bundled_data_dir() / "catalog_prefixes.json")
    puzzle_date: Optional[date] = None
    puzzle_seed: int = 0

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.catalog_path.suffix != ".json":
            raise ValueError(f"catalog_path must be a .json file: {self.catalog_path}")
        if self.prefixes_path.suffix != ".json":
            raise ValueError(f"prefixes_path must be a .json file: {self.prefixes_path}")
        if self.puzzle_seed < 0:
            raise ValueError(f"puzzle_seed must be non-negative: {self.puzzle_seed}")

    @property
    def effective_date(self) -> date:
        return self.puzzle_date or date.today()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> CatalogConfig:
        """
        Build a config from environment variables, falling back to defaults.

        Reads COMPOSER_QUIZ_CATALOG, COMPOSER_QUIZ_PREFIXES,
        COMPOSER_QUIZ_DATE (ISO format) and COMPOSER_QUIZ_SEED.

        Raises:
            ValueError: If a date or seed value cannot be parsed
        """
        env = os.environ if environ is None else environ
        kwargs = {}
        if env.get(ENV_CATALOG):
            kwargs["catalog_path"] = Path(env[ENV_CATALOG])
        if env.get(ENV_PREFIXES):
            kwargs["prefixes_path"] = Path(env[ENV_PREFIXES])
        if env.get(ENV_DATE):
            kwargs["puzzle_date"] = date.fromisoformat(env[ENV_DATE])
        if env.get(ENV_SEED):
            kwargs["puzzle_seed"] = int(env[ENV_SEED])
        return cls(**kwargs)
