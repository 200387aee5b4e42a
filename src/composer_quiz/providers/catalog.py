"""
JSON-backed candidate provider.

Loads the composer catalog and the catalog prefix lookup once, caches
them, and answers composer / work listings from the cache.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from composer_quiz.core.errors import CatalogError
from composer_quiz.core.models import Composer, Work

from .base import CandidateProvider
from .config import CatalogConfig

logger = logging.getLogger(__name__)


def _read_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise CatalogError(f"Catalog file not found: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise CatalogError(f"Could not read {path}: {e}") from e


def parse_catalog(payload: Any) -> tuple[List[Composer], Dict[int, List[Work]]]:
    """
    Parse a catalog payload into composers and per-composer works.

    Args:
        payload: Decoded JSON with a ``composers`` list; each composer
            carries its ``works``

    Returns:
        Tuple of (composers in file order, works keyed by composer id)

    Raises:
        CatalogError: If the payload is malformed or holds duplicate ids
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("composers"), list):
        raise CatalogError("Catalog must be an object with a 'composers' list")

    composers: List[Composer] = []
    works: Dict[int, List[Work]] = {}
    for entry in payload["composers"]:
        try:
            composer = Composer.from_dict(entry)
            composer_works = [Work.from_dict(w, composer.id) for w in entry.get("works", [])]
        except (KeyError, TypeError, ValueError) as e:
            raise CatalogError(f"Malformed catalog entry {entry!r}: {e}") from e

        if composer.id in works:
            raise CatalogError(f"Duplicate composer id {composer.id}")
        work_ids = [w.id for w in composer_works]
        if len(work_ids) != len(set(work_ids)):
            raise CatalogError(f"Duplicate work ids for composer {composer.id}")

        composers.append(composer)
        works[composer.id] = composer_works

    return composers, works


def parse_prefixes(payload: Any) -> Dict[int, str]:
    """
    Parse the catalog prefix lookup (JSON object keys are strings).

    Raises:
        CatalogError: If the payload is not an id -> string mapping
    """
    if not isinstance(payload, dict):
        raise CatalogError("Catalog prefixes must be a JSON object")
    try:
        return {int(key): str(value) for key, value in payload.items()}
    except ValueError as e:
        raise CatalogError(f"Catalog prefix keys must be composer ids: {e}") from e


class JsonCatalogProvider(CandidateProvider):
    """
    Candidate provider reading a bundled JSON catalog.

    Files are loaded lazily on first use and cached; loading is guarded
    by a lock because calls arrive from worker threads.

    Example:
        >>> provider = JsonCatalogProvider()
        >>> [c.full_name for c in provider.list_composers()][:1]
        ['Johann Sebastian Bach']
    """

    def __init__(self, config: Optional[CatalogConfig] = None):
        self.config = config or CatalogConfig()
        self._lock = threading.Lock()
        self._composers: Optional[List[Composer]] = None
        self._works: Dict[int, List[Work]] = {}
        self._prefixes: Optional[Dict[int, str]] = None

    def list_composers(self) -> List[Composer]:
        self._ensure_loaded()
        return list(self._composers)

    def list_works_by_composer(self, composer_id: int) -> List[Work]:
        self._ensure_loaded()
        if composer_id not in self._works:
            raise CatalogError(f"Unknown composer id {composer_id}")
        return list(self._works[composer_id])

    @property
    def catalog_prefixes(self) -> Mapping[int, str]:
        if self._prefixes is None:
            with self._lock:
                if self._prefixes is None:
                    self._prefixes = parse_prefixes(_read_json(self.config.prefixes_path))
        return self._prefixes

    def _ensure_loaded(self) -> None:
        """Load and cache the catalog if not already loaded."""
        if self._composers is not None:
            return

        with self._lock:
            if self._composers is not None:
                return
            logger.info(f"Loading catalog from {self.config.catalog_path}...")
            composers, works = parse_catalog(_read_json(self.config.catalog_path))
            self._works = works
            self._composers = composers
            logger.info(f"Cached {len(composers)} composers")
