"""
Module: catalog

Purpose:
    Provides the Composer and Work dataclasses - the immutable records
    supplied by a candidate provider. A Work is always scoped to the
    composer that owns it.

Key Functions:
    - Composer.from_dict() / Composer.to_dict(): Serialization
    - Work.from_dict() / Work.to_dict(): Serialization
    - Work.has_opus_number: Whether the numeric suffix is displayed

Dependencies:
    - dataclasses (std)

Used By:
    - core.models.guess: Guess, PuzzleAnswer
    - selection.options: Option derivation
    - providers.catalog: JSON catalog provider
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class Composer:
    """
    Composer record (immutable).

    Attributes:
        id: Unique, stable composer identifier
        full_name: Display name, e.g. "Johann Sebastian Bach"

    Example:
        >>> Composer(id=1, full_name="Johann Sebastian Bach")
        Composer(id=1, full_name='Johann Sebastian Bach')
    """

    id: int
    full_name: str

    def __post_init__(self) -> None:
        if not self.full_name:
            raise ValueError(f"Composer {self.id} must have a full_name")

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "fullName": self.full_name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Composer:
        return cls(id=int(data["id"]), full_name=str(data["fullName"]))


@dataclass(frozen=True, slots=True)
class Work:
    """
    Work record (immutable), owned by exactly one composer.

    The identifier is only unique within the owning composer, so
    comparisons across composers must also compare ``composer_id``.

    Attributes:
        id: Work identifier, unique within its composer
        composer_id: Identifier of the owning composer
        opus: Catalog number as printed, e.g. "1007" or "525"
        work_title: Title of the work
        opus_number: Optional number within the opus (e.g. Op. 27 #2)

    Example:
        >>> work = Work(id=10, composer_id=1, opus="1007", work_title="Cello Suite No. 1")
        >>> work.has_opus_number
        False
    """

    id: int
    composer_id: int
    opus: str
    work_title: str
    opus_number: Optional[int] = None

    @property
    def has_opus_number(self) -> bool:
        """
        Whether the ``#<opus_number>`` suffix should be displayed.

        A missing, zero or negative number suppresses the suffix.
        """
        return bool(self.opus_number) and self.opus_number >= 0

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "opus": self.opus,
            "workTitle": self.work_title,
        }
        if self.opus_number is not None:
            data["opusNumber"] = self.opus_number
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any], composer_id: int) -> Work:
        """
        Build a Work from a catalog payload.

        Args:
            data: Payload with ``id``, ``opus``, ``workTitle`` and
                optional ``opusNumber``
            composer_id: Owning composer (payloads are nested per composer)
        """
        opus_number = data.get("opusNumber")
        return cls(
            id=int(data["id"]),
            composer_id=composer_id,
            opus=str(data["opus"]),
            work_title=str(data["workTitle"]),
            opus_number=int(opus_number) if opus_number is not None else None,
        )
