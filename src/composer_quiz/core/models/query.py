"""
Module: query

Purpose:
    Provides QueryResult - the uniform pending/error/success shape of
    every asynchronous collaborator response (composer list, work list,
    puzzle answer).

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - selection.engine: Cached provider data
    - providers.puzzle: Answer oracle state
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class QueryStatus(str, Enum):
    """Lifecycle of an asynchronous request."""
    PENDING = "pending"
    ERROR = "error"
    SUCCESS = "success"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class QueryResult(Generic[T]):
    """
    Result of an asynchronous request (immutable).

    Attributes:
        status: PENDING, ERROR or SUCCESS
        data: Payload, only set on SUCCESS
        error: Error message, only set on ERROR

    Example:
        >>> QueryResult.success([1, 2]).is_success
        True
        >>> QueryResult.pending().data is None
        True
    """

    status: QueryStatus
    data: Optional[T] = None
    error: Optional[str] = None

    @classmethod
    def pending(cls) -> QueryResult[T]:
        return cls(status=QueryStatus.PENDING)

    @classmethod
    def success(cls, data: T) -> QueryResult[T]:
        return cls(status=QueryStatus.SUCCESS, data=data)

    @classmethod
    def failure(cls, error: str) -> QueryResult[T]:
        return cls(status=QueryStatus.ERROR, error=error)

    @property
    def is_pending(self) -> bool:
        return self.status is QueryStatus.PENDING

    @property
    def is_error(self) -> bool:
        return self.status is QueryStatus.ERROR

    @property
    def is_success(self) -> bool:
        return self.status is QueryStatus.SUCCESS
