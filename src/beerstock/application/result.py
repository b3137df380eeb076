"""Result values returned by every application handler.

A handler never raises a domain error at its caller. It returns either
``Ok(value)`` or ``Failure(error)`` where ``error`` is one of the
DomainException subclasses. Store failures are not domain outcomes and
still propagate as ``StoreError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

from beerstock.domain.exceptions import DomainException

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Failure:
    error: DomainException

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self):
        """Re-raise the carried domain error."""
        raise self.error


Result = Union[Ok[T], Failure]
