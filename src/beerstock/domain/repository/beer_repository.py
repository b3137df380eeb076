"""Abstract repository for the Beer aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer.

Implementations must never expose a partially written record. A
``delete`` must be visible to every lookup that follows it, and an id
is never reused once assigned. Transient failures (including a lock
that cannot be taken) are raised as ``StoreError``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager

from beerstock.domain.model.beer import Beer


class BeerRepository(ABC):

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Hold the store exclusively for a read-modify-write.

        Stores shared between processes override this with a lock every
        process honours. The default suits stores private to one process.
        """
        yield

    @abstractmethod
    def find_by_name(self, name: str) -> Beer | None:
        """Return the live beer with this exact name, or None."""

    @abstractmethod
    def find_by_id(self, beer_id: int) -> Beer | None:
        """Return a beer by its ID, or None if not found."""

    @abstractmethod
    def find_all(self) -> list[Beer]:
        """Return every live beer (possibly none)."""

    @abstractmethod
    def insert(self, beer: Beer) -> Beer:
        """Persist a new beer and return it with its assigned ID."""

    @abstractmethod
    def save(self, beer: Beer) -> Beer:
        """Insert or overwrite the beer with ``beer.id``."""

    @abstractmethod
    def delete(self, beer: Beer) -> None:
        """Remove the beer with ``beer.id``."""
