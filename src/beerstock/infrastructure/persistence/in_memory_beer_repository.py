"""Dict-backed implementation of BeerRepository.

Used when the stock does not need to outlive the process. Beers are
frozen, so handing out the stored instances is safe.
"""

from __future__ import annotations

import itertools
import threading

from beerstock.domain.model.beer import Beer
from beerstock.domain.repository.beer_repository import BeerRepository


class InMemoryBeerRepository(BeerRepository):

    def __init__(self, beers: list[Beer] | None = None) -> None:
        seed = beers or []
        self._store: dict[int, Beer] = {}
        self._lock = threading.RLock()
        start = max((b.id for b in seed if b.id is not None), default=0) + 1
        self._ids = itertools.count(start)
        for beer in seed:
            self.save(beer)

    def find_by_name(self, name: str) -> Beer | None:
        with self._lock:
            for beer in self._store.values():
                if beer.name == name:
                    return beer
        return None

    def find_by_id(self, beer_id: int) -> Beer | None:
        with self._lock:
            return self._store.get(beer_id)

    def find_all(self) -> list[Beer]:
        with self._lock:
            return list(self._store.values())

    def insert(self, beer: Beer) -> Beer:
        with self._lock:
            stored = beer.with_id(next(self._ids))
            self._store[stored.id] = stored
        return stored

    def save(self, beer: Beer) -> Beer:
        if beer.id is None:
            return self.insert(beer)
        with self._lock:
            self._store[beer.id] = beer
        return beer

    def delete(self, beer: Beer) -> None:
        with self._lock:
            self._store.pop(beer.id, None)
