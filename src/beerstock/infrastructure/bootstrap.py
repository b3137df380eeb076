"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from beerstock.application.locking import RecordLocks
from beerstock.infrastructure.config import get_settings
from beerstock.infrastructure.persistence.json_beer_repository import (
    JsonBeerRepository,
)

# One lock registry per process; every handler must share it.
_RECORD_LOCKS = RecordLocks()


def beer_repository() -> JsonBeerRepository:
    return JsonBeerRepository(get_settings().beers_file)


def record_locks() -> RecordLocks:
    return _RECORD_LOCKS
