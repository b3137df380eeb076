"""Beer aggregate: one inventory record with a bounded stock counter.

Each beer has a unique name and a ``quantity`` that increment and
decrement keep inside ``[0, max]``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from beerstock.domain.exceptions import (
    BeerStockExceededError,
    NegativeStockError,
    ValidationError,
)

MAX_STOCK_LIMIT = 500


class BeerType(Enum):
    LAGER = "Lager"
    MALZBIER = "Malzbier"
    WITBIER = "Witbier"
    WEISS = "Weiss"
    ALE = "Ale"
    IPA = "IPA"
    STOUT = "Stout"

    @classmethod
    def parse(cls, raw: str) -> BeerType:
        """Accept either the member name or its description, any case."""
        wanted = raw.strip().lower()
        for member in cls:
            if wanted in (member.name.lower(), member.value.lower()):
                return member
        raise ValidationError(f"Unknown beer type: {raw!r}")


@dataclass(frozen=True)
class Beer:
    """Aggregate root for beer stock.

    Invariants:
    - ``0 <= quantity <= max`` after every increment or decrement
    - ``max`` never changes through increment or decrement

    Instances are immutable: increment and decrement return a new Beer
    that the caller must save. ``id`` is ``None`` until the store assigns one on insert.
    """

    name: str
    brand: str
    type: BeerType
    max: int
    quantity: int
    id: int | None = None

    def increment(self, delta: int) -> Beer:
        """Return a copy holding ``delta`` more units.

        Raises BeerStockExceededError if the result would exceed ``max``.
        """
        _check_delta(delta)
        new_quantity = self.quantity + delta
        if new_quantity > self.max:
            raise BeerStockExceededError()
        return replace(self, quantity=new_quantity)

    def decrement(self, delta: int) -> Beer:
        """Return a copy holding ``delta`` fewer units.

        Raises NegativeStockError if the result would drop below zero.
        """
        _check_delta(delta)
        new_quantity = self.quantity - delta
        if new_quantity < 0:
            raise NegativeStockError()
        return replace(self, quantity=new_quantity)

    def with_id(self, beer_id: int) -> Beer:
        return replace(self, id=beer_id)


def _check_delta(delta: int) -> None:
    if not isinstance(delta, int) or isinstance(delta, bool):
        raise ValidationError(
            f"Stock adjustment must be an integer, got {type(delta).__name__}"
        )
    if delta < 0:
        raise ValidationError("Stock adjustment cannot be negative")
