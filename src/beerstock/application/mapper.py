"""Translation between DTOs and the Beer aggregate.

Plain functions with no state of their own.
"""

from __future__ import annotations

from beerstock.application.dto import BeerDTO, BeerInput
from beerstock.domain.model.beer import Beer, BeerType


def to_dto(beer: Beer) -> BeerDTO:
    return BeerDTO(
        id=beer.id,  # type: ignore[arg-type]
        name=beer.name,
        brand=beer.brand,
        max=beer.max,
        quantity=beer.quantity,
        type=beer.type.value,
    )


def to_entity(data: BeerInput, beer_id: int | None = None) -> Beer:
    """Build a Beer from caller input.

    Raises ValidationError if ``data.type`` is not a known BeerType.
    """
    return Beer(
        id=beer_id,
        name=data.name,
        brand=data.brand,
        type=BeerType.parse(data.type),
        max=data.max,
        quantity=data.quantity,
    )
