"""Application service: List Beers use case (query)."""

from __future__ import annotations

from beerstock.application import mapper
from beerstock.application.dto import BeerDTO
from beerstock.application.result import Ok, Result
from beerstock.domain.repository.beer_repository import BeerRepository


class ListBeersHandler:

    def __init__(self, beer_repo: BeerRepository) -> None:
        self._beer_repo = beer_repo

    def handle(self) -> Result[list[BeerDTO]]:
        """Return every live beer in store order; an empty stock is not an error."""
        return Ok([mapper.to_dto(beer) for beer in self._beer_repo.find_all()])
