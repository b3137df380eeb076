"""Application service: Show Beer use case (query)."""

from __future__ import annotations

from beerstock.application import mapper
from beerstock.application.dto import BeerDTO
from beerstock.application.result import Failure, Ok, Result
from beerstock.domain.exceptions import BeerNotFoundError
from beerstock.domain.repository.beer_repository import BeerRepository


class ShowBeerHandler:

    def __init__(self, beer_repo: BeerRepository) -> None:
        self._beer_repo = beer_repo

    def handle(self, name: str) -> Result[BeerDTO]:
        beer = self._beer_repo.find_by_name(name)
        if beer is None:
            return Failure(BeerNotFoundError(name))
        return Ok(mapper.to_dto(beer))
