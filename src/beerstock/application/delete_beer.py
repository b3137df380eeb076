"""Application service: Delete Beer use case."""

from __future__ import annotations

import structlog

from beerstock.application.locking import RecordLocks, beer_key
from beerstock.application.result import Failure, Ok, Result
from beerstock.domain.exceptions import BeerNotFoundError
from beerstock.domain.repository.beer_repository import BeerRepository

logger = structlog.get_logger(__name__)


class DeleteBeerHandler:

    def __init__(self, beer_repo: BeerRepository, locks: RecordLocks) -> None:
        self._beer_repo = beer_repo
        self._locks = locks

    def handle(self, beer_id: int) -> Result[None]:
        with self._locks.hold(beer_key(beer_id)), self._beer_repo.transaction():
            beer = self._beer_repo.find_by_id(beer_id)
            if beer is None:
                logger.warning("Beer deletion rejected", beer_id=beer_id, reason="not found")
                return Failure(BeerNotFoundError(beer_id))
            self._beer_repo.delete(beer)

        logger.info("Beer deleted", beer_id=beer_id, name=beer.name)
        return Ok(None)
