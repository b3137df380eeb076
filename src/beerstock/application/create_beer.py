"""Application service: Create Beer use case."""

from __future__ import annotations

import structlog

from beerstock.application import mapper
from beerstock.application.dto import BeerDTO, BeerInput
from beerstock.application.locking import NAMES, RecordLocks
from beerstock.application.result import Failure, Ok, Result
from beerstock.domain.exceptions import BeerAlreadyExistsError, DomainException
from beerstock.domain.repository.beer_repository import BeerRepository

logger = structlog.get_logger(__name__)


class CreateBeerHandler:

    def __init__(self, beer_repo: BeerRepository, locks: RecordLocks) -> None:
        self._beer_repo = beer_repo
        self._locks = locks

    def handle(self, data: BeerInput) -> Result[BeerDTO]:
        """Register a new beer under a name no live beer holds yet."""
        with self._locks.hold(NAMES), self._beer_repo.transaction():
            try:
                if self._beer_repo.find_by_name(data.name) is not None:
                    raise BeerAlreadyExistsError(data.name)
                beer = self._beer_repo.insert(mapper.to_entity(data))
            except DomainException as exc:
                logger.warning("Beer creation rejected", name=data.name, reason=str(exc))
                return Failure(exc)

        logger.info("Beer created", beer_id=beer.id, name=beer.name, quantity=beer.quantity)
        return Ok(mapper.to_dto(beer))
