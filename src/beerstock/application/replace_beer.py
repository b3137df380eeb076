"""Application service: Replace Beer use case.

Overwrites every field of an existing beer except its ID. ``max`` and
``quantity`` are adopted exactly as given; the previous stock level plays
no part in the check. Renaming onto a name another beer holds is refused.
"""

from __future__ import annotations

import structlog

from beerstock.application import mapper
from beerstock.application.dto import BeerDTO, BeerInput
from beerstock.application.locking import NAMES, RecordLocks, beer_key
from beerstock.application.result import Failure, Ok, Result
from beerstock.domain.exceptions import (
    BeerAlreadyExistsError,
    BeerNotFoundError,
    DomainException,
)
from beerstock.domain.repository.beer_repository import BeerRepository

logger = structlog.get_logger(__name__)


class ReplaceBeerHandler:

    def __init__(self, beer_repo: BeerRepository, locks: RecordLocks) -> None:
        self._beer_repo = beer_repo
        self._locks = locks

    def handle(self, beer_id: int, data: BeerInput) -> Result[BeerDTO]:
        with self._locks.hold(beer_key(beer_id), NAMES), self._beer_repo.transaction():
            try:
                if self._beer_repo.find_by_id(beer_id) is None:
                    raise BeerNotFoundError(beer_id)

                holder = self._beer_repo.find_by_name(data.name)
                if holder is not None and holder.id != beer_id:
                    raise BeerAlreadyExistsError(data.name)

                beer = self._beer_repo.save(mapper.to_entity(data, beer_id=beer_id))
            except DomainException as exc:
                logger.warning("Beer replace rejected", beer_id=beer_id, reason=str(exc))
                return Failure(exc)

        logger.info("Beer replaced", beer_id=beer_id, name=beer.name, quantity=beer.quantity)
        return Ok(mapper.to_dto(beer))
