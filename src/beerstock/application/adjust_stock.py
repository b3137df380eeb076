"""Application services: Increment Stock and Decrement Stock use cases.

Both are a read-modify-write on one beer. The read, the bounds check on
the Beer aggregate, and the save all happen while that beer's lock and
the store's transaction are held, so two concurrent adjustments (from
this process or another one sharing the store) can never both commit
against the same stale quantity. On any failure nothing is saved.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

import structlog

from beerstock.application import mapper
from beerstock.application.dto import BeerDTO
from beerstock.application.locking import RecordLocks, beer_key
from beerstock.application.result import Failure, Ok, Result
from beerstock.domain.exceptions import BeerNotFoundError, DomainException
from beerstock.domain.model.beer import Beer
from beerstock.domain.repository.beer_repository import BeerRepository

logger = structlog.get_logger(__name__)


class _AdjustStockHandler(ABC):

    action = ""

    def __init__(self, beer_repo: BeerRepository, locks: RecordLocks) -> None:
        self._beer_repo = beer_repo
        self._locks = locks

    def handle(self, beer_id: int, delta: int) -> Result[BeerDTO]:
        with self._locks.hold(beer_key(beer_id)), self._beer_repo.transaction():
            try:
                beer = self._beer_repo.find_by_id(beer_id)
                if beer is None:
                    raise BeerNotFoundError(beer_id)
                updated = self._beer_repo.save(self._apply(beer, delta))
            except DomainException as exc:
                logger.warning(
                    f"Stock {self.action} rejected",
                    beer_id=beer_id,
                    delta=delta,
                    reason=str(exc),
                )
                return Failure(exc)

        logger.info(
            f"Stock {self.action}ed",
            beer_id=beer_id,
            delta=delta,
            quantity=updated.quantity,
        )
        return Ok(mapper.to_dto(updated))

    @abstractmethod
    def _apply(self, beer: Beer, delta: int) -> Beer:
        """Return the adjusted beer, or raise the matching DomainException."""


class IncrementStockHandler(_AdjustStockHandler):

    action = "increment"

    def _apply(self, beer: Beer, delta: int) -> Beer:
        return beer.increment(delta)


class DecrementStockHandler(_AdjustStockHandler):

    action = "decrement"

    def _apply(self, beer: Beer, delta: int) -> Beer:
        return beer.decrement(delta)
