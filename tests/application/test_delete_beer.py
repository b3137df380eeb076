"""Integration tests for the DeleteBeer use case."""

from beerstock.application.delete_beer import DeleteBeerHandler
from beerstock.application.locking import RecordLocks
from beerstock.application.result import Failure, Ok
from beerstock.application.show_beer import ShowBeerHandler
from beerstock.domain.exceptions import BeerNotFoundError
from beerstock.infrastructure.persistence.in_memory_beer_repository import (
    InMemoryBeerRepository,
)
from tests.fakes import make_beer


def _setup():
    repo = InMemoryBeerRepository([make_beer(id=1, name="Brahma")])
    return repo, DeleteBeerHandler(repo, RecordLocks())


class TestDeleteBeer:

    def test_delete_removes_beer(self):
        repo, handler = _setup()

        result = handler.handle(1)

        assert result == Ok(None)
        assert repo.find_by_id(1) is None
        assert not ShowBeerHandler(repo).handle("Brahma").ok

    def test_second_delete_not_found(self):
        _, handler = _setup()
        assert handler.handle(1).ok

        result = handler.handle(1)

        assert isinstance(result, Failure)
        assert isinstance(result.error, BeerNotFoundError)

    def test_delete_unknown_id_leaves_store_alone(self):
        repo, handler = _setup()

        result = handler.handle(99)

        assert isinstance(result.error, BeerNotFoundError)
        assert len(repo.find_all()) == 1
