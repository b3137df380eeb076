"""Integration tests for the ReplaceBeer use case."""

from beerstock.application.locking import RecordLocks
from beerstock.application.replace_beer import ReplaceBeerHandler
from beerstock.application.result import Failure, Ok
from beerstock.domain.exceptions import BeerAlreadyExistsError, BeerNotFoundError
from beerstock.domain.model.beer import BeerType
from beerstock.infrastructure.persistence.in_memory_beer_repository import (
    InMemoryBeerRepository,
)
from tests.fakes import make_beer, make_input


def _setup():
    repo = InMemoryBeerRepository([
        make_beer(id=1, name="Brahma", max=50, quantity=10),
        make_beer(id=2, name="Skol", max=30, quantity=3),
    ])
    return repo, ReplaceBeerHandler(repo, RecordLocks())


class TestReplaceBeerHappyPath:

    def test_replace_overwrites_all_fields_but_id(self):
        repo, handler = _setup()

        result = handler.handle(
            1, make_input(name="Brahma Duplo Malte", brand="Ambev", max=80, quantity=60, type="Malzbier"),
        )

        assert isinstance(result, Ok)
        stored = repo.find_by_id(1)
        assert stored.id == 1
        assert stored.name == "Brahma Duplo Malte"
        assert stored.type is BeerType.MALZBIER
        assert (stored.max, stored.quantity) == (80, 60)
        assert result.value.id == 1

    def test_replace_adopts_quantity_regardless_of_previous_stock(self):
        repo, handler = _setup()

        handler.handle(1, make_input(name="Brahma", max=5, quantity=0))

        assert (repo.find_by_id(1).max, repo.find_by_id(1).quantity) == (5, 0)

    def test_replace_keeping_own_name_allowed(self):
        repo, handler = _setup()
        assert handler.handle(1, make_input(name="Brahma", brand="New")).ok
        assert repo.find_by_id(1).brand == "New"


class TestReplaceBeerValidation:

    def test_replace_unknown_id_not_found(self):
        repo, handler = _setup()

        result = handler.handle(99, make_input(name="Ghost"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, BeerNotFoundError)
        assert repo.find_by_name("Ghost") is None

    def test_rename_onto_existing_name_rejected(self):
        repo, handler = _setup()

        result = handler.handle(1, make_input(name="Skol"))

        assert isinstance(result.error, BeerAlreadyExistsError)
        assert repo.find_by_id(1).name == "Brahma"
        assert [b.id for b in repo.find_all() if b.name == "Skol"] == [2]
