"""Integration tests for the ShowBeer and ListBeers queries."""

from beerstock.application.list_beers import ListBeersHandler
from beerstock.application.result import Failure, Ok
from beerstock.application.show_beer import ShowBeerHandler
from beerstock.domain.exceptions import BeerNotFoundError
from beerstock.infrastructure.persistence.in_memory_beer_repository import (
    InMemoryBeerRepository,
)
from tests.fakes import make_beer


class TestShowBeer:

    def test_show_returns_matching_beer(self):
        repo = InMemoryBeerRepository([make_beer(id=3, name="Brahma", quantity=12)])

        result = ShowBeerHandler(repo).handle("Brahma")

        assert isinstance(result, Ok)
        assert result.value.id == 3
        assert result.value.quantity == 12
        assert result.value.type == "Lager"

    def test_show_unknown_name_not_found(self):
        repo = InMemoryBeerRepository([make_beer(name="Brahma")])

        result = ShowBeerHandler(repo).handle("Heineken")

        assert isinstance(result, Failure)
        assert isinstance(result.error, BeerNotFoundError)

    def test_name_lookup_is_exact(self):
        repo = InMemoryBeerRepository([make_beer(name="Brahma")])
        assert not ShowBeerHandler(repo).handle("brahma").ok


class TestListBeers:

    def test_list_returns_every_beer(self):
        repo = InMemoryBeerRepository([
            make_beer(id=1, name="Brahma"),
            make_beer(id=2, name="Skol"),
        ])

        beers = ListBeersHandler(repo).handle().unwrap()

        assert sorted(b.name for b in beers) == ["Brahma", "Skol"]

    def test_empty_stock_is_success(self):
        result = ListBeersHandler(InMemoryBeerRepository()).handle()

        assert isinstance(result, Ok)
        assert result.value == []
