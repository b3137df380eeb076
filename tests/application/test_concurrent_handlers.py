"""Concurrency tests: many callers hitting the same beer at once."""

from concurrent.futures import ThreadPoolExecutor

from beerstock.application.adjust_stock import (
    DecrementStockHandler,
    IncrementStockHandler,
)
from beerstock.application.create_beer import CreateBeerHandler
from beerstock.application.locking import RecordLocks
from beerstock.domain.exceptions import (
    BeerAlreadyExistsError,
    BeerStockExceededError,
    NegativeStockError,
)
from tests.fakes import SlowBeerRepository, make_beer, make_input

N = 20


def _run_concurrently(fn, args):
    with ThreadPoolExecutor(max_workers=len(args)) as pool:
        return list(pool.map(fn, args))


class TestConcurrentIncrement:

    def test_exactly_capacity_increments_succeed(self):
        repo = SlowBeerRepository([make_beer(id=1, max=N - 1, quantity=0)])
        handler = IncrementStockHandler(repo, RecordLocks())

        results = _run_concurrently(lambda _: handler.handle(1, 1), range(N))

        successes = [r for r in results if r.ok]
        failures = [r for r in results if not r.ok]
        assert len(successes) == N - 1
        assert len(failures) == 1
        assert all(isinstance(f.error, BeerStockExceededError) for f in failures)
        assert repo.find_by_id(1).quantity == N - 1

    def test_mixed_adjustments_keep_bounds(self):
        repo = SlowBeerRepository([make_beer(id=1, max=10, quantity=5)])
        locks = RecordLocks()
        increment = IncrementStockHandler(repo, locks)
        decrement = DecrementStockHandler(repo, locks)

        def adjust(i):
            return increment.handle(1, 3) if i % 2 else decrement.handle(1, 3)

        results = _run_concurrently(adjust, range(N))

        for r in results:
            if not r.ok:
                assert isinstance(r.error, (BeerStockExceededError, NegativeStockError))
        net = sum(
            (3 if i % 2 else -3) for i, r in zip(range(N), results) if r.ok
        )
        final = repo.find_by_id(1).quantity
        assert final == 5 + net
        assert 0 <= final <= 10


class TestConcurrentCreate:

    def test_only_one_create_per_name_wins(self):
        repo = SlowBeerRepository()
        handler = CreateBeerHandler(repo, RecordLocks())

        results = _run_concurrently(lambda _: handler.handle(make_input(name="Brahma")), range(N))

        assert sum(r.ok for r in results) == 1
        assert all(
            isinstance(r.error, BeerAlreadyExistsError) for r in results if not r.ok
        )
        assert len(repo.find_all()) == 1
