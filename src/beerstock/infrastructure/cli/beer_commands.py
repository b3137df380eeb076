"""CLI commands for the Beer aggregate."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click

from beerstock.application.adjust_stock import (
    DecrementStockHandler,
    IncrementStockHandler,
)
from beerstock.application.create_beer import CreateBeerHandler
from beerstock.application.delete_beer import DeleteBeerHandler
from beerstock.application.dto import BeerDTO, BeerInput
from beerstock.application.list_beers import ListBeersHandler
from beerstock.application.replace_beer import ReplaceBeerHandler
from beerstock.application.show_beer import ShowBeerHandler
from beerstock.domain.exceptions import (
    BeerAlreadyExistsError,
    BeerNotFoundError,
    DomainException,
    StoreError,
)
from beerstock.domain.model.beer import MAX_STOCK_LIMIT, BeerType
from beerstock.infrastructure.bootstrap import beer_repository, record_locks

MAX_QUANTITY_PER_REQUEST = 100

EXIT_ALREADY_EXISTS = 3
EXIT_NOT_FOUND = 4
EXIT_UNPROCESSABLE = 5
EXIT_TEMPFAIL = 75


class CommandFailed(click.ClickException):
    """A ClickException carrying a failure-specific exit code."""

    def __init__(self, message: str, exit_code: int) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def _exit_code_for(error: DomainException) -> int:
    if isinstance(error, BeerNotFoundError):
        return EXIT_NOT_FOUND
    if isinstance(error, BeerAlreadyExistsError):
        return EXIT_ALREADY_EXISTS
    return EXIT_UNPROCESSABLE


@contextmanager
def _reported_failures() -> Iterator[None]:
    try:
        yield
    except DomainException as exc:
        raise CommandFailed(str(exc), _exit_code_for(exc)) from exc
    except StoreError as exc:
        raise CommandFailed(f"{exc} (temporary failure, retry)", EXIT_TEMPFAIL) from exc


def _check_length(low: int, high: int):
    def callback(ctx: click.Context, param: click.Parameter, value: str) -> str:
        if not low <= len(value) <= high:
            raise click.BadParameter(f"must be {low} to {high} characters long.")
        return value
    return callback


def _beer_options(command):
    """Attach the options shared by ``create`` and ``replace``."""
    options = [
        click.option("--name", required=True, callback=_check_length(1, 100), help="Beer name (unique)."),
        click.option("--brand", required=True, callback=_check_length(1, 150), help="Brand name."),
        click.option("--max", "max_", required=True, type=click.IntRange(0, MAX_STOCK_LIMIT), help="Stock capacity."),
        click.option("--quantity", required=True, type=click.IntRange(0, MAX_QUANTITY_PER_REQUEST), help="Units in stock."),
        click.option(
            "--type", "beer_type", required=True,
            type=click.Choice([t.value for t in BeerType], case_sensitive=False),
            help="Beer style.",
        ),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def _beer_input(name: str, brand: str, max_: int, quantity: int, beer_type: str) -> BeerInput:
    if quantity > max_:
        raise click.BadParameter(
            f"quantity {quantity} is above max {max_}.", param_hint="'--quantity'"
        )
    return BeerInput(name=name, brand=brand, max=max_, quantity=quantity, type=beer_type)


def _display_beer(dto: BeerDTO) -> None:
    click.echo(f"Beer #{dto.id}  {dto.name}")
    click.echo(f"Brand:    {dto.brand}")
    click.echo(f"Type:     {dto.type}")
    click.echo(f"Stock:    {dto.quantity}/{dto.max}")


@click.command("create")
@_beer_options
def beer_create(name: str, brand: str, max_: int, quantity: int, beer_type: str) -> None:
    """Register a new beer."""
    data = _beer_input(name, brand, max_, quantity, beer_type)

    with _reported_failures():
        handler = CreateBeerHandler(beer_repo=beer_repository(), locks=record_locks())
        dto = handler.handle(data).unwrap()

    click.echo(f"Beer #{dto.id} '{dto.name}' created  (stock {dto.quantity}/{dto.max})")


@click.command("show")
@click.argument("name")
def beer_show(name: str) -> None:
    """Show the beer registered under NAME."""
    with _reported_failures():
        handler = ShowBeerHandler(beer_repo=beer_repository())
        dto = handler.handle(name).unwrap()

    _display_beer(dto)


@click.command("list")
def beer_list() -> None:
    """List every beer in stock."""
    with _reported_failures():
        handler = ListBeersHandler(beer_repo=beer_repository())
        beers = handler.handle().unwrap()

    if not beers:
        click.echo("No beers found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Brand':<20} {'Type':<10} {'Stock':>9}")
    click.echo("-" * 69)
    for b in beers:
        stock = f"{b.quantity}/{b.max}"
        click.echo(f"{b.id:<6} {b.name:<20} {b.brand:<20} {b.type:<10} {stock:>9}")


@click.command("delete")
@click.option("--id", "beer_id", required=True, type=int, help="Beer ID to delete.")
def beer_delete(beer_id: int) -> None:
    """Delete a beer."""
    with _reported_failures():
        handler = DeleteBeerHandler(beer_repo=beer_repository(), locks=record_locks())
        handler.handle(beer_id).unwrap()

    click.echo(f"Beer #{beer_id} deleted.")


@click.command("replace")
@click.option("--id", "beer_id", required=True, type=int, help="Beer ID to overwrite.")
@_beer_options
def beer_replace(
    beer_id: int, name: str, brand: str, max_: int, quantity: int, beer_type: str
) -> None:
    """Overwrite every field of an existing beer."""
    data = _beer_input(name, brand, max_, quantity, beer_type)

    with _reported_failures():
        handler = ReplaceBeerHandler(beer_repo=beer_repository(), locks=record_locks())
        dto = handler.handle(beer_id, data).unwrap()

    click.echo(f"Beer #{dto.id} replaced.")
    _display_beer(dto)


_delta_option = click.option(
    "--quantity", "delta", required=True,
    type=click.IntRange(0, MAX_QUANTITY_PER_REQUEST),
    help="Units to add or remove.",
)


@click.command("increment")
@click.option("--id", "beer_id", required=True, type=int, help="Beer ID.")
@_delta_option
def beer_increment(beer_id: int, delta: int) -> None:
    """Add units to a beer's stock."""
    with _reported_failures():
        handler = IncrementStockHandler(beer_repo=beer_repository(), locks=record_locks())
        dto = handler.handle(beer_id, delta).unwrap()

    click.echo(f"Beer #{dto.id} stock is now {dto.quantity}/{dto.max}")


@click.command("decrement")
@click.option("--id", "beer_id", required=True, type=int, help="Beer ID.")
@_delta_option
def beer_decrement(beer_id: int, delta: int) -> None:
    """Remove units from a beer's stock."""
    with _reported_failures():
        handler = DecrementStockHandler(beer_repo=beer_repository(), locks=record_locks())
        dto = handler.handle(beer_id, delta).unwrap()

    click.echo(f"Beer #{dto.id} stock is now {dto.quantity}/{dto.max}")
