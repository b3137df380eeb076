import click

from beerstock.infrastructure.cli.beer_commands import (
    beer_create,
    beer_decrement,
    beer_delete,
    beer_increment,
    beer_list,
    beer_replace,
    beer_show,
)
from beerstock.infrastructure.config import get_settings
from beerstock.infrastructure.logging import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every stock change.")
def cli(verbose: bool) -> None:
    """Beer Stock: bounded inventory of beers"""
    configure_logging("INFO" if verbose else get_settings().log_level)


@cli.group()
def beer() -> None:
    """Manage beers and their stock."""


# Register subcommands
beer.add_command(beer_create)
beer.add_command(beer_delete)
beer.add_command(beer_decrement)
beer.add_command(beer_increment)
beer.add_command(beer_list)
beer.add_command(beer_replace)
beer.add_command(beer_show)
