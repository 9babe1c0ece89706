"""
CLI: nightly-update simulation and cart quotes over the default inventory.
"""
from __future__ import annotations

import dataclasses
from typing import List, Optional

import typer

from gilded_rose.bootstrap import create_app
from gilded_rose.cart.application import AddToCart, GetCart
from gilded_rose.catalog import Catalog, default_inventory, seeded_catalog
from gilded_rose.catalog.application import AddCatalogItem, AdvanceDay
from gilded_rose.core import Application, load_config_from_env, setup_logging
from gilded_rose.domain import DomainError, ItemNotFound
from gilded_rose.quality import Item

app = typer.Typer(help="Gilded Rose: age the inventory and price a cart.")


def money(value: float, currency: str) -> str:
    return f"{value:.2f} {currency}"


def _parse_add(entry: str) -> tuple[str, int]:
    name, sep, amount = entry.rpartition("=")
    if not sep or not name.strip():
        raise typer.BadParameter(f"expected NAME=AMOUNT, got {entry!r}", param_hint="--add")
    try:
        return name.strip(), int(amount)
    except ValueError:
        raise typer.BadParameter(f"amount is not an integer in {entry!r}", param_hint="--add") from None


def stock_default_inventory(application: Application) -> list[str]:
    """Add the seed inventory through the catalog commands; returns the new ids."""
    return [
        application.dispatch(
            AddCatalogItem(
                name=item.name,
                sell_in=item.sell_in,
                quality=item.quality,
                base_price=item.base_price,
                variant=item.variant.value,
            )
        )
        for item in default_inventory()
    ]


def _find_by_name(catalog: Catalog, name: str) -> Item:
    for item in catalog.get_items():
        if item.name.lower() == name.lower():
            return item
    raise ItemNotFound(name)


@app.command()
def simulate(
    days: int = typer.Option(2, "--days", "-n", min=0, help="Number of days to simulate"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Overrides GILDED_ROSE_LOG_LEVEL"),
) -> None:
    """Print the default inventory for day 0 through DAYS."""
    setup_logging(log_level or load_config_from_env().log_level)
    catalog = seeded_catalog()
    for day in range(days + 1):
        typer.echo(f"-------- day {day} --------")
        typer.echo("name, sellIn, quality")
        for item in catalog.get_items():
            typer.echo(f"{item.name}, {item.sell_in}, {item.quality}")
        typer.echo("")
        catalog.update_quality()


@app.command()
def quote(
    add: Optional[List[str]] = typer.Option(None, "--add", "-a", help="NAME=AMOUNT, repeatable"),
    days: int = typer.Option(0, "--days", "-n", min=0, help="Age the inventory first"),
    currency: Optional[str] = typer.Option(None, "--currency", help="Overrides GILDED_ROSE_CURRENCY"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Overrides GILDED_ROSE_LOG_LEVEL"),
) -> None:
    """Fill a cart from the default inventory and print the discounted total."""
    config = load_config_from_env()
    setup_logging(log_level or config.log_level)
    if currency:
        config = dataclasses.replace(config, currency=currency)
    application = create_app(config)
    stock_default_inventory(application)
    catalog = application.container.resolve(Catalog)

    requests = [_parse_add(entry) for entry in add or []]
    names: dict[str, str] = {}
    try:
        application.dispatch(AdvanceDay(days=days))
        for name, amount in requests:
            item = _find_by_name(catalog, name)
            names[item.id] = item.name
            application.dispatch(AddToCart(item_id=item.id, amount=amount))
    except DomainError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    cart = application.dispatch(GetCart())
    for line in cart["lines"]:
        typer.echo(
            f"{names[line['item_id']]} x{line['amount']}: "
            f"{money(line['discounted_unit_price'], cart['currency'])} each"
        )
    typer.echo(f"Total: {money(cart['total_price'], cart['currency'])}")


def main() -> None:
    """Entry point for the gilded-rose console command."""
    app()


if __name__ == "__main__":
    main()
