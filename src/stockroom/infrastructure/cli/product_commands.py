"""CLI commands for the product list."""

from __future__ import annotations

import click

from stockroom.application.dto import ProductDTO
from stockroom.application.inventory_manager import InventoryManager
from stockroom.domain.exceptions import DomainException


def _display_products(products: list[ProductDTO]) -> None:
    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<32} {'Name':<24} {'Qty':>6}")
    click.echo("-" * 64)
    for p in products:
        click.echo(f"{p.id:<32} {p.name:<24} {p.quantity:>6}")


@click.command("list")
@click.pass_obj
def product_list(manager: InventoryManager) -> None:
    """List all products, sorted by name."""
    _display_products(manager.list_products())


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--quantity", required=True, help="Quantity in stock.")
@click.pass_obj
def product_add(manager: InventoryManager, name: str, quantity: str) -> None:
    """Add a new product."""
    try:
        products = manager.add(name=name, quantity_text=quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product '{name.strip()}' added")
    _display_products(products)


@click.command("edit")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name (default: unchanged).")
@click.option("--quantity", default=None, help="New quantity (default: unchanged).")
@click.pass_obj
def product_edit(
    manager: InventoryManager, product_id: str, name: str | None, quantity: str | None
) -> None:
    """Change a product's name and/or quantity."""
    try:
        form = manager.begin_edit(product_id)
        products = manager.commit_edit(
            name=form.name if name is None else name,
            quantity_text=form.quantity_text if quantity is None else quantity,
        )
    except DomainException as exc:
        manager.cancel_edit()
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated")
    _display_products(products)


@click.command("increase")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_increase(manager: InventoryManager, product_id: str) -> None:
    """Add one unit to a product's stock."""
    try:
        products = manager.increase_quantity(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_products(products)


@click.command("decrease")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_decrease(manager: InventoryManager, product_id: str) -> None:
    """Take one unit out of a product's stock (never below zero)."""
    try:
        products = manager.decrease_quantity(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_products(products)


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation.")
@click.pass_obj
def product_remove(manager: InventoryManager, product_id: str, yes: bool) -> None:
    """Remove a product after confirmation."""
    try:
        request = manager.request_removal(product_id)
        confirmed = yes or click.confirm(request.prompt, default=False)
        products = manager.confirm_removal(product_id, confirmed=confirmed)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if confirmed:
        click.echo(f"Product '{request.name}' removed")
    else:
        click.echo("Removal cancelled")
    _display_products(products)
