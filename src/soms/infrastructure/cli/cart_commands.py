"""CLI commands for the Cart aggregate."""

from __future__ import annotations

import uuid

import click

from soms.application.dto import (
    CartItemSpec,
    CreateCartCommand,
    DeleteCartCommand,
    GetCartCommand,
    ListCartsCommand,
    UpdateCartCommand,
)
from soms.infrastructure.cli.runtime import run_command
from soms.infrastructure.cli.sale_commands import DATE_FORMATS


def _parse_items(raw_items: tuple[str, ...]) -> list[CartItemSpec]:
    """Parse ('<product-uuid>:3', ...) into CartItemSpec list."""
    specs: list[CartItemSpec] = []
    for raw in raw_items:
        if ":" not in raw:
            raise click.BadParameter(
                f"Invalid item format '{raw}'. Expected 'ProductId:Quantity'."
            )
        product, qty_str = raw.strip().rsplit(":", 1)
        try:
            product_id = uuid.UUID(product)
        except ValueError:
            raise click.BadParameter(f"Invalid product id '{product}'.")
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid quantity '{qty_str}' for product '{product}'.")
        specs.append(CartItemSpec(product_id=product_id, quantity=qty))
    return specs


@click.command("create")
@click.option("--user", "user_id", required=True, type=click.UUID, help="Owner's user ID.")
@click.option("--date", "date", required=True, type=click.DateTime(DATE_FORMATS), help="Cart date.")
@click.option("--item", "items", multiple=True, help="Item as 'ProductId:Qty'. Repeatable.")
def cart_create(user_id, date, items) -> None:
    """Open a new cart."""
    result = run_command(
        CreateCartCommand(user_id=user_id, date=date, items=_parse_items(items))
    )
    click.echo(f"Cart {result.id} created.")


@click.command("show")
@click.option("--id", "cart_id", required=True, type=click.UUID, help="Cart ID to display.")
def cart_show(cart_id: uuid.UUID) -> None:
    """Show the contents of a cart."""
    dto = run_command(GetCartCommand(id=cart_id))

    click.echo(f"Cart {dto.id}")
    click.echo(f"User: {dto.user_id}")
    click.echo(f"Date: {dto.date:%Y-%m-%d}")
    click.echo()
    click.echo(f"  {'Product':<36} {'Qty':>5}")
    click.echo(f"  {'-'*42}")
    for item in dto.items:
        click.echo(f"  {str(item.product_id):<36} {item.quantity:>5}")


@click.command("list")
@click.option("--page", default=1, show_default=True, type=int, help="Page number (1-based).")
@click.option("--size", default=10, show_default=True, type=int, help="Carts per page.")
def cart_list(page: int, size: int) -> None:
    """List carts one page at a time."""
    result = run_command(ListCartsCommand(page=page, size=size))

    if not result.items:
        click.echo(f"No carts on page {result.current_page} ({result.total_count} in total).")
        return

    click.echo(f"{'ID':<36} {'User':<36} {'Items':>5}")
    click.echo("-" * 79)
    for dto in result.items:
        click.echo(f"{str(dto.id):<36} {str(dto.user_id):<36} {len(dto.items):>5}")
    click.echo(f"Page {result.current_page}/{result.total_pages} ({result.total_count} carts)")


@click.command("update")
@click.option("--id", "cart_id", required=True, type=click.UUID, help="Cart ID.")
@click.option("--user", "user_id", default=None, type=click.UUID, help="New owner.")
@click.option("--date", "date", default=None, type=click.DateTime(DATE_FORMATS), help="New cart date.")
@click.option("--item", "items", multiple=True, help="Replacement items as 'ProductId:Qty'.")
def cart_update(cart_id, user_id, date, items) -> None:
    """Change some fields of a cart; omitted fields are kept."""
    result = run_command(
        UpdateCartCommand(
            id=cart_id,
            user_id=user_id,
            date=date,
            items=_parse_items(items) if items else None,
        )
    )
    click.echo(f"Cart {result.id} updated.")


@click.command("delete")
@click.option("--id", "cart_id", required=True, type=click.UUID, help="Cart ID to delete.")
def cart_delete(cart_id: uuid.UUID) -> None:
    """Delete a cart."""
    run_command(DeleteCartCommand(id=cart_id))
    click.echo(f"Cart {cart_id} deleted.")
