"""CLI commands for the Sale aggregate."""

from __future__ import annotations

import uuid
from decimal import Decimal, InvalidOperation

import click

from soms.application.dto import (
    CreateSaleCommand,
    DeleteSaleCommand,
    GetSaleCommand,
    ListSalesCommand,
    SaleDTO,
    SaleItemSpec,
    UpdateSaleCommand,
)
from soms.infrastructure.cli.runtime import run_command

DATE_FORMATS = ["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S", "%Y-%m-%d %H:%M:%S"]


def _parse_items(raw_items: tuple[str, ...]) -> list[SaleItemSpec]:
    """Parse ('<product-uuid>:3:15.00', ...) into SaleItemSpec list."""
    specs: list[SaleItemSpec] = []
    for raw in raw_items:
        parts = raw.strip().split(":")
        if len(parts) != 3:
            raise click.BadParameter(
                f"Invalid item format '{raw}'. Expected 'ProductId:Quantity:UnitPrice'."
            )
        product, qty_str, price_str = parts
        try:
            product_id = uuid.UUID(product)
        except ValueError:
            raise click.BadParameter(f"Invalid product id '{product}'.")
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(f"Invalid quantity '{qty_str}' for product '{product}'.")
        try:
            price = Decimal(price_str)
        except InvalidOperation:
            raise click.BadParameter(f"Invalid unit price '{price_str}' for product '{product}'.")
        specs.append(SaleItemSpec(product_id=product_id, quantity=qty, unit_price=price))
    return specs


def _display_sale(dto: SaleDTO) -> None:
    click.echo(f"Sale {dto.sale_number}  ({dto.id})")
    click.echo(f"Date:     {dto.sale_date:%Y-%m-%d}")
    click.echo(f"Customer: {dto.customer}")
    click.echo(f"Branch:   {dto.branch}")
    click.echo()
    click.echo(f"  {'Product':<36} {'Qty':>4} {'Price':>10} {'Disc':>5} {'Total':>10}")
    click.echo(f"  {'-'*69}")
    for item in dto.items:
        flag = " (cancelled)" if item.cancelled else ""
        click.echo(
            f"  {str(item.product_id):<36} {item.quantity:>4} {item.unit_price:>10.2f} "
            f"{item.discount:>5.0%} {item.total_amount:>10.2f}{flag}"
        )
    click.echo(f"  {'-'*69}")
    click.echo(f"  {'Sale Total':<57} {dto.total_sale_amount:>10.2f}")


@click.command("create")
@click.option("--number", "sale_number", required=True, help="Sale number.")
@click.option("--date", "sale_date", required=True, type=click.DateTime(DATE_FORMATS), help="Sale date.")
@click.option("--customer", required=True, help="Customer name.")
@click.option("--branch", required=True, help="Branch name.")
@click.option("--item", "items", multiple=True, required=True, help="Item as 'ProductId:Qty:UnitPrice'. Repeatable.")
def sale_create(sale_number, sale_date, customer, branch, items) -> None:
    """Record a new sale."""
    command = CreateSaleCommand(
        sale_number=sale_number,
        sale_date=sale_date,
        customer=customer,
        branch=branch,
        items=_parse_items(items),
    )
    result = run_command(command)
    click.echo(f"Sale {result.sale_number} created with ID {result.id}")


@click.command("show")
@click.option("--id", "sale_id", required=True, type=click.UUID, help="Sale ID to display.")
def sale_show(sale_id: uuid.UUID) -> None:
    """Show details of an existing sale."""
    _display_sale(run_command(GetSaleCommand(id=sale_id)))


@click.command("list")
@click.option("--page", default=1, show_default=True, type=int, help="Page number (1-based).")
@click.option("--size", default=10, show_default=True, type=int, help="Sales per page.")
def sale_list(page: int, size: int) -> None:
    """List sales one page at a time."""
    result = run_command(ListSalesCommand(page=page, size=size))

    if not result.items:
        click.echo(f"No sales on page {result.current_page} ({result.total_count} in total).")
        return

    click.echo(f"{'ID':<36} {'Number':<12} {'Customer':<20} {'Total':>10}")
    click.echo("-" * 81)
    for dto in result.items:
        click.echo(
            f"{str(dto.id):<36} {dto.sale_number:<12} {dto.customer:<20} {dto.total_sale_amount:>10.2f}"
        )
    click.echo(
        f"Page {result.current_page}/{result.total_pages} ({result.total_count} sales)"
    )


@click.command("update")
@click.option("--id", "sale_id", required=True, type=click.UUID, help="Sale ID.")
@click.option("--number", "sale_number", default=None, help="New sale number.")
@click.option("--date", "sale_date", default=None, type=click.DateTime(DATE_FORMATS), help="New sale date.")
@click.option("--customer", default=None, help="New customer name.")
@click.option("--branch", default=None, help="New branch name.")
@click.option("--item", "items", multiple=True, help="Replacement items as 'ProductId:Qty:UnitPrice'.")
def sale_update(sale_id, sale_number, sale_date, customer, branch, items) -> None:
    """Change some fields of a sale; omitted fields are kept."""
    command = UpdateSaleCommand(
        id=sale_id,
        sale_number=sale_number,
        sale_date=sale_date,
        customer=customer,
        branch=branch,
        items=_parse_items(items) if items else None,
    )
    result = run_command(command)
    click.echo(f"Sale {result.sale_number} ({result.id}) updated.")


@click.command("delete")
@click.option("--id", "sale_id", required=True, type=click.UUID, help="Sale ID to delete.")
def sale_delete(sale_id: uuid.UUID) -> None:
    """Delete a sale and announce its cancellation."""
    run_command(DeleteSaleCommand(id=sale_id))
    click.echo(f"Sale {sale_id} deleted.")
