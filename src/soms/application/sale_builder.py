"""Sale aggregate builder.

Turns a validated creation command into a new Sale: fresh identifiers for
the sale and each line, discounts applied through the discount policy.
"""

from __future__ import annotations

import uuid

from soms.application.dto import CreateSaleCommand, SaleItemSpec
from soms.application.validation import ensure_valid, validate_create_sale
from soms.domain.model.sale import Sale, SaleItem
from soms.domain.model.value_objects import Money, Quantity


def build_items(specs: list[SaleItemSpec]) -> list[SaleItem]:
    """Build new sale lines; each gets its own identifier."""
    return [
        SaleItem(
            id=uuid.uuid4(),
            product_id=spec.product_id,
            quantity=Quantity(spec.quantity),
            unit_price=Money.of(spec.unit_price),
        )
        for spec in specs
    ]


def build(command: CreateSaleCommand) -> Sale:
    """Validate *command* and assemble the Sale it describes.

    Raises ValidationError carrying every violation found.  The sale total
    is the sum of the discounted line totals and is never taken from input.
    """
    ensure_valid(validate_create_sale(command))

    return Sale(
        id=uuid.uuid4(),
        sale_number=command.sale_number.strip(),
        sale_date=command.sale_date,
        customer=command.customer.strip(),
        branch=command.branch.strip(),
        items=build_items(command.items),
    )
