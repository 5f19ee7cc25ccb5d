"""Command and entity builders shared by the application tests."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal

from soms.application.dto import CreateSaleCommand, SaleItemSpec
from soms.domain.model.sale import Sale, SaleItem
from soms.domain.model.value_objects import Money, Quantity

WIDGET = uuid.UUID("00000000-0000-0000-0000-0000000000a1")
GADGET = uuid.UUID("00000000-0000-0000-0000-0000000000a2")


def item_spec(qty: int = 1, price: str = "10.00", product: uuid.UUID = WIDGET) -> SaleItemSpec:
    return SaleItemSpec(product_id=product, quantity=qty, unit_price=Decimal(price))


def create_command(*items: SaleItemSpec, **overrides) -> CreateSaleCommand:
    fields = dict(
        sale_number="S-1001",
        sale_date=datetime(2024, 3, 15, 10, 30),
        customer="Alice Smith",
        branch="Downtown",
        items=list(items) or [item_spec()],
    )
    fields.update(overrides)
    return CreateSaleCommand(**fields)


def stored_sale(number: int = 1, qty: int = 2, price: str = "10.00") -> Sale:
    return Sale(
        id=uuid.uuid4(),
        sale_number=f"S-{number:04d}",
        sale_date=datetime(2024, 1, 1),
        customer="Existing Customer",
        branch="Uptown",
        items=[
            SaleItem(
                product_id=WIDGET,
                quantity=Quantity(qty),
                unit_price=Money.of(price),
            )
        ],
    )
