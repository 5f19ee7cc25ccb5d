"""Explicit conversions between commands, entities and DTOs.

Computed values (discount, line total, sale total) are always read from
the entity's derived properties; no conversion copies them from input.
"""

from __future__ import annotations

import uuid

from soms.application.dto import CartDTO, CartItemDTO, CartItemSpec, SaleDTO, SaleItemDTO
from soms.domain.model.cart import Cart, CartItem
from soms.domain.model.sale import Sale, SaleItem
from soms.domain.model.value_objects import Quantity


# --- Sale ---------------------------------------------------------------------


def to_sale_item_dto(item: SaleItem) -> SaleItemDTO:
    return SaleItemDTO(
        id=item.id,
        product_id=item.product_id,
        quantity=item.quantity.value,
        unit_price=item.unit_price.amount,
        discount=item.discount,
        total_amount=item.total_amount.amount,
        cancelled=item.cancelled,
    )


def to_sale_dto(sale: Sale) -> SaleDTO:
    return SaleDTO(
        id=sale.id,
        sale_number=sale.sale_number,
        sale_date=sale.sale_date,
        customer=sale.customer,
        branch=sale.branch,
        items=[to_sale_item_dto(item) for item in sale.items],
        total_sale_amount=sale.total_sale_amount.amount,
    )


# --- Cart ---------------------------------------------------------------------


def to_cart_items(specs: list[CartItemSpec]) -> list[CartItem]:
    return [
        CartItem(
            id=uuid.uuid4(),
            product_id=spec.product_id,
            quantity=Quantity(spec.quantity),
        )
        for spec in specs
    ]


def to_cart_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        id=cart.id,
        user_id=cart.user_id,
        date=cart.date,
        items=[
            CartItemDTO(
                id=item.id,
                product_id=item.product_id,
                quantity=item.quantity.value,
            )
            for item in cart.items
        ],
    )
