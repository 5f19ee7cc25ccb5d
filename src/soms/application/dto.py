"""Data Transfer Objects: plain containers that cross layer boundaries.

Commands carry what a caller asked for; results and DTOs carry what the
application hands back.  None of them expose domain internals, and no
command has a field for a computed value such as a discount or a total.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


# --- Sale commands ------------------------------------------------------------


@dataclass(frozen=True)
class SaleItemSpec:
    """Input: one requested sale line."""

    product_id: uuid.UUID
    quantity: int
    unit_price: Decimal


@dataclass(frozen=True)
class CreateSaleCommand:
    sale_number: str
    sale_date: datetime
    customer: str
    branch: str
    items: list[SaleItemSpec] = field(default_factory=list)


@dataclass(frozen=True)
class UpdateSaleCommand:
    """Partial update: ``None`` means "leave the stored value alone"."""

    id: uuid.UUID
    sale_number: str | None = None
    sale_date: datetime | None = None
    customer: str | None = None
    branch: str | None = None
    items: list[SaleItemSpec] | None = None


@dataclass(frozen=True)
class GetSaleCommand:
    id: uuid.UUID


@dataclass(frozen=True)
class ListSalesCommand:
    page: int = 1
    size: int = 10


@dataclass(frozen=True)
class DeleteSaleCommand:
    id: uuid.UUID


# --- Sale results -------------------------------------------------------------


@dataclass(frozen=True)
class CreateSaleResult:
    id: uuid.UUID
    sale_number: str


@dataclass(frozen=True)
class UpdateSaleResult:
    id: uuid.UUID
    sale_number: str


@dataclass(frozen=True)
class SaleItemDTO:
    id: uuid.UUID
    product_id: uuid.UUID
    quantity: int
    unit_price: Decimal
    discount: Decimal
    total_amount: Decimal
    cancelled: bool


@dataclass(frozen=True)
class SaleDTO:
    """Output: the full projection of a sale."""

    id: uuid.UUID
    sale_number: str
    sale_date: datetime
    customer: str
    branch: str
    items: list[SaleItemDTO]
    total_sale_amount: Decimal


# --- Cart commands ------------------------------------------------------------


@dataclass(frozen=True)
class CartItemSpec:
    product_id: uuid.UUID
    quantity: int


@dataclass(frozen=True)
class CreateCartCommand:
    user_id: uuid.UUID
    date: datetime
    items: list[CartItemSpec] = field(default_factory=list)


@dataclass(frozen=True)
class UpdateCartCommand:
    id: uuid.UUID
    user_id: uuid.UUID | None = None
    date: datetime | None = None
    items: list[CartItemSpec] | None = None


@dataclass(frozen=True)
class GetCartCommand:
    id: uuid.UUID


@dataclass(frozen=True)
class ListCartsCommand:
    page: int = 1
    size: int = 10


@dataclass(frozen=True)
class DeleteCartCommand:
    id: uuid.UUID


# --- Cart results -------------------------------------------------------------


@dataclass(frozen=True)
class CreateCartResult:
    id: uuid.UUID


@dataclass(frozen=True)
class UpdateCartResult:
    id: uuid.UUID


@dataclass(frozen=True)
class CartItemDTO:
    id: uuid.UUID
    product_id: uuid.UUID
    quantity: int


@dataclass(frozen=True)
class CartDTO:
    id: uuid.UUID
    user_id: uuid.UUID
    date: datetime
    items: list[CartItemDTO]


# --- Shared -------------------------------------------------------------------


@dataclass(frozen=True)
class DeleteResult:
    success: bool
