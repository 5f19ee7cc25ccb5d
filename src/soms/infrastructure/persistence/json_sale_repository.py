"""JSON-file-backed implementation of SaleRepository."""

from __future__ import annotations

import uuid
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from soms.domain.exceptions import DependencyError, ValidationError
from soms.domain.model.sale import Sale, SaleItem
from soms.domain.model.value_objects import Money, Quantity
from soms.domain.repository.sale_repository import SaleRepository
from soms.infrastructure.persistence.json_file import JsonFile


class JsonSaleRepository(SaleRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- SaleRepository interface ---------------------------------------------

    async def create(self, sale: Sale) -> None:
        self._file.upsert(self._to_raw(sale))

    async def get_by_id(self, sale_id: uuid.UUID) -> Sale | None:
        raw = self._file.find(str(sale_id))
        return self._to_domain(raw) if raw is not None else None

    async def list_all(self) -> list[Sale]:
        return [self._to_domain(raw) for raw in self._file.load()]

    async def update(self, sale: Sale) -> None:
        self._file.upsert(self._to_raw(sale))

    async def delete(self, sale_id: uuid.UUID) -> None:
        self._file.remove(str(sale_id))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(sale: Sale) -> dict:
        # Discounts and totals are written for readers of the file only;
        # they are re-derived on load.
        return {
            "id": str(sale.id),
            "sale_number": sale.sale_number,
            "sale_date": sale.sale_date.isoformat(),
            "customer": sale.customer,
            "branch": sale.branch,
            "total_sale_amount": str(sale.total_sale_amount.amount),
            "items": [
                {
                    "id": str(item.id),
                    "product_id": str(item.product_id),
                    "quantity": item.quantity.value,
                    "unit_price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                    "discount": str(item.discount),
                    "total_amount": str(item.total_amount.amount),
                    "cancelled": item.cancelled,
                }
                for item in sale.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Sale:
        try:
            items = [
                SaleItem(
                    id=uuid.UUID(i["id"]),
                    product_id=uuid.UUID(i["product_id"]),
                    quantity=Quantity(i["quantity"]),
                    unit_price=Money(Decimal(i["unit_price"]), i.get("currency", "USD")),
                    cancelled=i.get("cancelled", False),
                )
                for i in raw["items"]
            ]
            return Sale(
                id=uuid.UUID(raw["id"]),
                sale_number=raw["sale_number"],
                sale_date=datetime.fromisoformat(raw["sale_date"]),
                customer=raw["customer"],
                branch=raw["branch"],
                items=items,
            )
        except (KeyError, ValueError, ArithmeticError, ValidationError) as exc:
            raise DependencyError(f"Corrupt sale record {raw.get('id')!r}: {exc}") from exc
