"""JSON-file-backed implementation of CartRepository."""

from __future__ import annotations

import uuid
from datetime import datetime
from pathlib import Path

from soms.domain.exceptions import DependencyError, ValidationError
from soms.domain.model.cart import Cart, CartItem
from soms.domain.model.value_objects import Quantity
from soms.domain.repository.cart_repository import CartRepository
from soms.infrastructure.persistence.json_file import JsonFile


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- CartRepository interface ---------------------------------------------

    async def create(self, cart: Cart) -> None:
        self._file.upsert(self._to_raw(cart))

    async def get_by_id(self, cart_id: uuid.UUID) -> Cart | None:
        raw = self._file.find(str(cart_id))
        return self._to_domain(raw) if raw is not None else None

    async def list_all(self) -> list[Cart]:
        return [self._to_domain(raw) for raw in self._file.load()]

    async def update(self, cart: Cart) -> None:
        self._file.upsert(self._to_raw(cart))

    async def delete(self, cart_id: uuid.UUID) -> None:
        self._file.remove(str(cart_id))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(cart: Cart) -> dict:
        return {
            "id": str(cart.id),
            "user_id": str(cart.user_id),
            "date": cart.date.isoformat(),
            "items": [
                {
                    "id": str(item.id),
                    "product_id": str(item.product_id),
                    "quantity": item.quantity.value,
                }
                for item in cart.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Cart:
        try:
            return Cart(
                id=uuid.UUID(raw["id"]),
                user_id=uuid.UUID(raw["user_id"]),
                date=datetime.fromisoformat(raw["date"]),
                items=[
                    CartItem(
                        id=uuid.UUID(i["id"]),
                        product_id=uuid.UUID(i["product_id"]),
                        quantity=Quantity(i["quantity"]),
                    )
                    for i in raw["items"]
                ],
            )
        except (KeyError, ValueError, ValidationError) as exc:
            raise DependencyError(f"Corrupt cart record {raw.get('id')!r}: {exc}") from exc
