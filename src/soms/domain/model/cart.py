"""Cart aggregate.

Structurally a Sale without prices or discounts: a user's pending
selection of products.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime

from soms.domain.model.value_objects import Quantity


@dataclass
class CartItem:
    product_id: uuid.UUID
    quantity: Quantity
    id: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass
class Cart:
    """Aggregate root for shopping carts."""

    id: uuid.UUID
    user_id: uuid.UUID
    date: datetime
    items: list[CartItem]

    def apply_changes(
        self,
        user_id: uuid.UUID | None = None,
        date: datetime | None = None,
        items: list[CartItem] | None = None,
    ) -> None:
        """Overwrite only the fields that were supplied."""
        if user_id is not None:
            self.user_id = user_id
        if date is not None:
            self.date = date
        if items is not None:
            self.items = list(items)
