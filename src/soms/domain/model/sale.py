"""Sale aggregate, the core of the domain.

The Sale is an aggregate root that owns its line items.  Discounts and
totals are derived from quantity and unit price every time they are read,
so they can never drift from their inputs.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from soms.domain.model.value_objects import Money, Quantity
from soms.domain.service import discount_policy


@dataclass
class SaleItem:
    """One line of a sale.

    ``discount`` and ``total_amount`` are computed from ``quantity`` and
    ``unit_price`` through the discount policy; callers never supply them.
    """

    product_id: uuid.UUID
    quantity: Quantity
    unit_price: Money
    id: uuid.UUID = field(default_factory=uuid.uuid4)
    cancelled: bool = False

    @property
    def discount(self) -> Decimal:
        return discount_policy.discount_rate(self.quantity.value)

    @property
    def total_amount(self) -> Money:
        return discount_policy.compute(self.quantity.value, self.unit_price).line_total


@dataclass
class Sale:
    """Aggregate root for sales.

    Use ``soms.application.sale_builder.build`` for new sales; it
    validates the command and generates identifiers.  The ``__init__`` is
    intentionally simple so the repository can reconstitute persisted
    sales without re-validating.
    """

    id: uuid.UUID
    sale_number: str
    sale_date: datetime
    customer: str
    branch: str
    items: list[SaleItem]

    # --- Partial update -------------------------------------------------------

    def apply_changes(
        self,
        sale_number: str | None = None,
        sale_date: datetime | None = None,
        customer: str | None = None,
        branch: str | None = None,
        items: list[SaleItem] | None = None,
    ) -> None:
        """Overwrite only the fields that were supplied.

        Values are expected to be validated already.  Replacing the items
        re-derives every discount and the sale total.
        """
        if sale_number is not None:
            self.sale_number = sale_number
        if sale_date is not None:
            self.sale_date = sale_date
        if customer is not None:
            self.customer = customer
        if branch is not None:
            self.branch = branch
        if items is not None:
            self.items = list(items)

    # --- Computed properties --------------------------------------------------

    @property
    def total_sale_amount(self) -> Money:
        result = Money.zero()
        for item in self.active_items:
            result = result + item.total_amount
        return result

    @property
    def active_items(self) -> list[SaleItem]:
        """Items that count towards the total (not cancelled)."""
        return [item for item in self.items if not item.cancelled]
