"""Application service: Update Sale use case.

Partial update: only fields present in the command change.  Totals are
always re-derived from the items, never read from the command.

After a successful persist the cached entry for the sale and the cached
listing are dropped, then SaleModified is published regardless of
which fields actually changed.  A failed lookup or persist stops the
pipeline before any cache or bus call.
"""

from __future__ import annotations

import logging

from soms.application import sale_builder
from soms.application.dto import UpdateSaleCommand, UpdateSaleResult
from soms.application.ports import SALE_LIST_KEY, Cache, EventPublisher, sale_key
from soms.application.validation import ensure_valid, validate_update_sale
from soms.domain.events import SaleModified
from soms.domain.exceptions import EntityNotFoundError
from soms.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


class UpdateSaleHandler:

    def __init__(
        self,
        sale_repo: SaleRepository,
        cache: Cache,
        publisher: EventPublisher,
    ) -> None:
        self._sale_repo = sale_repo
        self._cache = cache
        self._publisher = publisher

    async def handle(self, command: UpdateSaleCommand) -> UpdateSaleResult:
        ensure_valid(validate_update_sale(command))

        sale = await self._sale_repo.get_by_id(command.id)
        if sale is None:
            raise EntityNotFoundError(f"Sale with ID {command.id} not found")

        sale.apply_changes(
            sale_number=command.sale_number.strip() if command.sale_number is not None else None,
            sale_date=command.sale_date,
            customer=command.customer.strip() if command.customer is not None else None,
            branch=command.branch.strip() if command.branch is not None else None,
            items=sale_builder.build_items(command.items) if command.items is not None else None,
        )

        await self._sale_repo.update(sale)
        logger.info("Sale %s updated, total %s", sale.id, sale.total_sale_amount)

        await self._cache.remove(sale_key(sale.id))
        await self._cache.remove(SALE_LIST_KEY)
        logger.debug("Cache invalidated for sale %s", sale.id)

        await self._publisher.publish(SaleModified(sale_id=sale.id))

        return UpdateSaleResult(id=sale.id, sale_number=sale.sale_number)
