"""Application service: Create Sale use case.

Validating -> Building -> Persisting -> Publishing.  The event is only
published once the repository call has returned, so subscribers never
hear about a sale that was not stored.
"""

from __future__ import annotations

import logging

from soms.application import sale_builder
from soms.application.dto import CreateSaleCommand, CreateSaleResult
from soms.application.ports import EventPublisher
from soms.domain.events import SaleCreated
from soms.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


class CreateSaleHandler:

    def __init__(
        self,
        sale_repo: SaleRepository,
        publisher: EventPublisher,
    ) -> None:
        self._sale_repo = sale_repo
        self._publisher = publisher

    async def handle(self, command: CreateSaleCommand) -> CreateSaleResult:
        sale = sale_builder.build(command)

        await self._sale_repo.create(sale)
        logger.info(
            "Sale %s (%s) created, total %s",
            sale.id, sale.sale_number, sale.total_sale_amount,
        )

        await self._publisher.publish(SaleCreated(sale_id=sale.id))

        return CreateSaleResult(id=sale.id, sale_number=sale.sale_number)
