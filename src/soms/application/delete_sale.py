"""Application service: Delete Sale use case.

Deleting an unknown ID is not distinguished from deleting a stored one;
SaleCancelled is published after every successful repository call.
"""

from __future__ import annotations

import logging

from soms.application.dto import DeleteResult, DeleteSaleCommand
from soms.application.ports import EventPublisher
from soms.application.validation import ensure_valid, validate_identifier
from soms.domain.events import SaleCancelled
from soms.domain.repository.sale_repository import SaleRepository

logger = logging.getLogger(__name__)


class DeleteSaleHandler:

    def __init__(
        self,
        sale_repo: SaleRepository,
        publisher: EventPublisher,
    ) -> None:
        self._sale_repo = sale_repo
        self._publisher = publisher

    async def handle(self, command: DeleteSaleCommand) -> DeleteResult:
        ensure_valid(validate_identifier(command.id))

        await self._sale_repo.delete(command.id)
        logger.info("Sale %s deleted", command.id)

        await self._publisher.publish(SaleCancelled(sale_id=command.id))

        return DeleteResult(success=True)
