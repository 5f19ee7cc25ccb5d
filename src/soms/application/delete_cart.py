"""Application service: Delete Cart use case."""

from __future__ import annotations

import logging

from soms.application.dto import DeleteCartCommand, DeleteResult
from soms.application.ports import EventPublisher
from soms.application.validation import ensure_valid, validate_identifier
from soms.domain.events import CartDeleted
from soms.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class DeleteCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        publisher: EventPublisher,
    ) -> None:
        self._cart_repo = cart_repo
        self._publisher = publisher

    async def handle(self, command: DeleteCartCommand) -> DeleteResult:
        ensure_valid(validate_identifier(command.id))

        await self._cart_repo.delete(command.id)
        logger.info("Cart %s deleted", command.id)

        await self._publisher.publish(CartDeleted(cart_id=command.id))

        return DeleteResult(success=True)
