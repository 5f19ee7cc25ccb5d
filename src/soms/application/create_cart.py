"""Application service: Create Cart use case."""

from __future__ import annotations

import logging
import uuid

from soms.application.dto import CreateCartCommand, CreateCartResult
from soms.application.mapping import to_cart_items
from soms.application.ports import EventPublisher
from soms.application.validation import ensure_valid, validate_create_cart
from soms.domain.events import CartCreated
from soms.domain.model.cart import Cart
from soms.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class CreateCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        publisher: EventPublisher,
    ) -> None:
        self._cart_repo = cart_repo
        self._publisher = publisher

    async def handle(self, command: CreateCartCommand) -> CreateCartResult:
        ensure_valid(validate_create_cart(command))

        cart = Cart(
            id=uuid.uuid4(),
            user_id=command.user_id,
            date=command.date,
            items=to_cart_items(command.items),
        )

        await self._cart_repo.create(cart)
        logger.info("Cart %s created for user %s", cart.id, cart.user_id)

        await self._publisher.publish(CartCreated(cart_id=cart.id))

        return CreateCartResult(id=cart.id)
