"""Application service: Update Cart use case.

Same protocol as sale updates: persist, drop ``cart_<id>`` and the
cart listing from the cache, then publish CartModified.
"""

from __future__ import annotations

import logging

from soms.application.dto import UpdateCartCommand, UpdateCartResult
from soms.application.mapping import to_cart_items
from soms.application.ports import CARTS_LIST_KEY, Cache, EventPublisher, cart_key
from soms.application.validation import ensure_valid, validate_update_cart
from soms.domain.events import CartModified
from soms.domain.exceptions import EntityNotFoundError
from soms.domain.repository.cart_repository import CartRepository

logger = logging.getLogger(__name__)


class UpdateCartHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        cache: Cache,
        publisher: EventPublisher,
    ) -> None:
        self._cart_repo = cart_repo
        self._cache = cache
        self._publisher = publisher

    async def handle(self, command: UpdateCartCommand) -> UpdateCartResult:
        ensure_valid(validate_update_cart(command))

        cart = await self._cart_repo.get_by_id(command.id)
        if cart is None:
            raise EntityNotFoundError(f"Cart with ID {command.id} not found")

        cart.apply_changes(
            user_id=command.user_id,
            date=command.date,
            items=to_cart_items(command.items) if command.items is not None else None,
        )

        await self._cart_repo.update(cart)
        logger.info("Cart %s updated", cart.id)

        await self._cache.remove(cart_key(cart.id))
        await self._cache.remove(CARTS_LIST_KEY)

        await self._publisher.publish(CartModified(cart_id=cart.id))

        return UpdateCartResult(id=cart.id)
