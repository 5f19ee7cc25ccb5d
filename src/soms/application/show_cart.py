"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from soms.application.dto import CartDTO, GetCartCommand
from soms.application.mapping import to_cart_dto
from soms.application.validation import ensure_valid, validate_identifier
from soms.domain.exceptions import EntityNotFoundError
from soms.domain.repository.cart_repository import CartRepository


class ShowCartHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    async def handle(self, command: GetCartCommand) -> CartDTO:
        ensure_valid(validate_identifier(command.id))

        cart = await self._cart_repo.get_by_id(command.id)
        if cart is None:
            raise EntityNotFoundError(f"Cart with ID {command.id} not found")
        return to_cart_dto(cart)
