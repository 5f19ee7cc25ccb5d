"""Application service: List Carts use case (query)."""

from __future__ import annotations

from soms.application.dto import CartDTO, ListCartsCommand
from soms.application.mapping import to_cart_dto
from soms.application.pagination import Page, paginate
from soms.domain.repository.cart_repository import CartRepository


class ListCartsHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    async def handle(self, command: ListCartsCommand) -> Page[CartDTO]:
        carts = await self._cart_repo.list_all()
        return paginate(carts, command.page, command.size).map(to_cart_dto)
