"""Abstract repository for Cart aggregate."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from collections.abc import Sequence

from soms.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    async def create(self, cart: Cart) -> None:
        """Persist a new cart."""

    @abstractmethod
    async def get_by_id(self, cart_id: uuid.UUID) -> Cart | None:
        """Return a cart by its ID, or None if not found."""

    @abstractmethod
    async def list_all(self) -> Sequence[Cart]:
        """Return every stored cart."""

    @abstractmethod
    async def update(self, cart: Cart) -> None:
        """Overwrite a stored cart."""

    @abstractmethod
    async def delete(self, cart_id: uuid.UUID) -> None:
        """Remove a cart. Unknown IDs are ignored."""
