"""Abstract repository for Sale aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from collections.abc import Sequence

from soms.domain.model.sale import Sale


class SaleRepository(ABC):

    @abstractmethod
    async def create(self, sale: Sale) -> None:
        """Persist a new sale together with its items."""

    @abstractmethod
    async def get_by_id(self, sale_id: uuid.UUID) -> Sale | None:
        """Return a sale by its ID, or None if not found."""

    @abstractmethod
    async def list_all(self) -> Sequence[Sale]:
        """Return every stored sale, in a stable order."""

    @abstractmethod
    async def update(self, sale: Sale) -> None:
        """Overwrite a stored sale (last write wins)."""

    @abstractmethod
    async def delete(self, sale_id: uuid.UUID) -> None:
        """Remove a sale and its items. Unknown IDs are ignored."""
