"""Capabilities the handlers consume besides the repositories.

Both are shared, externally owned services.  Implementations raise
DependencyError when the underlying transport fails.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod

from soms.domain.events import DomainEvent

SALE_LIST_KEY = "sale_list"
CARTS_LIST_KEY = "carts_list"


def sale_key(sale_id: uuid.UUID) -> str:
    return f"sale_{sale_id}"


def cart_key(cart_id: uuid.UUID) -> str:
    return f"cart_{cart_id}"


class Cache(ABC):

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Drop a cached entry. Missing keys are not an error."""


class EventPublisher(ABC):

    @abstractmethod
    async def publish(self, event: DomainEvent) -> None:
        """Hand an event to the bus; no acknowledgement is returned."""
