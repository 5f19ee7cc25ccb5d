"""Lifecycle events announcing committed state changes.

Events are immutable facts.  ``to_payload()`` gives the JSON-ready body a
publisher puts on the wire; ``name`` is used as the routing key.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class DomainEvent:
    name = "domain_event"

    def to_payload(self) -> dict:
        raise NotImplementedError


# --- Sale events --------------------------------------------------------------


@dataclass(frozen=True)
class SaleCreated(DomainEvent):
    name = "sale.created"

    sale_id: uuid.UUID
    created_at: datetime = field(default_factory=_utcnow)

    def to_payload(self) -> dict:
        return {"sale_id": str(self.sale_id), "created_at": self.created_at.isoformat()}


@dataclass(frozen=True)
class SaleModified(DomainEvent):
    name = "sale.modified"

    sale_id: uuid.UUID
    modified_at: datetime = field(default_factory=_utcnow)

    def to_payload(self) -> dict:
        return {"sale_id": str(self.sale_id), "modified_at": self.modified_at.isoformat()}


@dataclass(frozen=True)
class SaleCancelled(DomainEvent):
    name = "sale.cancelled"

    sale_id: uuid.UUID
    cancelled_at: datetime = field(default_factory=_utcnow)

    def to_payload(self) -> dict:
        return {
            "sale_id": str(self.sale_id),
            "cancelled_at": self.cancelled_at.isoformat(),
        }


# --- Cart events --------------------------------------------------------------


@dataclass(frozen=True)
class CartCreated(DomainEvent):
    name = "cart.created"

    cart_id: uuid.UUID
    created_at: datetime = field(default_factory=_utcnow)

    def to_payload(self) -> dict:
        return {"cart_id": str(self.cart_id), "created_at": self.created_at.isoformat()}


@dataclass(frozen=True)
class CartModified(DomainEvent):
    name = "cart.modified"

    cart_id: uuid.UUID
    modified_at: datetime = field(default_factory=_utcnow)

    def to_payload(self) -> dict:
        return {"cart_id": str(self.cart_id), "modified_at": self.modified_at.isoformat()}


@dataclass(frozen=True)
class CartDeleted(DomainEvent):
    name = "cart.deleted"

    cart_id: uuid.UUID
    deleted_at: datetime = field(default_factory=_utcnow)

    def to_payload(self) -> dict:
        return {"cart_id": str(self.cart_id), "deleted_at": self.deleted_at.isoformat()}
