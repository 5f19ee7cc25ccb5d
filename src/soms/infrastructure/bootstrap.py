"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.  Collaborators are
built once here and handed to each handler's constructor.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from soms.application.create_cart import CreateCartHandler
from soms.application.create_sale import CreateSaleHandler
from soms.application.delete_cart import DeleteCartHandler
from soms.application.delete_sale import DeleteSaleHandler
from soms.application.dispatcher import CommandDispatcher
from soms.application.dto import (
    CreateCartCommand,
    CreateSaleCommand,
    DeleteCartCommand,
    DeleteSaleCommand,
    GetCartCommand,
    GetSaleCommand,
    ListCartsCommand,
    ListSalesCommand,
    UpdateCartCommand,
    UpdateSaleCommand,
)
from soms.application.list_carts import ListCartsHandler
from soms.application.list_sales import ListSalesHandler
from soms.application.ports import Cache, EventPublisher
from soms.application.show_cart import ShowCartHandler
from soms.application.show_sale import ShowSaleHandler
from soms.application.update_cart import UpdateCartHandler
from soms.application.update_sale import UpdateSaleHandler
from soms.domain.repository.cart_repository import CartRepository
from soms.domain.repository.sale_repository import SaleRepository
from soms.infrastructure.cache.memory_cache import InMemoryCache
from soms.infrastructure.cache.redis_cache import RedisCache
from soms.infrastructure.config import Settings, get_settings
from soms.infrastructure.messaging.logging_publisher import LoggingEventPublisher
from soms.infrastructure.messaging.rabbitmq_publisher import RabbitMqEventPublisher
from soms.infrastructure.persistence.json_cart_repository import JsonCartRepository
from soms.infrastructure.persistence.json_sale_repository import JsonSaleRepository

logger = logging.getLogger(__name__)


def sale_repository(settings: Settings) -> JsonSaleRepository:
    return JsonSaleRepository(settings.data_dir / "sales.json")


def cart_repository(settings: Settings) -> JsonCartRepository:
    return JsonCartRepository(settings.data_dir / "carts.json")


def cache(settings: Settings) -> Cache:
    if settings.redis_url:
        return RedisCache.from_url(settings.redis_url)
    return InMemoryCache()


def event_publisher(settings: Settings) -> EventPublisher:
    if settings.rabbitmq_url:
        return RabbitMqEventPublisher(settings.rabbitmq_url, settings.event_exchange)
    return LoggingEventPublisher()


def build_dispatcher(
    sale_repo: SaleRepository,
    cart_repo: CartRepository,
    cache: Cache,
    publisher: EventPublisher,
) -> CommandDispatcher:
    return CommandDispatcher({
        CreateSaleCommand: CreateSaleHandler(sale_repo, publisher),
        GetSaleCommand: ShowSaleHandler(sale_repo),
        ListSalesCommand: ListSalesHandler(sale_repo),
        UpdateSaleCommand: UpdateSaleHandler(sale_repo, cache, publisher),
        DeleteSaleCommand: DeleteSaleHandler(sale_repo, publisher),
        CreateCartCommand: CreateCartHandler(cart_repo, publisher),
        GetCartCommand: ShowCartHandler(cart_repo),
        ListCartsCommand: ListCartsHandler(cart_repo),
        UpdateCartCommand: UpdateCartHandler(cart_repo, cache, publisher),
        DeleteCartCommand: DeleteCartHandler(cart_repo, publisher),
    })


@dataclass
class Application:
    """Everything assembled at start-up, plus the means to release it."""

    dispatcher: CommandDispatcher
    cache: Cache
    publisher: EventPublisher

    async def aclose(self) -> None:
        try:
            if isinstance(self.cache, RedisCache):
                await self.cache.close()
        finally:
            if isinstance(self.publisher, RabbitMqEventPublisher):
                await self.publisher.close()


def build_application(settings: Settings | None = None) -> Application:
    settings = settings or get_settings()
    shared_cache = cache(settings)
    publisher = event_publisher(settings)
    logger.debug(
        "Building application (data_dir=%s, cache=%s, publisher=%s)",
        settings.data_dir, type(shared_cache).__name__, type(publisher).__name__,
    )
    return Application(
        dispatcher=build_dispatcher(
            sale_repository(settings),
            cart_repository(settings),
            shared_cache,
            publisher,
        ),
        cache=shared_cache,
        publisher=publisher,
    )
