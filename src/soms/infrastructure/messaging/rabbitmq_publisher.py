"""RabbitMQ event publisher built on aio-pika.

Events go to a durable topic exchange with the event name as routing
key.  Publishing is fire-and-forget: no publisher confirms are awaited.
"""

from __future__ import annotations

import json
import logging

import aio_pika
from aio_pika.abc import AbstractChannel, AbstractExchange, AbstractRobustConnection
from aio_pika.exceptions import AMQPError

from soms.application.ports import EventPublisher
from soms.domain.events import DomainEvent
from soms.domain.exceptions import DependencyError

logger = logging.getLogger(__name__)


class RabbitMqEventPublisher(EventPublisher):

    def __init__(self, url: str, exchange_name: str) -> None:
        self._url = url
        self._exchange_name = exchange_name
        self._connection: AbstractRobustConnection | None = None
        self._channel: AbstractChannel | None = None
        self._exchange: AbstractExchange | None = None

    async def publish(self, event: DomainEvent) -> None:
        message = aio_pika.Message(
            body=json.dumps(event.to_payload()).encode("utf-8"),
            content_type="application/json",
            delivery_mode=aio_pika.DeliveryMode.PERSISTENT,
            type=event.name,
        )
        try:
            exchange = await self._get_exchange()
            await exchange.publish(message, routing_key=event.name)
        except (AMQPError, OSError) as exc:
            raise DependencyError(f"Publishing {event.name} failed: {exc}") from exc
        logger.info("Published %s to %s", event.name, self._exchange_name)

    async def close(self) -> None:
        if self._connection is not None and not self._connection.is_closed:
            await self._connection.close()
        self._connection = self._channel = self._exchange = None

    async def _get_exchange(self) -> AbstractExchange:
        if self._exchange is None:
            self._connection = await aio_pika.connect_robust(self._url)
            self._channel = await self._connection.channel(publisher_confirms=False)
            self._exchange = await self._channel.declare_exchange(
                self._exchange_name, aio_pika.ExchangeType.TOPIC, durable=True
            )
            logger.info("Connected to RabbitMQ exchange %s", self._exchange_name)
        return self._exchange
