"""Event publisher that writes events to the log.

Used when no message broker is configured.
"""

from __future__ import annotations

import json
import logging

from soms.application.ports import EventPublisher
from soms.domain.events import DomainEvent

logger = logging.getLogger(__name__)


class LoggingEventPublisher(EventPublisher):

    async def publish(self, event: DomainEvent) -> None:
        logger.info("Event %s %s", event.name, json.dumps(event.to_payload()))
