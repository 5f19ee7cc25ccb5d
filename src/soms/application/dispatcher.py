"""Explicit command-to-handler lookup table.

The table is assembled once by the composition root; dispatching is a
dictionary lookup on the command's type.
"""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


class CommandDispatcher:

    def __init__(self, routes: dict[type, Any] | None = None) -> None:
        self._routes: dict[type, Any] = dict(routes or {})

    def register(self, command_type: type, handler: Any) -> None:
        if command_type in self._routes:
            raise ValueError(f"A handler for {command_type.__name__} is already registered")
        self._routes[command_type] = handler

    def handler_for(self, command_type: type) -> Any:
        try:
            return self._routes[command_type]
        except KeyError:
            raise TypeError(
                f"No handler registered for {command_type.__name__}"
            ) from None

    async def dispatch(self, command: Any) -> Any:
        handler = self.handler_for(type(command))
        logger.debug("Dispatching %s to %s", type(command).__name__, type(handler).__name__)
        return await handler.handle(command)

    @property
    def command_types(self) -> list[type]:
        return list(self._routes)
