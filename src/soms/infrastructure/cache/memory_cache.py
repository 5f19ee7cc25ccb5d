"""In-process cache used when no Redis URL is configured."""

from __future__ import annotations

from typing import Any

from soms.application.ports import Cache


class InMemoryCache(Cache):

    def __init__(self, entries: dict[str, Any] | None = None) -> None:
        self._entries: dict[str, Any] = dict(entries or {})

    async def remove(self, key: str) -> None:
        self._entries.pop(key, None)
