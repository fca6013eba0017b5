"""Process-wide memo of assembled comment pages."""

import copy
import threading
from typing import Any, Callable

import logfire

from .base import Service

Payload = dict[str, Any]


class CommentCache(Service):
    """Cache of public comment page payloads keyed by (path, page).

    Only the public view is ever stored; administrator views bypass it.
    Payloads are deep-copied on the way in and out so callers can never
    mutate a cached page in place.

    Every invalidation bumps ``generation``. A reader takes the generation
    before it queries the database and hands it back to ``put``; if a write
    invalidated the cache in between, the page it built may predate that
    write and is not stored.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._entries: dict[tuple[str, int], Payload] = {}
        self._generation = 0
        self.hits = 0
        self.misses = 0

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def get(self, path: str, page: int) -> Payload | None:
        with self._lock:
            payload = self._entries.get((path, page))
            if payload is None:
                self.misses += 1
                return None
            self.hits += 1
            return copy.deepcopy(payload)

    def put(
        self, path: str, page: int, payload: Payload, generation: int | None = None
    ) -> bool:
        """Store a page.

        Args:
            path: Page path as requested
            page: Page number
            payload: Assembled page
            generation: Generation read before the page was assembled

        Returns:
            False when the page was dropped because the cache was
            invalidated after ``generation`` was read
        """
        with self._lock:
            if generation is not None and generation != self._generation:
                stale = True
            else:
                stale = False
                self._entries[(path, page)] = copy.deepcopy(payload)
        if stale:
            logfire.info("Discarded page assembled before a write", path=path, page=page)
        return not stale

    def invalidate(self, path: str) -> int:
        """Drop every page cached for exactly ``path``.

        Returns:
            Number of entries removed
        """
        removed = self._drop(lambda cached_path: cached_path == path)
        logfire.info("Comment cache invalidated", path=path, removed=removed)
        return removed

    def invalidate_matching(self, url: str) -> int:
        """Drop every page whose path would list a comment posted at ``url``.

        Pages select comments whose url contains the page path, so any
        cached path that is a substring of ``url`` may now be out of date.

        Returns:
            Number of entries removed
        """
        removed = self._drop(lambda cached_path: cached_path in url)
        logfire.info("Comment cache invalidated", url=url, removed=removed)
        return removed

    def clear(self) -> None:
        with self._lock:
            removed = len(self._entries)
            self._entries.clear()
            self._generation += 1
        logfire.info("Comment cache cleared", removed=removed)

    def _drop(self, matches: Callable[[str], bool]) -> int:
        with self._lock:
            keys = [key for key in self._entries if matches(key[0])]
            for key in keys:
                del self._entries[key]
            self._generation += 1
        return len(keys)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def stats(self) -> dict[str, int]:
        with self._lock:
            return {
                "entries": len(self._entries),
                "hits": self.hits,
                "misses": self.misses,
            }
