"""Process-wide memoization of loaded configuration.

Updates:
    v0.1.0 - 2025-11-09 - Added per-key locking so each source loads at most once.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, List

from ..core.mash import Mash

logger = logging.getLogger(__name__)


class MashCache:
    """Caches loaded containers by source key and returns the same instance on hits."""

    def __init__(self, loader: Callable[[str], Mash]) -> None:
        """Initialize an empty cache.

        Args:
            loader (Callable[[str], Mash]): Called with the key on a cache miss.
        """

        self._loader = loader
        self._entries: Dict[str, Mash] = {}
        self._key_locks: Dict[str, threading.Lock] = {}
        self._lock = threading.Lock()
        self._generation = 0

    def get(self, key: str) -> Mash:
        """Return the cached container for ``key``, loading it on first use.

        Args:
            key (str): Source key.

        Returns:
            Mash: The stored instance; identical across calls until ``clear``.

        Raises:
            Exception: Whatever the loader raises. Nothing is stored in that case.
        """

        while True:
            entry = self._entries.get(key)
            if entry is not None:
                logger.debug("Config cache hit for %s", key)
                return entry

            with self._lock:
                key_lock = self._key_locks.setdefault(key, threading.Lock())

            with key_lock:
                entry = self._entries.get(key)
                if entry is not None:
                    return entry
                generation = self._generation
                logger.debug("Config cache miss for %s", key)
                entry = self._loader(key)
                with self._lock:
                    # A clear() during the load makes this result stale.
                    if generation == self._generation:
                        self._entries[key] = entry
                        logger.info("Config %s cached", key)
                        return entry
            logger.debug("Discarding %s loaded before a cache reset", key)

    __getitem__ = get

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> List[str]:
        """Return the keys currently cached."""

        with self._lock:
            return list(self._entries)

    def clear(self) -> None:
        """Drop every cached entry so the next lookup reloads from source."""

        with self._lock:
            self._generation += 1
            self._entries.clear()
            self._key_locks.clear()


__all__ = ["MashCache"]
