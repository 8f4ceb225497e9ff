"""Yash facade combining configuration, loading and caching.

Updates:
    v0.1.0 - 2025-11-09 - Added Yash facade and the package-wide default instance.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, List

from ..core.config import YashConfig
from ..core.mash import Mash
from ..core.parser import Parser
from .binder import DEFAULT_ACCESSOR_NAME, Binder
from .cache import MashCache
from .loader import Loader

logger = logging.getLogger(__name__)


class Yash:
    """Loads configuration files into cached, immutable ``Mash`` objects.

    Example:
        >>> yash = Yash(YashConfig(default_folder="config", default_namespace="production"))
        >>> yash["database.yml"].host  # doctest: +SKIP
        '1.2.3.4'
    """

    def __init__(
        self, config: YashConfig | None = None, parser: Parser | None = None
    ) -> None:
        """Initialize the facade.

        Args:
            config (YashConfig | None): Settings; ``YashConfig.from_env()`` when omitted.
            parser (Parser | None): Default parser for every load.
        """

        self._loader = Loader(config or YashConfig.from_env(), parser)
        self._cache = MashCache(self.load)

    @property
    def config(self) -> YashConfig:
        """Return the active settings."""

        return self._loader.config

    @property
    def default_folder(self) -> str | None:
        return self.config.default_folder

    @property
    def default_namespace(self) -> str | None:
        return self.config.default_namespace

    def configure(self, **changes: Any) -> YashConfig:
        """Replace settings for subsequent loads; cached entries are kept.

        Args:
            **changes: ``YashConfig`` fields to replace.

        Returns:
            YashConfig: The new active settings.
        """

        config = self.config.with_overrides(**changes)
        self._loader = Loader(config, self._loader.parser)
        logger.debug("Yash configured: %s", config)
        return config

    def file_path(self, key: str | os.PathLike[str]) -> Path:
        """Return the effective path for ``key``."""

        return self._loader.file_path(key)

    def file_to_mash(self, file_path: Path, parser: Parser | None = None) -> Mash:
        """Parse an already resolved file into a namespaced ``Mash``."""

        return self._loader.file_to_mash(file_path, parser)

    def load(self, key: str | os.PathLike[str], parser: Parser | None = None) -> Mash:
        """Load ``key`` from disk, bypassing the cache."""

        return self._loader.load(key, parser)

    def get(self, key: str | os.PathLike[str]) -> Mash:
        """Return the cached container for ``key``, loading it on first use."""

        return self._cache.get(os.fspath(key))

    def __getitem__(self, key: str | os.PathLike[str]) -> Mash:
        return self.get(key)

    def cached(self, key: str | os.PathLike[str]) -> bool:
        """Return whether ``key`` is already cached, without loading it."""

        return os.fspath(key) in self._cache

    def cached_keys(self) -> List[str]:
        """Return every key currently cached."""

        return self._cache.keys()

    def clear_cache(self) -> None:
        """Forget cached containers so later lookups reload from source."""

        self._cache.clear()

    def bind(self, key: str, accessor_name: str = DEFAULT_ACCESSOR_NAME) -> Binder:
        """Return a ``Binder`` for ``key`` backed by this instance's cache."""

        return Binder(key, accessor_name=accessor_name, source=self)


default_yash = Yash()


__all__ = ["Yash", "default_yash"]
