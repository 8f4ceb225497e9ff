"""Configuration file loading pipeline.

Updates:
    v0.1.0 - 2025-11-09 - Added Loader orchestrating resolve, parse, build and narrow.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ..core.config import YashConfig
from ..core.errors import NamespaceError, ParseError
from ..core.mash import Mash, build_mash
from ..core.parser import Parser, YamlTemplateParser
from ..core.path_resolver import resolve_path

logger = logging.getLogger(__name__)


class Loader:
    """Turns a source key into an immutable ``Mash``, without caching."""

    def __init__(
        self, config: YashConfig | None = None, parser: Parser | None = None
    ) -> None:
        """Initialize the loader.

        Args:
            config (YashConfig | None): Folder and namespace settings.
            parser (Parser | None): Parser used when ``load`` gets none explicitly.
        """

        self._config = config or YashConfig()
        self._parser = parser or YamlTemplateParser()

    @property
    def config(self) -> YashConfig:
        """Return the settings this loader applies."""

        return self._config

    @property
    def parser(self) -> Parser:
        """Return the default parser."""

        return self._parser

    def file_path(self, key: str | os.PathLike[str]) -> Path:
        """Return the effective path for ``key`` after applying the default folder.

        Raises:
            NotFoundError: If the effective path is not an existing file.
        """

        return resolve_path(key, self._config.default_folder)

    def file_to_mash(self, file_path: Path, parser: Parser | None = None) -> Mash:
        """Parse ``file_path`` and narrow the result to the default namespace.

        Args:
            file_path (Path): Already resolved file to parse.
            parser (Parser | None): Parser overriding the loader's default.

        Returns:
            Mash: Immutable container for the file or its namespace.

        Raises:
            ReadError: If the file cannot be read.
            ParseError: If the content or the namespace value is invalid.
            NamespaceError: If strict mode is on and the namespace is missing.
        """

        raw = (parser or self._parser).parse(file_path)
        mash = build_mash(raw)
        namespace = self._config.default_namespace
        if namespace is None:
            return mash
        return self._narrow(mash, namespace, file_path)

    def load(self, key: str | os.PathLike[str], parser: Parser | None = None) -> Mash:
        """Resolve and load ``key`` into a fresh container.

        Args:
            key (str | PathLike): Source key to load.
            parser (Parser | None): Parser overriding the loader's default.

        Returns:
            Mash: Newly built immutable container.

        Raises:
            NotFoundError: If the key does not resolve to a file.
            ReadError: If the file cannot be read.
            ParseError: If the content is invalid.
            NamespaceError: If strict mode is on and the namespace is missing.
        """

        path = self.file_path(key)
        mash = self.file_to_mash(path, parser)
        logger.debug(
            "Loaded config %s from %s (namespace=%s, keys=%s)",
            key,
            path,
            self._config.default_namespace,
            len(mash),
        )
        return mash

    def _narrow(self, mash: Mash, namespace: str, file_path: Path) -> Mash:
        if namespace not in mash:
            if self._config.strict_namespace:
                raise NamespaceError(
                    f"Namespace '{namespace}' not found in {file_path}"
                )
            logger.warning(
                "Namespace '%s' not found in %s; using an empty config.",
                namespace,
                file_path,
            )
            return Mash()

        section = mash[namespace]
        if not isinstance(section, Mash):
            raise ParseError(
                f"Namespace '{namespace}' in {file_path} must be a mapping, "
                f"got {type(section).__name__}"
            )
        return section


__all__ = ["Loader"]
