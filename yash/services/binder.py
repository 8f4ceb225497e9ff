"""Named accessors that expose a cached config on a consumer class.

Updates:
    v0.1.0 - 2025-11-09 - Added Binder descriptor and class decorator support.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from ..core.mash import Mash

DEFAULT_ACCESSOR_NAME = "settings"

T = TypeVar("T", bound=type)


class MashSource(Protocol):
    """Anything that hands out cached containers by key."""

    def get(self, key: str) -> Mash:
        ...


class Binder:
    """Zero-argument accessor bound to one source key.

    Use it as a class attribute, where the attribute name is the accessor name::

        class Twitter:
            settings = Binder("settings/twitter.yml")

        Twitter.settings().api_key

    or install it under ``accessor_name`` with ``install``, which also works as
    a class decorator::

        @Binder("settings/twitter.yml", accessor_name="config").install
        class Twitter:
            ...
    """

    def __init__(
        self,
        key: str,
        *,
        accessor_name: str = DEFAULT_ACCESSOR_NAME,
        source: MashSource | None = None,
    ) -> None:
        if not accessor_name or not accessor_name.isidentifier():
            raise ValueError(f"Invalid accessor name: {accessor_name!r}")
        self.key = key
        self.accessor_name = accessor_name
        self._source = source

    def __call__(self) -> Mash:
        return self.source.get(self.key)

    def __set_name__(self, owner: type, name: str) -> None:
        self.accessor_name = name

    def __get__(self, instance: Any, owner: type | None = None) -> "Binder":
        return self

    def __repr__(self) -> str:
        return f"Binder(key={self.key!r}, accessor_name={self.accessor_name!r})"

    @property
    def source(self) -> MashSource:
        """Return the cache backing this binder, defaulting to the package-wide one."""

        if self._source is None:
            from .registry import default_yash

            return default_yash
        return self._source

    def install(self, klass: T) -> T:
        """Expose this binder on ``klass`` as ``accessor_name`` and return ``klass``."""

        setattr(klass, self.accessor_name, self)
        return klass


__all__ = ["Binder", "DEFAULT_ACCESSOR_NAME", "MashSource"]
