"""Immutable attribute-access container for parsed configuration.

Updates:
    v0.1.0 - 2025-11-09 - Added Mash with recursive construction and rich inspection.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterator

from rich.pretty import pretty_repr

from .errors import MutationError, ParseError

logger = logging.getLogger(__name__)


def _convert(value: Any, visiting: set[int]) -> Any:
    if isinstance(value, Mash):
        return value
    if not isinstance(value, (Mapping, list, tuple)):
        return value

    marker = id(value)
    if marker in visiting:
        raise ParseError("Recursive structure cannot be converted to a Mash")
    visiting.add(marker)
    try:
        if isinstance(value, Mapping):
            return Mash._from_items(_convert_items(value, visiting))
        return tuple(_convert(item, visiting) for item in value)
    finally:
        visiting.discard(marker)


def _convert_items(data: Mapping[Any, Any], visiting: set[int]) -> dict[str, Any]:
    converted = {str(key): _convert(value, visiting) for key, value in data.items()}
    shadowed = sorted(key for key in converted if key in _METHOD_NAMES)
    if shadowed:
        logger.warning(
            "Keys %s shadow Mash methods; use item access to read them.",
            ", ".join(shadowed),
        )
    return converted


def _thaw(value: Any) -> Any:
    if isinstance(value, Mash):
        return value.to_dict()
    if isinstance(value, tuple):
        return [_thaw(item) for item in value]
    return value


class Mash(Mapping):
    """Read-only mapping whose keys are also readable as attributes.

    Nested mappings become ``Mash`` instances and sequences become tuples, so the
    whole tree is immutable once constructed. Keys are stored as strings.

    Example:
        >>> mash = Mash({"production": {"host": "1.2.3.4"}})
        >>> mash.production.host
        '1.2.3.4'
        >>> mash["production"]["host"]
        '1.2.3.4'
    """

    __slots__ = ("_data",)

    def __init__(self, data: Mapping[Any, Any] | None = None) -> None:
        source = data or {}
        converted = _convert_items(source, {id(source)})
        object.__setattr__(self, "_data", converted)

    @classmethod
    def _from_items(cls, converted: dict[str, Any]) -> "Mash":
        mash = cls.__new__(cls)
        object.__setattr__(mash, "_data", converted)
        return mash

    def __getitem__(self, key: Any) -> Any:
        return self._data[str(key)]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __getattr__(self, name: str) -> Any:
        # Private and dunder probes (copy, pickle, rich) must not hit the data.
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._data[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__} has no key {name!r}"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise MutationError(f"can't modify frozen {type(self).__name__}: {name!r}")

    def __delattr__(self, name: str) -> None:
        raise MutationError(f"can't modify frozen {type(self).__name__}: {name!r}")

    def __setitem__(self, key: Any, value: Any) -> None:
        raise MutationError(f"can't modify frozen {type(self).__name__}: {key!r}")

    def __delitem__(self, key: Any) -> None:
        raise MutationError(f"can't modify frozen {type(self).__name__}: {key!r}")

    def __dir__(self) -> list[str]:
        attributes = set(super().__dir__())
        attributes.update(
            key for key in self._data if key.isidentifier() and not key.startswith("_")
        )
        return sorted(attributes)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_dict()!r})"

    def __rich_repr__(self):
        yield self.to_dict()

    def __copy__(self) -> "Mash":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Mash":
        return self

    def __reduce__(self):
        return (type(self), (self.to_dict(),))

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable deep copy using plain dictionaries and lists."""

        return {key: _thaw(value) for key, value in self._data.items()}

    def pretty_inspect(self, max_width: int = 80) -> str:
        """Return a multi-line human-readable rendering of the container."""

        return pretty_repr(self, max_width=max_width)


_METHOD_NAMES = frozenset(name for name in dir(Mash) if not name.startswith("_"))


def build_mash(raw: Any) -> Mash:
    """Wrap a parsed structure in a ``Mash``.

    Args:
        raw (Any): Parser output; ``None`` yields an empty container.

    Returns:
        Mash: Immutable container over ``raw``.

    Raises:
        ParseError: If ``raw`` is neither ``None`` nor a mapping.
    """

    if raw is None:
        return Mash()
    if isinstance(raw, Mash):
        return raw
    if not isinstance(raw, Mapping):
        raise ParseError(
            f"Configuration root must be a mapping, got {type(raw).__name__}"
        )
    return Mash(raw)


__all__ = ["Mash", "build_mash"]
