"""Exception hierarchy for Yash.

Updates:
    v0.1.0 - 2025-11-09 - Introduced the loader error taxonomy.
"""

from __future__ import annotations


class YashError(Exception):
    """Base class for every error raised by Yash."""


class NotFoundError(YashError, FileNotFoundError):
    """Raised when a source key does not resolve to an existing file."""


class ReadError(YashError, OSError):
    """Raised when a configuration file exists but cannot be read."""


class ParseError(YashError, ValueError):
    """Raised when template expansion or YAML parsing fails."""


class MutationError(YashError, TypeError):
    """Raised on any attempt to modify a loaded configuration container."""


class NamespaceError(YashError, KeyError):
    """Raised in strict mode when the default namespace is missing from a file."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


__all__ = [
    "MutationError",
    "NamespaceError",
    "NotFoundError",
    "ParseError",
    "ReadError",
    "YashError",
]
