"""Loader configuration.

Updates:
    v0.1.0 - 2025-11-09 - Added YashConfig with environment overrides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Any, Mapping

FOLDER_ENV = "YASH_DEFAULT_FOLDER"
NAMESPACE_ENV = "YASH_DEFAULT_NAMESPACE"
STRICT_NAMESPACE_ENV = "YASH_STRICT_NAMESPACE"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(slots=True, frozen=True)
class YashConfig:
    """Settings shared by every load performed through one loader.

    Attributes:
        default_folder (str | None): Directory prefixed to relative source keys.
        default_namespace (str | None): Top-level key every loaded file is narrowed to.
        strict_namespace (bool): Raise instead of returning an empty container when
            the namespace is missing from a file.
    """

    default_folder: str | None = None
    default_namespace: str | None = None
    strict_namespace: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "YashConfig":
        """Build a configuration from ``YASH_*`` environment variables.

        Args:
            environ (Mapping[str, str] | None): Environment to read, defaults to
                ``os.environ``.

        Returns:
            YashConfig: Configuration with empty variables treated as unset.
        """

        env = os.environ if environ is None else environ
        strict = env.get(STRICT_NAMESPACE_ENV, "").strip().lower() in _TRUTHY
        return cls(
            default_folder=env.get(FOLDER_ENV) or None,
            default_namespace=env.get(NAMESPACE_ENV) or None,
            strict_namespace=strict,
        )

    def with_overrides(self, **changes: Any) -> "YashConfig":
        """Return a copy with the given fields replaced."""

        return replace(self, **changes)


__all__ = ["YashConfig", "FOLDER_ENV", "NAMESPACE_ENV", "STRICT_NAMESPACE_ENV"]
