"""Source key to file path resolution."""

from __future__ import annotations

import os
from pathlib import Path

from .errors import NotFoundError


def resolve_path(path: str | os.PathLike[str], default_folder: str | None = None) -> Path:
    """Resolve a source key to an existing configuration file.

    Args:
        path (str | PathLike): Source key, usually a path relative to the default folder.
        default_folder (str | None): Directory prefixed to ``path`` when set.

    Returns:
        Path: The effective path, joined but not made absolute.

    Raises:
        NotFoundError: If the effective path is not an existing regular file.
    """

    candidate = Path(default_folder) / path if default_folder else Path(path)
    if not candidate.is_file():
        raise NotFoundError(f"Config file not found: {candidate}")
    return candidate
