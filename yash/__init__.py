"""Yash: YAML + ERB configuration files as cached, immutable attribute mappings.

Example::

    # config/settings/database.yml
    # development:
    #   host: localhost
    # production:
    #   host: <%= ENV['HOST'] %>

    import yash

    yash.configure(default_folder="config", default_namespace="production")
    yash.get("settings/database.yml").host  # -> value of $HOST

    class Database:
        settings = yash.bind("settings/database.yml")

    Database.settings().host
"""

from __future__ import annotations

import logging

from .core.config import YashConfig
from .core.errors import (
    MutationError,
    NamespaceError,
    NotFoundError,
    ParseError,
    ReadError,
    YashError,
)
from .core.logging_setup import configure_logging, set_runtime_level
from .core.mash import Mash, build_mash
from .core.parser import Parser, YamlTemplateParser
from .core.path_resolver import resolve_path
from .services.binder import Binder
from .services.cache import MashCache
from .services.loader import Loader
from .services.registry import Yash, default_yash

logging.getLogger(__name__).addHandler(logging.NullHandler())

get = default_yash.get
load = default_yash.load
configure = default_yash.configure
clear_cache = default_yash.clear_cache
bind = default_yash.bind

__all__ = [
    "Binder",
    "Loader",
    "Mash",
    "MashCache",
    "MutationError",
    "NamespaceError",
    "NotFoundError",
    "ParseError",
    "Parser",
    "ReadError",
    "Yash",
    "YashConfig",
    "YashError",
    "YamlTemplateParser",
    "bind",
    "build_mash",
    "clear_cache",
    "configure",
    "configure_logging",
    "default_yash",
    "get",
    "load",
    "resolve_path",
    "set_runtime_level",
]
