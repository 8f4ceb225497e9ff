"""Template-expanding YAML parser.

Updates:
    v0.1.0 - 2025-11-09 - Added ERB-style directive expansion on top of Jinja2.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping, Protocol

import yaml
from jinja2 import Environment, TemplateError

from .errors import ParseError, ReadError


class Parser(Protocol):
    """Protocol describing a configuration file parser."""

    def parse(self, file_path: Path) -> Any:
        """Read ``file_path`` and return its nested mapping/sequence/scalar tree.

        Args:
            file_path (Path): Existing file to parse.

        Returns:
            Any: Parsed structure, usually a dictionary.
        """

        ...


def _build_environment() -> Environment:
    # Jinja2 matches the longest start delimiter first, so ``<%=`` and ``<%#``
    # win over ``<%``.
    return Environment(
        block_start_string="<%",
        block_end_string="%>",
        variable_start_string="<%=",
        variable_end_string="%>",
        comment_start_string="<%#",
        comment_end_string="%>",
        keep_trailing_newline=True,
        autoescape=False,
    )


class YamlTemplateParser:
    """Expands ``<%= ... %>`` directives and parses the result as YAML."""

    def __init__(self, context: Mapping[str, Any] | None = None) -> None:
        """Configure the parser.

        Args:
            context (Mapping[str, Any] | None): Extra variables visible inside
                directives alongside ``ENV``.
        """

        self._environment = _build_environment()
        self._context = dict(context or {})

    def parse(self, file_path: Path) -> Any:
        """Read, expand and parse a configuration file.

        Args:
            file_path (Path): File to parse.

        Returns:
            Any: Result of ``yaml.safe_load`` on the expanded text.

        Raises:
            ReadError: If the file cannot be read as UTF-8 text.
            ParseError: If a directive or the YAML document is invalid.
        """

        path = Path(file_path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ReadError(f"Unable to read config file {path}: {exc}") from exc

        expanded = self.expand(content, source=str(path))
        try:
            return yaml.safe_load(expanded)
        except yaml.YAMLError as exc:
            raise ParseError(f"Invalid YAML in {path}: {exc}") from exc

    def expand(self, content: str, *, source: str = "<string>") -> str:
        """Render template directives in ``content`` against the environment.

        Args:
            content (str): Raw file text.
            source (str): Name used in error messages.

        Returns:
            str: Text with every directive replaced by its value.

        Raises:
            ParseError: If a directive is malformed or fails to evaluate.
        """

        variables = {**self._context, "ENV": dict(os.environ)}
        try:
            template = self._environment.from_string(content)
            return template.render(variables)
        except TemplateError as exc:
            raise ParseError(f"Template error in {source}: {exc}") from exc

    @classmethod
    def perform(cls, file_path: Path) -> Any:
        """Parse ``file_path`` with a default-configured parser."""

        return cls().parse(file_path)


__all__ = ["Parser", "YamlTemplateParser"]
