"""Configuration for code imports."""

from __future__ import annotations

import codecs
import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from codeimport.errors import InvalidConfigurationError

DEFAULT_ENCODING = "utf-8"

# Host option names accepted by from_mapping, including the camelCase spelling
# used by JavaScript-based renderers.
_OPTION_ALIASES = {
    "root_dir": "root_dir",
    "rootDir": "root_dir",
    "line_separator": "line_separator",
    "lineSeparator": "line_separator",
    "encoding": "encoding",
}


def require_absolute_root(root_dir: str) -> None:
    """Raise InvalidConfigurationError unless root_dir is an absolute path."""
    if not os.path.isabs(root_dir):
        raise InvalidConfigurationError(
            f"The provided 'root_dir' must be an absolute path - received: {root_dir}"
        )


@dataclass(frozen=True)
class CodeImportConfig:
    """Validated settings shared by every reference an importer resolves.

    Attributes:
        root_dir: Absolute directory substituted for the ``^<rootDir>`` placeholder.
        line_separator: Separator used to split file content into lines. Defaults
            to the separator of the machine building the documentation, not the
            convention of the file being read.
        encoding: Text encoding used to decode referenced files.
    """

    root_dir: str
    line_separator: str = os.linesep
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        require_absolute_root(self.root_dir)
        if not self.line_separator:
            raise InvalidConfigurationError("The 'line_separator' must not be empty")
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise InvalidConfigurationError(f"Unknown encoding: {self.encoding!r}") from e

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> CodeImportConfig:
        """Build a config from host-supplied plugin options.

        Args:
            options: Option mapping, e.g. ``{"rootDir": "/repo"}``.

        Returns:
            The validated configuration.

        Raises:
            InvalidConfigurationError: On unknown keys or invalid values.
        """
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _OPTION_ALIASES.get(key)
            if name is None:
                raise InvalidConfigurationError(f"Unknown code import option: {key}")
            if name in kwargs:
                raise InvalidConfigurationError(f"Option given more than once: {name}")
            kwargs[name] = value

        if "root_dir" not in kwargs:
            raise InvalidConfigurationError("The 'root_dir' option is required")

        return cls(**kwargs)
