"""Rendering pipeline hooks for code imports.

A code block opts in through its ``file`` meta option::

    ```python file=^<rootDir>/src/app.py#L10-L20
    ```

Metadata preprocessing loads the referenced lines into the block props, and
code preprocessing inserts them at the top of the block.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping, Sequence
from typing import Any, Protocol

from codeimport.config import CodeImportConfig
from codeimport.importer import CodeImporter

logger = logging.getLogger(__name__)

PLUGIN_NAME = "code-import"
FILE_META_OPTION = "file"
LINES_PROP = "lines"


class CodeBlock(Protocol):
    """The parts of a host code block the hooks use."""

    @property
    def meta_options(self) -> Mapping[str, str]: ...

    @property
    def props(self) -> dict[str, Any]: ...

    @property
    def source_file_path(self) -> str | None: ...

    def insert_lines(self, index: int, lines: Sequence[str]) -> None: ...


class CodeImportPlugin:
    """Hooks that fill code blocks from referenced files."""

    name = PLUGIN_NAME

    def __init__(self, config: CodeImportConfig) -> None:
        self._importer = CodeImporter(config)

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> CodeImportPlugin:
        """Create the plugin from host options such as ``{"rootDir": "/repo"}``."""
        return cls(CodeImportConfig.from_mapping(options))

    def preprocess_metadata(self, block: CodeBlock) -> None:
        """Load the lines referenced by the block's ``file`` option into its props.

        Blocks without the option are left untouched. Parse and read errors
        propagate to the host.
        """
        meta = block.meta_options.get(FILE_META_OPTION)
        if meta is None:
            return

        # Blocks without a parent document resolve against the working directory
        base_dir = os.path.dirname(block.source_file_path or "")
        block.props[LINES_PROP] = self._importer.import_lines(meta, base_dir)

    def preprocess_code(self, block: CodeBlock) -> None:
        """Insert previously loaded lines at the top of the block."""
        meta = block.meta_options.get(FILE_META_OPTION)
        lines = block.props.get(LINES_PROP)
        if meta and lines:
            block.insert_lines(0, lines)
        elif meta:
            logger.debug(f"No lines loaded for {meta!r}, leaving block unchanged")
