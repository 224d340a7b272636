"""Code importer tying parsing, path resolution and line extraction together."""

from __future__ import annotations

import logging

from codeimport.config import CodeImportConfig
from codeimport.line_extractor import LineExtractor
from codeimport.path_resolver import PathResolver
from codeimport.reference import LineSelection
from codeimport.reference_parser import parse_reference

logger = logging.getLogger(__name__)


class CodeImporter:
    """Resolves references and loads the lines they select.

    Each call parses, resolves and reads independently; the importer keeps no
    per-call state and may be shared between threads.
    """

    def __init__(self, config: CodeImportConfig) -> None:
        """Initialize the importer.

        Args:
            config: Validated code import configuration.
        """
        self._config = config
        self._resolver = PathResolver(config.root_dir)
        self._extractor = LineExtractor(config.line_separator, config.encoding)

    @property
    def config(self) -> CodeImportConfig:
        return self._config

    def load(self, meta: str, base_dir: str) -> LineSelection:
        """Load the lines selected by a reference.

        Args:
            meta: The reference string, e.g. ``src/lib.rs#L10-L20``.
            base_dir: Directory of the document containing the reference.

        Returns:
            The selection with its resolved location.

        Raises:
            InvalidReferenceError: If meta cannot be parsed.
            FileReadError: If the referenced file cannot be read.
        """
        reference = parse_reference(meta)
        location = self._resolver.resolve(reference.path, base_dir)
        lines = self._extractor.extract(location.absolute_path, reference)
        logger.debug(f"Imported {len(lines)} line(s) for {meta!r}")
        return LineSelection(location=location, first_line=reference.start or 1, lines=lines)

    def import_lines(self, meta: str, base_dir: str) -> list[str]:
        """Return only the lines selected by a reference."""
        return self.load(meta, base_dir).lines
