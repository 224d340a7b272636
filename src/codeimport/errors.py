"""Exception hierarchy for code imports.

Configuration problems are raised once, when an importer is built. Reference
and read problems are raised per reference and abort only that reference.
"""

from __future__ import annotations


class CodeImportError(Exception):
    """Base class for all code import failures."""


class InvalidConfigurationError(CodeImportError, ValueError):
    """Raised when the importer configuration is unusable."""


class InvalidReferenceError(CodeImportError, ValueError):
    """Raised when a reference string cannot be parsed.

    Attributes:
        reference: The raw reference string that failed to parse.
    """

    def __init__(self, reference: str, reason: str) -> None:
        super().__init__(f"Received invalid 'file' reference {reference!r}: {reason}")
        self.reference = reference


class FileReadError(CodeImportError, OSError):
    """Raised when the referenced file cannot be read.

    Attributes:
        path: The absolute path that was read.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read {path}: {reason}")
        self.path = path


class SourceFileNotFoundError(FileReadError):
    """Raised when the referenced file does not exist."""
