"""Code import package.

This package resolves file references such as ``src/lib.rs#L10-L20`` into
the lines they select, for embedding into rendered documents.
"""

from codeimport.config import CodeImportConfig
from codeimport.errors import (
    CodeImportError,
    FileReadError,
    InvalidConfigurationError,
    InvalidReferenceError,
    SourceFileNotFoundError,
)
from codeimport.importer import CodeImporter
from codeimport.line_extractor import LineExtractor, extract_lines
from codeimport.path_resolver import PathResolver
from codeimport.plugin import CodeImportPlugin
from codeimport.reference import LineSelection, Reference, ResolvedLocation
from codeimport.reference_parser import parse_reference

__all__ = [
    "CodeImportConfig",
    "CodeImportError",
    "CodeImportPlugin",
    "CodeImporter",
    "FileReadError",
    "InvalidConfigurationError",
    "InvalidReferenceError",
    "LineExtractor",
    "LineSelection",
    "PathResolver",
    "Reference",
    "ResolvedLocation",
    "SourceFileNotFoundError",
    "extract_lines",
    "parse_reference",
]
