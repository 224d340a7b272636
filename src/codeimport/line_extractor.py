"""Line Extractor for code imports.

This module reads a referenced file and slices out the selected lines.

Line numbers are 1-indexed and inclusive. Bounds outside the file clamp the
same way list slicing does, so an out-of-range selection comes back short or
empty instead of raising.

An open-ended range (``#L5-``, or no selector at all) ends at
``len(lines) - 1``: the last element produced by splitting is excluded. For
content ending with a line separator that element is the empty string after
the final separator. For content without a trailing separator it is the last
real line, which is then dropped.
"""

from __future__ import annotations

import logging
import os

from codeimport.config import DEFAULT_ENCODING
from codeimport.errors import FileReadError, SourceFileNotFoundError
from codeimport.reference import Reference

logger = logging.getLogger(__name__)


def extract_lines(
    content: str,
    start: int | None,
    end: int | None,
    is_range: bool,
    line_separator: str = os.linesep,
) -> list[str]:
    """Select lines from file content.

    Args:
        content: The full file content.
        start: First line (1-indexed); None or 0 selects from line 1.
        end: Last line (inclusive); None or 0 selects to the open-ended bound.
            Ignored when is_range is False.
        is_range: False selects the single line ``start``.
        line_separator: Separator used to split content into lines.

    Returns:
        The selected lines in file order.
    """
    lines = content.split(line_separator)
    first = start or 1
    if not is_range:
        last = first
    elif end:
        last = end
    else:
        last = len(lines) - 1
    return lines[first - 1 : last]


def read_source(path: str, encoding: str = DEFAULT_ENCODING) -> str:
    """Read the whole content of a referenced file.

    Undecodable bytes are replaced rather than rejected.

    Args:
        path: Absolute path of the file.
        encoding: Text encoding of the file.

    Returns:
        The file content.

    Raises:
        SourceFileNotFoundError: If the file does not exist.
        FileReadError: If the path is not a regular file or cannot be read.
    """
    try:
        # newline="" keeps the file's own line endings for the splitter
        with open(path, encoding=encoding, errors="replace", newline="") as f:
            return f.read()
    except FileNotFoundError as e:
        raise SourceFileNotFoundError(path, "no such file") from e
    except IsADirectoryError as e:
        raise FileReadError(path, "not a regular file") from e
    except PermissionError as e:
        raise FileReadError(path, "permission denied") from e
    except OSError as e:
        raise FileReadError(path, e.strerror or str(e)) from e
    except ValueError as e:
        # open() rejects paths containing NUL bytes
        raise FileReadError(path, str(e)) from e


class LineExtractor:
    """Reads files and extracts the lines a reference selects."""

    def __init__(self, line_separator: str = os.linesep, encoding: str = DEFAULT_ENCODING) -> None:
        self._line_separator = line_separator
        self._encoding = encoding

    def extract(self, path: str, reference: Reference) -> list[str]:
        """Read path and return the lines selected by reference.

        Args:
            path: Absolute path of the referenced file.
            reference: The parsed reference providing the line selection.

        Returns:
            The selected lines.

        Raises:
            FileReadError: If the file cannot be read.
        """
        content = read_source(path, self._encoding)
        lines = extract_lines(
            content,
            reference.start,
            reference.end,
            reference.is_range,
            self._line_separator,
        )
        if not lines and content:
            logger.warning(f"Reference {reference.path!r} selected no lines from {path}")
        logger.debug(f"Extracted {len(lines)} line(s) from {path}")
        return lines
