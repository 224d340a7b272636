"""Reference Parser for code import references.

This module turns a reference string like ``src/lib.rs#L10-L20`` into a
``Reference``. Supported selectors:

    path            whole file
    path#L5         line 5
    path#L5-        line 5 to the end of the file
    path#L5-L10     lines 5 to 10
    path#L-L10      lines 1 to 10
"""

from __future__ import annotations

import logging
import re

from codeimport.errors import InvalidReferenceError
from codeimport.reference import Reference

logger = logging.getLogger(__name__)

# <path>[#[L<start>][-][L<end>]]
# The start digits may be empty so that "#L-L10" parses with no start line.
# Only ASCII digits count as line numbers.
REFERENCE_PATTERN = re.compile(
    r"(?P<path>.*?)"
    r"(?:#(?:L(?P<start>\d*))?(?P<dash>-)?(?:L(?P<end>\d+))?)?",
    re.ASCII,
)


def parse_line_number(capture: str | None) -> int | None:
    """Convert a captured line number, treating unparseable captures as absent.

    A capture that is missing, empty or not a base-10 integer yields None
    instead of raising, so ``#L-L10`` selects from the first line.

    Args:
        capture: The captured digits, or None when the group did not match.

    Returns:
        The line number, or None.
    """
    if capture is None:
        return None
    try:
        return int(capture, 10)
    except ValueError:
        if capture:
            logger.warning(f"Ignoring unparseable line number: {capture!r}")
        return None


def parse_reference(meta: str) -> Reference:
    """Parse a reference string.

    Args:
        meta: The reference, e.g. ``^<rootDir>/src/main.py#L3-L8``.

    Returns:
        The parsed Reference.

    Raises:
        InvalidReferenceError: If the string does not match the grammar or
            the path segment is empty.
    """
    match = REFERENCE_PATTERN.fullmatch(meta)
    if match is None:
        raise InvalidReferenceError(meta, "does not match <path>[#L<start>[-][L<end>]]")

    path = match.group("path")
    if not path:
        raise InvalidReferenceError(meta, "path is empty")

    start = parse_line_number(match.group("start"))
    end = parse_line_number(match.group("end"))
    # Without a start line the selection always runs from line 1 as a range.
    is_range = match.group("dash") is not None or start is None

    reference = Reference(path=path, start=start, end=end, is_range=is_range)
    logger.debug(f"Parsed reference {meta!r} -> {reference}")
    return reference
