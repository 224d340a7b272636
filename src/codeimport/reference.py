"""Data model for code references and their resolved selections.

This module provides the immutable values passed between the reference
parser, the path resolver and the line extractor.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from lsprotocol import types


@dataclass(frozen=True)
class Reference:
    """A parsed code reference such as ``src/lib.rs#L10-L20``.

    When ``is_range`` is False the selection is the single line ``start``
    (line 1 when absent) and ``end`` is ignored.

    Attributes:
        path: The raw path segment, before placeholder expansion.
        start: First selected line (1-indexed), or None when not given.
        end: Last selected line (1-indexed, inclusive), or None when not given.
        is_range: Whether the selector spans more than one line.
    """

    path: str
    start: int | None = None
    end: int | None = None
    is_range: bool = False


@dataclass(frozen=True)
class ResolvedLocation:
    """The absolute, normalized file-system path a reference points at.

    Attributes:
        absolute_path: Normalized absolute path of the referenced file.
    """

    absolute_path: str

    @property
    def uri(self) -> str:
        """The location as a ``file://`` URI."""
        return Path(self.absolute_path).as_uri()


@dataclass(frozen=True)
class LineSelection:
    """Lines extracted from a resolved location.

    Attributes:
        location: Where the lines were read from.
        first_line: 1-indexed line number of the first selected line.
        lines: The selected lines in file order, without line terminators.
    """

    location: ResolvedLocation
    first_line: int
    lines: list[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)

    def to_location(self) -> types.Location:
        """Convert this selection to an LSP Location object.

        The range starts at the beginning of the first selected line and ends
        after the last character of the last selected line. An empty selection
        yields an empty range at the first line.

        Returns:
            An LSP Location covering the selected lines.
        """
        from lsprotocol import types

        start_line = self.first_line - 1
        if self.lines:
            end_line = start_line + len(self.lines) - 1
            end_character = len(self.lines[-1].rstrip("\r"))
        else:
            end_line = start_line
            end_character = 0

        return types.Location(
            uri=self.location.uri,
            range=types.Range(
                start=types.Position(line=start_line, character=0),
                end=types.Position(line=end_line, character=end_character),
            ),
        )
