"""Path Resolver for code import references.

This module provides the PathResolver class which turns the raw path of a
reference into an absolute file-system path. Paths may start with the
``^<rootDir>`` placeholder; any other relative path is resolved against the
directory of the document that holds the reference.
"""

from __future__ import annotations

import logging
import os

from codeimport.config import require_absolute_root
from codeimport.reference import ResolvedLocation

logger = logging.getLogger(__name__)

ROOT_DIR_PLACEHOLDER = "^<rootDir>"

# Spaces escaped as "\ " in the reference
ESCAPED_SPACE = "\\ "


class PathResolver:
    """Resolver for reference paths.

    The resolver holds only the configured root directory, so one instance
    can serve any number of documents.
    """

    def __init__(self, root_dir: str) -> None:
        """Initialize the resolver.

        Args:
            root_dir: Absolute directory substituted for the placeholder.

        Raises:
            InvalidConfigurationError: If root_dir is not absolute.
        """
        require_absolute_root(root_dir)
        self._root_dir = root_dir

    @property
    def root_dir(self) -> str:
        return self._root_dir

    def expand(self, raw_path: str) -> str:
        """Substitute the root placeholder and unescape spaces.

        Args:
            raw_path: The path segment of a reference.

        Returns:
            The expanded, possibly still relative, path.
        """
        return raw_path.replace(ROOT_DIR_PLACEHOLDER, self._root_dir).replace(ESCAPED_SPACE, " ")

    def resolve(self, raw_path: str, base_dir: str) -> ResolvedLocation:
        """Resolve a reference path to a normalized absolute location.

        Args:
            raw_path: The path segment of a reference.
            base_dir: Directory of the document containing the reference.

        Returns:
            The resolved location.
        """
        expanded = self.expand(raw_path)
        # os.path.join discards base_dir when expanded is already absolute
        absolute_path = os.path.abspath(os.path.join(base_dir, expanded))
        logger.debug(f"Resolved {raw_path!r} against {base_dir!r} -> {absolute_path}")
        return ResolvedLocation(absolute_path=absolute_path)
