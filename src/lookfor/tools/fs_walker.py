"""
Filesystem walker for lookfor.

This module provides the depth-bounded directory traversal that feeds the
filter chain. The walk is lazy, never follows symlinks below the root, prunes
subtrees beyond the depth bound before opening them, and silently drops any
node it cannot read.
"""

import logging
import os
from typing import Dict, Iterator, List, Optional, Union

from ..models.entry import Entry, EntryType


logger = logging.getLogger(__name__)


def _root_name(root: str) -> str:
    """
    Base name of the search root as given.

    Roots whose last component is not a name (".", "..", "/") are named by the
    whole path, so "foo/.." is not mistaken for a hidden entry.
    """
    separators = os.sep + (os.altsep or "")
    last = os.path.basename(root.rstrip(separators))
    if last in ("", ".", ".."):
        return root
    return last


class FSWalker:
    """
    Filesystem walker that lazily yields every entry under a search root.

    The root is yielded first at depth 0, followed by a depth-first, pre-order
    walk in which each directory's children are visited in name order. With a
    depth bound of D, directories at depth D are reported but never opened.

    Directory listings are read completely inside a ``with os.scandir(...)``
    block, so no directory handle is held while entries are being consumed.
    Pending siblings are kept on an explicit stack rather than in nested
    generators.
    """

    def __init__(self, max_depth: Optional[int] = None):
        """
        Initialize the filesystem walker.

        Args:
            max_depth: Deepest level to report; the root is 0. None for unbounded.
        """
        if max_depth is not None and max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {max_depth}")
        self.max_depth = max_depth
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            'entries_seen': 0,
            'directories_traversed': 0,
            'errors': 0
        }

    def walk(self, root: Union[str, os.PathLike]) -> Iterator[Entry]:
        """
        Walk a directory tree and yield its entries.

        A root that does not exist or cannot be stat'ed yields nothing.

        Args:
            root: Directory to start from; returned paths keep its style

        Yields:
            Entry objects, the root first
        """
        root = os.fspath(root)

        root_entry = self._make_root_entry(root)
        if root_entry is None:
            return

        self._stats['entries_seen'] += 1
        yield root_entry

        if not self._should_descend(root, root_entry):
            return

        logger.info(f"Walking directory tree: {root}")

        # Each frame holds the not-yet-visited children of one open level
        stack: List[Iterator[os.DirEntry]] = [iter(self._list_directory(root))]

        while stack:
            dir_entry = next(stack[-1], None)
            if dir_entry is None:
                stack.pop()
                continue

            entry = self._make_entry(dir_entry, depth=len(stack))
            if entry is None:
                continue

            self._stats['entries_seen'] += 1
            yield entry

            if entry.is_dir and self._within_depth(entry.depth):
                stack.append(iter(self._list_directory(entry.path)))

    def _within_depth(self, depth: int) -> bool:
        """Whether children of a directory at ``depth`` may be visited."""
        return self.max_depth is None or depth < self.max_depth

    def _should_descend(self, root: str, root_entry: Entry) -> bool:
        """
        Decide whether the root's contents are walked.

        A symlinked root is followed so that ``lookfor some-link/`` searches
        the directory it points to; links below the root never are.
        """
        if not self._within_depth(0):
            return False

        if root_entry.is_dir:
            return True

        if os.path.islink(root):
            return os.path.isdir(root)

        return False

    def _make_root_entry(self, root: str) -> Optional[Entry]:
        try:
            st = os.lstat(root)
        except (OSError, ValueError):
            self._stats['errors'] += 1
            return None

        return Entry(
            path=root,
            name=_root_name(root),
            entry_type=EntryType.from_mode(st.st_mode),
            depth=0
        )

    def _make_entry(self, dir_entry: os.DirEntry, depth: int) -> Optional[Entry]:
        """
        Build an Entry from a scandir result without following symlinks.

        Returns:
            Entry, or None if the node vanished or cannot be classified
        """
        try:
            if dir_entry.is_dir(follow_symlinks=False):
                entry_type = EntryType.DIR
            elif dir_entry.is_file(follow_symlinks=False):
                entry_type = EntryType.FILE
            else:
                entry_type = EntryType.OTHER
        except OSError:
            self._stats['errors'] += 1
            return None

        return Entry(
            path=dir_entry.path,
            name=dir_entry.name,
            entry_type=entry_type,
            depth=depth
        )

    def _list_directory(self, path: str) -> List[os.DirEntry]:
        """
        Read a directory's children, sorted by name.

        Args:
            path: Directory to list

        Returns:
            The children, or an empty list if the directory cannot be read
        """
        try:
            with os.scandir(path) as it:
                children = sorted(it, key=lambda child: child.name)
        except OSError:
            self._stats['errors'] += 1
            return []

        self._stats['directories_traversed'] += 1
        return children

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the filesystem walking operation.

        Returns:
            Dictionary containing operation statistics
        """
        return self._stats.copy()

    def reset_stats(self) -> None:
        """Reset the statistics counters."""
        self._stats = self._empty_stats()
