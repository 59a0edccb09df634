"""
Filesystem entry data models for lookfor.

This module defines the value produced by the walker for every node it
discovers: the path, the base name, the node type and the depth below the
search root.
"""

import stat
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EntryType(Enum):
    """Enumeration of filesystem node types reported by the walker."""
    FILE = "file"
    DIR = "dir"
    OTHER = "other"

    @classmethod
    def from_mode(cls, mode: int) -> 'EntryType':
        """Classify an ``st_mode`` value without following symlinks."""
        if stat.S_ISREG(mode):
            return cls.FILE
        if stat.S_ISDIR(mode):
            return cls.DIR
        return cls.OTHER


def extension_of(name: str) -> Optional[str]:
    """
    Get the extension component of a base name.

    The extension is the text after the last ``.``. Names without a dot, and
    names whose only dot is the leading one (``.bashrc``), have no extension.
    A trailing dot yields an empty extension (``foo.`` -> ``''``).

    Args:
        name: Base name of an entry

    Returns:
        Extension without the dot, or None
    """
    idx = name.rfind('.')
    if idx <= 0:
        return None
    return name[idx + 1:]


@dataclass(frozen=True)
class Entry:
    """
    A single node discovered while walking a search root.

    Attributes:
        path: Root path as given, joined with the names leading to this node
        name: Base name of the node
        entry_type: File, directory or other (symlinks, sockets, devices)
        depth: Distance from the search root (the root itself is 0)
    """
    path: str
    name: str
    entry_type: EntryType
    depth: int

    @property
    def is_file(self) -> bool:
        return self.entry_type is EntryType.FILE

    @property
    def is_dir(self) -> bool:
        return self.entry_type is EntryType.DIR

    @property
    def extension(self) -> Optional[str]:
        return extension_of(self.name)

    def __str__(self) -> str:
        return self.path
