"""
Search pipeline for lookfor.

Connects the walker, the filter chain and the output stream. Entries are
pulled one at a time from the walker, so nothing beyond the current
traversal stack is held in memory.
"""

import logging
import os
from typing import Iterable, Iterator, Optional, TextIO, Union

from .models.entry import Entry
from .models.filter_spec import FilterSpec
from .tools.filter_chain import FilterChain
from .tools.fs_walker import FSWalker


logger = logging.getLogger(__name__)


def find_entries(
    root: Union[str, os.PathLike],
    spec: FilterSpec,
    walker: Optional[FSWalker] = None
) -> Iterator[Entry]:
    """
    Lazily yield the entries under ``root`` that match ``spec``.

    Args:
        root: Search root
        spec: Resolved filter criteria
        walker: Walker to use; one bounded by ``spec.max_depth`` is created if omitted

    Returns:
        Iterator over matching entries, in walk order
    """
    if walker is None:
        walker = FSWalker(max_depth=spec.max_depth)

    chain = FilterChain(spec)
    logger.debug(f"Active filters: {', '.join(chain.active_filters)} ({spec})")
    return chain.filter(walker.walk(root))


def write_results(entries: Iterable[Entry], stream: TextIO) -> int:
    """
    Write one path per line to ``stream``.

    Returns:
        Number of paths written
    """
    count = 0
    for entry in entries:
        stream.write(f"{entry.path}\n")
        count += 1
    return count
