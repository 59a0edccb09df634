"""
Filter chain for lookfor.

Applies the active predicates of a FilterSpec to each entry in a fixed order:
hidden visibility, type, name, then extension. Evaluation stops at the first
rejection.
"""

from typing import Callable, Iterable, Iterator, List, Tuple

from ..models.entry import Entry, extension_of
from ..models.filter_spec import FilterSpec


Predicate = Callable[[Entry], bool]

_ASCII_LOWER = str.maketrans('ABCDEFGHIJKLMNOPQRSTUVWXYZ', 'abcdefghijklmnopqrstuvwxyz')


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only, leaving every other character as is."""
    return text.translate(_ASCII_LOWER)


def is_hidden(entry: Entry) -> bool:
    """Check whether an entry's base name starts with a dot."""
    return entry.name.startswith('.')


class FilterChain:
    """
    Ordered set of predicates deciding which entries are reported.

    The predicate list is built once from the FilterSpec; filters that are not
    configured are left out entirely rather than evaluated as no-ops.
    """

    def __init__(self, spec: FilterSpec):
        """
        Initialize the filter chain.

        Args:
            spec: Resolved filter criteria for the run
        """
        self.spec = spec
        self._extension = ascii_lower(spec.extension) if spec.extension is not None else None
        self._predicates: List[Tuple[str, Predicate]] = self._build_predicates()

    def _build_predicates(self) -> List[Tuple[str, Predicate]]:
        predicates: List[Tuple[str, Predicate]] = []

        if not self.spec.show_hidden:
            predicates.append(('hidden', self._check_hidden))

        predicates.append(('type', self._check_type))

        if self.spec.name is not None:
            predicates.append(('name', self._check_name))

        if self.spec.extension is not None:
            predicates.append(('extension', self._check_extension))

        return predicates

    @property
    def active_filters(self) -> List[str]:
        """Names of the active predicates, in evaluation order."""
        return [name for name, _ in self._predicates]

    def _check_hidden(self, entry: Entry) -> bool:
        return not is_hidden(entry)

    def _check_type(self, entry: Entry) -> bool:
        return self.spec.entry_type.accepts(entry.entry_type)

    def _check_name(self, entry: Entry) -> bool:
        return self.spec.name.matches(entry.name)

    def _check_extension(self, entry: Entry) -> bool:
        ext = extension_of(entry.name)
        if ext is None:
            return False
        return ascii_lower(ext) == self._extension

    def accepts(self, entry: Entry) -> bool:
        """
        Check whether an entry passes every active filter.

        Args:
            entry: Entry to check

        Returns:
            True if the entry should be reported
        """
        for _, predicate in self._predicates:
            if not predicate(entry):
                return False
        return True

    def filter(self, entries: Iterable[Entry]) -> Iterator[Entry]:
        """Lazily yield the entries that pass every active filter."""
        for entry in entries:
            if self.accepts(entry):
                yield entry
