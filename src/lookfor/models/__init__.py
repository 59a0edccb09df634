"""
Data models for lookfor.

This module contains the core data structures used throughout the system.
"""

from .entry import Entry, EntryType, extension_of
from .filter_spec import (
    FilterSpec,
    InvalidPatternError,
    LiteralMatcher,
    PatternMatcher,
    TypeFilter,
    build_name_matcher
)

__all__ = [
    'Entry',
    'EntryType',
    'extension_of',
    'FilterSpec',
    'InvalidPatternError',
    'LiteralMatcher',
    'PatternMatcher',
    'TypeFilter',
    'build_name_matcher'
]
