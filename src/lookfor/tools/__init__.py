"""
Search tools for lookfor.

This module contains the traversal and filtering stages of the search
pipeline.
"""

from .filter_chain import FilterChain, is_hidden
from .fs_walker import FSWalker

__all__ = ['FSWalker', 'FilterChain', 'is_hidden']
