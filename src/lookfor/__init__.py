"""
lookfor - Core Package

A small command-line filesystem search utility: walk a directory tree and
print the paths whose names, extensions, types and depths match the given
criteria.
"""

__version__ = "0.1.0"
