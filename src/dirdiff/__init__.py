"""Asynchronous change detection for directory trees and files.

This package answers one question: are two directory trees (or two files)
different? It builds lightweight tree models of both sides, compares their
shape, and only reads file contents when the shapes match.
"""

from importlib.metadata import PackageNotFoundError, version

from dirdiff.diff import dir_diff, file_diff
from dirdiff.exceptions import DiffIOError

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirdiff")
except PackageNotFoundError:
    __version__ = "unknown"

__all__ = ["DiffIOError", "dir_diff", "file_diff", "__version__"]
