"""Asynchronous construction of filesystem trees with configurable exclusion rules.

This module walks a directory and produces a tree of :class:`DirectoryNode` and
:class:`FileNode` objects. Listing a directory is a blocking call, so every listing
runs in a worker thread, and sibling subdirectories are walked concurrently.
"""

import asyncio
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from dirdiff.concurrency import gather_or_cancel
from dirdiff.exceptions import DiffIOError
from dirdiff.exclusion_rules.base_rules import BaseExclusionRules
from dirdiff.exclusion_rules.name_rules import NameExclusionRules
from dirdiff.file_system_tree.file_system_node import DirectoryNode, FileNode, FileSystemNode
from dirdiff.types import PathType

logger = logging.getLogger(__name__)

# Either a rules object or a plain collection of entry names
ExclusionSpec = Union[BaseExclusionRules, Iterable[str]]


def normalize_exclusion_rules(excluding: Optional[ExclusionSpec]) -> Optional[BaseExclusionRules]:
    """Turn an exclusion argument into a rules object.

    Args:
        excluding: None, a rules object, or an iterable of plain entry names.

    Returns:
        The rules object to consult, or None when nothing is excluded.

    Example:
        >>> normalize_exclusion_rules(["target"]).exclude("target")
        True
        >>> normalize_exclusion_rules(None) is None
        True
    """
    if excluding is None:
        return None
    if isinstance(excluding, BaseExclusionRules):
        return excluding
    return NameExclusionRules(excluding)


def _scan_directory(path: Path) -> List[Tuple[str, bool]]:
    """List the immediate entries of a directory as ``(name, is_dir)`` pairs.

    Entries come back in the order the operating system returns them.

    Raises:
        DiffIOError: If the directory cannot be listed.
    """
    try:
        with os.scandir(path) as entries:
            return [(entry.name, entry.is_dir()) for entry in entries]
    except OSError as e:
        raise DiffIOError(path, e) from e


class FileSystemTree:
    """Builder for the tree representation of a directory.

    Each entry of the root directory that is not excluded becomes a node. Directories are
    descended into; files become leaves. The rules object is consulted with each entry's
    base name. Whether nested levels are filtered too is decided by ``recursive_excluding``:
    when False, only the root's immediate entries are checked and deeper levels are built
    without any exclusion.

    Entries keep the order in which the directory listing returned them unless
    ``sort_entries`` is set, in which case every directory's entries are sorted by name.
    Listing order differs between filesystems, so only sorted trees can be compared
    independently of it.

    Every call to :meth:`build` walks the filesystem again; nothing is cached.

    Attributes:
        root_path (Path): The directory being represented.
        exclusion_rules (Optional[BaseExclusionRules]): Rules for omitting entries.
        recursive_excluding (bool): Whether the rules apply below the root level.
        sort_entries (bool): Whether entries are sorted by name.

    Example:
        >>> tree = FileSystemTree("src", ["__pycache__"], recursive_excluding=True)  # doctest: +SKIP
        >>> root = asyncio.run(tree.build())  # doctest: +SKIP
        >>> [node.name for node in root.children]  # doctest: +SKIP
        ['dirdiff']
    """

    def __init__(
        self,
        root_path: PathType,
        exclusion_rules: Optional[ExclusionSpec] = None,
        recursive_excluding: bool = False,
        sort_entries: bool = False,
    ) -> None:
        """Initialize a FileSystemTree.

        Args:
            root_path: Path to the root directory. Can be any path-like object.
            exclusion_rules: Rules object or plain entry names to exclude. Defaults to None.
            recursive_excluding: Apply the exclusions at every nesting level instead of
                only to the root's immediate entries. Defaults to False.
            sort_entries: Sort each directory's entries by name. Defaults to False.
        """
        self.root_path = Path(root_path)
        self.exclusion_rules = normalize_exclusion_rules(exclusion_rules)
        self.recursive_excluding = recursive_excluding
        self.sort_entries = sort_entries

    async def build(self) -> DirectoryNode:
        """Walk the filesystem and return the root node of the tree.

        Returns:
            A directory node for the root whose children are the root's entries.

        Raises:
            DiffIOError: If the root or any nested directory cannot be listed, including
                when the root does not exist or is not a directory.
        """
        root = DirectoryNode(self.root_path.name or str(self.root_path), self.root_path)
        root.children = await self._build_entries(self.root_path, self.exclusion_rules)
        return root

    async def _build_entries(self, path: Path, rules: Optional[BaseExclusionRules]) -> List[FileSystemNode]:
        """Build the nodes for the entries of one directory, in listing order."""
        logger.debug("Listing %s", path)
        listing = await asyncio.to_thread(_scan_directory, path)
        if self.sort_entries:
            listing = sorted(listing, key=lambda entry: entry[0])

        child_rules = rules if self.recursive_excluding else None

        builds = []
        for name, is_dir in listing:
            if rules is not None and rules.exclude(name):
                logger.debug("Excluding %s", path / name)
                continue
            builds.append(self._build_entry(path / name, name, is_dir, child_rules))

        # results keep argument order, so children stay in listing order
        return await gather_or_cancel(*builds)

    async def _build_entry(
        self, path: Path, name: str, is_dir: bool, rules: Optional[BaseExclusionRules]
    ) -> FileSystemNode:
        if not is_dir:
            return FileNode(name, path)

        node = DirectoryNode(name, path)
        node.children = await self._build_entries(path, rules)
        return node


async def build_tree(
    root_path: PathType,
    exclusion_rules: Optional[ExclusionSpec] = None,
    recursive_excluding: bool = False,
    *,
    sort_entries: bool = False,
) -> Tuple[FileSystemNode, ...]:
    """Build the entries of a directory tree.

    Convenience wrapper around :class:`FileSystemTree` returning the root's entries
    rather than the root node itself.

    Args:
        root_path: Directory to walk.
        exclusion_rules: Rules object or plain entry names to exclude.
        recursive_excluding: Apply the exclusions at every nesting level.
        sort_entries: Sort each directory's entries by name.

    Returns:
        The root directory's entries as a tuple of nodes.

    Raises:
        DiffIOError: If any directory in the tree cannot be listed.
    """
    tree = FileSystemTree(root_path, exclusion_rules, recursive_excluding, sort_entries)
    root = await tree.build()
    return root.children
