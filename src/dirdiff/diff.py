"""Change detection between two directory trees or two files.

This module composes the tree builder, the structural comparison and the content
reader into the two public operations of the package. Each call walks and reads the
filesystem from scratch; nothing is cached between calls.
"""

import logging
from typing import Optional

from dirdiff.concurrency import gather_or_cancel
from dirdiff.content.content_comparator import content_equivalent
from dirdiff.content.content_reader import read_all, read_file
from dirdiff.content.flattener import flatten
from dirdiff.file_system_tree.tree_builder import ExclusionSpec, build_tree, normalize_exclusion_rules
from dirdiff.file_system_tree.tree_shape import structurally_equal
from dirdiff.types import PathType

logger = logging.getLogger(__name__)


async def dir_diff(
    root_a: PathType,
    root_b: PathType,
    excluding: Optional[ExclusionSpec] = None,
    recursive_excluding: bool = False,
    *,
    sort_entries: bool = False,
    max_concurrency: Optional[int] = None,
) -> bool:
    """Determine whether two directory trees are different.

    Both trees are built with the same exclusion settings. If their shapes differ, the
    trees are different and no file is read. Otherwise the text of every file of both
    trees is read and the trees are different unless each content of the first tree
    also occurs somewhere in the second tree.

    Note that the content test is one-directional: files present only in ``root_b``
    are caught by the shape comparison, but contents are matched without regard to
    position, so two trees whose files hold permuted contents are reported equal.

    Args:
        root_a: First directory.
        root_b: Second directory.
        excluding: Plain entry names (or a rules object) to leave out of both trees.
        recursive_excluding: Apply ``excluding`` at every nesting level instead of only
            to the roots' immediate entries.
        sort_entries: Compare entries sorted by name instead of in listing order.
        max_concurrency: Maximum number of file reads in flight per tree.

    Returns:
        True if the trees are different, False if they are considered the same.

    Raises:
        DiffIOError: If either root, any nested directory or any compared file cannot be
            read. Pending listings and reads of both trees are cancelled first.

    Example:
        >>> asyncio.run(dir_diff("./build", "./build.previous", ["logs"]))  # doctest: +SKIP
        False
    """
    rules = normalize_exclusion_rules(excluding)

    tree_a, tree_b = await gather_or_cancel(
        build_tree(root_a, rules, recursive_excluding, sort_entries=sort_entries),
        build_tree(root_b, rules, recursive_excluding, sort_entries=sort_entries),
    )

    if not structurally_equal(tree_a, tree_b):
        logger.debug("Structure of %s and %s differs", root_a, root_b)
        return True

    contents_a, contents_b = await gather_or_cancel(
        read_all(flatten(tree_a), max_concurrency),
        read_all(flatten(tree_b), max_concurrency),
    )
    return not content_equivalent(contents_a, contents_b)


async def file_diff(file_a: PathType, file_b: PathType) -> bool:
    """Determine whether two files have different text content.

    Args:
        file_a: First file.
        file_b: Second file.

    Returns:
        True if the contents differ.

    Raises:
        DiffIOError: If either file cannot be read or is not valid UTF-8 text.
    """
    content_a, content_b = await gather_or_cancel(read_file(file_a), read_file(file_b))
    return content_a != content_b
