"""Structural comparison of built trees."""

from typing import NamedTuple, Optional, Sequence, Tuple

from dirdiff.file_system_tree.file_system_node import DirectoryNode, FileSystemNode


class TreeShape(NamedTuple):
    """Path-free view of a node used for structural comparison.

    ``children`` is None for a file and a (possibly empty) tuple for a directory, so an
    empty directory never compares equal to a file of the same name.
    """

    name: str
    children: Optional[Tuple["TreeShape", ...]]


def project(nodes: Sequence[FileSystemNode]) -> Tuple[TreeShape, ...]:
    """Project a sequence of nodes to their shapes, recursively, dropping paths.

    Example:
        >>> from dirdiff.file_system_tree.file_system_node import FileNode
        >>> project([FileNode("a.txt", "/x/a.txt"), DirectoryNode("empty", "/x/empty")])
        (TreeShape(name='a.txt', children=None), TreeShape(name='empty', children=()))
    """
    return tuple(
        TreeShape(node.name, project(node.children) if isinstance(node, DirectoryNode) else None) for node in nodes
    )


def structurally_equal(tree: Sequence[FileSystemNode], other: Sequence[FileSystemNode]) -> bool:
    """Check whether two trees have the same shape.

    Two entry sequences are equal when they have the same length and, position by
    position, the same name and the same kind, with directory children compared the
    same way. Paths are ignored. The comparison is order-sensitive: the same entries in
    a different order are a different shape.

    Args:
        tree: Entries of the first tree.
        other: Entries of the second tree.

    Returns:
        True if both trees have the same shape.
    """
    return project(tree) == project(other)
