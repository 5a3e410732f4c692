"""Reduction of a tree to its file entries."""

from typing import List, NamedTuple, Sequence

from anytree import PreOrderIter

from dirdiff.file_system_tree.file_system_node import FileNode, FileSystemNode


class LeafReference(NamedTuple):
    """A file entry reached by flattening a tree."""

    name: str
    file_path: str


def flatten(tree: Sequence[FileSystemNode]) -> List[LeafReference]:
    """List the file entries of a tree, depth-first.

    Entries are visited in tree order and a directory's contents are emitted before its
    following siblings. Directories themselves, empty or not, contribute nothing.

    Args:
        tree: Entries of the tree to flatten.

    Returns:
        One leaf reference per file, in traversal order.

    Example:
        >>> from dirdiff.file_system_tree.file_system_node import DirectoryNode
        >>> src = DirectoryNode("src", "/p/src")
        >>> _ = FileNode("lib.rs", "/p/src/lib.rs", parent=src)
        >>> [leaf.name for leaf in flatten([src, FileNode("README", "/p/README")])]
        ['lib.rs', 'README']
    """
    leaves: List[LeafReference] = []
    for node in tree:
        for leaf in PreOrderIter(node, filter_=lambda n: isinstance(n, FileNode)):
            leaves.append(LeafReference(leaf.name, str(leaf.file_path)))
    return leaves
