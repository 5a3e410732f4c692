"""Node representation for file system entries in the tree."""

from pathlib import Path
from typing import Any, Optional

from anytree import Node

from dirdiff.types import PathType


class FileSystemNode(Node):  # type: ignore
    """Base node class representing an entry in the filesystem tree.

    Extends anytree.Node with the filesystem path the entry was built from. The path is
    only used for listing and reading; it never takes part in comparisons, which is what
    allows trees rooted at different locations to be judged equal.

    The node kind is carried by the class: :class:`DirectoryNode` or :class:`FileNode`.
    Do not rely on anytree's ``is_leaf`` to tell them apart, since an empty directory is
    a leaf as far as anytree is concerned.

    Attributes:
        name (str): The base name of the file or directory.
        file_path (Path): Path used to access the entry. Named ``file_path`` because
            anytree already defines ``path`` as the chain of ancestor nodes.
        parent (Optional[FileSystemNode]): The parent node in the tree.
        children (tuple[FileSystemNode]): The child nodes (inherited from anytree.Node).
    """

    is_dir = False

    def __init__(
        self,
        name: str,
        file_path: PathType,
        parent: Optional["FileSystemNode"] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: The base name of the file or directory. Must not be empty.
            file_path: The path used to access the entry.
            parent: The parent node. Defaults to None.
            **kwargs: Additional arguments passed to anytree.Node.

        Raises:
            ValueError: If name is empty.
        """
        if not name:
            raise ValueError("Node name must be a non-empty string")
        super().__init__(name, parent, **kwargs)
        self.file_path = Path(file_path)

    def _pre_attach(self, parent: Node) -> None:
        # anytree hook, called before this node is attached to a parent
        if isinstance(parent, FileNode):
            raise TypeError(f"File node '{parent.name}' cannot have children")


class DirectoryNode(FileSystemNode):
    """A directory entry. Its children are the entries listed inside it, possibly none.

    Example:
        >>> root = DirectoryNode("root", "/tmp/root")
        >>> child = FileNode("a.txt", "/tmp/root/a.txt", parent=root)
        >>> [node.name for node in root.children]
        ['a.txt']
        >>> root.is_dir, child.is_dir
        (True, False)
    """

    is_dir = True


class FileNode(FileSystemNode):
    """A file entry. File nodes never have children."""

    is_dir = False
