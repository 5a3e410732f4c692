"""Unit tests for the node classes of the tree model."""

from pathlib import Path

import pytest

from dirdiff.file_system_tree.file_system_node import DirectoryNode, FileNode, FileSystemNode


def test_file_node_initialization():
    node = FileNode("test_file.txt", "/data/test_file.txt")

    assert node.name == "test_file.txt"
    assert node.file_path == Path("/data/test_file.txt")
    assert not node.is_dir
    assert isinstance(node, FileSystemNode)
    assert node.children == ()


def test_directory_node_initialization():
    node = DirectoryNode("test_dir", Path("/data/test_dir"))

    assert node.name == "test_dir"
    assert node.is_dir
    assert node.children == ()


def test_parent_child_relationships():
    root = DirectoryNode("root", "/r")
    child1 = DirectoryNode("child1", "/r/child1", parent=root)
    child2 = FileNode("child2", "/r/child2", parent=root)
    grandchild = FileNode("grandchild", "/r/child1/grandchild", parent=child1)

    assert child1.parent == root
    assert grandchild.parent == child1
    assert root.parent is None
    assert root.children == (child1, child2)
    assert child1.children == (grandchild,)


def test_children_assignment_keeps_order():
    root = DirectoryNode("root", "/r")
    b = FileNode("b", "/r/b")
    a = FileNode("a", "/r/a")

    root.children = [b, a]

    assert [node.name for node in root.children] == ["b", "a"]


def test_empty_directory_is_still_a_directory():
    """Test that an empty directory is distinguishable from a file."""
    empty = DirectoryNode("empty", "/r/empty")

    assert empty.is_leaf
    assert empty.is_dir
    assert not isinstance(empty, FileNode)


def test_file_node_cannot_have_children():
    parent = FileNode("file.txt", "/r/file.txt")

    with pytest.raises(TypeError, match="cannot have children"):
        FileNode("nested", "/r/file.txt/nested", parent=parent)

    with pytest.raises(TypeError, match="cannot have children"):
        parent.children = [FileNode("other", "/r/other")]


def test_empty_name_rejected():
    with pytest.raises(ValueError, match="non-empty"):
        FileNode("", "/r/")
