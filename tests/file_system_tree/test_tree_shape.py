"""Unit tests for structural comparison."""

import pytest

from dirdiff.file_system_tree import tree_builder
from dirdiff.file_system_tree.file_system_node import DirectoryNode, FileNode
from dirdiff.file_system_tree.tree_builder import build_tree
from dirdiff.file_system_tree.tree_shape import TreeShape, project, structurally_equal


def directory(name, base, *children):
    node = DirectoryNode(name, f"{base}/{name}")
    node.children = list(children)
    return node


def test_project_drops_paths():
    tree = [directory("src", "/a", FileNode("lib.rs", "/a/src/lib.rs")), FileNode("Cargo.toml", "/a/Cargo.toml")]

    assert project(tree) == (
        TreeShape("src", (TreeShape("lib.rs", None),)),
        TreeShape("Cargo.toml", None),
    )


def test_equal_trees_at_different_locations():
    tree_a = [directory("src", "/a", FileNode("lib.rs", "/a/src/lib.rs"))]
    tree_b = [directory("src", "/elsewhere/b", FileNode("lib.rs", "/elsewhere/b/src/lib.rs"))]

    assert structurally_equal(tree_a, tree_b)


def test_different_names():
    assert not structurally_equal([FileNode("a.txt", "/a/a.txt")], [FileNode("b.txt", "/b/b.txt")])


def test_different_lengths():
    assert not structurally_equal([FileNode("a.txt", "/a/a.txt")], [])
    assert not structurally_equal([], [FileNode("a.txt", "/b/a.txt")])
    assert structurally_equal([], [])


def test_empty_directory_differs_from_file():
    """Test that an empty directory never matches a file of the same name."""
    assert not structurally_equal([DirectoryNode("x", "/a/x")], [FileNode("x", "/b/x")])


def test_nested_difference():
    tree_a = [directory("docs", "/a", directory("api", "/a/docs", FileNode("index.md", "/a/docs/api/index.md")))]
    tree_b = [directory("docs", "/b", directory("api", "/b/docs", FileNode("intro.md", "/b/docs/api/intro.md")))]

    assert not structurally_equal(tree_a, tree_b)


def test_order_sensitive():
    """Test that the same entries in a different order are a different shape."""
    tree_a = [FileNode("a.txt", "/a/a.txt"), FileNode("b.txt", "/a/b.txt")]
    tree_b = [FileNode("b.txt", "/b/b.txt"), FileNode("a.txt", "/b/a.txt")]

    assert not structurally_equal(tree_a, tree_b)


@pytest.mark.asyncio
async def test_reversed_listing_order_is_structurally_different(make_tree, monkeypatch):
    """Test that listing order reaches the comparison unless entries are sorted."""
    root_a = make_tree("a", {"one.txt": "1", "two.txt": "2"})
    root_b = make_tree("b", {"one.txt": "1", "two.txt": "2"})
    original_scan = tree_builder._scan_directory

    def reversing_scan(path):
        listing = sorted(original_scan(path))
        return listing[::-1] if path == root_b else listing

    monkeypatch.setattr(tree_builder, "_scan_directory", reversing_scan)

    assert not structurally_equal(await build_tree(root_a), await build_tree(root_b))
    assert structurally_equal(
        await build_tree(root_a, sort_entries=True), await build_tree(root_b, sort_entries=True)
    )
