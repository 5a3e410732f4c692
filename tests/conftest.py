"""Test configuration and fixtures for dirdiff."""

from pathlib import Path
from typing import Callable, Mapping, Union

import pytest

Layout = Mapping[str, Union[str, bytes, "Layout"]]


def write_layout(root: Path, layout: Layout) -> Path:
    """Create files and directories under root, in the mapping's order.

    String values become UTF-8 text files, bytes values become raw files and mapping
    values become subdirectories.
    """
    root.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        path = root / name
        if isinstance(value, Mapping):
            write_layout(path, value)
        elif isinstance(value, bytes):
            path.write_bytes(value)
        else:
            path.write_bytes(value.encode("utf-8"))
    return root


@pytest.fixture
def make_tree(tmp_path) -> Callable[[str, Layout], Path]:
    """Return a factory building a directory layout under tmp_path."""

    def factory(name: str, layout: Layout) -> Path:
        return write_layout(tmp_path / name, layout)

    return factory


PROJECT_LAYOUT = {
    "hello.txt": "Hello world",
    "scripts": {
        "main.py": 'print("This line will be printed.")',
        "notes": {"language.txt": "new language"},
    },
    "src": {"main.rs": 'fn main() {\n    println("hello world")\n}\n'},
}


@pytest.fixture
def project_layout():
    """A small mixed tree of text files used as the reference layout."""
    return PROJECT_LAYOUT
