"""Comparison of two sets of file contents."""

from typing import Sequence


def content_equivalent(contents: Sequence[str], other: Sequence[str]) -> bool:
    """Check that every content of ``contents`` occurs somewhere in ``other``.

    This is a one-directional containment test, not an equality test. Positions are
    ignored, duplicates are not counted, and ``other`` may hold contents that do not
    appear in ``contents``. Swapping the arguments can change the result.

    Example:
        >>> content_equivalent(["hello"], ["hello", "world"])
        True
        >>> content_equivalent(["hello", "world"], ["hello"])
        False
    """
    available = set(other)
    return all(content in available for content in contents)
