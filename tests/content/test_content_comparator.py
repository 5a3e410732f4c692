"""Unit tests for content comparison."""

from dirdiff.content.content_comparator import content_equivalent


def test_identical_contents():
    assert content_equivalent(["Hello world", "new language"], ["Hello world", "new language"])


def test_different_contents():
    assert not content_equivalent(["Hello world"], ["Goodbye world"])


def test_containment_is_asymmetric():
    """Test that extra contents on the right are tolerated but not on the left."""
    assert content_equivalent(["hello"], ["hello", "world"])
    assert not content_equivalent(["hello", "world"], ["hello"])


def test_positions_are_ignored():
    assert content_equivalent(["a", "b"], ["b", "a"])


def test_duplicates_are_not_counted():
    assert content_equivalent(["same", "same"], ["same", "other"])
    assert content_equivalent(["same"], ["same", "same"])


def test_empty_contents():
    assert content_equivalent([], [])
    assert content_equivalent([], ["anything"])
    assert not content_equivalent(["anything"], [])


def test_comparison_is_exact():
    assert not content_equivalent(["line\n"], ["line\r\n"])
    assert not content_equivalent(["Text"], ["text"])
