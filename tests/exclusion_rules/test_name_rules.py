"""Unit tests for plain-name exclusion rules."""

import pytest

from dirdiff.exclusion_rules.name_rules import NameExclusionRules


def test_exclude_exact_names():
    rules = NameExclusionRules(["purpose", ".git"])

    assert rules.exclude("purpose")
    assert rules.exclude(".git")
    assert not rules.exclude("src")


def test_names_are_case_sensitive_and_not_patterns():
    rules = NameExclusionRules(["Build", "*.log"])

    assert not rules.exclude("build")
    assert not rules.exclude("app.log")
    assert rules.exclude("*.log")


def test_single_string_is_one_name():
    """Test that a bare string is not split into characters."""
    rules = NameExclusionRules("target")

    assert rules.names == frozenset({"target"})
    assert not rules.exclude("t")


def test_empty_rules():
    rules = NameExclusionRules()

    assert not rules.has_rules()
    assert not rules.exclude("anything")


def test_add_rule():
    rules = NameExclusionRules()
    rules.add_rule("node_modules")

    assert rules.has_rules()
    assert rules.exclude("node_modules")


def test_empty_name_rejected():
    with pytest.raises(ValueError, match="non-empty"):
        NameExclusionRules([""])


def test_load_rules_not_supported(tmp_path):
    with pytest.raises(NotImplementedError, match="NameExclusionRules doesn't support loading rules from files"):
        NameExclusionRules().load_rules(tmp_path / "rules.txt")
