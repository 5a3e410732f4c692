"""Exclusion by exact entry name."""

from typing import FrozenSet, Iterable, Optional

from .base_rules import BaseExclusionRules


class NameExclusionRules(BaseExclusionRules):
    """Exclusion rules matching plain entry names.

    Names are compared exactly and case-sensitively. They are neither paths nor
    patterns: ``"build"`` excludes any entry called ``build`` at the levels the rules
    are applied to, while ``"*.pyc"`` only excludes an entry literally named ``*.pyc``.

    Attributes:
        names (FrozenSet[str]): The names currently excluded.

    Example:
        >>> rules = NameExclusionRules(["purpose"])
        >>> rules.exclude("purpose")
        True
        >>> rules.exclude("Purpose")
        False
        >>> rules.add_rule("target")
        >>> sorted(rules.names)
        ['purpose', 'target']
    """

    def __init__(self, names: Optional[Iterable[str]] = None) -> None:
        """Initialize the rules with an optional collection of names.

        Args:
            names: Names to exclude. A single string is treated as one name, not as a
                sequence of characters.

        Raises:
            ValueError: If any name is empty.
        """
        self._names: FrozenSet[str] = frozenset()
        if names is not None:
            if isinstance(names, str):
                names = [names]
            for name in names:
                self.add_rule(name)

    @property
    def names(self) -> FrozenSet[str]:
        return self._names

    def exclude(self, name: str) -> bool:
        return name in self._names

    def has_rules(self) -> bool:
        return bool(self._names)

    def add_rule(self, rule: str) -> None:
        """Add one name to exclude.

        Args:
            rule: The entry name.

        Raises:
            ValueError: If the name is empty.
        """
        if not rule:
            raise ValueError("Excluded name must be a non-empty string")
        self._names = self._names | {rule}

    def __repr__(self) -> str:
        return f"NameExclusionRules({sorted(self._names)!r})"
