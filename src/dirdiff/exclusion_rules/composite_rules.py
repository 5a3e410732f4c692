"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Sequence

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    An entry is excluded if ANY of the constituent rules excludes it (logical OR).
    This is how plain-name exclusions and wildcard patterns given together on the
    command line are applied as one rules object.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from dirdiff.exclusion_rules.name_rules import NameExclusionRules
        >>> from dirdiff.exclusion_rules.pattern_rules import PatternExclusionRules
        >>> patterns = PatternExclusionRules()
        >>> patterns.add_rule("*.tmp")
        >>> composite = CompositeExclusionRules([NameExclusionRules(["build"]), patterns])
        >>> composite.exclude("build"), composite.exclude("cache.tmp"), composite.exclude("main.rs")
        (True, True, False)
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine, evaluated in order.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, name: str) -> bool:
        """Check if an entry name is excluded by any constituent rule.

        Uses short-circuit evaluation: stops as soon as any rule excludes the name.
        """
        return any(rule.exclude(name) for rule in self.rules)

    def has_rules(self) -> bool:
        return any(rule.has_rules() for rule in self.rules)

    def get_rules(self) -> List[BaseExclusionRules]:
        """Get a copy of the constituent rules list."""
        return list(self.rules)
