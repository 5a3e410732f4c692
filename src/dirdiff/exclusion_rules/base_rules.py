from abc import ABC, abstractmethod
from typing import Sequence, Union

from dirdiff.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for entry exclusion rules.

    Exclusion rules decide, while a tree is being built, whether an entry is left out
    of the tree altogether. Rules are consulted with the entry's base name only (never a
    path), so the same rules object can be applied at the root level alone or at every
    nesting level. An excluded directory is never listed.

    File loading and individual rule addition are optional capabilities that depend on
    the rule type.

    Example:
        >>> from dirdiff.exclusion_rules.name_rules import NameExclusionRules
        >>> rules = NameExclusionRules(["node_modules", ".git"])
        >>> rules.exclude(".git")
        True
        >>> rules.exclude("src")
        False
    """

    @abstractmethod
    def exclude(self, name: str) -> bool:
        """
        Determine if an entry with the given base name should be excluded.

        Args:
            name (str): Base name of the file or directory (no separators).

        Returns:
            bool: True if the entry should be omitted from the tree, False otherwise.
        """
        pass

    def has_rules(self) -> bool:
        """
        Report whether any rule is configured.

        Returns:
            bool: True unless the concrete rule type knows it is empty.
        """
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        Rule types that don't support file operations use this default implementation.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add. Its format depends on the rule type.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
