"""Implementation of exclusion rules using .gitignore wildcard syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import PathSpec

from dirdiff.types import PathType

from .base_rules import BaseExclusionRules

# Git wildmatch semantics, as used by .gitignore files
PATTERN_STYLE = "gitignore"


class PatternExclusionRules(BaseExclusionRules):
    """Exclusion rules using .gitignore wildcard patterns matched against entry names.

    Patterns are compiled with the pathspec library using Git's wildmatch semantics,
    so globs (``*``, ``?``, ``[abc]``), negation (``!``) and comment lines (``#``)
    behave as they do in a .gitignore file. Because rules are consulted with an
    entry's base name rather than its path, patterns containing a ``/`` (anchored
    or directory-only patterns) never match.

    Later patterns override earlier ones, which is what makes negation useful.

    Attributes:
        spec (PathSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = PatternExclusionRules()
        >>> rules.add_rule("*.log")
        >>> rules.exclude("app.log")
        True
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("keep.log")
        False
        >>> rules.exclude("app.py")
        False
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize PatternExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore-style patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = PathSpec.from_lines(PATTERN_STYLE, self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, name: str) -> bool:
        return self.spec.match_file(name)

    def has_rules(self) -> bool:
        return bool(self.spec.patterns)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and append patterns from one or more files.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore-style patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
            OSError: If a rules file cannot be read, for example when it is a directory
                (IsADirectoryError) or access is denied (PermissionError). No pattern from
                any of the given files is added in that case.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        loaded: List[str] = []
        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                loaded.extend(f.read().splitlines())

        self._lines.extend(loaded)
        self.spec = PathSpec.from_lines(PATTERN_STYLE, self._lines)

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore-style pattern (e.g. ``"*.pyc"`` or ``"!important.pyc"``)."""
        self._lines.append(rule)
        self.spec = PathSpec.from_lines(PATTERN_STYLE, self._lines)
