"""Command-line argument parsing for dirdiff.

This module defines the command-line interface for dirdiff,
handling argument parsing and validation.
"""

import argparse
from pathlib import Path
from typing import Any, List, Optional, Sequence, Type, Union

from dirdiff import __version__
from dirdiff.exclusion_rules.name_rules import NameExclusionRules
from dirdiff.exclusion_rules.pattern_rules import PatternExclusionRules


def create_exclusion_action(
    name_rules: NameExclusionRules, pattern_rules: PatternExclusionRules
) -> Type[argparse.Action]:
    """Create a custom action class for handling exclusion options.

    This factory function creates an action class that updates the provided rules
    objects as arguments are processed, so patterns are added in the exact order they
    appear on the command line (which matters for negated patterns).

    Args:
        name_rules: Rules object receiving -x/--exclude-name values.
        pattern_rules: Rules object receiving -i/--ignore and -e/--exclude-from values.

    Returns:
        A custom action class for use with argparse.
    """

    class ExclusionRulesAction(argparse.Action):
        """Action to update exclusion rules as arguments are processed."""

        def __init__(self, option_strings: List[str], dest: str, **kwargs: Any) -> None:
            super().__init__(option_strings, dest, **kwargs)

        def __call__(
            self,
            parser: argparse.ArgumentParser,
            namespace: argparse.Namespace,
            values: Union[str, Sequence[Any], None],
            option_string: Optional[str] = None,
        ) -> None:
            if values is None:
                return

            try:
                if option_string in ("-e", "--exclude-from"):
                    pattern_rules.load_rules(Path(str(values)))
                elif option_string in ("-i", "--ignore"):
                    pattern_rules.add_rule(str(values))
                else:  # -x/--exclude-name
                    name_rules.add_rule(str(values))
            except (OSError, ValueError) as e:
                parser.error(str(e))

            # Keep the raw values on the namespace as well
            collected = getattr(namespace, self.dest, None) or []
            collected.append(values)
            setattr(namespace, self.dest, collected)

    return ExclusionRulesAction


def create_parser(name_rules: NameExclusionRules, pattern_rules: PatternExclusionRules) -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Args:
        name_rules: The plain-name rules object to update during parsing.
        pattern_rules: The pattern rules object to update during parsing.

    Returns:
        An ArgumentParser instance configured with dirdiff's options.
    """
    description = """
    dirdiff: report whether two directory trees, or two files, are different.

    Two directories differ when their entries differ in name, kind or nesting, or
    when their structure matches but file contents do not. No diff is printed; the
    answer is given by the exit status (and a one-line message unless -q is used).

    Exit status:
      0  the paths are the same
      1  the paths differ
      2  invalid arguments or a path could not be read
    """

    epilog = """
    Examples:
      # Compare two directory trees
      dirdiff build/ build.previous/

      # Compare two files
      dirdiff config.toml config.toml.bak

      # Ignore a top-level directory named "logs"
      dirdiff -x logs site/ site.previous/

      # Ignore every "__pycache__" directory at any depth, and *.pyc files
      dirdiff -r -x __pycache__ -i "*.pyc" src/ other/src/

      # Compare regardless of directory listing order
      dirdiff -S a/ b/
    """

    parser = argparse.ArgumentParser(
        prog="dirdiff",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirdiff {__version__}", help="Show the version and exit"
    )

    ExclusionAction = create_exclusion_action(name_rules, pattern_rules)

    parser.add_argument("path_a", type=Path, help="First directory or file.")
    parser.add_argument("path_b", type=Path, help="Second directory or file.")
    parser.add_argument(
        "-x",
        "--exclude-name",
        type=str,
        metavar="NAME",
        dest="exclude_name",
        action=ExclusionAction,
        help="Entry name to leave out of both trees (exact match, can be specified multiple times).",
    )
    parser.add_argument(
        "-i",
        "--ignore",
        type=str,
        metavar="PATTERN",
        dest="ignore",
        action=ExclusionAction,
        help=(
            "Gitignore-style wildcard pattern matched against entry names (e.g. '*.log' or '!keep.log'). "
            "Can be specified multiple times; patterns apply in command-line order."
        ),
    )
    parser.add_argument(
        "-e",
        "--exclude-from",
        type=Path,
        metavar="FILE",
        dest="exclude_from",
        action=ExclusionAction,
        help="File of gitignore-style patterns, one per line (can be specified multiple times).",
    )
    parser.add_argument(
        "-r",
        "--recursive-excluding",
        action="store_true",
        help="Apply exclusions at every nesting level instead of only to the roots' immediate entries.",
    )
    parser.add_argument(
        "-S",
        "--sort-entries",
        action="store_true",
        help="Sort directory entries by name so listing order does not affect the result.",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        metavar="N",
        help="Maximum number of files read concurrently per tree (default: unlimited).",
    )
    parser.add_argument("-q", "--quiet", action="store_true", help="Print nothing; report through the exit status.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug information to stderr.")

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs additional validation beyond what argparse can handle.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    if args.jobs is not None and args.jobs < 1:
        raise ValueError("-j/--jobs must be a positive integer")
