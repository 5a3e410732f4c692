"""Command-line interface for dirdiff.

This module provides the ``dirdiff`` command, which reports whether two directory
trees or two files differ. It handles argument parsing, logging setup, dispatch to the
library's asynchronous operations and the mapping of outcomes to exit codes.

Exit Codes:
    0: The paths are the same
    1: The paths differ
    2: Command-line syntax error, or a path could not be read
    130: Interrupted by SIGINT (Ctrl+C)

Example:
    # Compare two trees, ignoring every node_modules directory
    $ dirdiff -r -x node_modules app/ app.orig/
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dirdiff.cli.argparser import create_parser, validate_args
from dirdiff.diff import dir_diff, file_diff
from dirdiff.exceptions import DiffIOError
from dirdiff.exclusion_rules.base_rules import BaseExclusionRules
from dirdiff.exclusion_rules.composite_rules import CompositeExclusionRules
from dirdiff.exclusion_rules.name_rules import NameExclusionRules
from dirdiff.exclusion_rules.pattern_rules import PatternExclusionRules

EXIT_SAME = 0
EXIT_DIFFERENT = 1
EXIT_ERROR = 2
EXIT_INTERRUPTED = 130


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def combine_rules(
    name_rules: NameExclusionRules, pattern_rules: PatternExclusionRules
) -> Optional[BaseExclusionRules]:
    """Merge the rules collected on the command line into one rules object.

    Returns:
        None when no exclusion was given, the single configured rules object, or a
        composite of both.
    """
    configured: List[BaseExclusionRules] = [rules for rules in (name_rules, pattern_rules) if rules.has_rules()]
    if not configured:
        return None
    if len(configured) == 1:
        return configured[0]
    return CompositeExclusionRules(configured)


def describe_kind_mismatch(path_a: Path, path_b: Path) -> Optional[str]:
    """Explain why a file and a directory cannot be compared.

    Returns:
        An error message when one path is a regular file and the other a directory,
        otherwise None (missing paths are reported later by the comparison itself).
    """
    if path_a.is_file() and path_b.is_dir():
        return f"Cannot compare file {path_a} with directory {path_b}"
    if path_a.is_dir() and path_b.is_file():
        return f"Cannot compare directory {path_a} with file {path_b}"
    return None


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the dirdiff command-line interface.

    Args:
        argv: Arguments to parse instead of ``sys.argv[1:]``.

    Exit codes:
        0: The paths are the same
        1: The paths differ
        2: Command-line syntax error, or a path could not be read
        130: Interrupted by SIGINT (Ctrl+C)
    """
    name_rules = NameExclusionRules()
    pattern_rules = PatternExclusionRules()

    # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
    parser = create_parser(name_rules, pattern_rules)
    args = parser.parse_args(argv)

    try:
        validate_args(args)
    except ValueError as e:
        parser.error(str(e))

    configure_logging(args.verbose)

    mismatch = describe_kind_mismatch(args.path_a, args.path_b)
    if mismatch:
        print(f"Error: {mismatch}", file=sys.stderr)
        sys.exit(EXIT_ERROR)

    try:
        if args.path_a.is_file() and args.path_b.is_file():
            different = asyncio.run(file_diff(args.path_a, args.path_b))
        else:
            different = asyncio.run(
                dir_diff(
                    args.path_a,
                    args.path_b,
                    combine_rules(name_rules, pattern_rules),
                    args.recursive_excluding,
                    sort_entries=args.sort_entries,
                    max_concurrency=args.jobs,
                )
            )
    except DiffIOError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(EXIT_ERROR)
    except KeyboardInterrupt:
        sys.exit(EXIT_INTERRUPTED)

    if different:
        if not args.quiet:
            print(f"{args.path_a} and {args.path_b} differ")
        sys.exit(EXIT_DIFFERENT)

    sys.exit(EXIT_SAME)


if __name__ == "__main__":
    main()
