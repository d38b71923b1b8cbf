#!/usr/bin/env python3
"""
CLI entry for picotest (thin wrapper).
"""

import argparse
import sys

from picotest import __version__ as PICOTEST_VERSION
from picotest.colored_output import Color, print_colored
from picotest.exit_status import ExitStatus
from picotest.loader import TestLoader
from picotest.registry import Registry, run_all

# ANSI code for messages outside the test report
YELLOW: str = "\033[33m"
RESET: str = "\033[0m"


def get_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Gets and returns command line arguments.
    """
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        prog="picotest",
        description="picotest - A minimal xUnit style test runner for Python",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "pattern",
        nargs="?",
        default="test_*.py",
        help="Test file pattern, directory or specific file (default: test_*.py)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"picotest {PICOTEST_VERSION}",
        help="Show program's version number and exit",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Main function for CLI.
    """
    args = get_arguments(argv)
    try:
        loader = TestLoader(verbose=args.verbose)
        test_files = loader.find_test_files(args.pattern)
        if not test_files:
            print(f"{YELLOW}No test files matching '{args.pattern}' found{RESET}")
            return ExitStatus.FAILURE.value

        registry = Registry.get_instance()
        registry.verbose = args.verbose
        loader.load_files(test_files)

        return run_all(registry=registry)

    except KeyboardInterrupt:
        print(f"\n{YELLOW}Test execution interrupted by user{RESET}")
        return ExitStatus.FAILURE.value

    except Exception as e:
        print_colored(Color.RED, "Error: %s\n", e)
        if args.verbose:
            import traceback
            traceback.print_exc()
        return ExitStatus.FAILURE.value


if __name__ == "__main__":
    sys.exit(main())
