#!/usr/bin/env python3
"""
Main entry point for Perf Check.
"""

import sys
import argparse
import logging
from typing import List

from .modules.base import DEFAULT_COMMANDS_FILE, CommandResult, CommandSourceError
from .modules.source import load_commands
from .modules.aggregate import collect
from .ui.tui import ResultsTUI
from .ui.report import ReportGenerator

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("perfcheck")


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Run Linux performance check commands and browse the results")
    parser.add_argument("-p", "--parallel", action="store_true",
                        help="Run all commands at once instead of one after another")
    parser.add_argument("-y", "--yes", action="store_true", help="Print a text report, no interactive mode")
    parser.add_argument("-a", "--ascii", action="store_true", help="Use ASCII instead of Unicode characters")
    parser.add_argument("--version", action="store_true", help="Show version information")
    return parser.parse_args(argv)


def run_interactive_mode(results: List[CommandResult], args):
    """Browse results in the tabbed viewer."""
    tui = ResultsTUI(results, use_ascii=args.ascii)
    tui.run()


def run_non_interactive_mode(results: List[CommandResult], args):
    """Print all results to standard output."""
    report = ReportGenerator(results).generate()
    print(report)


def show_version():
    """Show version information."""
    from . import __version__
    print(f"Perf Check version {__version__}")
    print("Linux performance analysis commands in a tabbed terminal viewer")


def main(argv=None):
    """Main function."""
    args = parse_arguments(argv)

    if args.version:
        show_version()
        sys.exit(0)

    try:
        commands = load_commands(DEFAULT_COMMANDS_FILE)
    except CommandSourceError as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        logger.info("Start to collect results of perf checks...")
        results = collect(commands, parallel=args.parallel)

        if args.yes:
            run_non_interactive_mode(results, args)
        else:
            run_interactive_mode(results, args)
    except KeyboardInterrupt:
        logger.info("\nOperation cancelled by user.")
        sys.exit(0)


if __name__ == "__main__":
    main()
