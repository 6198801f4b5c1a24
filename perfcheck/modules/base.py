#!/usr/bin/env python3
"""
Base types shared by the command engine: parsed commands, their results and
the startup errors raised while loading the command list.
"""

from typing import NamedTuple

# Default command list, resolved against the working directory
DEFAULT_COMMANDS_FILE = "cmds.sh"

# Tabs break fixed-width rendering in the content pane
TAB_EXPANSION = "    "

# Path-resolution helper used by the availability check
AVAILABILITY_CHECKER = "which"

FAILURE_SEPARATOR = "----------"


class CommandSpec(NamedTuple):
    """One parsed line of the command list."""

    name: str
    args: str = ""

    def argv(self):
        """Return the argument list, split on whitespace without quoting."""
        return [self.name] + self.args.split()

    def __str__(self):
        return f"{self.name} {self.args}".strip()


class CommandResult(NamedTuple):
    """Outcome of running one command. The name doubles as the tab label."""

    name: str
    output: str


class CommandSourceError(Exception):
    """Base class for failures that prevent the UI from starting."""


class SourceUnavailable(CommandSourceError):
    """The command list file could not be opened or read."""

    def __init__(self, path: str, reason: Exception):
        super().__init__(f"Cannot read command list {path}: {reason}")
        self.path = path
        self.reason = reason


class EmptyCommandSource(CommandSourceError):
    """The command list contains no runnable lines."""

    def __init__(self, path: str):
        super().__init__(f"Command list {path} contains no commands")
        self.path = path
