#!/usr/bin/env python3
"""
Command engine - loading the command list, checking and running each command,
and aggregating the results.
"""

from .base import (
    CommandSpec, CommandResult, CommandSourceError, SourceUnavailable, EmptyCommandSource
)
from .source import load_commands, parse_command_line
from .availability import check_command_available
from .executor import run_command
from .aggregate import collect
