#!/usr/bin/env python3
"""
Command list loading.

The command list is plain text with one command per line. Anything after the
first '#' is a comment, and lines that are blank once the comment is removed
are skipped.
"""

import logging
from typing import List, Optional

from .base import CommandSpec, SourceUnavailable, EmptyCommandSource

logger = logging.getLogger("perfcheck.source")


def parse_command_line(line: str) -> Optional[CommandSpec]:
    """
    Parse one line of the command list.

    Args:
        line: Raw line, possibly carrying a trailing comment

    Returns:
        The parsed command, or None for blank and comment-only lines
    """
    content = line.split("#", 1)[0].strip()
    if not content:
        return None

    parts = content.split(None, 1)
    name = parts[0]
    args = parts[1] if len(parts) > 1 else ""
    return CommandSpec(name, args)


def parse_commands(lines) -> List[CommandSpec]:
    """Parse an iterable of lines, keeping source order."""
    commands = []
    for line in lines:
        spec = parse_command_line(line)
        if spec is not None:
            commands.append(spec)
    return commands


def load_commands(path: str) -> List[CommandSpec]:
    """
    Read the command list from a file.

    Raises:
        SourceUnavailable: the file cannot be opened, read or decoded
        EmptyCommandSource: the file holds no commands
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            commands = parse_commands(f)
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(path, e) from e

    if not commands:
        raise EmptyCommandSource(path)

    logger.info(f"Loaded {len(commands)} commands from {path}")
    return commands
