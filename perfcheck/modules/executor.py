#!/usr/bin/env python3
"""
Runs a single diagnostic command and turns whatever happened into display text.
"""

import subprocess
import logging

from .base import CommandSpec, TAB_EXPANSION, FAILURE_SEPARATOR

logger = logging.getLogger("perfcheck.executor")


def not_found_message(name: str) -> str:
    """Text shown in place of output for a command missing from the path."""
    return f"CMD {name} not exist. Please recheck or install corresponding packages."


def normalize_output(text: str) -> str:
    """Expand horizontal tabs so the content pane keeps its column layout."""
    return text.replace("\t", TAB_EXPANSION)


def format_exit_status(returncode: int) -> str:
    """Describe a return code, reporting signals separately from exit codes."""
    if returncode < 0:
        return f"signal: {-returncode}"
    return f"exit status: {returncode}"


def run_command(name: str, args: str = "") -> str:
    """
    Run a command to completion and return its normalized output.

    Args:
        name: Executable to run
        args: Argument string, split on whitespace (no quoting support)

    Returns:
        Captured stdout with tabs expanded. A non-zero exit appends the status
        and stderr; a failure to start the process returns the error text.
    """
    spec = CommandSpec(name, args)
    command = spec.argv()
    logger.info(f"Running command: {spec}")

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            check=False
        )
    except (OSError, ValueError) as e:
        logger.error(f"Failed to run command {spec}: {e}")
        return str(e)

    output = normalize_output(result.stdout.decode("utf-8", errors="replace"))

    if result.returncode != 0:
        status = format_exit_status(result.returncode)
        logger.warning(f"Command {name} failed with {status}")
        stderr = result.stderr.decode("utf-8", errors="replace")
        output += f"\n\n{FAILURE_SEPARATOR}\nCMD failed with status: {status}, STDERR:\n{stderr}"

    return output
