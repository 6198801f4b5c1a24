#!/usr/bin/env python3
"""
Aggregation of command results.

Every command in the list is checked for availability and then run. Results
come back in command-list order whether the commands ran one after another or
all at once.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional, Sequence

from .base import CommandSpec, CommandResult
from .availability import check_command_available
from .executor import run_command, not_found_message

logger = logging.getLogger("perfcheck.aggregate")

AvailabilityCheck = Callable[[str], bool]
Runner = Callable[[str, str], str]


def run_one(spec: CommandSpec, is_available: AvailabilityCheck, runner: Runner) -> CommandResult:
    """Check and run a single command, never raising for per-command failures."""
    if not is_available(spec.name):
        logger.warning(f"Command {spec.name} not found on path")
        return CommandResult(spec.name, not_found_message(spec.name))
    return CommandResult(spec.name, runner(spec.name, spec.args))


def lost_unit_result(spec: CommandSpec, error: BaseException) -> CommandResult:
    """Placeholder for a parallel unit whose result could not be collected."""
    return CommandResult(spec.name, f"Execution of CMD {spec.name} failed: {error}")


def collect_sequential(commands: Sequence[CommandSpec], is_available: AvailabilityCheck,
                       runner: Runner) -> List[CommandResult]:
    """Run commands one at a time, in order."""
    return [run_one(spec, is_available, runner) for spec in commands]


def collect_parallel(commands: Sequence[CommandSpec], is_available: AvailabilityCheck,
                     runner: Runner) -> List[CommandResult]:
    """
    Run every command at once on its own thread.

    Each thread fills the slot matching its position in the command list, so
    completion order never shows up in the result order. A thread that fails
    to produce a result leaves a placeholder in its slot.
    """
    results: List[Optional[CommandResult]] = [None] * len(commands)

    with ThreadPoolExecutor(max_workers=max(1, len(commands))) as pool:
        futures = [pool.submit(run_one, spec, is_available, runner) for spec in commands]

        for index, future in enumerate(futures):
            spec = commands[index]
            try:
                results[index] = future.result()
            except Exception as e:
                logger.error(f"Lost result for command {spec.name}: {e}")
                results[index] = lost_unit_result(spec, e)

    return results


def collect(commands: Sequence[CommandSpec], parallel: bool = False,
            is_available: Optional[AvailabilityCheck] = None,
            runner: Optional[Runner] = None) -> List[CommandResult]:
    """
    Produce one result per command, in command-list order.

    Args:
        commands: Parsed command list
        parallel: Run all commands concurrently instead of sequentially
        is_available: Availability check, defaults to the `which` lookup
        runner: Command runner, defaults to running the real process

    Returns:
        Results in the same order as commands
    """
    if is_available is None:
        is_available = check_command_available
    if runner is None:
        runner = run_command

    mode = "parallel" if parallel else "sequential"
    logger.info(f"Collecting {len(commands)} commands ({mode})")

    if parallel:
        return collect_parallel(commands, is_available, runner)
    return collect_sequential(commands, is_available, runner)
