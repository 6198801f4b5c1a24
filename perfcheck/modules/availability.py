#!/usr/bin/env python3
"""
Checks whether a command can be found on the system path before running it.
"""

import subprocess
import logging

from .base import AVAILABILITY_CHECKER

logger = logging.getLogger("perfcheck.availability")


def check_command_available(name: str, checker: str = AVAILABILITY_CHECKER) -> bool:
    """
    Ask the path-resolution helper whether a command exists.

    If the helper itself cannot be started the command is reported as
    available, so the real invocation gets a chance to surface its own error.
    """
    try:
        result = subprocess.run(
            [checker, name],
            capture_output=True,
            check=False
        )
    except OSError as e:
        logger.warning(f"Command checker `{checker}` may not exist ({e}), trying [{name}] directly")
        return True
    except ValueError as e:
        logger.warning(f"Cannot check [{name!r}] ({e}), trying it directly")
        return True

    return result.returncode == 0
