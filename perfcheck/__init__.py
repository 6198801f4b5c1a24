#!/usr/bin/env python3
"""
Perf Check

Runs a list of Linux performance diagnostic commands and shows each command's
output in its own tab of a terminal viewer.
"""

__version__ = "1.0.0"
