#!/usr/bin/env python3
"""
UI module initialization for the perf check viewer.
"""

from .tabs import TabNavigation
from .tui import ResultsTUI
from .report import ReportGenerator
