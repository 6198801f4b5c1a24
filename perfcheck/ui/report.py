#!/usr/bin/env python3
"""
Plain-text rendering of command results for non-interactive use.
"""

import datetime
import logging
import socket
from typing import List

from ..modules.base import CommandResult

logger = logging.getLogger("perfcheck.report")


class ReportGenerator:
    """Formats all results as one text report, one section per command."""

    def __init__(self, results: List[CommandResult]):
        self.results = results

    def generate(self) -> str:
        """Generate the report text."""
        timestamp = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        hostname = self.get_hostname()

        report = [
            "=" * 80,
            "PERF CHECK REPORT",
            f"Generated: {timestamp}",
            f"Hostname: {hostname}",
            f"Commands: {len(self.results)}",
            "=" * 80,
            ""
        ]

        for result in self.results:
            report.append(f"### {result.name} ###")
            report.append("-" * 80)
            report.append(result.output.rstrip("\n"))
            report.append("")

        logger.info(f"Report generated for {len(self.results)} commands")
        return "\n".join(report)

    @staticmethod
    def get_hostname():
        """Get the system hostname."""
        try:
            return socket.gethostname()
        except OSError:
            return "unknown-host"
