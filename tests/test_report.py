"""Tests for the plain-text report."""

from perfcheck.modules.base import CommandResult
from perfcheck.ui.report import ReportGenerator


def test_report_has_one_section_per_result_in_order() -> None:
    results = [
        CommandResult("uptime", "up 3 days\n"),
        CommandResult("free", "Mem: 1024\n"),
    ]

    report = ReportGenerator(results).generate()

    assert "Commands: 2" in report
    assert report.index("### uptime ###") < report.index("### free ###")
    assert "up 3 days" in report
    assert "Mem: 1024" in report


def test_hostname_falls_back(monkeypatch) -> None:
    def broken():
        raise OSError("no hostname")

    monkeypatch.setattr("perfcheck.ui.report.socket.gethostname", broken)

    assert ReportGenerator.get_hostname() == "unknown-host"
