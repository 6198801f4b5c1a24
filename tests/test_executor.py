"""Tests for running a single command."""

import logging
import os

from perfcheck.modules.executor import (
    format_exit_status,
    normalize_output,
    not_found_message,
    run_command,
)


def test_successful_command_returns_stdout(make_script) -> None:
    script = make_script("ok.sh", "echo hello\n")

    assert run_command(script) == "hello\n"


def test_tabs_are_expanded_to_four_spaces(make_script) -> None:
    script = make_script("tab.sh", "printf 'a\\tb'\n")

    assert run_command(script) == "a    b"


def test_arguments_are_split_on_whitespace(make_script) -> None:
    script = make_script("args.sh", 'echo "$#:$1,$2,$3"\n')

    assert run_command(script, " one  two\tthree ") == "3:one,two,three\n"


def test_non_zero_exit_appends_status_and_stderr(make_script) -> None:
    script = make_script("fail.sh", "printf partial\necho oops >&2\nexit 2\n")

    output = run_command(script)

    assert output.startswith("partial")
    assert "----------" in output
    assert "exit status: 2" in output
    assert output.endswith("oops\n")


def test_signal_is_reported(make_script) -> None:
    script = make_script("killed.sh", "kill -9 $$\n")

    assert "signal: 9" in run_command(script)


def test_invalid_stderr_bytes_are_replaced(make_script) -> None:
    script = make_script("bad_bytes.sh", "printf '\\377' >&2\nexit 1\n")

    assert "�" in run_command(script)


def test_missing_executable_returns_error_text(tmp_path) -> None:
    missing = os.fspath(tmp_path / "no-such-binary")

    output = run_command(missing, "--flag")

    assert "No such file or directory" in output


def test_non_executable_file_returns_error_text(tmp_path) -> None:
    path = tmp_path / "plain.txt"
    path.write_text("not a program\n")

    assert "Permission denied" in run_command(os.fspath(path))


def test_embedded_nul_returns_error_text() -> None:
    assert "null" in run_command("echo", "a\0b").lower()


def test_not_found_message_names_command() -> None:
    message = not_found_message("definitely-not-a-real-cmd")

    assert "definitely-not-a-real-cmd" in message
    assert "not exist" in message


def test_normalize_output_only_touches_tabs() -> None:
    assert normalize_output("x\ty\t\tz\n") == "x    y        z\n"


def test_format_exit_status() -> None:
    assert format_exit_status(3) == "exit status: 3"
    assert format_exit_status(-15) == "signal: 15"


def test_spawn_failure_is_logged_with_command_line(tmp_path, caplog) -> None:
    missing = os.fspath(tmp_path / "no-such-binary")

    with caplog.at_level(logging.ERROR, logger="perfcheck.executor"):
        run_command(missing, "-n  1")

    assert f"Failed to run command {missing} -n  1" in caplog.text
