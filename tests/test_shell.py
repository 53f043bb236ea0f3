"""Tests for subprocess helpers."""

from unittest.mock import Mock, patch

import pytest

from woodev.core.errors import CommandError
from woodev.core.shell import capture_stdout, format_command, run_command, run_commands


def completed(returncode=0, stdout="", stderr=""):
    result = Mock()
    result.returncode = returncode
    result.stdout = stdout
    result.stderr = stderr
    return result


def test_format_command_quotes_arguments():
    assert format_command(["ln", "-fs", "/a b", "/c"]) == "ln -fs '/a b' /c"


@patch("woodev.core.shell.subprocess.run")
def test_run_command_success(mock_run):
    mock_run.return_value = completed()
    result = run_command(["git", "stash"], cwd="/repo")

    assert result.returncode == 0
    mock_run.assert_called_once_with(
        ["git", "stash"], capture_output=False, text=True, cwd="/repo"
    )


@patch("woodev.core.shell.subprocess.run")
def test_run_command_nonzero_exit(mock_run):
    mock_run.return_value = completed(returncode=128, stderr="fatal: not a git repository")

    with pytest.raises(CommandError) as exc_info:
        run_command(["git", "status"], capture_output=True)

    assert exc_info.value.returncode == 128
    assert exc_info.value.command == "git status"
    assert "fatal: not a git repository" in str(exc_info.value)


@patch("woodev.core.shell.subprocess.run")
def test_run_command_missing_program(mock_run):
    mock_run.side_effect = FileNotFoundError()

    with pytest.raises(CommandError) as exc_info:
        run_command(["ddev", "restart"])

    assert exc_info.value.returncode is None
    assert "ddev not found" in str(exc_info.value)


@patch("woodev.core.shell.subprocess.run")
def test_capture_stdout(mock_run):
    mock_run.return_value = completed(stdout="trunk\n")
    assert capture_stdout(["git", "rev-parse", "--abbrev-ref", "HEAD"]) == "trunk"
    assert mock_run.call_args[1]["capture_output"] is True


@patch("woodev.core.shell.subprocess.run")
def test_run_commands_stops_at_first_failure(mock_run):
    mock_run.side_effect = [completed(), completed(returncode=1), completed()]

    result = run_commands([["a"], ["b"], ["c"]], cwd="/repo")

    assert result.success is False
    assert result.error == "b failed (exit code 1)"
    assert result.metadata["command"] == "b"
    assert mock_run.call_count == 2


@patch("woodev.core.shell.subprocess.run")
def test_run_commands_success(mock_run):
    mock_run.return_value = completed()
    result = run_commands([["a"], ["b"]])
    assert result.success is True
    assert result.metadata["commands"] == 2
