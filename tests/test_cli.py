"""Tests for CLI commands."""

import logging
import os
from unittest.mock import Mock, patch

import pytest
from typer.testing import CliRunner

from woodev.cli.cli import FLAG_LETTERS, app, collect_flags
from woodev.core.operations.base import operation
from woodev.core.operations.registry import OperationRegistry, get_default_registry
from woodev.core.operations.types import OperationResult

runner = CliRunner()


@pytest.fixture(autouse=True)
def data_dir(tmp_path):
    with patch.dict(os.environ, {"WOODEV_DATA_DIR": str(tmp_path), "WOODEV_LOG_LEVEL": "INFO"}):
        yield tmp_path
    logger = logging.getLogger("woodev")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


@pytest.fixture
def calls():
    return []


def prepare_branch(context):
    return {"branch": context.value("branch", "Branch?", default="trunk")}


@pytest.fixture
def registry(calls):
    def action(name, succeed=True):
        def run(config):
            calls.append((name, config))
            return OperationResult.ok(None) if succeed else OperationResult.fail("exploded")

        return run

    return OperationRegistry(
        [
            operation("clone", action("clone"), prepare=prepare_branch),
            operation("install", action("install"), flags=["i"]),
            operation("build", action("build"), flags=["b"]),
            operation("link", action("link"), flags=["l", "p"]),
            operation("broken", action("broken", succeed=False), flags=["t"]),
        ]
    )


def invoke(registry, args, **kwargs):
    with patch("woodev.cli.cli.get_default_registry", return_value=registry):
        return runner.invoke(app, args, **kwargs)


def test_cli_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Woodev CLI" in result.output


def test_cli_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "version" in result.output.lower()


def test_nothing_to_do(registry, calls):
    result = invoke(registry, [])
    assert result.exit_code == 0
    assert "Nothing to do" in result.output
    assert calls == []


def test_invalid_operation(registry, calls):
    result = invoke(registry, ["deploy", "-i"])
    assert result.exit_code == 1
    assert '"deploy" is an invalid operation' in result.output
    assert calls == []


def test_flags_select_operations(registry, calls):
    result = invoke(registry, ["-bi"])
    assert result.exit_code == 0
    assert [name for name, _ in calls] == ["install", "build"]
    assert "Completed operation `install`" in result.output


def test_name_and_flags(registry, calls):
    result = invoke(registry, ["clone", "-ib", "--branch", "fix/cart"])
    assert result.exit_code == 0
    assert [name for name, _ in calls] == ["clone", "install", "build"]
    assert calls[0][1].branch == "fix/cart"


def test_prompt_answers_flow_into_config(registry, calls):
    result = invoke(registry, ["clone"], input="release/9.0\n")
    assert result.exit_code == 0
    assert calls[0][1].branch == "release/9.0"


def test_failure_exits_nonzero(registry, calls):
    result = invoke(registry, ["link", "-t"])
    assert result.exit_code == 1
    assert [name for name, _ in calls] == ["link", "broken"]
    assert "Unable to run operation broken: exploded" in result.output


def test_quiet_suppresses_output(registry, calls):
    result = invoke(registry, ["-q", "-i"])
    assert result.exit_code == 0
    assert "Completed operation" not in result.output
    assert [name for name, _ in calls] == ["install"]


def test_list_operations(registry, calls):
    result = invoke(registry, ["--list"])
    assert result.exit_code == 0
    assert "link [-l -p]" in result.output
    assert calls == []


def test_invalid_configuration_exits_nonzero(calls):
    registry = OperationRegistry(
        [operation("a", Mock(), flags=["i"], prepare=lambda ctx: {"bogus": True})]
    )
    result = invoke(registry, ["-i"])
    assert result.exit_code == 1
    assert "Invalid configuration from operation 'a'" in result.output


def test_collect_flags():
    assert collect_flags(install=True, build=False, provision=True) == {"i", "p"}


def test_every_registry_flag_has_an_option():
    assert get_default_registry().flags() <= set(FLAG_LETTERS.values())
