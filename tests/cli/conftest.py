# topmark:header:start
#
#   project      : JSON Anything
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""CLI test helpers for running JSON Anything through Click's test runner.

`run_cli()` invokes the Click group in-process. Tests that rely on configuration
discovery or relative paths should use the `isolation` fixture so the working
directory is an empty temporary directory.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from jsonanything.cli.exit_codes import ExitCode
from jsonanything.cli.main import cli
from jsonanything.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Reinstall TRACE logging after each CLI test.

    The CLI reconfigures the root logger and binds its handler to the runner's
    temporary stderr; later tests must not log into that stream.
    """
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_text: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI in the current working directory.

    Args:
        argv (str | Sequence[str] | None): CLI argument vector, e.g. ``["convert", "-t", "csv"]``.
        input_text (str | bytes | IO[Any] | None): Optional standard input passed to the
            command (used with the ``-`` input path).

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.

    Example:
        ```python
        result = run_cli(["--no-color", "convert", "-t", "csv"], input_text='{"a": 1}')
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """
    runner = CliRunner()
    return runner.invoke(cli, argv, input=input_text)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit_code(result: Result, expected: ExitCode | int) -> None:
    """Assert that the command exited with ``expected``.

    Args:
        result (Result): The Result object returned by `run_cli`.
        expected (ExitCode | int): The expected exit code.
    """
    assert result.exit_code == expected, result.output
