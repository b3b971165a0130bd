"""Helper functions for integration tests."""

from click.testing import CliRunner, Result

from adrtool.cli import main


def run_adr(runner: CliRunner, *args: str, expect_exit: int = 0) -> Result:
    """Invoke the adr CLI and check the exit code."""
    result = runner.invoke(main, list(args))
    assert result.exit_code == expect_exit, result.output
    return result


def listed(runner: CliRunner) -> list[str]:
    """Names printed by `adr list`, one per line."""
    return run_adr(runner, "list").output.splitlines()
