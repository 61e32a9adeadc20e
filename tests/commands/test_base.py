"""Tests for the LaunchkitCommand base class."""

from __future__ import annotations

import click
from click.testing import CliRunner

from launchkit.commands._base import LaunchkitCommand


def _command(examples: str | None) -> click.Command:
    @click.command(cls=LaunchkitCommand, examples=examples)
    @click.option("--name", default="world")
    def greet(name: str) -> None:
        click.echo(f"hello {name}")

    return greet


class TestExamplesFlag:
    def test_prints_examples_and_skips_command(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(_command("  greet --name you"), ["--examples"])
        assert result.exit_code == 0
        assert "greet --name you" in result.output
        assert "hello" not in result.output

    def test_declared_options_are_kept(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(_command("  greet"), ["--name", "there"])
        assert result.output == "hello there\n"

    def test_listed_in_help(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(_command("  greet"), ["--help"])
        assert "--examples" in result.output

    def test_absent_without_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(_command(None), ["--examples"])
        assert result.exit_code != 0
        assert "No such option" in result.output
