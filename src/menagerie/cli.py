"""Root CLI group for menagerie with global flags and command registration."""

from __future__ import annotations

import click

from menagerie import __version__
from menagerie.commands import register_commands
from menagerie.commands._context import AppContext
from menagerie.commands._examples import examples_option
from menagerie.config.settings import MenagerieSettings


@click.group(invoke_without_command=True)
@examples_option(
    """\
  menagerie                      # same as 'menagerie collect'
  menagerie -q collect < animals.txt
  menagerie --json collect
  menagerie -c ./menagerie.toml collect --parse-policy abort"""
)
@click.version_option(version=__version__, prog_name="menagerie")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="No prompts; print only the report.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """menagerie: collect name/species/age records and print them back."""
    settings = MenagerieSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        from menagerie.commands.collect import collect

        ctx.invoke(collect)


register_commands(cli)
