"""Root CLI group for utf16kit with global flags and command registration."""

from __future__ import annotations

import click

from utf16kit import __version__
from utf16kit.commands import register_commands
from utf16kit.commands._base import Utf16Group
from utf16kit.commands._context import AppContext
from utf16kit.config.settings import Utf16Settings


@click.group(
    cls=Utf16Group,
    invoke_without_command=True,
    examples="""\
  utf16kit decode D83D DE00
  utf16kit encode --text "hi 😀"
  utf16kit -q utf8 --file wide.bin""",
)
@click.version_option(version=__version__, prog_name="utf16kit")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
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
    """utf16kit — UTF-16 / UTF-32 / UTF-8 codec utility."""
    settings = Utf16Settings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
