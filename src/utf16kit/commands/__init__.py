"""Subcommand modules for utf16kit.

Provides register_commands() which uses deferred imports to keep
``utf16kit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the codec commands on the root CLI group."""
    from utf16kit.commands.decode import decode
    from utf16kit.commands.encode import encode
    from utf16kit.commands.utf8 import utf8

    cli.add_command(decode)
    cli.add_command(encode)
    cli.add_command(utf8)
