"""Subcommand modules for menagerie.

Provides register_commands() which uses deferred imports to keep
``menagerie --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register standalone commands on the root CLI group."""
    from menagerie.commands.collect import collect

    cli.add_command(collect)
