"""Subcommand modules for zaidctl.

Provides register_commands() which uses deferred imports to keep
``zaidctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from zaidctl.commands.decode import decode
    from zaidctl.commands.validate import validate

    cli.add_command(decode)
    cli.add_command(validate)
