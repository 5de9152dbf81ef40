"""Command: check an ID number without decoding it."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from zaidctl.commands._base import ZaidCommand

if TYPE_CHECKING:
    from zaidctl.commands._context import AppContext


@click.command(
    cls=ZaidCommand,
    examples="""\
  zaidctl validate 8001315009087
  zaidctl -q validate 8001315009088""",
)
@click.argument("id_number")
@click.option(
    "--max-age",
    type=click.IntRange(min=1),
    default=None,
    help="Oldest plausible age, used to resolve the birth century.",
)
@click.pass_obj
def validate(app: AppContext, id_number: str, max_age: int | None) -> None:
    """Print VALID, or the reason ID_NUMBER was rejected (exit code 1)."""
    from zaidctl.services.decode import DecodeService

    app.emit(DecodeService(app.settings).validate(id_number, max_age=max_age))
