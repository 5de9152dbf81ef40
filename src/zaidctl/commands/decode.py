"""Command: decode an ID number into the facts it encodes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from zaidctl.commands._base import ZaidCommand

if TYPE_CHECKING:
    from zaidctl.commands._context import AppContext


@click.command(
    cls=ZaidCommand,
    examples="""\
  zaidctl decode 8001315009087
  zaidctl decode 8001315009087 --max-age 80
  zaidctl --json decode 8001315009087""",
)
@click.argument("id_number")
@click.option(
    "--max-age",
    type=click.IntRange(min=1),
    default=None,
    help="Oldest plausible age, used to resolve the birth century.",
)
@click.pass_obj
def decode(app: AppContext, id_number: str, max_age: int | None) -> None:
    """Validate ID_NUMBER and show its date of birth, gender and citizenship."""
    from zaidctl.services.decode import DecodeService

    app.emit(DecodeService(app.settings).decode(id_number, max_age=max_age))
