"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, zaidctl.toml only contains overrides.
"""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, Field

from zaidctl.domain.decoder import DEFAULT_MAX_AGE


class DecoderConfig(BaseModel):
    """[decoder] section.

    Attributes:
        max_age: Oldest plausible age; anchors the two-digit year window.
        reference_date: Pins "today" for reproducible runs. None uses the
            system date.
    """

    model_config = {"frozen": True}

    max_age: int = Field(default=DEFAULT_MAX_AGE, ge=1)
    reference_date: date | None = None
