"""BaseService — abstract foundation for zaidctl services.

Every service receives the resolved :class:`ZaidSettings` at construction
time. The settings supply the decoder defaults and the clock.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from zaidctl.config.settings import ZaidSettings
    from zaidctl.domain.decoder import Clock


class BaseService:
    """Abstract base for all service-layer classes.

    Usage::

        class DecodeService(BaseService):
            def decode(self, id_number: str) -> ServiceResult:
                ...
    """

    def __init__(self, settings: ZaidSettings, *, clock: Clock | None = None) -> None:
        self._settings = settings
        self._clock: Clock = clock or settings.clock

    @property
    def today(self) -> date:
        return self._clock()
