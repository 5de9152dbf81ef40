"""DecodeService — ID number validation and decoding behind ServiceResult.

Pipeline: RESOLVE (max age, today) → DECODE → RESPOND
"""

from __future__ import annotations

from datetime import date
from typing import Any

import structlog

from zaidctl.domain.decoder import DecodeResult, base_year_for, decode, validate
from zaidctl.domain.types import InvalidReason
from zaidctl.services._helpers import mask_id
from zaidctl.services.base import BaseService
from zaidctl.services.result import ServiceError, ServiceResult

logger = structlog.get_logger(__name__)

_DATA_FIELDS = {"id_number", "date_of_birth", "gender", "citizenship_status"}


def _reason_error(reason: InvalidReason) -> ServiceError:
    return ServiceError(
        code=reason.value,
        message=reason.description,
        detail={"reason": reason.value},
    )


def result_data(result: DecodeResult) -> dict[str, Any]:
    """JSON-friendly payload for a valid DecodeResult."""
    return result.model_dump(mode="json", include=_DATA_FIELDS)


class DecodeService(BaseService):
    """Validates and decodes single ID numbers."""

    def _resolve(self, op: str, max_age: int | None) -> tuple[int, date] | ServiceResult:
        """Pin max age and today for one operation, or return an error result."""
        age = self._settings.decoder.max_age if max_age is None else max_age
        today = self.today
        try:
            base_year_for(age, lambda: today)
        except ValueError as exc:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="INVALID_MAX_AGE",
                    message=str(exc),
                    detail={"max_age": age},
                ),
            )
        return age, today

    def decode(self, id_number: str | None, *, max_age: int | None = None) -> ServiceResult:
        """Decode *id_number* into its date of birth, gender and citizenship."""
        op = "decode"
        resolved = self._resolve(op, max_age)
        if isinstance(resolved, ServiceResult):
            return resolved
        age, today = resolved
        meta = {"max_age": age, "reference_date": today.isoformat()}

        result = decode(id_number, age, clock=lambda: today)
        if result.invalid_reason is not None:
            logger.debug(
                "id_rejected",
                id_number=mask_id(id_number),
                reason=result.invalid_reason.value,
            )
            return ServiceResult(
                ok=False,
                op=op,
                error=_reason_error(result.invalid_reason),
                meta=meta,
            )

        logger.debug("id_decoded", id_number=mask_id(id_number))
        return ServiceResult(ok=True, op=op, data=result_data(result), meta=meta)

    def validate(self, id_number: str | None, *, max_age: int | None = None) -> ServiceResult:
        """Check *id_number* without extracting its fields."""
        op = "validate"
        resolved = self._resolve(op, max_age)
        if isinstance(resolved, ServiceResult):
            return resolved
        age, today = resolved
        meta = {"max_age": age, "reference_date": today.isoformat()}

        reason = validate(id_number, age, clock=lambda: today)
        if reason is not None:
            logger.debug("id_rejected", id_number=mask_id(id_number), reason=reason.value)
            return ServiceResult(ok=False, op=op, error=_reason_error(reason), meta=meta)

        logger.debug("id_validated", id_number=mask_id(id_number))
        return ServiceResult(ok=True, op=op, data={"valid": True}, meta=meta)
