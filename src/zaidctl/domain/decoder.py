"""South African ID number validation and field extraction.

Layout of the 13-digit number::

    YYMMDD SSSS C A Z
    |      |    | | +-- Luhn check digit
    |      |    | +---- legacy indicator (ignored)
    |      |    +------ citizenship (0 = citizen)
    |      +----------- sequence (>= 5000 = male)
    +------------------ date of birth

Validation is a fixed pipeline: blank -> format -> month -> day -> checksum.
The first failing step decides the reason and nothing after it runs.

INVARIANT: ``decode`` never raises for any input string. The only
exception path is a caller passing a nonsensical ``max_age``.
"""

from __future__ import annotations

import calendar
import re
from collections.abc import Callable
from datetime import date
from typing import NamedTuple

from pydantic import BaseModel, model_validator

from zaidctl.domain.luhn import verify_luhn
from zaidctl.domain.types import CitizenshipStatus, Gender, InvalidReason

Clock = Callable[[], date]

DEFAULT_MAX_AGE = 100
MALE_SEQUENCE_START = 5000
MONTHS_IN_YEAR = 12

_THIRTEEN_DIGITS = re.compile(r"[0-9]{13}")


class IdFields(NamedTuple):
    """Fixed-position slices of a 13-digit ID number."""

    year: str
    month: str
    day: str
    sequence: str
    citizenship: str
    legacy: str
    check: str

    @classmethod
    def split(cls, number: str) -> IdFields:
        """Slice *number*, which must already be 13 digits."""
        return cls(
            year=number[0:2],
            month=number[2:4],
            day=number[4:6],
            sequence=number[6:10],
            citizenship=number[10:11],
            legacy=number[11:12],
            check=number[12:13],
        )


class DecodeResult(BaseModel):
    """Outcome of decoding one ID number.

    Exactly one side is populated: ``invalid_reason`` when ``valid`` is
    False, or all four data fields when ``valid`` is True.
    """

    model_config = {"frozen": True}

    valid: bool
    invalid_reason: InvalidReason | None = None
    id_number: str | None = None
    date_of_birth: date | None = None
    gender: Gender | None = None
    citizenship_status: CitizenshipStatus | None = None

    @model_validator(mode="after")
    def _check_exclusive(self) -> DecodeResult:
        data = (self.id_number, self.date_of_birth, self.gender, self.citizenship_status)
        if self.valid:
            if self.invalid_reason is not None or any(v is None for v in data):
                msg = "A valid result needs every data field and no invalid_reason"
                raise ValueError(msg)
        elif self.invalid_reason is None or any(v is not None for v in data):
            msg = "An invalid result needs an invalid_reason and no data fields"
            raise ValueError(msg)
        return self

    @classmethod
    def invalid(cls, reason: InvalidReason) -> DecodeResult:
        return cls(valid=False, invalid_reason=reason)


def base_year_for(max_age: int, clock: Clock = date.today) -> int:
    """Return the earliest plausible birth year for *max_age*.

    Raises:
        ValueError: If *max_age* is not positive or reaches before year 1.
    """
    if isinstance(max_age, bool) or not isinstance(max_age, int) or max_age < 1:
        msg = f"max_age must be a positive integer, got {max_age!r}"
        raise ValueError(msg)
    base = clock().year - max_age
    if base < 1:
        msg = f"max_age {max_age} reaches before year 1"
        raise ValueError(msg)
    return base


def resolve_year(two_digits: int, base_year: int) -> int:
    """Return the smallest year >= *base_year* ending in *two_digits*."""
    return base_year + (two_digits - base_year) % 100


def days_in_month(year: int, month: int) -> int:
    """Length of *month* in *year* (proleptic Gregorian)."""
    return calendar.monthrange(year, month)[1]


def _check(number: str, base_year: int) -> InvalidReason | None:
    """Run the post-format steps on a trimmed 13-digit *number*."""
    fields = IdFields.split(number)

    month = int(fields.month)
    if month > MONTHS_IN_YEAR:
        return InvalidReason.INVALID_MONTH_DIGITS

    year = resolve_year(int(fields.year), base_year)

    # Only the last day of the month is accepted. Month 00 is caught here.
    if month < 1 or int(fields.day) != days_in_month(year, month):
        return InvalidReason.INVALID_DAYS_DIGITS

    if not verify_luhn(number):
        return InvalidReason.CHECK_DIGIT_VERIFICATION_FAILED

    return None


def validate(
    id_number: str | None,
    max_age: int = DEFAULT_MAX_AGE,
    *,
    clock: Clock = date.today,
) -> InvalidReason | None:
    """Run the validation pipeline and return the first failure, or None.

    The input is trimmed after the blank check::

        validate(None)              -> INPUT_BLANK
        validate(" ")               -> INPUT_BLANK
        validate("123")             -> NOT_13_DIGITS
        validate("1234567890123")   -> INVALID_MONTH_DIGITS
        validate("1212567890123")   -> INVALID_DAYS_DIGITS
        validate("1212107890123")   -> INVALID_DAYS_DIGITS
        validate("1212317890123")   -> CHECK_DIGIT_VERIFICATION_FAILED
        validate("8001315009087")   -> None
    """
    return _pipeline(id_number, base_year_for(max_age, clock))


def _pipeline(id_number: str | None, base_year: int) -> InvalidReason | None:
    if id_number is None or not id_number.strip():
        return InvalidReason.INPUT_BLANK

    number = id_number.strip()
    if not _THIRTEEN_DIGITS.fullmatch(number):
        return InvalidReason.NOT_13_DIGITS

    return _check(number, base_year)


def decode(
    id_number: str | None,
    max_age: int = DEFAULT_MAX_AGE,
    *,
    clock: Clock = date.today,
) -> DecodeResult:
    """Validate *id_number* and, when valid, extract the facts it encodes.

    Args:
        id_number: Raw input; surrounding whitespace is ignored.
        max_age: Oldest plausible age, used to pick the birth century.
        clock: Provider of "today". Pin it for reproducible results.
    """
    base_year = base_year_for(max_age, clock)
    if id_number is None:
        return DecodeResult.invalid(InvalidReason.INPUT_BLANK)
    reason = _pipeline(id_number, base_year)
    if reason is not None:
        return DecodeResult.invalid(reason)

    number = id_number.strip()
    fields = IdFields.split(number)
    year = resolve_year(int(fields.year), base_year)

    return DecodeResult(
        valid=True,
        id_number=number,
        date_of_birth=date(year, int(fields.month), int(fields.day)),
        gender=Gender.MALE if int(fields.sequence) >= MALE_SEQUENCE_START else Gender.FEMALE,
        citizenship_status=(
            CitizenshipStatus.CITIZEN
            if int(fields.citizenship) == 0
            else CitizenshipStatus.PERMANENT_RESIDENT
        ),
    )
