"""Tags and reason codes encoded in (or derived from) an ID number."""

from __future__ import annotations

from enum import StrEnum


class Gender(StrEnum):
    """Gender derived from the four-digit sequence block."""

    FEMALE = "FEMALE"
    MALE = "MALE"


class CitizenshipStatus(StrEnum):
    """Citizenship derived from the eleventh digit."""

    CITIZEN = "CITIZEN"
    PERMANENT_RESIDENT = "PERMANENT_RESIDENT"


class InvalidReason(StrEnum):
    """Why an ID number was rejected.

    Members are declared in pipeline order: an input failing several
    checks always reports the earliest one.
    """

    INPUT_BLANK = "INPUT_BLANK"
    NOT_13_DIGITS = "NOT_13_DIGITS"
    INVALID_MONTH_DIGITS = "INVALID_MONTH_DIGITS"
    INVALID_DAYS_DIGITS = "INVALID_DAYS_DIGITS"
    CHECK_DIGIT_VERIFICATION_FAILED = "CHECK_DIGIT_VERIFICATION_FAILED"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[InvalidReason, str] = {
    InvalidReason.INPUT_BLANK: "The ID number was not provided or is blank",
    InvalidReason.NOT_13_DIGITS: "The ID number is not a 13 digit string",
    InvalidReason.INVALID_MONTH_DIGITS: "The month digits are greater than 12",
    InvalidReason.INVALID_DAYS_DIGITS: (
        "The day digits do not fit the month in the resolved birth year"
    ),
    InvalidReason.CHECK_DIGIT_VERIFICATION_FAILED: "The Luhn check digit does not match",
}
