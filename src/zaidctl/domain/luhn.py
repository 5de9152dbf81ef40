"""Luhn check-digit arithmetic for 13-digit ID numbers.

The payload is the ID without its final digit. Doubling starts at the
payload's second-to-last digit and continues on every second digit to
the left.
"""

from __future__ import annotations

_RADIX = 10


def _reduce(doubled: int) -> int:
    """Collapse a doubled digit back to one digit (its digit sum)."""
    if doubled > _RADIX - 1:
        return doubled % _RADIX + 1
    return doubled


def compute_luhn_check_digit(payload: str) -> int:
    """Return the Luhn check digit for *payload*.

    Raises:
        ValueError: If *payload* is empty or contains a non-digit.
    """
    if not payload or not payload.isascii() or not payload.isdigit():
        msg = f"Luhn payload must be a non-empty digit string, got {payload!r}"
        raise ValueError(msg)

    digits = [int(ch) for ch in payload]
    for i in range(len(digits) - 2, -1, -2):
        digits[i] = _reduce(digits[i] * 2)

    return (_RADIX - sum(digits) % _RADIX) % _RADIX


def verify_luhn(number: str) -> bool:
    """Check whether the last digit of *number* is its Luhn check digit."""
    if len(number) < 2:
        return False
    payload, check = number[:-1], number[-1]
    if not check.isascii() or not check.isdigit():
        return False
    return compute_luhn_check_digit(payload) == int(check)
