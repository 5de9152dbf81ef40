"""Tests for Luhn check-digit computation."""

import pytest

from zaidctl.domain.luhn import compute_luhn_check_digit, verify_luhn


class TestComputeLuhnCheckDigit:
    @pytest.mark.parametrize(
        "payload,expected",
        [
            # doubled: indices 0, 2, 4, 6, 8, 10
            ("800131500908", 7),  # 7+0+6+1+0+0 + 0+1+1+0+9+8 = 33
            ("800101500908", 3),  # 7+0+0+1+0+0 + 0+1+1+0+9+8 = 27
            ("920229472018", 5),  # 9+0+4+8+4+2 + 2+2+9+7+0+8 = 55
            ("000229000108", 6),  # 0+0+4+0+0+0 + 0+2+9+0+1+8 = 24
            ("121231789012", 9),  # 2+2+6+5+9+2 + 2+2+1+8+0+2 = 41
        ],
    )
    def test_known_payloads(self, payload: str, expected: int) -> None:
        assert compute_luhn_check_digit(payload) == expected

    def test_sum_multiple_of_ten_gives_zero(self) -> None:
        assert compute_luhn_check_digit("000000000000") == 0

    def test_last_payload_digit_is_not_doubled(self) -> None:
        # 5 doubled would give 1 -> check 9; undoubled gives check 5
        assert compute_luhn_check_digit("05") == 5

    def test_doubled_value_over_nine_is_reduced(self) -> None:
        # 5 doubles to 10, reduced to 1; 10 - 1 = 9
        assert compute_luhn_check_digit("50") == 9

    @pytest.mark.parametrize("payload", ["", "12a4", "12 4", "١٢"])
    def test_rejects_non_digits(self, payload: str) -> None:
        with pytest.raises(ValueError):
            compute_luhn_check_digit(payload)


class TestVerifyLuhn:
    def test_valid_number(self) -> None:
        assert verify_luhn("8001315009087")

    def test_wrong_check_digit(self) -> None:
        assert not verify_luhn("8001315009088")

    def test_too_short(self) -> None:
        assert not verify_luhn("0")

    def test_non_digit_check_character(self) -> None:
        assert not verify_luhn("800131500908x")
