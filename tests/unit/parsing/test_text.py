"""Unit tests for the normalizer."""

from __future__ import annotations

import pytest
from hypothesis import given

from phonecanon.parsing import digits_only, normalize
from phonecanon.testing.generators import digit_strings, formatted_numbers, phone_like_text


class TestNormalize:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("+33 6 86 57 90 14", "+33686579014"),
            ("06 86 57 90 14", "0686579014"),
            ("(+33) 6-86.57/90", "+336865790"),
            ("tel: 06 86", "0686"),
            ("٠٦ ٨٦", "0686"),
            ("＋３３ ６", "+336"),
            ("1+2", "12"),
            ("++33", "+33"),
            ("", ""),
            ("no digits here", ""),
            ("+", "+"),
        ],
    )
    def test_examples(self, text: str, expected: str) -> None:
        assert normalize(text) == expected

    @given(phone_like_text())
    def test_idempotent(self, text: str) -> None:
        once = normalize(text)
        assert normalize(once) == once

    @given(phone_like_text())
    def test_output_alphabet(self, text: str) -> None:
        result = digits_only(normalize(text))
        assert result == "" or (result.isascii() and result.isdigit())

    @given(formatted_numbers("686579014"))
    def test_separators_are_dropped(self, text: str) -> None:
        assert normalize(text) == "686579014"

    @given(digit_strings().flatmap(lambda d: formatted_numbers(d, plus=True).map(lambda t: (d, t))))
    def test_leading_plus_kept(self, sample: tuple[str, str]) -> None:
        digits, text = sample
        assert normalize(text) == "+" + digits


class TestDigitsOnly:
    def test_strips_plus(self) -> None:
        assert digits_only("+33") == "33"

    def test_leaves_digits(self) -> None:
        assert digits_only("0033") == "0033"
