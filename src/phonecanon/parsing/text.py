"""Normalizer – reduces free text to ASCII digits with an optional leading ``+``."""

from __future__ import annotations

import unicodedata
from typing import Final

_PLUS_SIGNS: Final = frozenset("+＋")


def normalize(text: str) -> str:
    """Return *text* as ASCII digits, prefixed by ``+`` when one leads the digits.

    Any Unicode decimal digit (Arabic-Indic, fullwidth, …) is mapped to its
    ASCII value; every other character is dropped. A plus sign is kept only
    when it comes before the first digit. Never fails, and
    ``normalize(normalize(x)) == normalize(x)``.
    """
    digits: list[str] = []
    leading_plus = False
    for char in text:
        if char in _PLUS_SIGNS:
            if not digits:
                leading_plus = True
            continue
        value = unicodedata.decimal(char, None)
        if value is not None:
            digits.append(str(value))
    return ("+" if leading_plus else "") + "".join(digits)


def digits_only(number: str) -> str:
    """Drop the leading ``+`` of an already normalized number."""
    return number[1:] if number.startswith("+") else number


__all__ = ["digits_only", "normalize"]
