"""Testing generators – Hypothesis property-based testing strategies.

Requires the ``hypothesis`` package:

    pip install "phonecanon[test]"
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import hypothesis.strategies as st

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

_SEPARATORS: tuple[str, ...] = (" ", "-", ".", "/", "(", ")", " ", "–")


def digit_strings(min_size: int = 1, max_size: int = 15) -> "SearchStrategy[str]":
    """ASCII digit strings of realistic phone-number length."""
    return st.text(alphabet="0123456789", min_size=min_size, max_size=max_size)


def formatted_numbers(digits: str, *, plus: bool = False) -> "SearchStrategy[str]":
    """Render *digits* the way people type them: separators between any digits.

    Example::

        @given(formatted_numbers("686579014"))
        def test_separators_are_dropped(text):
            assert normalize(text) == "686579014"
    """

    @st.composite
    def _render(draw: st.DrawFn) -> str:
        parts: list[str] = ["+"] if plus else []
        for digit in digits:
            parts.append(digit)
            if draw(st.booleans()):
                parts.append(draw(st.sampled_from(_SEPARATORS)))
        return "".join(parts)

    return _render()


def phone_like_text(max_size: int = 30) -> "SearchStrategy[str]":
    """Arbitrary text biased towards digits, plus signs and separators."""
    alphabet = st.sampled_from("0123456789+＋٠١٢٣٤٥٦٧٨٩" + "".join(_SEPARATORS)) | st.characters()
    return st.text(alphabet=alphabet, max_size=max_size)


__all__ = ["digit_strings", "formatted_numbers", "phone_like_text"]
