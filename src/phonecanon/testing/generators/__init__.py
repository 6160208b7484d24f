"""Testing generators – Hypothesis strategies for phone-number text."""
from phonecanon.testing.generators.strategies import digit_strings, formatted_numbers, phone_like_text

__all__ = ["digit_strings", "formatted_numbers", "phone_like_text"]
