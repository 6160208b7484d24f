"""Metadata matcher – picks one country among those sharing a calling code."""

from __future__ import annotations

from collections.abc import Sequence

from phonecanon.metadata.model import CountryMetadata


def find_best_match(national: str, candidates: Sequence[CountryMetadata]) -> CountryMetadata:
    """Return the candidate whose rules best fit ``national``.

    Priority, each pass walking ``candidates`` in store order:

    1. a record whose type patterns accept the digits;
    2. a record whose ``leading_digits`` match the start of the digits;
    3. the main country for the calling code;
    4. the first candidate.
    """
    if not candidates:
        raise ValueError("find_best_match() requires at least one candidate")
    if len(candidates) == 1:
        return candidates[0]
    for candidate in candidates:
        if candidate.matches_any_type(national):
            return candidate
    for candidate in candidates:
        if candidate.starts_with_leading_digits(national):
            return candidate
    for candidate in candidates:
        if candidate.is_main_country:
            return candidate
    return candidates[0]


__all__ = ["find_best_match"]
