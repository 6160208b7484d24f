"""National-number transformer – national dialing form to NSN."""

from __future__ import annotations

from phonecanon.metadata.model import CountryMetadata
from phonecanon.parsing.outcome import StripResult


def remove_national_prefix(digits: str, metadata: CountryMetadata) -> StripResult:
    """Strip the country's fixed trunk prefix (e.g. ``0``) when present.

    ``stripped`` is ``False`` when the prefix was absent, in which case the
    area-code boundary of *digits* is unknown.
    """
    prefix = metadata.national_prefix
    if prefix and digits.startswith(prefix):
        return StripResult(digits[len(prefix):], prefix)
    return StripResult(digits)


def transform_local_nsn_to_international(digits: str, metadata: CountryMetadata) -> str:
    """Apply the first matching transform rule of *metadata*.

    Returns *digits* unchanged when no rule matches.
    """
    for rule in metadata.transform_rules:
        transformed = rule.apply(digits)
        if transformed is not None:
            return transformed
    return digits


def to_national_significant_number(digits: str, metadata: CountryMetadata) -> str:
    """Transform *digits* unless that breaks a number already fitting the country.

    A national number that matches the general pattern only loses its
    leading digits when the transformed number still matches it; ``80``
    opening a toll-free number is not a trunk prefix.
    """
    transformed = transform_local_nsn_to_international(digits, metadata)
    if transformed == digits:
        return digits
    if metadata.matches_general(digits) and not metadata.matches_general(transformed):
        return digits
    return transformed


__all__ = [
    "remove_national_prefix",
    "to_national_significant_number",
    "transform_local_nsn_to_international",
]
