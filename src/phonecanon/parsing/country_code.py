"""Country-code resolver – extraction, stripping and country disambiguation."""

from __future__ import annotations

from phonecanon.kernel.errors import InvalidCountryCodeError
from phonecanon.metadata.model import CountryMetadata
from phonecanon.metadata.store import MetadataStore
from phonecanon.parsing.outcome import StripResult
from phonecanon.parsing.text import digits_only, normalize


def normalize_country_code(country_code: str) -> str:
    """``"+33"``, ``"(33)"`` and ``"33"`` all become ``"33"``."""
    return digits_only(normalize(country_code))


def extract_country_code(digits: str, store: MetadataStore) -> str:
    """Return the calling code *digits* start with.

    Prefixes are tried from one digit up to the longest code in *store*;
    no calling code is a prefix of another, so the first hit is the only one.

    Raises
    ------
    InvalidCountryCodeError
        When no prefix of *digits* is a known calling code.
    """
    for length in range(1, min(store.max_country_code_length, len(digits)) + 1):
        candidate = digits[:length]
        if store.has_country_code(candidate):
            return candidate
    raise InvalidCountryCodeError(digits[: store.max_country_code_length] or digits)


def remove_country_code(digits: str, country_code: str) -> StripResult:
    if country_code and digits.startswith(country_code):
        return StripResult(digits[len(country_code):], country_code)
    return StripResult(digits)


def resolve_country(national: str, country_code: str, store: MetadataStore) -> CountryMetadata:
    """Pick the record for *country_code* that best fits *national*."""
    candidates = store.get_metadatas_for_country_code(country_code)
    return store.find_best_match(national, candidates)


__all__ = [
    "extract_country_code",
    "normalize_country_code",
    "remove_country_code",
    "resolve_country",
]
