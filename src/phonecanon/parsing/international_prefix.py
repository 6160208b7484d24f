"""International-prefix resolver – strips ``+`` or a country's exit code."""

from __future__ import annotations

import re
from typing import Final

from phonecanon.metadata.model import CountryMetadata
from phonecanon.parsing.outcome import StripResult

# Best-effort exit codes when no caller country is known.
_GENERIC_EXIT_CODES: Final = re.compile(r"00|011")


def remove_international_prefix(
    number: str,
    *,
    country_code: str | None = None,
    metadata: CountryMetadata | None = None,
) -> StripResult:
    """Strip a leading ``+`` or exit code from a normalized *number*.

    A ``+`` is always an international prefix. A numeric exit code comes
    from *metadata*'s international-prefix pattern, or from the generic
    ``00``/``011`` set without metadata, and is only stripped when digits
    follow it that could start a calling code (not ``0``) and, when
    *country_code* is given, actually start with it.
    """
    if number.startswith("+"):
        return StripResult(number[1:], "+")

    if metadata is not None:
        match = metadata.match_international_prefix(number)
    else:
        match = _GENERIC_EXIT_CODES.match(number)
    if match is None or not match.group():
        return StripResult(number)

    remainder = number[match.end():]
    if not remainder or remainder.startswith("0"):
        return StripResult(number)
    if country_code is not None and not remainder.startswith(country_code):
        return StripResult(number)
    return StripResult(remainder, match.group())


__all__ = ["remove_international_prefix"]
