"""Metadata records – immutable per-country rules consumed by the parser."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Final

from phonecanon.kernel.types.phone import PhoneNumberType

# ``$1`` (libphonenumber XML) and ``\1`` (Python) both denote group references.
_DOLLAR_GROUP: Final = re.compile(r"\$(\d)")


@dataclasses.dataclass(frozen=True, slots=True)
class NumberPattern:
    """Structural pattern for one number type plus its permitted lengths.

    An empty ``possible_lengths`` means "same as the country's general lengths".
    """

    pattern: str
    possible_lengths: tuple[int, ...] = ()
    example: str | None = None
    _regex: re.Pattern[str] = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "possible_lengths", tuple(self.possible_lengths))
        object.__setattr__(self, "_regex", re.compile(self.pattern))

    def matches(self, digits: str) -> bool:
        return self._regex.fullmatch(digits) is not None


@dataclasses.dataclass(frozen=True, slots=True)
class TransformRule:
    """Rewrite of a national dialing form into the NSN.

    ``pattern`` is matched at the start of the digits. When ``replacement``
    is set and the pattern's last capture group participated, the matched
    prefix is replaced by the expanded template; otherwise the matched
    prefix is simply dropped.
    """

    pattern: str
    replacement: str = ""
    _regex: re.Pattern[str] = dataclasses.field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "replacement", _DOLLAR_GROUP.sub(r"\\\1", self.replacement))
        object.__setattr__(self, "_regex", re.compile(self.pattern))

    def apply(self, digits: str) -> str | None:
        """Return the rewritten digits, or ``None`` when the rule does not match."""
        match = self._regex.match(digits)
        if match is None:
            return None
        rest = digits[match.end():]
        groups = self._regex.groups
        if self.replacement and groups and match.group(groups) is not None:
            return match.expand(self.replacement) + rest
        return rest


@dataclasses.dataclass(frozen=True, slots=True)
class CountryMetadata:
    """Read-only numbering rules of one country.

    Exactly one record exists per ISO code; records are never mutated once
    the store holding them has been built.
    """

    iso_code: str
    country_code: str
    international_prefix: str | None = None
    national_prefix: str | None = None
    transform_rules: tuple[TransformRule, ...] = ()
    general: NumberPattern | None = None
    patterns: Mapping[PhoneNumberType, NumberPattern] = dataclasses.field(
        default_factory=dict, compare=False
    )
    leading_digits: str | None = None
    is_main_country: bool = False
    _intl_regex: re.Pattern[str] | None = dataclasses.field(init=False, repr=False, compare=False)
    _leading_regex: re.Pattern[str] | None = dataclasses.field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(self, "iso_code", self.iso_code.upper())
        object.__setattr__(self, "transform_rules", tuple(self.transform_rules))
        object.__setattr__(self, "patterns", MappingProxyType(dict(self.patterns)))
        object.__setattr__(
            self,
            "_intl_regex",
            re.compile(self.international_prefix) if self.international_prefix else None,
        )
        object.__setattr__(
            self,
            "_leading_regex",
            re.compile(self.leading_digits) if self.leading_digits else None,
        )

    @property
    def possible_lengths(self) -> tuple[int, ...]:
        """General permitted lengths, or the union of the per-type lengths."""
        if self.general is not None and self.general.possible_lengths:
            return self.general.possible_lengths
        lengths: set[int] = set()
        for pattern in self.patterns.values():
            lengths.update(pattern.possible_lengths)
        return tuple(sorted(lengths))

    def pattern_for(self, number_type: PhoneNumberType) -> NumberPattern | None:
        return self.patterns.get(number_type)

    def matches_type(self, digits: str, number_type: PhoneNumberType) -> bool:
        """Whether ``digits`` fit the pattern and lengths of ``number_type``."""
        pattern = self.patterns.get(number_type)
        if pattern is None:
            return False
        lengths = pattern.possible_lengths or self.possible_lengths
        if lengths and len(digits) not in lengths:
            return False
        return pattern.matches(digits)

    def matches_any_type(self, digits: str) -> bool:
        return any(self.matches_type(digits, number_type) for number_type in self.patterns)

    def matches_general(self, digits: str) -> bool:
        """Whether ``digits`` fit the country's general pattern (or, lacking one, its lengths)."""
        if self.general is not None:
            return self.general.matches(digits)
        return len(digits) in self.possible_lengths

    def match_international_prefix(self, digits: str) -> re.Match[str] | None:
        if self._intl_regex is None:
            return None
        return self._intl_regex.match(digits)

    def starts_with_leading_digits(self, digits: str) -> bool:
        return self._leading_regex is not None and self._leading_regex.match(digits) is not None


__all__ = ["CountryMetadata", "NumberPattern", "TransformRule"]
