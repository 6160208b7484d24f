"""Canonical phone number value object and number-type enumeration."""

from __future__ import annotations

import dataclasses
from enum import Enum

from phonecanon.kernel.errors.domain import ValidationError


class PhoneNumberType(str, Enum):
    """Selects which structural pattern a number is validated against."""

    FIXED_LINE = "fixed_line"
    MOBILE = "mobile"
    TOLL_FREE = "toll_free"
    PREMIUM_RATE = "premium_rate"
    SHARED_COST = "shared_cost"
    VOIP = "voip"
    PERSONAL_NUMBER = "personal_number"
    PAGER = "pager"
    UAN = "uan"
    VOICEMAIL = "voicemail"
    UNKNOWN = "unknown"


@dataclasses.dataclass(frozen=True, slots=True)
class CanonicalPhoneNumber:
    """A ``(country, national significant number)`` pair.

    The NSN holds ASCII digits only: no separators, no ``+`` or exit code,
    no national prefix. An empty NSN is allowed so that pathological input
    still yields a (semantically invalid) result instead of an exception.
    """

    country: str
    national_significant_number: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "country", self.country.upper())
        nsn = self.national_significant_number
        if nsn and not (nsn.isascii() and nsn.isdigit()):
            raise ValidationError(
                "National significant number must contain ASCII digits only",
                field="national_significant_number",
            )

    @property
    def nsn(self) -> str:
        return self.national_significant_number

    def with_nsn(self, nsn: str) -> "CanonicalPhoneNumber":
        """Return a corrected copy; instances are never mutated in place."""
        return dataclasses.replace(self, national_significant_number=nsn)


__all__ = ["CanonicalPhoneNumber", "PhoneNumberType"]
