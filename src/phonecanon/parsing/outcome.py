"""Pipeline result types shared by the parsing stages."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from enum import Enum

from phonecanon.kernel.types.phone import CanonicalPhoneNumber


@dataclasses.dataclass(frozen=True, slots=True)
class StripResult:
    """Digits left after a stripping stage plus what that stage removed."""

    digits: str
    removed: str = ""

    @property
    def stripped(self) -> bool:
        return bool(self.removed)


@dataclasses.dataclass(frozen=True, slots=True)
class ParseOutcome:
    """Transformed candidate and the untransformed fallback it may revert to."""

    candidate: CanonicalPhoneNumber
    fallback: CanonicalPhoneNumber

    def select(self, accept: Callable[[CanonicalPhoneNumber], bool]) -> CanonicalPhoneNumber:
        """Return the candidate when *accept* approves it, otherwise the fallback."""
        return self.candidate if accept(self.candidate) else self.fallback

    @property
    def transformed(self) -> bool:
        return self.candidate != self.fallback


class KnownContext(str, Enum):
    """What the caller of :meth:`PhoneParser.from_raw` already knows."""

    NOTHING = "nothing"
    CALLER_ONLY = "caller_only"
    DESTINATION_ONLY = "destination_only"
    BOTH = "both"

    @classmethod
    def of(cls, caller_country: str | None, destination_country: str | None) -> "KnownContext":
        if caller_country is None:
            return cls.NOTHING if destination_country is None else cls.DESTINATION_ONLY
        return cls.CALLER_ONLY if destination_country is None else cls.BOTH

    @property
    def knows_caller(self) -> bool:
        return self in (KnownContext.CALLER_ONLY, KnownContext.BOTH)


__all__ = ["KnownContext", "ParseOutcome", "StripResult"]
