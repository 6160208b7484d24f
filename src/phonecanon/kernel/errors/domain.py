"""Domain errors – invalid values and unknown country identities."""

from __future__ import annotations

from typing import Any

from phonecanon.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Raised when a domain rule / invariant is violated."""

    default_code = "domain_error"


class InvariantViolationError(DomainError):
    """A structural invariant of the metadata table was violated."""

    default_code = "invariant_violation"


class ValidationError(DomainError):
    """A value object was constructed from data that breaks its rules.

    *field* names the offending attribute; it is copied into ``detail``.
    """

    default_code = "validation_error"

    def __init__(self, message: str, *, field: str | None = None, **kwargs: Any) -> None:
        detail = kwargs.pop("detail", None) or {}
        if field is not None:
            detail.setdefault("field", field)
        super().__init__(message, detail=detail, **kwargs)
        self.field = field


class InvalidCountryCodeError(DomainError):
    """No metadata exists for an ISO country code or a calling code.

    This is the only failure a parse call surfaces; a number that merely
    fails structural validation is not an error.
    """

    default_code = "invalid_country_code"

    def __init__(self, country: str, **kwargs: Any) -> None:
        detail = kwargs.pop("detail", None) or {}
        detail.setdefault("country", country)
        super().__init__(f"Invalid country code: {country!r}", detail=detail, **kwargs)
        self.country = country


__all__ = [
    "DomainError",
    "InvalidCountryCodeError",
    "InvariantViolationError",
    "ValidationError",
]
