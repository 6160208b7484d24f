"""Kernel – framework-agnostic building blocks (errors, value types)."""

from phonecanon.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    InvalidCountryCodeError,
    InvariantViolationError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "InvalidCountryCodeError",
    "InvariantViolationError",
    "ValidationError",
]
