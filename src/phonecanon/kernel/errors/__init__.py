"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── InvariantViolationError
    │   ├── ValidationError
    │   └── InvalidCountryCodeError
    └── ApplicationError         (application.py)
        └── ConfigError          (phonecanon.config.validation)
"""

from phonecanon.kernel.errors.application import ApplicationError
from phonecanon.kernel.errors.base import BaseError
from phonecanon.kernel.errors.domain import (
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
