"""Kernel value-object types – public re-export surface.

Modules:
  phone.py – CanonicalPhoneNumber, PhoneNumberType
"""

from phonecanon.kernel.types.phone import CanonicalPhoneNumber, PhoneNumberType

__all__ = ["CanonicalPhoneNumber", "PhoneNumberType"]
