"""
phonecanon – canonical phone-number parsing and validation.

Import path convention::

    from phonecanon import PhoneParser, MetadataStore
    from phonecanon.api import from_raw, validate
    from phonecanon.kernel.errors import InvalidCountryCodeError
"""

from phonecanon.kernel.errors import InvalidCountryCodeError
from phonecanon.kernel.types import CanonicalPhoneNumber, PhoneNumberType
from phonecanon.metadata import CountryMetadata, MetadataStore
from phonecanon.parsing import PhoneParser

__version__ = "0.1.0"
__all__ = [
    "CanonicalPhoneNumber",
    "CountryMetadata",
    "InvalidCountryCodeError",
    "MetadataStore",
    "PhoneNumberType",
    "PhoneParser",
    "__version__",
]
