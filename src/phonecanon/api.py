"""Module-level entry points over a process-wide default parser.

The default :class:`MetadataStore` is built from ``phonenumbers`` on first
use, restricted by ``PHONECANON_REGIONS`` when set, and then shared
read-only for the lifetime of the process::

    from phonecanon.api import from_raw, validate

    number = from_raw("+33 6 86 57 90 14")
    assert number.country == "FR" and validate(number)
"""

from __future__ import annotations

import functools

from phonecanon.config.settings import ParserSettings, load_settings
from phonecanon.kernel.types.phone import CanonicalPhoneNumber, PhoneNumberType
from phonecanon.metadata.store import MetadataStore
from phonecanon.observability.logging import JsonLoggerFactory, get_logger
from phonecanon.parsing.parser import PhoneParser

logger = get_logger(__name__)


def configure_logging(settings: ParserSettings | None = None) -> None:
    """Install JSON logging at the configured ``PHONECANON_LOG_LEVEL``."""
    settings = settings or load_settings()
    JsonLoggerFactory.configure(settings.log_level_number)


@functools.lru_cache(maxsize=1)
def get_default_parser() -> PhoneParser:
    settings = load_settings()
    store = MetadataStore.from_phonenumbers(settings.regions or None)
    logger.info("phone.parser.ready", countries=len(store), restricted=bool(settings.regions))
    return PhoneParser(store)


def from_national(country: str, national: str) -> CanonicalPhoneNumber:
    return get_default_parser().from_national(country, national)


def from_iso_code(country: str, phone_number: str) -> CanonicalPhoneNumber:
    return get_default_parser().from_iso_code(country, phone_number)


def from_country_code(country_code: str, phone_number: str) -> CanonicalPhoneNumber:
    return get_default_parser().from_country_code(country_code, phone_number)


def from_raw(
    phone_number: str,
    *,
    caller_country: str | None = None,
    destination_country: str | None = None,
) -> CanonicalPhoneNumber:
    return get_default_parser().from_raw(
        phone_number,
        caller_country=caller_country,
        destination_country=destination_country,
    )


def validate(number: CanonicalPhoneNumber, number_type: PhoneNumberType | None = None) -> bool:
    return get_default_parser().validate(number, number_type)


def number_type(number: CanonicalPhoneNumber) -> PhoneNumberType:
    return get_default_parser().number_type(number)


__all__ = [
    "configure_logging",
    "from_country_code",
    "from_iso_code",
    "from_national",
    "from_raw",
    "get_default_parser",
    "number_type",
    "validate",
]
