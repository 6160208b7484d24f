"""Parsing – normalize, strip, resolve, transform and validate phone numbers.

Stages, leaves first::

    text.py                  normalize()
    international_prefix.py  remove_international_prefix()
    country_code.py          extract / remove / resolve calling codes
    national_number.py       national prefix and transform rules
    validator.py             Validator
    parser.py                PhoneParser (the four entry points)
"""

from phonecanon.parsing.country_code import (
    extract_country_code,
    normalize_country_code,
    remove_country_code,
    resolve_country,
)
from phonecanon.parsing.international_prefix import remove_international_prefix
from phonecanon.parsing.national_number import (
    remove_national_prefix,
    to_national_significant_number,
    transform_local_nsn_to_international,
)
from phonecanon.parsing.outcome import KnownContext, ParseOutcome, StripResult
from phonecanon.parsing.parser import PhoneParser
from phonecanon.parsing.text import digits_only, normalize
from phonecanon.parsing.validator import Validator

__all__ = [
    "KnownContext",
    "ParseOutcome",
    "PhoneParser",
    "StripResult",
    "Validator",
    "digits_only",
    "extract_country_code",
    "normalize",
    "normalize_country_code",
    "remove_country_code",
    "remove_international_prefix",
    "remove_national_prefix",
    "resolve_country",
    "to_national_significant_number",
    "transform_local_nsn_to_international",
]
