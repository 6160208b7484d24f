"""Metadata source – converts ``phonenumbers`` bundled metadata into records."""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import Any, Final

import phonenumbers
from phonenumbers import PhoneMetadata

from phonecanon.kernel.types.phone import PhoneNumberType
from phonecanon.metadata.model import CountryMetadata, NumberPattern, TransformRule
from phonecanon.observability.logging import get_logger

logger = get_logger(__name__)

_NON_GEO_REGION: Final = "001"

_TYPE_ATTRIBUTES: Final[dict[PhoneNumberType, str]] = {
    PhoneNumberType.FIXED_LINE: "fixed_line",
    PhoneNumberType.MOBILE: "mobile",
    PhoneNumberType.TOLL_FREE: "toll_free",
    PhoneNumberType.PREMIUM_RATE: "premium_rate",
    PhoneNumberType.SHARED_COST: "shared_cost",
    PhoneNumberType.VOIP: "voip",
    PhoneNumberType.PERSONAL_NUMBER: "personal_number",
    PhoneNumberType.PAGER: "pager",
    PhoneNumberType.UAN: "uan",
    PhoneNumberType.VOICEMAIL: "voicemail",
}


def load_phonenumbers_metadata(regions: Iterable[str] | None = None) -> list[CountryMetadata]:
    """Return one :class:`CountryMetadata` per geographic region.

    Parameters
    ----------
    regions:
        Optional ISO codes to restrict the table to. ``None`` or an empty
        iterable loads every region ``phonenumbers`` knows about.

    The first region listed for a calling code in
    ``phonenumbers.COUNTRY_CODE_TO_REGION_CODE`` is that code's main country.
    """
    wanted = {region.upper() for region in regions} if regions else None
    records: list[CountryMetadata] = []
    for code, region_codes in sorted(phonenumbers.COUNTRY_CODE_TO_REGION_CODE.items()):
        for index, region in enumerate(region_codes):
            if region == _NON_GEO_REGION:
                continue
            if wanted is not None and region not in wanted:
                continue
            raw = PhoneMetadata.metadata_for_region(region)
            if raw is None:
                logger.warning("metadata.region_missing", region=region, country_code=code)
                continue
            records.append(_to_record(raw, str(code), is_main_country=index == 0))
    if wanted is not None:
        missing = wanted - {record.iso_code for record in records}
        if missing:
            logger.warning("metadata.regions_unknown", regions=sorted(missing))
    logger.debug("metadata.loaded", countries=len(records))
    return records


def _to_record(raw: Any, country_code: str, *, is_main_country: bool) -> CountryMetadata:
    patterns: dict[PhoneNumberType, NumberPattern] = {}
    for number_type, attribute in _TYPE_ATTRIBUTES.items():
        pattern = _to_pattern(getattr(raw, attribute, None))
        if pattern is not None:
            patterns[number_type] = pattern

    return CountryMetadata(
        iso_code=raw.id,
        country_code=country_code,
        international_prefix=raw.international_prefix or None,
        national_prefix=raw.national_prefix or None,
        transform_rules=_to_transform_rules(raw),
        general=_to_pattern(raw.general_desc),
        patterns=patterns,
        leading_digits=raw.leading_digits or None,
        is_main_country=is_main_country,
    )


def _to_pattern(desc: Any) -> NumberPattern | None:
    if desc is None or not desc.national_number_pattern:
        return None
    raw_lengths = tuple(desc.possible_length or ())
    lengths = tuple(length for length in raw_lengths if length > 0)
    # (-1,) marks a type the country does not have.
    if raw_lengths and not lengths:
        return None
    return NumberPattern(desc.national_number_pattern, lengths, desc.example_number or None)


def _to_transform_rules(raw: Any) -> tuple[TransformRule, ...]:
    if raw.national_prefix_for_parsing:
        return (
            TransformRule(
                raw.national_prefix_for_parsing,
                raw.national_prefix_transform_rule or "",
            ),
        )
    if raw.national_prefix:
        return (TransformRule(re.escape(raw.national_prefix)),)
    return ()


__all__ = ["load_phonenumbers_metadata"]
