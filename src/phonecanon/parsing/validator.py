"""Validator – structural and length checks of a canonical number."""

from __future__ import annotations

from phonecanon.kernel.errors import InvalidCountryCodeError
from phonecanon.kernel.types.phone import CanonicalPhoneNumber, PhoneNumberType
from phonecanon.metadata.model import CountryMetadata
from phonecanon.metadata.store import MetadataStore

# Specific ranges first: they often overlap the broad fixed-line pattern.
_TYPE_PRIORITY: tuple[PhoneNumberType, ...] = (
    PhoneNumberType.PREMIUM_RATE,
    PhoneNumberType.TOLL_FREE,
    PhoneNumberType.SHARED_COST,
    PhoneNumberType.VOIP,
    PhoneNumberType.PERSONAL_NUMBER,
    PhoneNumberType.PAGER,
    PhoneNumberType.UAN,
    PhoneNumberType.VOICEMAIL,
    PhoneNumberType.FIXED_LINE,
    PhoneNumberType.MOBILE,
)


class Validator:
    """Match NSNs against a store's per-country patterns.

    Every check returns a boolean; a country missing from the store or a
    type the country does not define simply never matches.
    """

    def __init__(self, store: MetadataStore) -> None:
        self._store = store

    def validate(self, number: CanonicalPhoneNumber, number_type: PhoneNumberType | None = None) -> bool:
        metadata = self._metadata(number)
        if metadata is None:
            return False
        nsn = number.national_significant_number
        if number_type is not None:
            return metadata.matches_type(nsn, number_type)
        if not self._length_ok(metadata, nsn):
            return False
        return metadata.matches_any_type(nsn)

    def validate_length(self, number: CanonicalPhoneNumber) -> bool:
        """Weaker check: the NSN length is one the country permits."""
        metadata = self._metadata(number)
        if metadata is None:
            return False
        return self._length_ok(metadata, number.national_significant_number)

    def number_type(self, number: CanonicalPhoneNumber) -> PhoneNumberType:
        metadata = self._metadata(number)
        if metadata is None:
            return PhoneNumberType.UNKNOWN
        nsn = number.national_significant_number
        for number_type in _TYPE_PRIORITY:
            if metadata.matches_type(nsn, number_type):
                return number_type
        return PhoneNumberType.UNKNOWN

    def _metadata(self, number: CanonicalPhoneNumber) -> CountryMetadata | None:
        try:
            return self._store.get_metadata_for_iso_code(number.country)
        except InvalidCountryCodeError:
            return None

    @staticmethod
    def _length_ok(metadata: CountryMetadata, nsn: str) -> bool:
        return bool(nsn) and len(nsn) in metadata.possible_lengths


__all__ = ["Validator"]
