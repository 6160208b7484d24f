"""Phone parser – the four entry points over one normalize/strip/transform pipeline.

Input text can be written like::

    +33 6 86 57 90 14
    06 86 57 90 14
    6 86 57 90 14

Each entry point builds a :class:`ParseOutcome` holding the transformed
candidate and the caller's untransformed digits, then lets a validator pick
between them. A speculative strip that does not validate is never surfaced.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from phonecanon.kernel.types.phone import CanonicalPhoneNumber, PhoneNumberType
from phonecanon.metadata.model import CountryMetadata
from phonecanon.metadata.store import MetadataStore
from phonecanon.observability.logging import get_logger
from phonecanon.parsing.country_code import (
    extract_country_code,
    normalize_country_code,
    remove_country_code,
)
from phonecanon.parsing.international_prefix import remove_international_prefix
from phonecanon.parsing.national_number import (
    remove_national_prefix,
    to_national_significant_number,
)
from phonecanon.parsing.outcome import KnownContext, ParseOutcome
from phonecanon.parsing.text import digits_only, normalize
from phonecanon.parsing.validator import Validator

logger = get_logger(__name__)


class PhoneParser:
    """Turns free-text phone numbers into :class:`CanonicalPhoneNumber`.

    Use :meth:`from_national` when the input is known to be a national
    number, :meth:`from_iso_code` over :meth:`from_country_code` when the
    country is known, and :meth:`from_country_code` over :meth:`from_raw`
    when the calling code is known.

    The parser holds no mutable state; one instance may serve any number
    of threads.
    """

    def __init__(self, store: MetadataStore) -> None:
        self._store = store
        self._validator = Validator(store)

    @property
    def store(self) -> MetadataStore:
        return self._store

    # ------------------------------------------------------------------
    # Entry points
    # ------------------------------------------------------------------

    def from_national(self, country: str, national: str) -> CanonicalPhoneNumber:
        """Parse a *national* number (as dialed inside *country*).

        The national number is only rewritten when the rewrite validates;
        otherwise the normalized input is kept as the NSN.

        Raises
        ------
        InvalidCountryCodeError
            When *country* has no metadata.
        """
        metadata = self._store.get_metadata_for_iso_code(country)
        digits = digits_only(normalize(national))
        outcome = ParseOutcome(
            candidate=self._parse(metadata, digits),
            fallback=CanonicalPhoneNumber(metadata.iso_code, digits),
        )
        return self._select(outcome, self._validator.validate, entry="from_national")

    def from_iso_code(self, country: str, phone_number: str) -> CanonicalPhoneNumber:
        """Parse *phone_number* knowing the destination *country*.

        Leading digits equal to the country's own calling code are stripped
        speculatively: some national numbers (e.g. in KZ) legitimately start
        with them, so an invalid result falls back to the original digits.

        Raises
        ------
        InvalidCountryCodeError
            When *country* has no metadata.
        """
        metadata = self._store.get_metadata_for_iso_code(country)
        number = normalize(phone_number)
        without_intl_prefix = remove_international_prefix(
            number,
            country_code=metadata.country_code,
            metadata=metadata,
        )
        # Without a calling code after it, the remainder is the national form.
        national = remove_country_code(without_intl_prefix.digits, metadata.country_code).digits
        outcome = ParseOutcome(
            candidate=self._parse(metadata, national),
            fallback=CanonicalPhoneNumber(metadata.iso_code, digits_only(number)),
        )
        return self._select(outcome, self._validator.validate, entry="from_iso_code")

    def from_country_code(self, country_code: str, phone_number: str) -> CanonicalPhoneNumber:
        """Parse *phone_number* knowing only its calling code.

        Several countries can share *country_code*; the one whose patterns
        fit the national digits is chosen. Because that choice is itself a
        guess, the result is only checked against permitted lengths.

        Raises
        ------
        InvalidCountryCodeError
            When *country_code* is not a known calling code.
        """
        country_code = normalize_country_code(country_code)
        number = normalize(phone_number)
        candidates = self._store.get_metadatas_for_country_code(country_code)

        without_intl_prefix = remove_international_prefix(number, country_code=country_code)
        without_country_code = remove_country_code(without_intl_prefix.digits, country_code)
        if without_country_code.stripped:
            national = without_country_code.digits
        else:
            # No calling code followed, so whatever was stripped was no exit code.
            national = digits_only(number)
        return self._from_candidates(
            candidates, national, digits_only(number), entry="from_country_code"
        )

    def from_raw(
        self,
        phone_number: str,
        *,
        caller_country: str | None = None,
        destination_country: str | None = None,
    ) -> CanonicalPhoneNumber:
        """Parse *phone_number* with whatever country hints are available.

        * no hints: the number must carry its calling code, optionally
          behind ``+`` or a common exit code;
        * *caller_country*: that country's exit code is recognised, and a
          number dialed without one is taken as national to the caller;
        * *destination_country*: its calling code is used, and always wins
          over a calling code inferred from the digits. Without a caller, an
          exit code only counts when that calling code follows it, and
          without an exit code the digits are first tried as dialed.

        Raises
        ------
        InvalidCountryCodeError
            When a hint has no metadata, or no calling code can be found.
        """
        context = KnownContext.of(caller_country, destination_country)
        number = normalize(phone_number)
        as_dialed = False

        if context.knows_caller:
            caller = self._store.get_metadata_for_iso_code(caller_country)  # type: ignore[arg-type]
            without_intl_prefix = remove_international_prefix(number, metadata=caller)
            digits = without_intl_prefix.digits
            if not without_intl_prefix.stripped:
                # Dialed without an exit code: national to the destination,
                # which defaults to the caller's own country.
                destination_country = destination_country or caller.iso_code
                destination = self._store.get_metadata_for_iso_code(destination_country)
                national = remove_national_prefix(digits, destination)
                if not national.stripped:
                    logger.debug(
                        "phone.parse.national_prefix_absent",
                        country=destination.iso_code,
                        digits=len(digits),
                    )
                digits = destination.country_code + national.digits
        elif context is KnownContext.DESTINATION_ONLY:
            destination = self._store.get_metadata_for_iso_code(destination_country)  # type: ignore[arg-type]
            without_intl_prefix = remove_international_prefix(number, country_code=destination.country_code)
            digits = without_intl_prefix.digits
            as_dialed = not without_intl_prefix.stripped
        else:
            digits = remove_international_prefix(number).digits

        if destination_country is None:
            country_code = extract_country_code(digits, self._store)
        else:
            country_code = self._store.get_metadata_for_iso_code(destination_country).country_code

        candidates = self._store.get_metadatas_for_country_code(country_code)
        national = remove_country_code(digits, country_code).digits
        if as_dialed and national != digits:
            # Without + or an exit code, leading calling-code digits may be national.
            dialed = self._from_candidates(candidates, digits, digits, entry="from_raw")
            if self._validator.validate(dialed):
                return dialed
        return self._from_candidates(candidates, national, national, entry="from_raw")

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, number: CanonicalPhoneNumber, number_type: PhoneNumberType | None = None) -> bool:
        """Pattern validation; restricted to *number_type* when given."""
        return self._validator.validate(number, number_type)

    def validate_length(self, number: CanonicalPhoneNumber) -> bool:
        return self._validator.validate_length(number)

    def number_type(self, number: CanonicalPhoneNumber) -> PhoneNumberType:
        return self._validator.number_type(number)

    # ------------------------------------------------------------------
    # Pipeline core
    # ------------------------------------------------------------------

    def _from_candidates(
        self,
        candidates: Sequence[CountryMetadata],
        national: str,
        fallback: str,
        *,
        entry: str,
    ) -> CanonicalPhoneNumber:
        """Resolve the country among *candidates* and transform *national*.

        *national* has already lost its calling code. The country is itself
        a guess, so only the permitted lengths are checked.
        """
        metadata = self._store.find_best_match(national, candidates)
        outcome = ParseOutcome(
            candidate=self._parse(metadata, national),
            fallback=CanonicalPhoneNumber(metadata.iso_code, fallback),
        )
        return self._select(outcome, self._validator.validate_length, entry=entry)

    @staticmethod
    def _parse(metadata: CountryMetadata, national: str) -> CanonicalPhoneNumber:
        return CanonicalPhoneNumber(metadata.iso_code, to_national_significant_number(national, metadata))

    @staticmethod
    def _select(
        outcome: ParseOutcome,
        accept: Callable[[CanonicalPhoneNumber], bool],
        *,
        entry: str,
    ) -> CanonicalPhoneNumber:
        result = outcome.select(accept)
        if result is outcome.fallback and outcome.transformed:
            logger.debug(
                "phone.parse.reverted",
                entry=entry,
                country=result.country,
                digits=len(result.national_significant_number),
            )
        return result


__all__ = ["PhoneParser"]
