"""Metadata store – read-only index by ISO code and by calling code."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from types import MappingProxyType

from phonecanon.kernel.errors import InvalidCountryCodeError, InvariantViolationError
from phonecanon.metadata.matcher import find_best_match
from phonecanon.metadata.model import CountryMetadata


class MetadataStore:
    """Process-wide numbering table, built once and never mutated.

    Both indexes are frozen at construction, so concurrent readers need no
    locking. Records sharing a calling code are ordered main country first,
    then in insertion order.
    """

    def __init__(self, records: Iterable[CountryMetadata]) -> None:
        by_iso: dict[str, CountryMetadata] = {}
        by_code: dict[str, list[CountryMetadata]] = {}
        for record in records:
            if record.iso_code in by_iso:
                raise InvariantViolationError(
                    f"Duplicate metadata record for {record.iso_code!r}",
                    detail={"iso_code": record.iso_code},
                )
            by_iso[record.iso_code] = record
            by_code.setdefault(record.country_code, []).append(record)

        self._by_iso = MappingProxyType(by_iso)
        self._by_code = MappingProxyType(
            {
                code: tuple(sorted(group, key=lambda r: not r.is_main_country))
                for code, group in by_code.items()
            }
        )
        self._max_code_length = max((len(code) for code in by_code), default=0)

    @classmethod
    def from_phonenumbers(cls, regions: Iterable[str] | None = None) -> "MetadataStore":
        """Build a store from the metadata bundled with ``phonenumbers``."""
        from phonecanon.metadata.source import load_phonenumbers_metadata

        return cls(load_phonenumbers_metadata(regions))

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_metadata_for_iso_code(self, iso_code: str) -> CountryMetadata:
        record = self._by_iso.get(iso_code.upper())
        if record is None:
            raise InvalidCountryCodeError(iso_code)
        return record

    def get_metadatas_for_country_code(self, country_code: str) -> tuple[CountryMetadata, ...]:
        records = self._by_code.get(country_code)
        if not records:
            raise InvalidCountryCodeError(country_code)
        return records

    def find_best_match(
        self, national: str, candidates: Sequence[CountryMetadata]
    ) -> CountryMetadata:
        return find_best_match(national, candidates)

    def has_country_code(self, country_code: str) -> bool:
        return country_code in self._by_code

    @property
    def country_codes(self) -> frozenset[str]:
        return frozenset(self._by_code)

    @property
    def iso_codes(self) -> frozenset[str]:
        return frozenset(self._by_iso)

    @property
    def max_country_code_length(self) -> int:
        return self._max_code_length

    def __contains__(self, iso_code: object) -> bool:
        return isinstance(iso_code, str) and iso_code.upper() in self._by_iso

    def __iter__(self) -> Iterator[CountryMetadata]:
        return iter(self._by_iso.values())

    def __len__(self) -> int:
        return len(self._by_iso)

    def __repr__(self) -> str:
        return f"MetadataStore(countries={len(self._by_iso)}, calling_codes={len(self._by_code)})"


__all__ = ["MetadataStore"]
