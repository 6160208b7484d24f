"""Unit tests for MetadataStore and the best-match heuristic."""

from __future__ import annotations

import pytest

from phonecanon.kernel.errors import InvalidCountryCodeError, InvariantViolationError
from phonecanon.metadata import CountryMetadata, MetadataStore, find_best_match
from phonecanon.testing.fixtures import synthetic_records


# ---------------------------------------------------------------------------
# Indexes
# ---------------------------------------------------------------------------


class TestMetadataStore:
    def test_lookup_by_iso_code(self, store: MetadataStore) -> None:
        assert store.get_metadata_for_iso_code("XA").country_code == "33"

    def test_lookup_is_case_insensitive(self, store: MetadataStore) -> None:
        assert store.get_metadata_for_iso_code("xa").iso_code == "XA"

    def test_unknown_iso_code_raises(self, store: MetadataStore) -> None:
        with pytest.raises(InvalidCountryCodeError) as exc_info:
            store.get_metadata_for_iso_code("ZZ")
        assert exc_info.value.detail["country"] == "ZZ"

    def test_shared_calling_code_lists_main_country_first(self, store: MetadataStore) -> None:
        assert [r.iso_code for r in store.get_metadatas_for_country_code("7")] == ["XR", "XK"]
        assert [r.iso_code for r in store.get_metadatas_for_country_code("1")] == ["XU", "XC"]

    def test_unknown_calling_code_raises(self, store: MetadataStore) -> None:
        with pytest.raises(InvalidCountryCodeError):
            store.get_metadatas_for_country_code("999")

    def test_duplicate_iso_code_rejected(self) -> None:
        records = synthetic_records()
        with pytest.raises(InvariantViolationError):
            MetadataStore([*records, records[0]])

    def test_country_codes(self, store: MetadataStore) -> None:
        assert store.country_codes == frozenset({"1", "7", "33", "49", "54", "298"})
        assert store.has_country_code("298")
        assert not store.has_country_code("29")

    def test_max_country_code_length(self, store: MetadataStore) -> None:
        assert store.max_country_code_length == 3
        assert MetadataStore([]).max_country_code_length == 0

    def test_container_protocol(self, store: MetadataStore) -> None:
        assert len(store) == 8
        assert "xk" in store
        assert "ZZ" not in store
        assert 7 not in store
        assert {record.iso_code for record in store} == store.iso_codes


# ---------------------------------------------------------------------------
# find_best_match
# ---------------------------------------------------------------------------


class TestFindBestMatch:
    def _candidates(self, store: MetadataStore, code: str) -> tuple[CountryMetadata, ...]:
        return store.get_metadatas_for_country_code(code)

    def test_single_candidate_returned_as_is(self, store: MetadataStore) -> None:
        candidates = self._candidates(store, "33")
        assert find_best_match("anything", candidates) is candidates[0]

    def test_pattern_match_beats_main_country(self, store: MetadataStore) -> None:
        assert find_best_match("3362212345", self._candidates(store, "7")).iso_code == "XK"

    def test_pattern_match_on_main_country(self, store: MetadataStore) -> None:
        assert find_best_match("9161234567", self._candidates(store, "7")).iso_code == "XR"

    def test_area_code_disambiguation(self, store: MetadataStore) -> None:
        candidates = self._candidates(store, "1")
        assert find_best_match("4165550123", candidates).iso_code == "XC"
        assert find_best_match("2125550100", candidates).iso_code == "XU"

    def test_leading_digits_when_no_pattern_matches(self, store: MetadataStore) -> None:
        assert find_best_match("710009998", self._candidates(store, "7")).iso_code == "XK"

    def test_main_country_as_last_resort(self, store: MetadataStore) -> None:
        assert find_best_match("5555", self._candidates(store, "7")).iso_code == "XR"
        assert find_best_match("3055550100", self._candidates(store, "1")).iso_code == "XU"

    def test_first_candidate_without_main_country(self, store: MetadataStore) -> None:
        candidates = (store.get_metadata_for_iso_code("XC"), store.get_metadata_for_iso_code("XK"))
        assert find_best_match("000", candidates).iso_code == "XC"

    def test_store_delegates(self, store: MetadataStore) -> None:
        candidates = self._candidates(store, "7")
        assert store.find_best_match("3362212345", candidates).iso_code == "XK"

    def test_no_candidates_raises(self) -> None:
        with pytest.raises(ValueError):
            find_best_match("1", ())
