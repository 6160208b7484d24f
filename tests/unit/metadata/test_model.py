"""Unit tests for metadata records."""

from __future__ import annotations

import dataclasses

import pytest

from phonecanon.kernel.types import PhoneNumberType
from phonecanon.metadata import CountryMetadata, NumberPattern, TransformRule


# ---------------------------------------------------------------------------
# NumberPattern
# ---------------------------------------------------------------------------


class TestNumberPattern:
    def test_matches_whole_string_only(self) -> None:
        pattern = NumberPattern(r"6\d{8}", (9,))
        assert pattern.matches("612345678")
        assert not pattern.matches("6123456789")
        assert not pattern.matches("0612345678")

    def test_lengths_stored_as_tuple(self) -> None:
        assert NumberPattern(r"\d+", [9, 10]).possible_lengths == (9, 10)  # type: ignore[arg-type]

    def test_equality_ignores_compiled_regex(self) -> None:
        assert NumberPattern(r"\d", (1,)) == NumberPattern(r"\d", (1,))


# ---------------------------------------------------------------------------
# TransformRule
# ---------------------------------------------------------------------------


class TestTransformRule:
    def test_no_match_returns_none(self) -> None:
        assert TransformRule("8").apply("7710009998") is None

    def test_plain_rule_drops_matched_prefix(self) -> None:
        assert TransformRule("0").apply("0686579014") == "686579014"

    def test_dollar_references_are_converted(self) -> None:
        assert TransformRule(r"0?(?:(11)15)?", "9$1").replacement == r"9\1"

    def test_replacement_uses_capture_groups(self) -> None:
        rule = TransformRule(r"0?(?:(11)15)?", r"9\1")
        assert rule.apply("0111512345678") == "91112345678"

    def test_unset_last_group_drops_prefix_only(self) -> None:
        rule = TransformRule(r"0?(?:(11)15)?", r"9\1")
        assert rule.apply("01112345678") == "1112345678"

    def test_multiple_groups_substituted_positionally(self) -> None:
        rule = TransformRule(r"0(\d)(\d)", r"\2\1")
        assert rule.apply("01299") == "2199"


# ---------------------------------------------------------------------------
# CountryMetadata
# ---------------------------------------------------------------------------


def _record(**overrides: object) -> CountryMetadata:
    fields: dict[str, object] = {
        "iso_code": "xa",
        "country_code": "33",
        "international_prefix": "00",
        "national_prefix": "0",
        "general": NumberPattern(r"[1-9]\d{8}", (9,)),
        "patterns": {
            PhoneNumberType.MOBILE: NumberPattern(r"6\d{8}", (9,)),
            PhoneNumberType.FIXED_LINE: NumberPattern(r"[1-5]\d{7,8}"),
        },
        "leading_digits": "6",
    }
    fields.update(overrides)
    return CountryMetadata(**fields)  # type: ignore[arg-type]


class TestCountryMetadata:
    def test_iso_code_uppercased(self) -> None:
        assert _record().iso_code == "XA"

    def test_is_frozen(self) -> None:
        record = _record()
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.country_code = "44"  # type: ignore[misc]

    def test_patterns_are_read_only(self) -> None:
        record = _record()
        with pytest.raises(TypeError):
            record.patterns[PhoneNumberType.PAGER] = NumberPattern(r"\d")  # type: ignore[index]

    def test_possible_lengths_from_general(self) -> None:
        assert _record().possible_lengths == (9,)

    def test_possible_lengths_union_without_general(self) -> None:
        record = _record(
            general=None,
            patterns={
                PhoneNumberType.MOBILE: NumberPattern(r"\d+", (9,)),
                PhoneNumberType.TOLL_FREE: NumberPattern(r"\d+", (6, 9)),
            },
        )
        assert record.possible_lengths == (6, 9)

    def test_matches_type_checks_type_lengths(self) -> None:
        record = _record()
        assert record.matches_type("612345678", PhoneNumberType.MOBILE)
        assert not record.matches_type("61234567", PhoneNumberType.MOBILE)

    def test_matches_type_inherits_general_lengths(self) -> None:
        record = _record()
        # the pattern accepts 8 digits but the country only permits 9
        assert not record.matches_type("12345678", PhoneNumberType.FIXED_LINE)
        assert record.matches_type("123456789", PhoneNumberType.FIXED_LINE)

    def test_missing_type_never_matches(self) -> None:
        assert not _record().matches_type("612345678", PhoneNumberType.PAGER)

    def test_matches_any_type(self) -> None:
        record = _record()
        assert record.matches_any_type("612345678")
        assert not record.matches_any_type("912345678")

    def test_international_prefix_match(self) -> None:
        record = _record()
        match = record.match_international_prefix("0033612345678")
        assert match is not None and match.group() == "00"
        assert record.match_international_prefix("33612345678") is None

    def test_no_international_prefix(self) -> None:
        assert _record(international_prefix=None).match_international_prefix("00") is None

    def test_leading_digits(self) -> None:
        record = _record()
        assert record.starts_with_leading_digits("612")
        assert not record.starts_with_leading_digits("712")
        assert not _record(leading_digits=None).starts_with_leading_digits("612")
