"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Final

# Field names under which callers commonly attach raw phone input.
DEFAULT_SENSITIVE_FIELDS: Final = frozenset({
    "msisdn",
    "national",
    "national_number",
    "national_significant_number",
    "nsn",
    "phone",
    "phone_number",
    "raw",
    "text",
})


class SensitiveFieldsFilter:
    """Blank out the values of sensitive keys before an event is rendered.

    Key matching ignores case. :meth:`redact` looks at top-level keys only;
    :meth:`redact_deep` also walks nested mappings and lists of mappings.
    Inputs are never mutated.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: Iterable[str] | None = None) -> None:
        fields = DEFAULT_SENSITIVE_FIELDS if sensitive_fields is None else sensitive_fields
        self._fields = frozenset(name.lower() for name in fields)

    def is_sensitive(self, key: str) -> bool:
        return key.lower() in self._fields

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {key: self.REDACTED if self.is_sensitive(key) else value for key, value in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        return {
            key: self.REDACTED if self.is_sensitive(key) else self._walk(value)
            for key, value in data.items()
        }

    def _walk(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self.redact_deep(value)
        if isinstance(value, list):
            return [self._walk(item) for item in value]
        return value


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter"]
