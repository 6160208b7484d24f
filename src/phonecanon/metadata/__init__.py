"""Metadata – per-country numbering rules and the read-only store."""

from phonecanon.metadata.matcher import find_best_match
from phonecanon.metadata.model import CountryMetadata, NumberPattern, TransformRule
from phonecanon.metadata.store import MetadataStore

__all__ = [
    "CountryMetadata",
    "MetadataStore",
    "NumberPattern",
    "TransformRule",
    "find_best_match",
]
