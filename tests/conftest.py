"""Shared fixtures: synthetic and phonenumbers-backed metadata stores."""

from __future__ import annotations

import pytest

from phonecanon.metadata import MetadataStore
from phonecanon.parsing import PhoneParser
from phonecanon.testing.fixtures import synthetic_store


@pytest.fixture
def store() -> MetadataStore:
    return synthetic_store()


@pytest.fixture
def parser(store: MetadataStore) -> PhoneParser:
    return PhoneParser(store)


@pytest.fixture(scope="session")
def real_store() -> MetadataStore:
    """Every geographic region bundled with ``phonenumbers`` (built once)."""
    return MetadataStore.from_phonenumbers()


@pytest.fixture(scope="session")
def real_parser(real_store: MetadataStore) -> PhoneParser:
    return PhoneParser(real_store)
