"""Testing fixtures – synthetic metadata for pipeline tests."""
from phonecanon.testing.fixtures.metadata import synthetic_records, synthetic_store

__all__ = ["synthetic_records", "synthetic_store"]
