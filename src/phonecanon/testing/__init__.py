"""Testing support – synthetic metadata and property-based generators.

Generators need the ``test`` extra (``hypothesis``)::

    from phonecanon.testing.fixtures import synthetic_store
    from phonecanon.testing.generators import formatted_numbers
"""

from phonecanon.testing.fixtures import synthetic_records, synthetic_store

__all__ = ["synthetic_records", "synthetic_store"]
