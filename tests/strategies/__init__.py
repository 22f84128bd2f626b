"""Hypothesis strategies for localegen property-based testing.

Strategies are organized by domain:

- catalogs: key segments, prefix-free key trees, sorted key path sets,
  locale catalogs and translation subsets

Usage:
    from tests.strategies import key_trees, sorted_key_paths
    from tests.strategies.catalogs import catalog_pairs

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - key_trees, catalog_pairs
"""

from .catalogs import (
    LOCALE_POOL,
    SEGMENT_ALPHABET,
    catalog_pairs,
    key_segments,
    key_trees,
    locale_catalogs,
    sorted_key_paths,
)

__all__ = [
    "LOCALE_POOL",
    "SEGMENT_ALPHABET",
    "catalog_pairs",
    "key_segments",
    "key_trees",
    "locale_catalogs",
    "sorted_key_paths",
]
