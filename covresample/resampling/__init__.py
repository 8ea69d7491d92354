"""
Coverage-based resampling primitives.

- partition : per-class instance lists (read-only, shared across rounds)
- coverage  : round count from a target majority-class coverage
- sampler   : one balanced, deterministically seeded subset per round
"""
from .partition import ClassPartition, partition_by_class
from .coverage import (
    validate_coverage,
    minority_majority,
    required_rounds,
    resolve_round_count,
)
from .sampler import BalancedSubsetSampler

__all__ = [
    "ClassPartition",
    "partition_by_class",
    "validate_coverage",
    "minority_majority",
    "required_rounds",
    "resolve_round_count",
    "BalancedSubsetSampler",
]
