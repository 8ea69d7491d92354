# tests/resampling/test_sampler.py
from __future__ import annotations

from collections import Counter

import pytest

from covresample.resampling.partition import partition_by_class
from covresample.resampling.sampler import BalancedSubsetSampler
from covresample.utils.errors import InsufficientClassSize


def _sampler(ds, seed: int = 1, **kwargs) -> BalancedSubsetSampler:
    return BalancedSubsetSampler(partition_by_class(ds), seed, **kwargs)


def _keys(subset):
    return [(int(inst.values[0]), int(inst.values[1])) for inst in subset]


def test_minority_is_smallest_weighted_class(imbalanced_dataset):
    sampler = _sampler(imbalanced_dataset)

    assert sampler.minority_index == 1
    assert sampler.minority_size == 4


def test_minority_follows_weights_not_counts(make_dataset):
    # class 0 has more rows but less weight
    ds = make_dataset([4, 3], weights=[0.1] * 4 + [1.0] * 3)

    assert _sampler(ds).minority_index == 0


@pytest.mark.parametrize("round_index", [0, 1, 5])
def test_subset_composition(imbalanced_dataset, round_index):
    subset = _sampler(imbalanced_dataset).sample(round_index)
    keys = _keys(subset)

    per_class = Counter(c for c, _ in keys)
    assert per_class == {0: 4, 1: 4, 2: 4}

    # all minority instances
    assert sorted(p for c, p in keys if c == 1) == [0, 1, 2, 3]

    # no duplicates within a class
    assert len(set(keys)) == len(keys)


def test_subset_order_minority_block_first(imbalanced_dataset):
    keys = _keys(_sampler(imbalanced_dataset).sample(0))

    classes = [c for c, _ in keys]
    assert classes == [1] * 4 + [0] * 4 + [2] * 4


def test_same_round_same_seed_is_deterministic(imbalanced_dataset):
    a = _sampler(imbalanced_dataset, seed=42)
    b = _sampler(imbalanced_dataset, seed=42)

    assert a.sample_indices(3) == b.sample_indices(3)
    assert _keys(a.sample(3)) == _keys(b.sample(3))


def test_round_seed_is_base_seed_plus_round(imbalanced_dataset):
    # base 10 round 2 and base 11 round 1 share seed 12
    a = _sampler(imbalanced_dataset, seed=10)
    b = _sampler(imbalanced_dataset, seed=11)

    assert a.sample_indices(2) == b.sample_indices(1)


def test_different_rounds_differ(make_dataset):
    sampler = _sampler(make_dataset([3, 60]))

    draws = {sampler.sample_indices(r)[1] for r in range(5)}
    assert len(draws) > 1


def test_negative_seed_supported(imbalanced_dataset):
    sampler = _sampler(imbalanced_dataset, seed=-7)

    assert sampler.sample_indices(0) == sampler.sample_indices(0)


def test_class_equal_to_minority_size_takes_everything(make_dataset):
    subset = _sampler(make_dataset([5, 5, 9])).sample(0)

    assert sorted(p for c, p in _keys(subset) if c == 1) == [0, 1, 2, 3, 4]


def test_absent_classes_are_ignored(make_dataset):
    subset = _sampler(make_dataset([0, 3, 8])).sample(0)

    assert Counter(c for c, _ in _keys(subset)) == {1: 3, 2: 3}


def test_minority_instances_are_copied(imbalanced_dataset):
    sampler = _sampler(imbalanced_dataset)
    subset = sampler.sample(0)

    originals = {id(inst) for inst in sampler.partition[1]}
    minority_rows = [inst for inst in subset if inst.class_index == 1]

    assert all(id(inst) not in originals for inst in minority_rows)

    minority_rows[0].values[2] = 999.0
    assert all(inst.values[2] != 999.0 for inst in sampler.partition[1])


def test_sampled_instances_copied_by_default(imbalanced_dataset):
    sampler = _sampler(imbalanced_dataset)
    subset = sampler.sample(0)

    originals = {id(inst) for inst in sampler.partition[2]}
    assert all(id(inst) not in originals for inst in subset if inst.class_index == 2)


def test_sampled_instances_referenced_when_copy_disabled(imbalanced_dataset):
    sampler = _sampler(imbalanced_dataset, copy_sampled=False)
    subset = sampler.sample(0)

    originals = {id(inst) for inst in sampler.partition[2]}
    assert all(id(inst) in originals for inst in subset if inst.class_index == 2)


def test_validate_rejects_small_class(make_dataset):
    # class 0 is the minority by weight but class 1 has fewer rows
    ds = make_dataset([5, 3], weights=[0.1] * 5 + [1.0] * 3)

    with pytest.raises(InsufficientClassSize):
        _sampler(ds).validate()


def test_validate_accepts_balanced_sampling(imbalanced_dataset):
    _sampler(imbalanced_dataset).validate()


def test_zero_weight_class_is_not_sampled(make_dataset):
    # c0 holds rows but no weight: absent, like an empty class
    ds = make_dataset([3, 5, 10], weights=[0.0] * 3 + [1.0] * 15)
    sampler = _sampler(ds)

    sampler.validate()

    assert sampler.minority_index == 1
    assert set(sampler.sample_indices(0)) == {2}
    assert Counter(c for c, _ in _keys(sampler.sample(0))) == {1: 5, 2: 5}
