# covresample/resampling/partition.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

import numpy as np

from covresample import logs
from covresample.data.dataset import ClassAttribute, Dataset, Instance
from covresample.utils.errors import InvalidDataset, UnsupportedTargetType


@dataclass(frozen=True)
class ClassPartition:
    """
    ClassPartition (FROZEN)

    Semantics:
    - one entry per class index 0..num_classes-1 (empty tuple if absent)
    - built once per training run, read-only afterwards
    - safe for unsynchronized concurrent reads
    """
    class_attribute: ClassAttribute
    classes: Tuple[Tuple[Instance, ...], ...]

    def __len__(self) -> int:
        return len(self.classes)

    def __getitem__(self, class_index: int) -> Tuple[Instance, ...]:
        return self.classes[class_index]

    def __iter__(self) -> Iterator[Tuple[Instance, ...]]:
        return iter(self.classes)

    def counts(self) -> np.ndarray:
        return np.array([len(c) for c in self.classes], dtype=int)

    def weights(self) -> np.ndarray:
        return np.array(
            [sum(inst.weight for inst in c) for c in self.classes],
            dtype=float,
        )


def partition_by_class(dataset: Dataset) -> ClassPartition:
    """
    Split a dataset into per-class instance lists in a single pass.

    Instances with a missing class value are skipped.
    Out-of-range class indices raise InvalidDataset.
    """
    attr = dataset.class_attribute
    if attr.is_numeric:
        raise UnsupportedTargetType(
            f"[ClassPartition] numeric class attribute {attr.name!r} is not supported"
        )

    buckets: List[List[Instance]] = [[] for _ in range(attr.num_classes)]
    skipped = 0

    for inst in dataset:
        if inst.class_is_missing:
            skipped += 1
            continue

        idx = inst.class_index
        if idx < 0 or idx >= attr.num_classes:
            raise InvalidDataset(
                f"[ClassPartition] class index {idx} out of range "
                f"[0, {attr.num_classes})"
            )
        buckets[idx].append(inst)

    if skipped:
        logs.debug(f"[ClassPartition] skipped {skipped} instances with missing class")

    return ClassPartition(
        class_attribute=attr,
        classes=tuple(tuple(b) for b in buckets),
    )
