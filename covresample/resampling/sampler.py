# covresample/resampling/sampler.py
from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from covresample.data.dataset import Dataset, Instance
from covresample.resampling.coverage import minority_majority
from covresample.resampling.partition import ClassPartition
from covresample.utils.errors import InsufficientClassSize
from covresample.utils.seeding import make_rng


class BalancedSubsetSampler:
    """
    BalancedSubsetSampler

    One balanced training subset per round:
    - every minority-class instance (always copied)
    - `minority_size` distinct instances of every other class,
      drawn without replacement by rejection sampling

    Determinism:
    - round r uses its own generator seeded with base_seed + r
    - identical partition + seed + round -> identical subset

    The sampler keeps no mutable state, so concurrent `sample` calls
    for different rounds are safe.
    """

    def __init__(
        self,
        partition: ClassPartition,
        base_seed: int,
        *,
        copy_sampled: bool = True,
        feature_names: Optional[List[str]] = None,
    ):
        self.partition = partition
        self.base_seed = base_seed
        self.copy_sampled = copy_sampled
        self.feature_names = feature_names

    # --------------------------------------------------
    # minority (always derived from the full partition)
    # --------------------------------------------------
    @property
    def minority_index(self) -> int:
        minority, _ = minority_majority(self.partition.weights())
        return minority

    @property
    def minority_size(self) -> int:
        return len(self.partition[self.minority_index])

    def _sampled_classes(self, minority: int) -> Iterator[Tuple[int, Tuple[Instance, ...]]]:
        """
        Classes drawn from each round: present (positive weight), not the minority.
        Zero-weight classes are absent, as in minority_majority.
        """
        weights = self.partition.weights()
        for i, members in enumerate(self.partition):
            if i == minority or not members or weights[i] <= 0:
                continue
            yield i, members

    def validate(self) -> None:
        """
        Every present class must hold at least `minority_size` instances,
        otherwise rejection sampling cannot terminate.
        """
        minority = self.minority_index
        size = len(self.partition[minority])
        labels = self.partition.class_attribute.labels

        for i, members in self._sampled_classes(minority):
            if len(members) < size:
                raise InsufficientClassSize(
                    f"class {labels[i]!r} has {len(members)} instances, fewer than "
                    f"the {size} instances of minority class {labels[minority]!r}"
                )

    # --------------------------------------------------
    # sampling
    # --------------------------------------------------
    def sample_indices(self, round_index: int) -> Dict[int, Tuple[int, ...]]:
        """
        Selected positions per non-minority class, ascending.
        """
        rng = make_rng(self.base_seed + round_index)
        minority = self.minority_index
        size = len(self.partition[minority])

        selected_by_class: Dict[int, Tuple[int, ...]] = {}
        for i, members in self._sampled_classes(minority):
            n = len(members)
            if n < size:
                raise InsufficientClassSize(
                    f"class index {i} has {n} instances, minority size is {size}"
                )

            selected = set()
            while len(selected) < size:
                selected.add(int(rng.integers(n)))

            selected_by_class[i] = tuple(sorted(selected))

        return selected_by_class

    def sample(self, round_index: int) -> Dataset:
        """
        Balanced subset for one round:
        minority block first, then other classes in class index order.
        """
        subset = Dataset(
            class_attribute=self.partition.class_attribute,
            feature_names=list(self.feature_names) if self.feature_names else None,
        )

        for inst in self.partition[self.minority_index]:
            subset.append(inst.copy())

        for class_index, positions in self.sample_indices(round_index).items():
            members = self.partition[class_index]
            for pos in positions:
                inst = members[pos]
                subset.append(inst.copy() if self.copy_sampled else inst)

        return subset
