# covresample/data/dataset.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from covresample.utils.errors import InvalidDataset


# ============================================================
# Class attribute (FROZEN)
# ============================================================
@dataclass(frozen=True)
class ClassAttribute:
    """
    Target attribute of a dataset.

    - nominal: `labels` is the fixed, ordered set of classes
    - numeric: continuous target (unsupported by the ensemble)
    """
    name: str
    labels: Tuple[Any, ...] = ()
    numeric: bool = False

    @property
    def is_numeric(self) -> bool:
        return self.numeric

    @property
    def num_classes(self) -> int:
        return 0 if self.numeric else len(self.labels)

    def index_of(self, label: Any) -> int:
        try:
            return self.labels.index(label)
        except ValueError:
            raise InvalidDataset(
                f"[{self.name}] unknown class label {label!r}, "
                f"expected one of {list(self.labels)}"
            ) from None


# ============================================================
# Instance
# ============================================================
@dataclass(eq=False)
class Instance:
    """
    One feature vector + one class value.

    class_value is the class index for nominal targets,
    the raw value for numeric targets, None when missing.
    """
    values: np.ndarray
    class_value: Optional[float]
    weight: float = 1.0
    class_attribute: Optional[ClassAttribute] = None

    def __post_init__(self):
        self.values = np.asarray(self.values, dtype=float)

    @property
    def class_is_missing(self) -> bool:
        return self.class_value is None or (
            isinstance(self.class_value, float) and np.isnan(self.class_value)
        )

    @property
    def class_index(self) -> int:
        return int(self.class_value)

    def copy(self) -> "Instance":
        """
        Deep copy of the feature vector; the class attribute is shared.
        """
        return Instance(
            values=self.values.copy(),
            class_value=self.class_value,
            weight=self.weight,
            class_attribute=self.class_attribute,
        )


# ============================================================
# Dataset
# ============================================================
@dataclass(eq=False)
class Dataset:
    """
    Ordered collection of Instances sharing one ClassAttribute.
    """
    class_attribute: ClassAttribute
    instances: List[Instance] = field(default_factory=list)
    feature_names: Optional[List[str]] = None

    def __post_init__(self):
        for inst in self.instances:
            self._bind(inst)

    # --------------------------------------------------
    # collection protocol
    # --------------------------------------------------
    def __len__(self) -> int:
        return len(self.instances)

    def __iter__(self) -> Iterator[Instance]:
        return iter(self.instances)

    def __getitem__(self, i: int) -> Instance:
        return self.instances[i]

    def append(self, instance: Instance) -> None:
        self._bind(instance)
        self.instances.append(instance)

    def extend(self, instances: Iterable[Instance]) -> None:
        for inst in instances:
            self.append(inst)

    def empty_copy(self) -> "Dataset":
        """Same header, no instances."""
        return Dataset(
            class_attribute=self.class_attribute,
            feature_names=list(self.feature_names) if self.feature_names else None,
        )

    def _bind(self, instance: Instance) -> None:
        if instance.class_attribute is None:
            instance.class_attribute = self.class_attribute
        elif instance.class_attribute != self.class_attribute:
            raise InvalidDataset(
                f"[Dataset] instance class attribute "
                f"{instance.class_attribute.name!r} != {self.class_attribute.name!r}"
            )

    # --------------------------------------------------
    # class statistics
    # --------------------------------------------------
    @property
    def num_classes(self) -> int:
        return self.class_attribute.num_classes

    def class_weights(self) -> np.ndarray:
        """
        Weighted class histogram; instances with a missing class are ignored.
        """
        sums = np.zeros(self.num_classes, dtype=float)
        for inst in self.instances:
            if not inst.class_is_missing:
                sums[inst.class_index] += inst.weight
        return sums

    def class_counts(self) -> np.ndarray:
        counts = np.zeros(self.num_classes, dtype=int)
        for inst in self.instances:
            if not inst.class_is_missing:
                counts[inst.class_index] += 1
        return counts

    # --------------------------------------------------
    # matrix views (scikit-learn)
    # --------------------------------------------------
    def features(self) -> np.ndarray:
        if not self.instances:
            width = len(self.feature_names) if self.feature_names else 0
            return np.empty((0, width), dtype=float)
        return np.vstack([inst.values for inst in self.instances])

    def labels(self) -> np.ndarray:
        return np.array([inst.class_value for inst in self.instances])

    def weights(self) -> np.ndarray:
        return np.array([inst.weight for inst in self.instances], dtype=float)

    # --------------------------------------------------
    # constructors
    # --------------------------------------------------
    @classmethod
    def from_arrays(
        cls,
        X,
        y,
        *,
        class_name: str = "class",
        labels: Optional[Sequence[Any]] = None,
        weights=None,
        feature_names: Optional[List[str]] = None,
        numeric: bool = False,
    ) -> "Dataset":
        """
        Build a Dataset from a feature matrix and a target vector.

        Nominal targets: y holds class labels; `labels` fixes the class
        order (defaults to the sorted unique values of y).
        Missing targets (None / NaN) become instances with a missing class.
        """
        X = np.asarray(X, dtype=float)
        y = np.asarray(y)
        if X.ndim != 2 or len(X) != len(y):
            raise InvalidDataset(
                f"[Dataset] X shape {X.shape} does not match y length {len(y)}"
            )
        if weights is None:
            weights = np.ones(len(y), dtype=float)

        missing = pd.isna(y)

        if numeric:
            attr = ClassAttribute(name=class_name, numeric=True)
            values = [None if m else float(v) for v, m in zip(y.tolist(), missing)]
        else:
            if labels is None:
                labels = np.unique(y[~missing]).tolist()
            attr = ClassAttribute(name=class_name, labels=tuple(labels))
            index = {label: i for i, label in enumerate(attr.labels)}
            # index_of raises InvalidDataset for labels outside `labels`
            values = [
                None if m else (index[v] if v in index else attr.index_of(v))
                for v, m in zip(y.tolist(), missing)
            ]

        instances = [
            Instance(values=row, class_value=v, weight=float(w), class_attribute=attr)
            for row, v, w in zip(X, values, weights)
        ]
        return cls(class_attribute=attr, instances=instances, feature_names=feature_names)

    @classmethod
    def from_frame(
        cls,
        df: pd.DataFrame,
        target: str,
        *,
        weight_column: Optional[str] = None,
        numeric: Optional[bool] = None,
    ) -> "Dataset":
        """
        Build a Dataset from a DataFrame.

        Float targets are treated as numeric unless `numeric` says otherwise;
        categorical targets keep their declared categories as classes.
        """
        if target not in df.columns:
            raise InvalidDataset(f"[Dataset] target column {target!r} not in frame")

        y = df[target]
        drop = [target] + ([weight_column] if weight_column else [])
        X = df.drop(columns=drop)
        weights = df[weight_column].to_numpy(dtype=float) if weight_column else None

        if numeric is None:
            numeric = pd.api.types.is_float_dtype(y)

        labels = None
        if not numeric and isinstance(y.dtype, pd.CategoricalDtype):
            labels = list(y.cat.categories)

        return cls.from_arrays(
            X.to_numpy(dtype=float),
            y.to_numpy(),
            class_name=target,
            labels=labels,
            weights=weights,
            feature_names=[str(c) for c in X.columns],
            numeric=numeric,
        )
