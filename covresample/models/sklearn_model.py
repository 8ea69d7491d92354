# covresample/models/sklearn_model.py
from __future__ import annotations

from typing import Optional

import numpy as np
from sklearn.base import clone
from sklearn.utils.validation import has_fit_parameter

from covresample.data.dataset import Dataset, Instance
from covresample.models.base import BaseModel
from covresample.utils.errors import UnsupportedOperation


class SklearnBaseModel(BaseModel):
    """
    Adapter: scikit-learn classifier -> BaseModel

    - instance weights are passed as sample_weight when fit() accepts them
    - predict_proba is expanded to the full class index space;
      classes absent from a round's subset get probability 0
    - estimators without predict_proba vote with a one-hot vector
    """

    def __init__(self, estimator, kind: Optional[str] = None):
        self.estimator = estimator
        self._kind = kind or type(estimator).__name__
        self.num_classes: Optional[int] = None

    @property
    def kind(self) -> str:
        return self._kind

    def clone(self) -> "SklearnBaseModel":
        return SklearnBaseModel(clone(self.estimator), kind=self._kind)

    def set_seed(self, seed: int) -> bool:
        if "random_state" not in self.estimator.get_params(deep=False):
            return False
        self.estimator.set_params(random_state=seed)
        return True

    # --------------------------------------------------
    # train / predict
    # --------------------------------------------------
    def train(self, dataset: Dataset) -> None:
        self.num_classes = dataset.num_classes

        X = dataset.features()
        y = dataset.labels().astype(int)

        if has_fit_parameter(self.estimator, "sample_weight"):
            self.estimator.fit(X, y, sample_weight=dataset.weights())
        else:
            self.estimator.fit(X, y)

    def predict_distribution(self, instance: Instance) -> np.ndarray:
        if self.num_classes is None:
            raise RuntimeError(f"[{self.kind}] model is not trained")

        x = instance.values.reshape(1, -1)
        dist = np.zeros(self.num_classes, dtype=float)
        classes = np.asarray(self.estimator.classes_, dtype=int)

        if hasattr(self.estimator, "predict_proba"):
            dist[classes] = self.estimator.predict_proba(x)[0]
        else:
            dist[int(self.estimator.predict(x)[0])] = 1.0
        return dist

    # --------------------------------------------------
    # partition generation (tree-based estimators)
    # --------------------------------------------------
    @property
    def generates_partition(self) -> bool:
        return hasattr(self.estimator, "decision_path")

    def membership_values(self, instance: Instance) -> np.ndarray:
        if not self.generates_partition:
            return super().membership_values(instance)

        path = self.estimator.decision_path(instance.values.reshape(1, -1))
        if isinstance(path, tuple):
            # forests return (indicator, n_nodes_ptr)
            path = path[0]
        return np.asarray(path.toarray()).ravel().astype(float)

    def num_elements(self) -> int:
        if hasattr(self.estimator, "tree_"):
            return int(self.estimator.tree_.node_count)
        if hasattr(self.estimator, "estimators_") and self.generates_partition:
            return int(sum(e.tree_.node_count for e in self.estimator.estimators_))
        raise UnsupportedOperation(f"base model {self.kind!r} cannot generate a partition")

    def __str__(self) -> str:
        return f"{self.kind}: {self.estimator!r}"
