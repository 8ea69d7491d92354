# covresample/ensemble/ensemble.py
from __future__ import annotations

import threading
from typing import Optional, Sequence, Tuple, TYPE_CHECKING

import numpy as np

from covresample.data.dataset import ClassAttribute, Instance
from covresample.models.base import BaseModel
from covresample.utils.errors import UnsupportedOperation

if TYPE_CHECKING:
    from covresample.ensemble.merge import EnsembleMergeBuilder


TECHNICAL_INFORMATION = {
    "type": "article",
    "author": "Ibarguren Igor",
    "year": "2015",
    "title": "Coverage-based resampling: Building robust consolidated decision trees",
    "journal": "Knowledge-Based Systems",
    "volume": "79",
    "pages": "51-67",
}


class Ensemble:
    """
    Ensemble

    Semantics:
    - ordered base models (round order) + the round count that produced them
    - model_kind tags the base model type; merges require equal tags
    - `pending_merge` is only set between aggregate() and
      finalize_aggregation(); models / round_count stay the committed state
    """

    def __init__(
        self,
        *,
        models: Sequence[BaseModel],
        model_kind: str,
        class_attribute: ClassAttribute,
        round_count: Optional[int] = None,
    ):
        self._models: Tuple[BaseModel, ...] = tuple(models)
        self.model_kind = model_kind
        self.class_attribute = class_attribute
        self.round_count = len(self._models) if round_count is None else round_count
        self.pending_merge: Optional["EnsembleMergeBuilder"] = None
        self._lock = threading.Lock()

    @property
    def models(self) -> Tuple[BaseModel, ...]:
        return self._models

    @property
    def num_classes(self) -> int:
        return self.class_attribute.num_classes

    @property
    def has_pending_merge(self) -> bool:
        return self.pending_merge is not None

    def __len__(self) -> int:
        return len(self._models)

    def _replace_models(self, models: Sequence[BaseModel]) -> None:
        self._models = tuple(models)
        self.round_count = len(self._models)

    # --------------------------------------------------
    # pickling (locks are process-local)
    # --------------------------------------------------
    def __getstate__(self):
        state = self.__dict__.copy()
        del state["_lock"]
        return state

    def __setstate__(self, state):
        self.__dict__.update(state)
        self._lock = threading.Lock()

    # --------------------------------------------------
    # partition generation
    # --------------------------------------------------
    def _require_partition_generators(self) -> None:
        if not self._models or not all(m.generates_partition for m in self._models):
            raise UnsupportedOperation(
                f"Classifier: {self.model_kind} cannot generate a partition"
            )

    def membership_values(self, instance: Instance) -> np.ndarray:
        """Concatenated membership values of every member."""
        self._require_partition_generators()
        return np.concatenate([m.membership_values(instance) for m in self._models])

    def num_elements(self) -> int:
        self._require_partition_generators()
        return sum(m.num_elements() for m in self._models)

    # --------------------------------------------------
    # description
    # --------------------------------------------------
    def describe(self) -> str:
        if not self._models:
            return "No model built yet."

        lines = ["All the base classifiers: ", ""]
        for model in self._models:
            lines.append(str(model))
            lines.append("")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"Ensemble(model_kind={self.model_kind!r}, rounds={self.round_count}, "
            f"classes={list(self.class_attribute.labels)})"
        )
