# covresample/ensemble/merge.py
"""
Merging independently trained ensembles (e.g. one per data shard).

Two ways in:

- EnsembleMergeBuilder: accumulate ensembles, build() a new Ensemble
- aggregate() / finalize_aggregation(): two-phase merge into a receiver;
  the receiver's pending builder holds the uncommitted models
"""
from __future__ import annotations

from typing import List, Sequence

from covresample import logs
from covresample.data.dataset import ClassAttribute
from covresample.ensemble.ensemble import Ensemble
from covresample.models.base import BaseModel
from covresample.utils.errors import IncompatibleBaseModel, InvalidMergeState


class EnsembleMergeBuilder:
    def __init__(
        self,
        *,
        model_kind: str,
        class_attribute: ClassAttribute,
        models: Sequence[BaseModel] = (),
    ):
        self.model_kind = model_kind
        self.class_attribute = class_attribute
        self._models: List[BaseModel] = list(models)

    @classmethod
    def from_ensemble(cls, ensemble: Ensemble) -> "EnsembleMergeBuilder":
        return cls(
            model_kind=ensemble.model_kind,
            class_attribute=ensemble.class_attribute,
            models=ensemble.models,
        )

    def __len__(self) -> int:
        return len(self._models)

    def check_compatible(self, other: Ensemble) -> None:
        if other.model_kind != self.model_kind:
            raise IncompatibleBaseModel(
                "Can't aggregate because base classifiers differ: "
                f"{self.model_kind!r} vs {other.model_kind!r}"
            )
        if other.class_attribute != self.class_attribute:
            raise IncompatibleBaseModel(
                "Can't aggregate because class attributes differ: "
                f"{list(self.class_attribute.labels)} vs {list(other.class_attribute.labels)}"
            )

    def add(self, other: Ensemble) -> "EnsembleMergeBuilder":
        self.check_compatible(other)
        self._models.extend(other.models)
        return self

    def build(self) -> Ensemble:
        return Ensemble(
            models=self._models,
            model_kind=self.model_kind,
            class_attribute=self.class_attribute,
        )


def aggregate(receiver: Ensemble, other: Ensemble) -> Ensemble:
    """
    Append `other`'s models to the receiver's pending merge.

    The pending merge starts from the receiver's committed models.
    Incompatible ensembles raise IncompatibleBaseModel and leave the
    receiver untouched. Returns the receiver for chaining.
    """
    with receiver._lock:
        builder = receiver.pending_merge
        if builder is None:
            builder = EnsembleMergeBuilder.from_ensemble(receiver)

        builder.add(other)
        receiver.pending_merge = builder

    logs.info(
        f"[EnsembleMerge] aggregate kind={receiver.model_kind} "
        f"added={len(other)} pending={len(builder)}"
    )
    return receiver


def finalize_aggregation(receiver: Ensemble) -> None:
    """
    Commit the pending merge as the receiver's models and clear it.
    """
    with receiver._lock:
        builder = receiver.pending_merge
        if builder is None:
            raise InvalidMergeState(
                "finalize_aggregation called without a prior aggregate"
            )

        receiver._replace_models(builder.build().models)
        receiver.pending_merge = None

    logs.info(
        f"[EnsembleMerge] finalized kind={receiver.model_kind} "
        f"rounds={receiver.round_count}"
    )
