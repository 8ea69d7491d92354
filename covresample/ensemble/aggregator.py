# covresample/ensemble/aggregator.py
from __future__ import annotations

from typing import Any, Optional

import numpy as np

from covresample.data.dataset import Dataset, Instance
from covresample.ensemble.ensemble import Ensemble
from covresample.utils.errors import DistributionShapeError, UnsupportedTargetType

# sums below this are treated as zero
SMALL = 1e-6


def _check_target(ensemble: Ensemble, instance: Instance) -> None:
    attr = instance.class_attribute or ensemble.class_attribute
    if attr.is_numeric or ensemble.class_attribute.is_numeric:
        raise UnsupportedTargetType("Numeric Class Attribute is not supported")


def predict(ensemble: Ensemble, instance: Instance) -> np.ndarray:
    """
    Sum of member distributions, normalized to 1.

    An all-zero sum is returned unchanged.
    """
    _check_target(ensemble, instance)

    sums = np.zeros(ensemble.num_classes, dtype=float)
    for i, model in enumerate(ensemble.models):
        dist = np.asarray(model.predict_distribution(instance), dtype=float)
        if dist.shape != sums.shape:
            raise DistributionShapeError(
                f"member {i} returned {dist.shape[0] if dist.ndim else 0} "
                f"probabilities, expected {sums.shape[0]}"
            )
        sums += dist

    total = sums.sum()
    if abs(total) < SMALL:
        return sums
    return sums / total


def predict_label(ensemble: Ensemble, instance: Instance) -> Optional[Any]:
    """
    Most probable class label; None when every member predicts zero.
    """
    dist = predict(ensemble, instance)
    if abs(dist.sum()) < SMALL:
        return None
    return ensemble.class_attribute.labels[int(np.argmax(dist))]


def predict_many(ensemble: Ensemble, dataset: Dataset) -> np.ndarray:
    """(n_instances, n_classes) matrix of ensemble distributions."""
    if not len(dataset):
        return np.empty((0, ensemble.num_classes), dtype=float)
    return np.vstack([predict(ensemble, inst) for inst in dataset])
