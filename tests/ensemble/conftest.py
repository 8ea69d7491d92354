# tests/ensemble/conftest.py
from __future__ import annotations

import numpy as np
import pytest

from covresample.data.dataset import ClassAttribute, Instance
from covresample.ensemble.ensemble import Ensemble


@pytest.fixture
def class_attribute() -> ClassAttribute:
    return ClassAttribute(name="class", labels=("a", "b", "c"))


@pytest.fixture
def instance(class_attribute) -> Instance:
    return Instance(values=np.zeros(3), class_value=None, class_attribute=class_attribute)


@pytest.fixture
def make_ensemble(make_constant_model, class_attribute):
    """
    Ensemble of ConstantModels, one per distribution.
    """

    def _make(dists, kind: str = "constant", attr=None) -> Ensemble:
        return Ensemble(
            models=[make_constant_model(d, kind=kind) for d in dists],
            model_kind=kind,
            class_attribute=attr or class_attribute,
        )

    return _make
