# tests/conftest.py
from __future__ import annotations

from typing import Sequence

import numpy as np
import pytest
from loguru import logger

from covresample.data.dataset import Dataset, Instance
from covresample.models.base import BaseModel


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


# =============================================================================
# Dummy base models (module level: deep-copy / pickle safe)
# =============================================================================

class ConstantModel(BaseModel):
    """
    Always predicts the same distribution.
    """

    def __init__(self, dist: Sequence[float], kind: str = "constant"):
        self.dist = np.asarray(dist, dtype=float)
        self._kind = kind
        self.trained = False

    @property
    def kind(self) -> str:
        return self._kind

    def train(self, dataset: Dataset) -> None:
        self.trained = True

    def predict_distribution(self, instance: Instance) -> np.ndarray:
        return self.dist.copy()


class RecordingModel(BaseModel):
    """
    Remembers what it was trained on and which seed it received.

    trained_on: tuple of (class_index, position) read from the feature
    vector built by `make_dataset`.
    """

    def __init__(self, num_classes: int = 3):
        self.num_classes = num_classes
        self.seed = None
        self.trained_on = None
        self.subset = None

    @property
    def kind(self) -> str:
        return "recording"

    def set_seed(self, seed: int) -> bool:
        self.seed = seed
        return True

    def train(self, dataset: Dataset) -> None:
        self.subset = dataset
        self.trained_on = tuple(
            (int(inst.values[0]), int(inst.values[1])) for inst in dataset
        )

    def predict_distribution(self, instance: Instance) -> np.ndarray:
        dist = np.zeros(self.num_classes)
        dist[0] = 1.0
        return dist


class FailingModel(RecordingModel):
    def train(self, dataset: Dataset) -> None:
        raise RuntimeError("boom")


# =============================================================================
# Datasets
# =============================================================================

def build_dataset(counts: Sequence[int], weights=None) -> Dataset:
    """
    counts[i] instances of class "c{i}".
    Features: [class_index, position within class, noise].
    """
    rng = np.random.default_rng(0)
    X, y = [], []
    for class_index, count in enumerate(counts):
        for pos in range(count):
            X.append([class_index, pos, rng.normal()])
            y.append(f"c{class_index}")

    return Dataset.from_arrays(
        np.asarray(X, dtype=float).reshape(-1, 3),
        np.asarray(y),
        labels=[f"c{i}" for i in range(len(counts))],
        weights=weights,
        feature_names=["class_index", "position", "noise"],
    )


@pytest.fixture
def make_dataset():
    return build_dataset


@pytest.fixture
def imbalanced_dataset() -> Dataset:
    # minority 4, majority 16 -> share 0.25
    return build_dataset([10, 4, 16])


@pytest.fixture
def recording_model() -> RecordingModel:
    return RecordingModel(num_classes=3)


@pytest.fixture
def make_constant_model():
    def _make(dist, kind: str = "constant") -> ConstantModel:
        return ConstantModel(dist, kind=kind)

    return _make


@pytest.fixture
def failing_model() -> FailingModel:
    return FailingModel(num_classes=3)
