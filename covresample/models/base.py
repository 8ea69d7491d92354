# covresample/models/base.py
from __future__ import annotations

import copy
from abc import ABC, abstractmethod

import numpy as np

from covresample.data.dataset import Dataset, Instance
from covresample.utils.errors import UnsupportedOperation


class BaseModel(ABC):
    """
    Abstract base model (one ensemble member)

    Contract:
    - train(dataset)                  fit on one balanced subset
    - predict_distribution(instance)  probability vector, len == num_classes
    - set_seed(seed)                  optional, returns False if not randomizable
    - kind                            tag compared when merging ensembles
    """

    @property
    @abstractmethod
    def kind(self) -> str:
        raise NotImplementedError

    @abstractmethod
    def train(self, dataset: Dataset) -> None:
        raise NotImplementedError

    @abstractmethod
    def predict_distribution(self, instance: Instance) -> np.ndarray:
        raise NotImplementedError

    def set_seed(self, seed: int) -> bool:
        return False

    def clone(self) -> "BaseModel":
        """
        Fresh copy of this model, used as the prototype for every round.
        """
        return copy.deepcopy(self)

    # --------------------------------------------------
    # partition generation (optional capability)
    # --------------------------------------------------
    @property
    def generates_partition(self) -> bool:
        return False

    def membership_values(self, instance: Instance) -> np.ndarray:
        raise UnsupportedOperation(f"base model {self.kind!r} cannot generate a partition")

    def num_elements(self) -> int:
        raise UnsupportedOperation(f"base model {self.kind!r} cannot generate a partition")
