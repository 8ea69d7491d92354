# covresample/training/strategy.py
from __future__ import annotations

from abc import ABC, abstractmethod

from covresample.data.dataset import Dataset


class EnsembleTrainingStrategy(ABC):
    """
    Abstract EnsembleTrainingStrategy

    A strategy decides WHAT each round trains on;
    the orchestrator decides HOW rounds are seeded and dispatched.
    """

    base_seed: int

    @abstractmethod
    def prepare(self, dataset: Dataset) -> int:
        """
        Validate the dataset and build shared, read-only state.
        Returns the round count. Must raise before any round is trained.
        """
        raise NotImplementedError

    @abstractmethod
    def training_set(self, round_index: int) -> Dataset:
        """
        Training subset for one round. Must be safe to call concurrently.
        """
        raise NotImplementedError

    def release(self) -> None:
        """Drop per-run state once every round is trained."""
