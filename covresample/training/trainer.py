# covresample/training/trainer.py
from __future__ import annotations

from typing import Optional

from covresample import logs
from covresample.config.training_config import TrainingConfig
from covresample.data.dataset import Dataset
from covresample.ensemble.ensemble import Ensemble
from covresample.models.base import BaseModel
from covresample.models.registry import resolve_base_model
from covresample.parallel.types import ParallelKind
from covresample.resampling.coverage import resolve_round_count
from covresample.resampling.partition import ClassPartition, partition_by_class
from covresample.resampling.sampler import BalancedSubsetSampler
from covresample.training.orchestrator import EnsembleOrchestrator
from covresample.training.strategy import EnsembleTrainingStrategy
from covresample.utils.errors import UnsupportedTargetType


class CoverageBasedResampling(EnsembleTrainingStrategy):
    """
    Coverage-based resampling (Ibarguren et al., 2015)

    prepare():
      1. reject numeric class attributes
      2. partition the data by class (once)
      3. round count: fixed, or derived from the majority-class coverage
      4. check every class can supply `minority_size` instances

    training_set(r): balanced subset of round r (BalancedSubsetSampler).
    """

    def __init__(self, cfg: Optional[TrainingConfig] = None):
        self.cfg = cfg or TrainingConfig()
        self.partition: Optional[ClassPartition] = None
        self.sampler: Optional[BalancedSubsetSampler] = None
        self.round_count: Optional[int] = None

    @property
    def base_seed(self) -> int:
        return self.cfg.base_seed

    def prepare(self, dataset: Dataset) -> int:
        if dataset.class_attribute.is_numeric:
            raise UnsupportedTargetType("Numeric Class Attribute is not supported")

        partition = partition_by_class(dataset)
        rounds = resolve_round_count(partition.weights(), self.cfg)

        sampler = BalancedSubsetSampler(
            partition,
            self.cfg.base_seed,
            copy_sampled=self.cfg.copy_sampled_instances,
            feature_names=dataset.feature_names,
        )
        sampler.validate()

        self.partition = partition
        self.sampler = sampler
        self.round_count = rounds

        logs.info(
            f"[CoverageBasedResampling] counts={partition.counts().tolist()} "
            f"minority={sampler.minority_index} "
            f"minority_size={sampler.minority_size} rounds={rounds}"
        )
        return rounds

    def training_set(self, round_index: int) -> Dataset:
        if self.sampler is None:
            raise RuntimeError("[CoverageBasedResampling] prepare() must run first")
        return self.sampler.sample(round_index)

    def release(self) -> None:
        self.partition = None
        self.sampler = None


class EnsembleTrainer:
    """
    Train a coverage-based resampling ensemble.

    base_model defaults to the registry entry named by cfg.base_model.
    """

    def __init__(
            self,
            cfg: Optional[TrainingConfig] = None,
            base_model: Optional[BaseModel] = None,
    ):
        self.cfg = cfg or TrainingConfig()
        self.base_model = base_model or resolve_base_model(
            name=self.cfg.base_model, params=self.cfg.model_params
        )

    @logs.catch(msg="ensemble training failed")
    def train(self, dataset: Dataset) -> Ensemble:
        orchestrator = EnsembleOrchestrator(
            strategy=CoverageBasedResampling(self.cfg),
            base_model=self.base_model,
            parallelism=self.cfg.parallelism,
            kind=ParallelKind(self.cfg.parallel_kind),
        )
        return orchestrator.run(dataset)


def train(
        dataset: Dataset,
        cfg: Optional[TrainingConfig] = None,
        base_model: Optional[BaseModel] = None,
) -> Ensemble:
    return EnsembleTrainer(cfg, base_model=base_model).train(dataset)
