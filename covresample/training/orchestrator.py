# covresample/training/orchestrator.py
from __future__ import annotations

from typing import List

from covresample import logs
from covresample.data.dataset import Dataset
from covresample.ensemble.ensemble import Ensemble
from covresample.models.base import BaseModel
from covresample.parallel.executor import ParallelExecutor
from covresample.parallel.types import ParallelKind
from covresample.training.round_result import RoundResult, RoundTask
from covresample.training.strategy import EnsembleTrainingStrategy
from covresample.utils.seeding import make_rng

_SEED_UPPER = 2 ** 31 - 1


def derive_seeds(base_seed: int, count: int) -> List[int]:
    """
    Per-model seeds from one generator seeded with base_seed,
    advanced once per model. Depends only on base_seed and count order.
    """
    rng = make_rng(base_seed)
    return [int(rng.integers(_SEED_UPPER)) for _ in range(count)]


def train_round(task: RoundTask) -> RoundResult:
    """
    Train a fresh base model on one round's subset.
    Module-level so process pools can pickle it.
    """
    subset = task.strategy.training_set(task.round_index)

    model = task.prototype.clone()
    model.set_seed(task.seed)
    model.train(subset)

    logs.debug(
        f"[Round] round={task.round_index} seed={task.seed} "
        f"subset={len(subset)} kind={model.kind}"
    )
    return RoundResult(
        round_index=task.round_index,
        seed=task.seed,
        subset_size=len(subset),
        model=model,
    )


class EnsembleOrchestrator:
    """
    EnsembleOrchestrator

    Owns:
    - per-model seed derivation
    - base model cloning
    - worker pool dispatch (rounds are independent)

    Guarantees:
    - strategy.prepare() runs before any training; its errors abort the run
    - models are kept in round order regardless of completion order
    - any failing round fails the whole run; no partial ensemble
    """

    def __init__(
            self,
            *,
            strategy: EnsembleTrainingStrategy,
            base_model: BaseModel,
            parallelism: int = 1,
            kind: ParallelKind = ParallelKind.THREAD,
    ):
        self.strategy = strategy
        self.base_model = base_model
        self.parallelism = parallelism
        self.kind = kind

    def run(self, dataset: Dataset) -> Ensemble:
        rounds = self.strategy.prepare(dataset)
        seeds = derive_seeds(self.strategy.base_seed, rounds)

        logs.info(
            f"[EnsembleOrchestrator] START rounds={rounds} "
            f"kind={self.base_model.kind} parallelism={self.parallelism}"
        )

        tasks = [
            RoundTask(
                round_index=r,
                seed=seeds[r],
                strategy=self.strategy,
                prototype=self.base_model,
            )
            for r in range(rounds)
        ]

        try:
            results = ParallelExecutor.run(
                kind=self.kind,
                items=tasks,
                handler=train_round,
                max_workers=self.parallelism,
            )
        finally:
            self.strategy.release()

        ensemble = Ensemble(
            models=[res.model for res in results],
            model_kind=self.base_model.kind,
            class_attribute=dataset.class_attribute,
            round_count=rounds,
        )

        logs.info(
            f"[EnsembleOrchestrator] DONE rounds={ensemble.round_count} "
            f"subset_sizes={[res.subset_size for res in results]}"
        )
        return ensemble
