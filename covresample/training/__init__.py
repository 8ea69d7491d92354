"""
Ensemble training

- strategy     : what each round trains on (EnsembleTrainingStrategy)
- orchestrator : seeding, cloning and worker-pool dispatch
- trainer      : coverage-based resampling strategy + public train()

Rounds are embarrassingly parallel: they share only the read-only
ClassPartition and each owns its generator and its subset.
"""
from .strategy import EnsembleTrainingStrategy
from .round_result import RoundTask, RoundResult
from .orchestrator import EnsembleOrchestrator, derive_seeds, train_round
from .trainer import CoverageBasedResampling, EnsembleTrainer, train

__all__ = [
    "EnsembleTrainingStrategy",
    "RoundTask",
    "RoundResult",
    "EnsembleOrchestrator",
    "derive_seeds",
    "train_round",
    "CoverageBasedResampling",
    "EnsembleTrainer",
    "train",
]
