#!filepath: covresample/__init__.py
"""
covresample: coverage-based resampling ensembles for imbalanced classification.

    from covresample import Dataset, TrainingConfig, train, predict

    ensemble = train(Dataset.from_frame(df, "label"), TrainingConfig(coverage_percent=95))
    dist = predict(ensemble, instance)
"""

from .utils.logger import Logging, logs, init_logging
from .utils import errors
from .config import AppConfig, LogConfig, TrainingConfig
from .data import ClassAttribute, Instance, Dataset
from .models import BaseModel, SklearnBaseModel, resolve_base_model
from .ensemble import (
    Ensemble,
    EnsembleMergeBuilder,
    aggregate,
    finalize_aggregation,
    predict,
    predict_label,
    predict_many,
)
from .training import CoverageBasedResampling, EnsembleTrainer, train

__version__ = "0.1.0"

__all__ = [
    "logs", "Logging", "init_logging",
    "errors",
    "AppConfig", "LogConfig", "TrainingConfig",
    "ClassAttribute", "Instance", "Dataset",
    "BaseModel", "SklearnBaseModel", "resolve_base_model",
    "Ensemble", "EnsembleMergeBuilder",
    "aggregate", "finalize_aggregation",
    "predict", "predict_label", "predict_many",
    "CoverageBasedResampling", "EnsembleTrainer", "train",
]
