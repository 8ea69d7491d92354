from .ensemble import Ensemble, TECHNICAL_INFORMATION
from .merge import EnsembleMergeBuilder, aggregate, finalize_aggregation
from .aggregator import predict, predict_label, predict_many

__all__ = [
    "Ensemble",
    "TECHNICAL_INFORMATION",
    "EnsembleMergeBuilder",
    "aggregate",
    "finalize_aggregation",
    "predict",
    "predict_label",
    "predict_many",
]
