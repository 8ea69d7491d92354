"""
Base models (ensemble members).

The ensemble treats members as opaque: train / predict_distribution /
optional set_seed. scikit-learn classifiers plug in through SklearnBaseModel.
"""
from .base import BaseModel
from .sklearn_model import SklearnBaseModel
from .registry import DEFAULT_BASE_MODEL, available_models, resolve_base_model

__all__ = [
    "BaseModel",
    "SklearnBaseModel",
    "DEFAULT_BASE_MODEL",
    "available_models",
    "resolve_base_model",
]
