# covresample/models/registry.py
from typing import Any, Callable, Dict, Optional

from sklearn.ensemble import RandomForestClassifier
from sklearn.linear_model import LogisticRegression, SGDClassifier
from sklearn.naive_bayes import GaussianNB
from sklearn.tree import DecisionTreeClassifier

from covresample.models.base import BaseModel
from covresample.models.sklearn_model import SklearnBaseModel
from covresample.utils.errors import InvalidConfiguration

_MODEL_REGISTRY: Dict[str, Callable[[Dict[str, Any]], BaseModel]] = {
    "decision_tree": lambda params: SklearnBaseModel(
        DecisionTreeClassifier(**params), kind="decision_tree"
    ),
    "random_forest": lambda params: SklearnBaseModel(
        RandomForestClassifier(**params), kind="random_forest"
    ),
    # log_loss keeps predict_proba available
    "sgd": lambda params: SklearnBaseModel(
        SGDClassifier(**{"loss": "log_loss", **params}), kind="sgd"
    ),
    "logistic": lambda params: SklearnBaseModel(
        LogisticRegression(**params), kind="logistic"
    ),
    "naive_bayes": lambda params: SklearnBaseModel(
        GaussianNB(**params), kind="naive_bayes"
    ),
}

DEFAULT_BASE_MODEL = "decision_tree"


def available_models() -> list:
    return sorted(_MODEL_REGISTRY)


def resolve_base_model(
        *, name: str = DEFAULT_BASE_MODEL, params: Optional[Dict[str, Any]] = None
) -> BaseModel:
    if name not in _MODEL_REGISTRY:
        available = ", ".join(available_models())
        raise InvalidConfiguration(
            f"No base model {name!r}. Available: {available}"
        )

    return _MODEL_REGISTRY[name](dict(params or {}))
