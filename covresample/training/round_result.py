# covresample/training/round_result.py
from dataclasses import dataclass
from typing import Any

from covresample.models.base import BaseModel


@dataclass(frozen=True)
class RoundTask:
    """
    One unit of parallel work: train one base model for one round.
    Must stay picklable (process pools).
    """
    round_index: int
    seed: int
    strategy: Any
    prototype: BaseModel


@dataclass(frozen=True)
class RoundResult:
    """
    Pure in-memory result of one round; no I/O semantics.
    """
    round_index: int
    seed: int
    subset_size: int
    model: BaseModel
