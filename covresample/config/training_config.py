# covresample/config/training_config.py
from __future__ import annotations

from typing import Any, Dict, Literal

from pydantic import BaseModel, Field


class TrainingConfig(BaseModel):
    """
    TrainingConfig (coverage-based resampling)

    Round count:
    - use_fixed_round_count=False -> derived from coverage_percent
    - use_fixed_round_count=True  -> fixed_round_count

    coverage_percent is range-checked at training time
    (InvalidConfiguration), not here.
    """

    # rounds
    coverage_percent: float = 90.0
    use_fixed_round_count: bool = False
    fixed_round_count: int = Field(default=10, ge=1)

    # randomness
    base_seed: int = 1

    # execution
    parallelism: int = Field(default=1, ge=1)
    parallel_kind: Literal["thread", "process"] = "thread"

    # base model
    base_model: str = "decision_tree"
    model_params: Dict[str, Any] = Field(default_factory=dict)

    # sampling
    copy_sampled_instances: bool = True
