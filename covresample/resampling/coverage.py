# covresample/resampling/coverage.py
"""
Round count from a target majority-class coverage.

Each round draws `minority` instances out of `majority` majority-class
instances, so a given majority instance is left out of one round with
probability ~ (1 - minority / majority) and out of all R rounds with
probability (1 - minority / majority) ** R. The smallest R reaching the
requested coverage c is

    R = ceil( log(1 - c / 100) / log(1 - minority / majority) )

minority / majority are the smallest / largest weighted class counts of the
whole training set. On multi-class data this is the pairwise (two-class)
bound applied to the extreme pair, not an exact multi-class guarantee.

The share is a ratio of weights, while each round draws the minority's
instance COUNT from every class. With non-unit instance weights the two
diverge and the coverage is not guaranteed: a minority of 2 instances of
weight 5 against 20 unit-weight majority instances gives R=4, yet each round
sees only 2/20 of the majority, about 34% coverage after 4 rounds.
"""
from __future__ import annotations

import math
from typing import Tuple

import numpy as np

from covresample import logs
from covresample.config.training_config import TrainingConfig
from covresample.utils.errors import InsufficientClassSize, InvalidConfiguration


def validate_coverage(coverage_percent: float) -> None:
    # 100 would need infinitely many rounds
    if not (0.0 < coverage_percent < 100.0):
        raise InvalidConfiguration(
            "The coverage percentage must be larger than 0 and lower than 100. "
            f"Received {coverage_percent}"
        )


def minority_majority(class_weights) -> Tuple[int, int]:
    """
    Indices of the smallest and largest weighted class.

    Classes with zero weight are absent from the data and ignored;
    ties resolve to the lowest class index.
    """
    w = np.asarray(class_weights, dtype=float)
    present = np.flatnonzero(w > 0)
    if present.size == 0:
        raise InsufficientClassSize("training data holds no weighted instances")

    minority = int(present[np.argmin(w[present])])
    majority = int(present[np.argmax(w[present])])
    return minority, majority


def required_rounds(class_weights, coverage_percent: float) -> int:
    validate_coverage(coverage_percent)

    w = np.asarray(class_weights, dtype=float)
    minority, majority = minority_majority(w)
    share = w[minority] / w[majority]

    if share >= 1.0:
        # balanced data: one round already sees every instance
        return 1

    rounds = math.ceil(
        math.log(1.0 - coverage_percent / 100.0) / math.log(1.0 - share)
    )
    return max(1, int(rounds))


def resolve_round_count(class_weights, cfg: TrainingConfig) -> int:
    """
    Fixed round count or coverage-derived round count, per cfg.
    """
    if cfg.use_fixed_round_count:
        logs.info(f"[Coverage] fixed rounds={cfg.fixed_round_count}")
        return cfg.fixed_round_count

    rounds = required_rounds(class_weights, cfg.coverage_percent)
    logs.info(
        f"[Coverage] coverage={cfg.coverage_percent}% "
        f"weights={np.asarray(class_weights).tolist()} rounds={rounds}"
    )
    return rounds
