# covresample/utils/seeding.py
from __future__ import annotations

import numpy as np

_SEED_SPACE = 2 ** 64


def make_rng(seed: int) -> np.random.Generator:
    """
    Deterministic generator for any integer seed.
    Negative seeds are folded into numpy's unsigned seed space.
    """
    return np.random.default_rng(int(seed) % _SEED_SPACE)
