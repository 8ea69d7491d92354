from .logger import Logging, logs, init_logging
from .errors import (
    CoverageResamplingError,
    UnsupportedTargetType,
    InvalidConfiguration,
    InsufficientClassSize,
    IncompatibleBaseModel,
    InvalidMergeState,
    InvalidDataset,
    DistributionShapeError,
    UnsupportedOperation,
)

__all__ = [
    "Logging", "logs", "init_logging",
    "CoverageResamplingError",
    "UnsupportedTargetType",
    "InvalidConfiguration",
    "InsufficientClassSize",
    "IncompatibleBaseModel",
    "InvalidMergeState",
    "InvalidDataset",
    "DistributionShapeError",
    "UnsupportedOperation",
]
