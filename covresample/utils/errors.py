# covresample/utils/errors.py
class CoverageResamplingError(RuntimeError):
    """
    Base class for every error raised by covresample.
    """


class UnsupportedTargetType(CoverageResamplingError):
    """
    Raised when the class attribute is numeric.
    Only nominal class targets are supported (training and prediction).
    """


class InvalidConfiguration(CoverageResamplingError, ValueError):
    """
    Raised for invalid training configuration,
    e.g. a coverage percentage outside (0, 100).
    """


class InsufficientClassSize(CoverageResamplingError):
    """
    Raised when a non-minority class holds fewer instances than the
    minority class, so a balanced subset cannot be drawn.
    """


class IncompatibleBaseModel(CoverageResamplingError):
    """
    Raised when merging ensembles built from different base model kinds.
    """


class InvalidMergeState(CoverageResamplingError):
    """
    Raised when finalize_aggregation is called without a pending merge.
    """


class InvalidDataset(CoverageResamplingError):
    """
    Raised for malformed datasets (missing or out-of-range class values).
    """


class DistributionShapeError(CoverageResamplingError):
    """
    Internal error: ensemble members returned distributions of different length.
    """


class UnsupportedOperation(CoverageResamplingError):
    """
    Raised when the base model does not provide a requested capability.
    """
