from .types import ParallelKind
from .executor import ParallelExecutor

__all__ = ["ParallelKind", "ParallelExecutor"]
