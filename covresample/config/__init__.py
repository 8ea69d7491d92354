from .log_config import LogConfig
from .training_config import TrainingConfig
from .app_config import AppConfig, project_root

__all__ = [
    "LogConfig",
    "TrainingConfig",
    "AppConfig",
    "project_root",
]
