#!filepath: covresample/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .training_config import TrainingConfig

SEED_ENV = "COVRESAMPLE_SEED"


def project_root() -> str:
    """
    Repository root, derived from this file's location:
    covresample/config/app_config.py -> covresample/config -> covresample -> root
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), "../../"))


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    training: TrainingConfig = Field(default_factory=TrainingConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - defaults to the packaged covresample/config/base.yml
        - independent of the current working directory
        - COVRESAMPLE_SEED overrides training.base_seed
        """
        root = project_root()

        # 1) .env at the project root
        load_dotenv(os.path.join(root, ".env"))

        # 2) config path
        if path is None:
            path = os.path.join(os.path.dirname(__file__), "base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        # 3) YAML
        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        # 4) env overrides
        seed = os.getenv(SEED_ENV)
        if seed is not None:
            training = raw.get("training") or {}
            training["base_seed"] = int(seed)
            raw["training"] = training

        return cls(**raw)
