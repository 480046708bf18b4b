from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from typing import Optional

from .evaluator import MAX_SEARCH_DEPTH


@dataclass
class SearchConfig:
    depth: int = 4
    seed: Optional[int] = None  # None means seed from system entropy


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "ataxx.toml") -> "Config":
        cfg = Config()
        if os.path.exists(path):
            with open(path, "rb") as f:
                raw = tomllib.load(f)
            for k, v in raw.get("search", {}).items():
                if hasattr(cfg.search, k):
                    setattr(cfg.search, k, v)
            if "log_level" in raw:
                cfg.log_level = str(raw["log_level"])
        cfg.apply_env()
        return cfg

    def apply_env(self) -> None:
        """Environment overrides, mainly for quick debugging."""
        depth = os.environ.get("ATAXX_SEARCH_DEPTH")
        if depth:
            self.search.depth = int(depth)
        seed = os.environ.get("ATAXX_SEED")
        if seed:
            self.search.seed = int(seed)
        level = os.environ.get("ATAXX_LOG_LEVEL")
        if level:
            self.log_level = level.upper()
        if not 1 <= self.search.depth <= MAX_SEARCH_DEPTH:
            raise ValueError(
                f"Search depth must be between 1 and {MAX_SEARCH_DEPTH}, got {self.search.depth}"
            )


# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("ATAXX_CONFIG_TOML", "ataxx.toml"))
