# reversi/config.py
from dataclasses import dataclass, field
from typing import List
import os
import tomllib

# Top-left quadrant of the positional weight grid, mirrored across both axes.
POSITION_WEIGHTS = [
    [99, -8, 8, 6],
    [-8, -24, -4, -3],
    [8, -4, 7, 4],
    [6, -3, 4, 0],
]

@dataclass
class SearchConfig:
    depth: int = 7
    end_game_depth: int = 11  # search to the end once empty cells <= this
    print_info: bool = False

@dataclass
class EvalConfig:
    weights: List[List[int]] = field(default_factory=lambda: [row[:] for row in POSITION_WEIGHTS])

@dataclass
class UIConfig:
    engine_name: str = "Robo"

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    ui: UIConfig = field(default_factory=UIConfig)

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "ui"):
            if section not in raw:
                continue
            target = getattr(cfg, section)
            for k, v in raw[section].items():
                if hasattr(target, k):
                    setattr(target, k, v)
        return cfg

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("ENGINE_CONFIG_TOML", "config.toml"))
# allow env override of depth for quick debugging
override_depth = os.environ.get("ENGINE_SEARCH_DEPTH")
if override_depth:
    CONFIG.search.depth = int(override_depth)
