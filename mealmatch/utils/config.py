"""YAML-backed configuration."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union

import yaml


@dataclass
class AppConfig:
    """Nested configuration read from a YAML file.

    Keys are looked up with dotted paths:

        cfg = AppConfig.load("mealmatch.yaml")
        cfg.y("logging.level", "INFO")
    """
    data: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "AppConfig":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")
        return cls(data=data)

    def y(self, key: str, default: Any = None) -> Any:
        cur = self.data
        for part in key.split('.'):
            if isinstance(cur, dict) and part in cur:
                cur = cur[part]
            else:
                return default
        return cur
