"""
Configuration for codehealth.

Defaults live in ``DEFAULT_CONFIG``; a YAML or JSON file can override any
subset of keys. Command-line flags override both.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml


CONFIG_FILE_NAMES = [
    ".codehealth.yaml",
    ".codehealth.yml",
    ".codehealth.json",
]

REPORT_FORMATS = ("text", "json")

DEFAULT_CONFIG: Dict[str, Any] = {
    "version": 1,
    "analysis": {
        "extensions": [".rs"],
        "exclude_dirs": [],
        "encoding": "utf-8",
        "comment_marker": "//",
        "top_functions": 20,
    },
    "reporting": {
        "format": "text",
        "leaderboard_size": 5,
        "max_complexity": None,
    },
}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@dataclass(frozen=True)
class Config:
    data: Dict[str, Any]

    @classmethod
    def load(cls, path: str | None) -> "Config":
        if not path:
            return cls(DEFAULT_CONFIG)
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")
        raw = config_path.read_text(encoding="utf-8")
        if config_path.suffix.lower() in {".json"}:
            overrides = json.loads(raw)
        else:
            overrides = yaml.safe_load(raw) or {}
        if not isinstance(overrides, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        config = cls(_deep_merge(DEFAULT_CONFIG, overrides))
        config.validate()
        return config

    def with_overrides(self, overrides: Dict[str, Any]) -> "Config":
        config = Config(_deep_merge(self.data, overrides))
        config.validate()
        return config

    def validate(self) -> None:
        fmt = self.report_format()
        if fmt not in REPORT_FORMATS:
            raise ValueError(
                f"Unknown report format: {fmt!r} (expected one of {', '.join(REPORT_FORMATS)})"
            )
        for name, value in (
            ("analysis.top_functions", self.top_functions()),
            ("reporting.leaderboard_size", self.leaderboard_size()),
        ):
            if not isinstance(value, int) or value < 0:
                raise ValueError(f"{name} must be a non-negative integer, got {value!r}")
        threshold = self.max_complexity()
        if threshold is not None and (not isinstance(threshold, int) or threshold < 0):
            raise ValueError(
                f"reporting.max_complexity must be a non-negative integer, got {threshold!r}"
            )

    def _analysis(self) -> Dict[str, Any]:
        return self.data.get("analysis", {})

    def _reporting(self) -> Dict[str, Any]:
        return self.data.get("reporting", {})

    def extensions(self) -> set[str]:
        return {ext.lower() for ext in self._analysis().get("extensions", [".rs"])}

    def exclude_dirs(self) -> set[str]:
        return set(self._analysis().get("exclude_dirs", []))

    def encoding(self) -> str:
        return self._analysis().get("encoding", "utf-8")

    def comment_marker(self) -> str:
        return self._analysis().get("comment_marker", "//")

    def top_functions(self) -> int:
        return self._analysis().get("top_functions", 20)

    def report_format(self) -> str:
        return self._reporting().get("format", "text")

    def leaderboard_size(self) -> int:
        return self._reporting().get("leaderboard_size", 5)

    def max_complexity(self) -> Optional[int]:
        return self._reporting().get("max_complexity")


def find_config(start_path: str = ".") -> Optional[str]:
    """
    Find a configuration file by searching up the directory tree.

    Returns the path to the first config file found, or None.
    """
    current = Path(start_path).resolve()
    if current.is_file():
        current = current.parent

    candidates: List[Path] = [current, *current.parents]
    for directory in candidates:
        for name in CONFIG_FILE_NAMES:
            config_path = directory / name
            if config_path.is_file():
                return str(config_path)
    return None
