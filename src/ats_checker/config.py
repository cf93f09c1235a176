"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml

CONFIG_ENV_VAR = "ATS_CHECKER_CONFIG"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


@dataclass(frozen=True)
class InputConfig:
    max_file_size_mb: int = 10

    def __post_init__(self) -> None:
        _check_range("max_file_size_mb", self.max_file_size_mb, 1, 100)

    @property
    def max_file_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


@dataclass(frozen=True)
class SuggestionConfig:
    max_highlighted_keywords: int = 3
    percent_per_keyword: int = 5

    def __post_init__(self) -> None:
        _check_range("max_highlighted_keywords", self.max_highlighted_keywords, 1, 10)
        _check_range("percent_per_keyword", self.percent_per_keyword, 1, 20)


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.level.upper() not in _LOG_LEVELS:
            raise ValueError(f"level must be one of {', '.join(_LOG_LEVELS)}, got {self.level!r}")

    @property
    def numeric_level(self) -> int:
        return getattr(logging, self.level.upper())


@dataclass(frozen=True)
class AppConfig:
    input: InputConfig = field(default_factory=InputConfig)
    suggestions: SuggestionConfig = field(default_factory=SuggestionConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [Path.cwd() / "config.yaml"]
        env_path = os.environ.get(CONFIG_ENV_VAR)
        if env_path:
            candidates.insert(0, Path(env_path))
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    return AppConfig(
        input=InputConfig(**(raw.get("input") or {})),
        suggestions=SuggestionConfig(**(raw.get("suggestions") or {})),
        logging=LoggingConfig(**(raw.get("logging") or {})),
    )
