"""Configuration management for bloomsieve."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, Any
import yaml

from bloomsieve.constants import (
    DEFAULT_FPR,
    DEFAULT_KMER_SIZE,
    DEFAULT_P_MAX,
    DEFAULT_PATTERN_SIZE,
    DEFAULT_WINDOW_SIZE,
)
from bloomsieve.correction.parameters import SearchParameters, Shape
from bloomsieve.exceptions import ConfigurationError, ContractViolationError


@dataclass
class RuntimeConfig:
    """Runtime configuration."""

    log_level: str = "WARNING"
    log_file: Optional[Path] = None


@dataclass
class SearchConfig:
    """Search parameters that determine the threshold correction."""

    pattern_size: int = DEFAULT_PATTERN_SIZE
    window_size: int = DEFAULT_WINDOW_SIZE
    kmer_size: int = DEFAULT_KMER_SIZE
    # 01-pattern; takes precedence over kmer_size when set
    shape: Optional[str] = None
    fpr: float = DEFAULT_FPR
    p_max: float = DEFAULT_P_MAX
    # A manual threshold disables the probabilistic correction
    threshold: Optional[float] = None
    cache_thresholds: bool = True

    def resolve_shape(self) -> Shape:
        if self.shape:
            return Shape(str(self.shape))
        return Shape.from_kmer_size(self.kmer_size)


@dataclass
class Config:
    """Main configuration class."""

    index_file: Optional[Path] = None

    search: SearchConfig = field(default_factory=SearchConfig)
    runtime: RuntimeConfig = field(default_factory=RuntimeConfig)

    def validate(self) -> None:
        """Validate configuration."""
        if not self.index_file:
            raise ConfigurationError("Index file is required")

        search = self.search
        for name in ("pattern_size", "window_size", "kmer_size"):
            value = getattr(search, name)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ConfigurationError(f"search.{name} must be a positive integer, got {value!r}")
        for name in ("fpr", "p_max"):
            value = getattr(search, name)
            if (
                not isinstance(value, (int, float))
                or isinstance(value, bool)
                or not 0.0 < value < 1.0
            ):
                raise ConfigurationError(f"search.{name} must be in (0, 1), got {value!r}")
        threshold = search.threshold
        if threshold is not None and (
            not isinstance(threshold, (int, float))
            or isinstance(threshold, bool)
            or not 0.0 <= threshold <= 1.0
        ):
            raise ConfigurationError(f"search.threshold must be in [0, 1], got {threshold!r}")
        if not isinstance(search.cache_thresholds, bool):
            raise ConfigurationError(
                f"search.cache_thresholds must be true or false, got {search.cache_thresholds!r}"
            )

        level = self.runtime.log_level
        if not isinstance(level, str) or not isinstance(logging.getLevelName(level.upper()), int):
            raise ConfigurationError(f"runtime.log_level is not a logging level: {level!r}")

        try:
            search.resolve_shape()
        except ContractViolationError as e:
            raise ConfigurationError(f"Invalid search.shape: {e}") from e

    def to_parameters(self) -> SearchParameters:
        """Build the immutable parameters for the correction engine."""
        self.validate()
        search = self.search
        return SearchParameters(
            pattern_size=search.pattern_size,
            window_size=search.window_size,
            shape=search.resolve_shape(),
            fpr=float(search.fpr),
            p_max=float(search.p_max),
            index_file=Path(self.index_file),
            threshold_was_set=search.threshold is not None,
            cache_thresholds=search.cache_thresholds,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""

        def path_to_str(obj):
            if isinstance(obj, Path):
                return str(obj)
            elif isinstance(obj, dict):
                return {k: path_to_str(v) for k, v in obj.items()}
            elif isinstance(obj, (list, tuple)):
                return [path_to_str(item) for item in obj]
            return obj

        return path_to_str(asdict(self))


def build_config(data: Dict[str, Any]) -> Config:
    """Build a Config from a parsed YAML mapping."""
    if not isinstance(data, dict):
        raise ConfigurationError("Configuration must be a mapping")

    unknown = sorted(set(data) - {"index_file", "search", "runtime"})
    if unknown:
        raise ConfigurationError("Unsupported config option(s): " + ", ".join(unknown))

    cfg = Config()
    if data.get("index_file") is not None:
        cfg.index_file = Path(data["index_file"])

    for section_name in ("search", "runtime"):
        section = data.get(section_name) or {}
        target = getattr(cfg, section_name)
        for key, value in section.items():
            if not hasattr(target, key):
                raise ConfigurationError(f"Unsupported config option: {section_name}.{key}")
            if key == "log_file" and value:
                value = Path(value)
            setattr(target, key, value)

    return cfg


def load_config(path: Path) -> Config:
    """Load configuration from YAML file."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Could not parse {path}: {e}") from e
    return build_config(data)


def save_config(cfg: Config, path: Path) -> None:
    """Save configuration to YAML file."""
    data = cfg.to_dict()
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)
