# Copyright (c) Syntropy Systems
"""Configuration management for fraudboard."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import cast

import yaml

CONFIG_DIR_NAME = ".fraudboard"
CONFIG_FILE_NAME = "config.yaml"


class FallbackPolicy(str, Enum):
    """What a load cycle does when real results are unavailable."""

    # Show synthetic data with a warning
    DEGRADE = "degrade"
    # Show an error instead of synthetic data
    STRICT = "strict"


class RefreshPolicy(str, Enum):
    """What readers see while a refresh is in flight."""

    KEEP_LAST = "keep_last"
    BLANK = "blank"


@dataclass
class FraudboardConfig:
    """Configuration for fraudboard."""

    # Directory holding the result artifacts (file source)
    data_dir: Path = field(default_factory=lambda: Path("data"))

    # Base URL serving the result artifacts (HTTP source, wins over data_dir)
    base_url: str | None = None

    # Logical artifact names
    metrics_artifact: str = "performance_metrics.json"
    curve_artifact: str = "pr_curve_data.json"

    # Per-artifact retrieval timeout in seconds
    fetch_timeout: float = 5.0

    fallback_policy: FallbackPolicy = FallbackPolicy.DEGRADE
    refresh_policy: RefreshPolicy = RefreshPolicy.KEEP_LAST

    # Auto-refresh interval for watch mode (seconds)
    refresh_interval: float = 30.0

    def to_dict(self) -> dict[str, object]:
        """Convert to a YAML-friendly dictionary."""
        return {
            "data_dir": str(self.data_dir),
            "base_url": self.base_url,
            "metrics_artifact": self.metrics_artifact,
            "curve_artifact": self.curve_artifact,
            "fetch_timeout": self.fetch_timeout,
            "fallback_policy": self.fallback_policy.value,
            "refresh_policy": self.refresh_policy.value,
            "refresh_interval": self.refresh_interval,
        }


def find_config_dir(start_path: Path | None = None) -> Path | None:
    """Find the nearest .fraudboard directory by walking up from start_path.

    Returns None if no .fraudboard directory is found.
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    while current != current.parent:
        config_dir = current / CONFIG_DIR_NAME
        if config_dir.is_dir():
            return config_dir
        current = current.parent

    # Check root
    config_dir = current / CONFIG_DIR_NAME
    if config_dir.is_dir():
        return config_dir

    return None


def get_global_config_dir() -> Path:
    """Get the global fraudboard config directory (~/.fraudboard)."""
    return Path.home() / CONFIG_DIR_NAME


def _values(enum_cls: type[Enum]) -> set[str]:
    return {str(member.value) for member in enum_cls}


def _apply(config: FraudboardConfig, data: dict[str, object], base_dir: Path) -> None:
    """Copy well-typed values from data onto config, ignoring the rest."""
    data_dir = data.get("data_dir")
    if isinstance(data_dir, str) and data_dir:
        path = Path(data_dir).expanduser()
        config.data_dir = path if path.is_absolute() else base_dir / path
    base_url = data.get("base_url")
    if isinstance(base_url, str) and base_url:
        config.base_url = base_url
    metrics_artifact = data.get("metrics_artifact")
    if isinstance(metrics_artifact, str) and metrics_artifact:
        config.metrics_artifact = metrics_artifact
    curve_artifact = data.get("curve_artifact")
    if isinstance(curve_artifact, str) and curve_artifact:
        config.curve_artifact = curve_artifact
    fetch_timeout = data.get("fetch_timeout")
    if isinstance(fetch_timeout, (int, float)) and not isinstance(fetch_timeout, bool):
        config.fetch_timeout = float(fetch_timeout)
    refresh_interval = data.get("refresh_interval")
    if isinstance(refresh_interval, (int, float)) and not isinstance(refresh_interval, bool):
        config.refresh_interval = float(refresh_interval)
    fallback_policy = data.get("fallback_policy")
    if isinstance(fallback_policy, str) and fallback_policy in _values(FallbackPolicy):
        config.fallback_policy = FallbackPolicy(fallback_policy)
    refresh_policy = data.get("refresh_policy")
    if isinstance(refresh_policy, str) and refresh_policy in _values(RefreshPolicy):
        config.refresh_policy = RefreshPolicy(refresh_policy)


def load_config(config_dir: Path | None = None) -> FraudboardConfig:
    """Load configuration from .fraudboard/config.yaml or defaults.

    Looks for config in:
    1. Provided config_dir
    2. Nearest .fraudboard directory walking up
    3. ~/.fraudboard/config.yaml
    4. Defaults

    A relative data_dir resolves against the directory containing
    .fraudboard.
    """
    if config_dir is None:
        config_dir = find_config_dir()
        if config_dir is None:
            global_dir = get_global_config_dir()
            if (global_dir / CONFIG_FILE_NAME).exists():
                config_dir = global_dir

    config = FraudboardConfig()
    if config_dir is None:
        return config

    base_dir = config_dir.resolve().parent
    config.data_dir = base_dir / config.data_dir

    config_path = config_dir / CONFIG_FILE_NAME
    if config_path.exists():
        with config_path.open() as f:
            loaded = cast("object", yaml.safe_load(f) or {})
        if not isinstance(loaded, dict):
            msg = f"Invalid config file {config_path}: expected a mapping"
            raise RuntimeError(msg)
        _apply(config, cast("dict[str, object]", loaded), base_dir)

    return config


def write_default_config(config_dir: Path) -> Path:
    """Write a config.yaml with default values and return its path."""
    config_path = config_dir / CONFIG_FILE_NAME
    with config_path.open("w") as f:
        yaml.dump(FraudboardConfig().to_dict(), f, default_flow_style=False)
    return config_path
