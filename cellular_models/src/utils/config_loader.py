"""Loads YAML/JSON configuration files and the global model settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


def load_config(path: str) -> Dict[str, Any]:
    """Load a YAML or JSON configuration file."""
    path_p = Path(path)
    with open(path_p, "r", encoding="utf-8") as f:
        if path_p.suffix in {".yaml", ".yml"}:
            return yaml.safe_load(f) or {}
        if path_p.suffix == ".json":
            return json.load(f)
        raise ValueError("Unsupported config format")


def load_model_config(path: Optional[Path] = None) -> Dict[str, Any]:
    """Return the model configuration shipped with the package."""
    if path is None:
        path = Path(__file__).resolve().parents[2] / "configs" / "model_config.yaml"
    if path.exists():
        return load_config(str(path))
    return {}


MODEL_CONFIG: Dict[str, Any] = load_model_config()

# Byte multiple every allocation is padded to by the runtime allocator.
ALLOCATION_GRANULARITY: int = int(MODEL_CONFIG.get("allocation_granularity", 8))
# Largest coordinate a dense grid may expose.
MAX_COORDINATE: int = int(MODEL_CONFIG.get("max_coordinate", 2**31 - 1))

_LOGGING_CONF = MODEL_CONFIG.get("logging", {}) or {}
LOG_LEVEL: str = str(_LOGGING_CONF.get("level", "INFO")).upper()
LOG_FILE: Optional[str] = _LOGGING_CONF.get("file")


def set_allocation_granularity(value: int) -> None:
    """Override the allocation granularity used by footprint estimates."""
    global ALLOCATION_GRANULARITY
    if value <= 0:
        raise ValueError("Allocation granularity must be positive")
    ALLOCATION_GRANULARITY = value
    MODEL_CONFIG["allocation_granularity"] = value


def set_max_coordinate(value: int) -> None:
    """Override the largest representable coordinate."""
    global MAX_COORDINATE
    MAX_COORDINATE = value
    MODEL_CONFIG["max_coordinate"] = value


def set_log_level(value: str) -> None:
    """Override the level applied by ``get_logger``, including existing package loggers."""
    global LOG_LEVEL
    LOG_LEVEL = value.upper()
    MODEL_CONFIG.setdefault("logging", {})["level"] = LOG_LEVEL
    for name, logger in list(logging.Logger.manager.loggerDict.items()):
        if name.startswith("cellular_models") and isinstance(logger, logging.Logger):
            logger.setLevel(LOG_LEVEL)


def print_runtime_config() -> None:
    """Print a summary of the current runtime configuration."""
    info = {
        "allocation_granularity": ALLOCATION_GRANULARITY,
        "max_coordinate": MAX_COORDINATE,
        "log_level": LOG_LEVEL,
        "log_file": LOG_FILE,
    }
    print("Runtime configuration:")
    for k, v in info.items():
        print(f"  {k}: {v}")
