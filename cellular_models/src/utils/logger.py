"""Logging wrapper shared by the model packages, with optional file output."""

from __future__ import annotations

import logging
from pathlib import Path

from cellular_models.src.utils import config_loader


def get_logger(name: str, file_path: str | None = None) -> logging.Logger:
    """Return configured logger, attaching ``file_path`` handler if provided.

    When ``file_path`` is omitted the configured ``LOG_FILE`` is used.
    """

    logger = logging.getLogger(name)
    if file_path is None:
        file_path = config_loader.LOG_FILE
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        if file_path:
            Path(file_path).parent.mkdir(parents=True, exist_ok=True)
            f_handler = logging.FileHandler(file_path, encoding="utf-8")
            f_handler.setFormatter(formatter)
            logger.addHandler(f_handler)
    logger.setLevel(config_loader.LOG_LEVEL)
    return logger
