"""Environment configuration for check-growth."""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_REFERENCE_DIR = "emots"
DEFAULT_TARGET_DIR = "out"

_TRUE_VALUES = {"1", "true", "yes", "on"}


def get_reference_dir() -> Path:
    """Return the reference directory.

    If the environment variable `CHECK_GROWTH_REFERENCE_DIR` is defined, its
    value is used. Otherwise falls back to `emots` relative to the current
    working directory.
    """
    override = os.getenv("CHECK_GROWTH_REFERENCE_DIR")
    if override:
        return Path(override)
    return Path(DEFAULT_REFERENCE_DIR)


def get_target_dir() -> Path:
    """Return the target directory from `CHECK_GROWTH_TARGET_DIR` or `out`."""
    override = os.getenv("CHECK_GROWTH_TARGET_DIR")
    if override:
        return Path(override)
    return Path(DEFAULT_TARGET_DIR)


def get_strict() -> bool:
    """Return True if `CHECK_GROWTH_STRICT` asks for strict mode."""
    value = os.getenv("CHECK_GROWTH_STRICT", "")
    return value.strip().lower() in _TRUE_VALUES
