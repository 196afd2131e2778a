"""Validation utilities for bloomsieve."""

from __future__ import annotations

import importlib
from typing import List


def validate_installation() -> List[str]:
    """
    Validate bloomsieve installation and dependencies.

    Returns:
        List of validation issues (empty if all good)
    """
    issues = []

    required_modules = ["numpy", "yaml", "click"]
    for module in required_modules:
        try:
            importlib.import_module(module)
        except ImportError:
            issues.append(f"Missing Python module: {module}")

    try:
        from bloomsieve.config import Config  # noqa: F401
        from bloomsieve.correction import precompute_correction  # noqa: F401
    except ImportError as e:
        issues.append(f"bloomsieve module import error: {e}")

    return issues
