"""Environment configuration.

Environment variables:
    CASCADE_PROPAGATION_MODE — mode for trees that declare none (default: row)
    CASCADE_LOG_LEVEL — CLI log level (default: WARNING)
"""

from __future__ import annotations

import logging
import os

from cascading_delegate.index_path import PropagationMode, parse_mode

_DEFAULT_MODE = "row"
_DEFAULT_LOG_LEVEL = "WARNING"


def default_propagation_mode() -> PropagationMode:
    """Return the configured default propagation mode.

    Raises:
        ValueError: If CASCADE_PROPAGATION_MODE is not row or section.
    """
    return parse_mode(os.environ.get("CASCADE_PROPAGATION_MODE", _DEFAULT_MODE))


def log_level() -> int:
    """Return the configured log level as a logging constant."""
    name = os.environ.get("CASCADE_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"Invalid log level: {name!r}")
    return level
