from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, Union

PACKAGE_LOGGER = "fabui"
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
_ENV_LEVEL = "FABUI_LOG_LEVEL"
_ENV_DEBUG = "FABUI_DEBUG"

Level = Union[int, str]


def _coerce_level(value: Optional[Level], fallback: int) -> int:
    if value is None or isinstance(value, bool):
        return fallback
    if isinstance(value, int):
        return value
    text = value.strip()
    if text.isdigit():
        return int(text)
    candidate = logging.getLevelName(text.upper()) if text else None
    return candidate if isinstance(candidate, int) else fallback


def resolve_level(default_level: Level = logging.WARNING, environ: Optional[Mapping[str, str]] = None) -> int:
    """Pick the level for the ``fabui`` loggers.

    ``FABUI_LOG_LEVEL`` (name or number) wins, then a truthy ``FABUI_DEBUG``
    selects DEBUG, then ``default_level``.
    """
    env = os.environ if environ is None else environ
    fallback = _coerce_level(default_level, logging.WARNING)
    explicit = env.get(_ENV_LEVEL)
    if explicit and explicit.strip():
        return _coerce_level(explicit, fallback)
    if (env.get(_ENV_DEBUG) or "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return fallback


def configure_logging(default_level: Level = logging.WARNING, environ: Optional[Mapping[str, str]] = None) -> int:
    """Send ``fabui`` log records to stderr at the resolved level.

    The root logger gets a compact handler only when the application has not
    installed one. The level is set on the ``fabui`` logger tree, so other
    libraries keep theirs.
    """
    level = resolve_level(default_level, environ)
    if not logging.getLogger().handlers:
        logging.basicConfig(format=_FORMAT, datefmt=_DATEFMT)
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    return level


__all__ = ["PACKAGE_LOGGER", "configure_logging", "resolve_level"]
