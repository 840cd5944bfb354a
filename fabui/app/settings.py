from __future__ import annotations

import os
from dataclasses import asdict, dataclass, replace
from typing import Any, Mapping, Optional

from fabui.domain.tracking import TRACK_MODES, TRACK_WEAK

_ENV_TRACK_MODE = "FABUI_TRACK_INSTANCES"
_ENV_TRACK_LIMIT = "FABUI_TRACK_LIMIT"
_ENV_STRICT = "FABUI_STRICT_ELEMENTS"
_ENV_LOGGING = "FABUI_CONFIGURE_LOGGING"


@dataclass(frozen=True)
class FactoryConfig:
    """Typed runtime settings for a controller factory."""

    track_instances: str = TRACK_WEAK
    track_limit: Optional[int] = None
    strict_elements: bool = True
    configure_logging: bool = False

    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any]) -> "FactoryConfig":
        """Build a config from flat keys, rejecting unknown ones."""
        if not isinstance(payload, Mapping):
            raise ValueError("Factory settings must be a mapping of flat keys.")
        unknown = set(payload.keys()) - set(cls.__annotations__.keys())
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")
        return cls().apply(payload)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FactoryConfig":
        """Read the ``FABUI_TRACK_*``, ``FABUI_STRICT_ELEMENTS`` and ``FABUI_CONFIGURE_LOGGING`` variables."""
        env = os.environ if environ is None else environ
        payload = {}
        if env.get(_ENV_TRACK_MODE):
            payload["track_instances"] = env[_ENV_TRACK_MODE]
        if env.get(_ENV_TRACK_LIMIT):
            payload["track_limit"] = env[_ENV_TRACK_LIMIT]
        if env.get(_ENV_STRICT):
            payload["strict_elements"] = env[_ENV_STRICT]
        if env.get(_ENV_LOGGING):
            payload["configure_logging"] = env[_ENV_LOGGING]
        return cls().apply(payload)

    def apply(self, payload: Mapping[str, Any]) -> "FactoryConfig":
        updates = {}
        if "track_instances" in payload:
            updates["track_instances"] = _coerce_mode(payload["track_instances"])
        if "track_limit" in payload:
            updates["track_limit"] = _coerce_limit(payload["track_limit"])
        if "strict_elements" in payload:
            updates["strict_elements"] = _coerce_bool(payload["strict_elements"])
        if "configure_logging" in payload:
            updates["configure_logging"] = _coerce_bool(payload["configure_logging"])
        return replace(self, **updates) if updates else self

    def to_dict(self) -> dict:
        return asdict(self)


def _coerce_mode(value: Any) -> str:
    text = str(value or "").strip().lower()
    if text not in TRACK_MODES:
        raise ValueError(f"track_instances must be one of {', '.join(TRACK_MODES)}.")
    return text


def _coerce_limit(value: Any) -> Optional[int]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, bool):
        raise ValueError("track_limit must be an integer.")
    if isinstance(value, (int, float)):
        coerced = int(value)
    elif isinstance(value, str):
        try:
            coerced = int(value.strip())
        except ValueError as exc:
            raise ValueError("track_limit must be an integer.") from exc
    else:
        raise ValueError("track_limit must be an integer.")
    if coerced <= 0:
        raise ValueError("track_limit must be positive.")
    return coerced


def _coerce_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "on"}
    return bool(value)


__all__ = ["FactoryConfig"]
