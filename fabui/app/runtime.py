"""Process-wide default factory behind ``fabui.make`` and ``fabui.construct``.

The default factory is created on first use with an in-memory element
library, the pydantic model subsystem (when importable) and settings read
from the environment. ``configure`` swaps it for one wired to other ports.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Type

from fabui.adapters.dom_memory import MemoryDom
from fabui.domain.controller import Controller
from fabui.domain.ports import ElementPort, ModelPort
from fabui.utils.logging import configure_logging

from .factory import ControllerFactory
from .settings import FactoryConfig

_log = logging.getLogger(__name__)
_UNSET: Any = object()
_default: Optional[ControllerFactory] = None


def _default_model_port() -> Optional[ModelPort]:
    try:
        from fabui.adapters.model_pydantic import PydanticModels
    except ImportError:
        _log.info("pydantic unavailable; model binding disabled")
        return None
    return PydanticModels()


def configure(
    *,
    element_port: Optional[ElementPort] = None,
    model_port: Any = _UNSET,
    config: Optional[FactoryConfig] = None,
) -> ControllerFactory:
    """Replace the default factory.

    ``model_port=None`` disables model binding; leaving it out keeps the
    pydantic model subsystem. The new factory starts with an empty registry.
    With ``config.configure_logging`` set, the ``fabui`` loggers are routed to
    stderr at the ``FABUI_LOG_LEVEL`` level.
    """
    global _default
    settings = config if config is not None else FactoryConfig.from_env()
    if settings.configure_logging:
        configure_logging()
    _default = ControllerFactory(
        element_port if element_port is not None else MemoryDom(),
        model_port=_default_model_port() if model_port is _UNSET else model_port,
        config=settings,
    )
    return _default


def default_factory() -> ControllerFactory:
    if _default is None:
        return configure()
    return _default


def make(name: Any = None, defaults: Any = None) -> Type[Controller]:
    return default_factory().make(name, defaults)


def construct(name: Any, *args: Any) -> Optional[Controller]:
    return default_factory().construct(name, *args)


def constructed() -> List[Controller]:
    return default_factory().constructed()


__all__ = ["configure", "construct", "constructed", "default_factory", "make"]
