"""Controller factory: blueprint registration and construction by name.

A factory owns one :class:`BlueprintRegistry`, one :class:`InstanceTracker`
and the construction pipeline wired to its element and model ports. The
module-level API in :mod:`fabui.app.runtime` delegates to a default factory.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Type

from fabui.domain.blueprint import normalize_blueprint_args
from fabui.domain.controller import Controller
from fabui.domain.naming import class_name_for
from fabui.domain.ports import ElementPort, ModelPort
from fabui.domain.registry import BlueprintRegistry
from fabui.domain.tracking import InstanceTracker
from fabui.usecases.build_controller import BuildController

from .settings import FactoryConfig


class ControllerFactory:
    """Register blueprints and build controllers from them.

    Call chain:
        ``make`` normalizes its arguments into a blueprint, generates a
        ``Controller`` subclass bound to this factory's pipeline and registers
        it when named. ``construct`` looks a name up, calls the class with the
        remaining arguments and records the instance.
    """

    def __init__(
        self,
        element_port: ElementPort,
        *,
        model_port: Optional[ModelPort] = None,
        config: Optional[FactoryConfig] = None,
        registry: Optional[BlueprintRegistry] = None,
        tracker: Optional[InstanceTracker] = None,
    ) -> None:
        """Wire the pipeline and process-scoped state.

        Args:
            element_port: DOM-like element library.
            model_port: Model subsystem; ``None`` disables model binding.
            config: Tracking and element-strictness settings.
            registry: Shared registry; a new one is created when omitted.
            tracker: Shared instance tracker; built from ``config`` when omitted.
        """
        self._log = logging.getLogger(__name__)
        self.config = config or FactoryConfig()
        self.registry = registry if registry is not None else BlueprintRegistry()
        self.tracker = tracker if tracker is not None else InstanceTracker(
            mode=self.config.track_instances,
            limit=self.config.track_limit,
        )
        self.build = BuildController(
            element_port=element_port,
            model_port=model_port,
            strict_elements=self.config.strict_elements,
        )

    @property
    def element_port(self) -> ElementPort:
        return self.build.element_port

    @property
    def model_port(self) -> Optional[ModelPort]:
        return self.build.model_port

    def make(self, name: Any = None, defaults: Any = None) -> Type[Controller]:
        """Return a controller class for the blueprint, registering it when named.

        ``make("todo", {...})`` registers under ``"todo"``; ``make({...})`` and
        ``make()`` return anonymous classes. Other argument shapes degrade to
        an anonymous blueprint with no defaults.
        """
        blueprint = normalize_blueprint_args(name, defaults)
        controller_cls = type(
            class_name_for(blueprint.name),
            (Controller,),
            {
                "__module__": __name__,
                "__doc__": f"Controller built from blueprint {blueprint.name or '<anonymous>'}.",
                "blueprint": blueprint,
                "builder": self.build,
            },
        )
        if not blueprint.anonymous:
            self.registry.register(blueprint.name, controller_cls)
        return controller_cls

    def construct(self, name: Any, *args: Any) -> Optional[Controller]:
        """Build a controller from the blueprint registered as ``name``.

        Returns ``None`` for unknown names; nothing is recorded in that case.
        """
        constructor = self.registry.get(name)
        if constructor is None:
            self._log.debug("No blueprint registered as %r", name)
            return None
        instance = constructor(*args)
        self.tracker.record(instance)
        return instance

    def constructed(self) -> List[Controller]:
        """Return the tracked instances built through :meth:`construct`."""
        return self.tracker.instances()


__all__ = ["ControllerFactory"]
