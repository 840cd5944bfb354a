"""Construction pipeline run by every generated controller class.

Steps, in order: default merge, override merge, element resolution, model
binding, initializer, event wiring. Optional steps are skipped when their
attribute is missing. Errors raised by caller-supplied ``init`` functions or
event callbacks propagate unchanged and nothing is rolled back.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Sequence

from fabui.domain.blueprint import EVENTS_ATTR, INIT_ATTR, Blueprint
from fabui.domain.elements import Absent, PrebuiltHandle, Selector, element_spec_for
from fabui.domain.errors import FactoryError
from fabui.domain.events import wiring_plan
from fabui.domain.ports import ElementPort, ModelPort

MODEL_ATTR = "model"
_PRIMITIVES = (str, bytes, bytearray, int, float, complex, bool)


def call_with_controller(controller: Any, func: Callable[..., Any], args: Sequence[Any]) -> Any:
    """Call ``func`` with ``controller`` as its first argument.

    Methods already bound to ``controller`` (from a ``Controller`` subclass)
    are called as they are; methods bound to any other object are rebound to
    ``controller``.
    """
    if inspect.ismethod(func):
        if func.__self__ is controller:
            return func(*args)
        return func.__func__(controller, *args)
    return func(controller, *args)


def bind_listener(controller: Any, callback: Callable[..., Any]) -> Callable[..., Any]:
    """Return a listener calling ``callback(controller, *event_args)``."""

    def listener(*event_args: Any) -> Any:
        return call_with_controller(controller, callback, event_args)

    listener.__wrapped__ = callback  # type: ignore[attr-defined]
    return listener


def is_model_data(value: Any) -> bool:
    """True for values the model subsystem may wrap (mappings and plain objects)."""
    if value is None or isinstance(value, _PRIMITIVES):
        return False
    return not callable(value)


def guid_of(model: Any) -> Any:
    if isinstance(model, Mapping):
        return model.get("guid")
    return getattr(model, "guid", None)


def model_data(model: Any) -> Mapping[str, Any]:
    if isinstance(model, Mapping):
        return dict(model)
    dump = getattr(model, "model_dump", None)
    if callable(dump):
        return dump()
    return dict(getattr(model, "__dict__", {}))


@dataclass
class BuildController:
    element_port: ElementPort
    model_port: Optional[ModelPort] = None
    strict_elements: bool = True

    def __post_init__(self) -> None:
        self._log = logging.getLogger(__name__)

    def __call__(
        self,
        controller: Any,
        blueprint: Blueprint,
        options: Any = None,
        args: Sequence[Any] = (),
    ) -> Any:
        self.merge(controller, blueprint.defaults, options)
        self.resolve_element(controller)
        self.bind_model(controller, blueprint)
        self.run_init(controller, args)
        self.wire_events(controller)
        self._log.debug("Constructed %r", controller)
        return controller

    # ---------- steps ----------

    def merge(self, controller: Any, defaults: Mapping[str, Any], options: Any) -> None:
        for key, value in defaults.items():
            setattr(controller, key, value)
        if isinstance(options, Mapping):
            for key, value in options.items():
                setattr(controller, str(key), value)
        elif options is not None:
            self._log.debug("Ignoring non-mapping options %r", options)

    def resolve_element(self, controller: Any) -> None:
        value = getattr(controller, "el", None)
        spec = element_spec_for(value, self.element_port.is_wrapped)
        if spec is None:
            if self.strict_elements:
                raise FactoryError(
                    "AMBIGUOUS_ELEMENT",
                    "el must be absent, a selector string or a wrapped element; "
                    f"got {type(value).__name__}.",
                    meta={"el": value},
                )
            self._log.warning("Unrecognized el %r; leaving it unresolved", value)
            controller.el = value
            controller.wrapped = None
            return

        if isinstance(spec, Absent):
            wrapped = self.element_port.create_container()
        elif isinstance(spec, Selector):
            wrapped = self.element_port.query(spec.selector)
        elif isinstance(spec, PrebuiltHandle):
            wrapped = spec.handle
        else:
            raise TypeError(f"Unhandled element spec: {spec!r}")

        controller.wrapped = wrapped
        controller.el = self.element_port.first(wrapped)
        if controller.el is None:
            self._log.warning("Element %r resolved to no elements", value)

    def bind_model(self, controller: Any, blueprint: Blueprint) -> None:
        if MODEL_ATTR not in vars(controller):
            return
        if self.model_port is None:
            return
        model = controller.model
        if not is_model_data(model):
            controller.model = None
            return
        if self.model_port.validate_guid(guid_of(model)):
            return
        model_cls = self.model_port.make(model_data(model), name=blueprint.name)
        controller.model = model_cls()
        self._log.debug("Bound %s to %r", model_cls.__name__, controller)

    def run_init(self, controller: Any, args: Sequence[Any]) -> None:
        init = getattr(controller, INIT_ATTR, None)
        if callable(init):
            call_with_controller(controller, init, args)

    def wire_events(self, controller: Any) -> None:
        events = getattr(controller, EVENTS_ATTR, None)
        if not isinstance(events, Mapping):
            return
        plan, skipped = wiring_plan(events)
        if skipped:
            self._log.debug("Skipping event keys %r", skipped)
        for event_key, callback in plan:
            listener = bind_listener(controller, callback)
            if event_key.delegated:
                self.element_port.delegate(
                    controller.wrapped, event_key.event_type, event_key.selector, listener
                )
            else:
                self.element_port.on(controller.wrapped, event_key.event_type, listener)


__all__ = [
    "BuildController",
    "MODEL_ATTR",
    "bind_listener",
    "call_with_controller",
    "guid_of",
    "is_model_data",
    "model_data",
]
