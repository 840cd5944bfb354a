"""Domain package exports for blueprints, controllers and their value objects."""

from .blueprint import Blueprint, normalize_blueprint_args
from .controller import Controller
from .elements import Absent, ElementSpec, PrebuiltHandle, Selector, element_spec_for
from .errors import FactoryError, SelectorError
from .events import EventKey, parse_event_key
from .registry import BlueprintRegistry
from .selectors import NodeInfo, compile_selector
from .tracking import InstanceTracker

__all__ = [
    "Absent",
    "Blueprint",
    "BlueprintRegistry",
    "Controller",
    "ElementSpec",
    "EventKey",
    "FactoryError",
    "InstanceTracker",
    "NodeInfo",
    "PrebuiltHandle",
    "Selector",
    "SelectorError",
    "compile_selector",
    "element_spec_for",
    "normalize_blueprint_args",
    "parse_event_key",
]
